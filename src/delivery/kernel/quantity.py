"""Shared behaviour of the positive integer value objects ``Volume`` and ``Speed``."""

import operator

from delivery.shared.errors import GeneralErrors
from delivery.shared.result import Result

_COMPARISONS = (
    ("__lt__", "is_less_than", operator.lt),
    ("__le__", "is_less_or_equal", operator.le),
    ("__gt__", "is_greater_than", operator.gt),
    ("__ge__", "is_greater_or_equal", operator.ge),
)


def _compare_values(op):
    def compare(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return op(self.value, other.value)

    return compare


def _compare_objects(op):
    def compare(self, other) -> bool:
        return op(self, other)

    return compare


def ordered_by_value(cls):
    """Order instances of ``cls`` by their ``value``.

    Adds the rich comparison operators and their named forms. Instances of
    different value objects do not compare and raise ``TypeError``.
    """
    for dunder, named, op in _COMPARISONS:
        setattr(cls, dunder, _compare_values(op))
        setattr(cls, named, _compare_objects(op))
    return cls


def positive_quantity(cls, value, name: str, min_value: int) -> Result:
    """Coerce ``value``, an instance of ``cls`` or a raw integer, into ``Result[cls]``."""
    if isinstance(value, cls):
        return Result.success(value)
    if value is None:
        return Result.failure(GeneralErrors.value_is_required(name))
    if value < min_value:
        return Result.failure(GeneralErrors.value_must_be_greater_or_equal(name, value, min_value))
    return Result.success(cls(value=value))
