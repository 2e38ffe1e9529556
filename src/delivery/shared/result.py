"""Success-or-error results returned by domain operations.

A ``Result`` carries either a value or an ``Error``. ``UnitResult`` is the
value-less flavour returned by commands. Reading the wrong side of a result
is a programming mistake and raises ``IncorrectUsageError``.
"""

from protean.exceptions import IncorrectUsageError, ValidationError

_NO_VALUE = object()


class Result:
    __slots__ = ("_value", "_error")

    def __init__(self, value=_NO_VALUE, error=None):
        self._value = value
        self._error = error

    @classmethod
    def success(cls, value=None):
        return cls(value=value)

    @classmethod
    def failure(cls, error):
        if error is None:
            raise IncorrectUsageError("A failed result needs an error")
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self._error is None

    @property
    def is_failure(self) -> bool:
        return self._error is not None

    @property
    def value(self):
        if self.is_failure:
            raise IncorrectUsageError(f"Cannot read the value of a failed result ({self._error.code})")
        return None if self._value is _NO_VALUE else self._value

    @property
    def error(self):
        if self.is_success:
            raise IncorrectUsageError("Cannot read the error of a successful result")
        return self._error

    def value_or_raise(self):
        """Unwrap the value, surfacing a failure as a ``ValidationError``."""
        if self.is_failure:
            raise ValidationError({self._error.code: [self._error.message]})
        return self.value

    def __bool__(self) -> bool:
        return self.is_success

    def __repr__(self) -> str:
        if self.is_failure:
            return f"<{type(self).__name__} failure {self._error.code}>"
        return f"<{type(self).__name__} success>"


class UnitResult(Result):
    """A result without a value."""

    __slots__ = ()

    @classmethod
    def success(cls, value=None):
        return cls()

    @classmethod
    def from_result(cls, result: Result) -> "UnitResult":
        """Drop the value of ``result`` but keep its outcome."""
        if result.is_failure:
            return cls.failure(result.error)
        return cls.success()
