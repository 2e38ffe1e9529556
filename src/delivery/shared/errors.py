"""Error value object and the catalogue of generic validation errors.

Business-rule violations travel as ``Error`` values inside a ``Result``
instead of being raised. Each error carries a stable, machine-readable
``code`` and a human-readable ``message``.
"""

from protean.fields import String

from delivery.domain import delivery


@delivery.value_object
class Error:
    """A recoverable domain error."""

    code = String(required=True, max_length=100)
    message = String(required=True, max_length=500)

    @classmethod
    def of(cls, code: str, message: str) -> "Error":
        return cls(code=code, message=message)

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class GeneralErrors:
    """Validation errors shared by every factory in the context."""

    @staticmethod
    def value_is_required(name: str) -> Error:
        return Error.of("value.is.required", f"Value is required for {name}")

    @staticmethod
    def value_is_out_of_range(name: str, value, min_value, max_value) -> Error:
        return Error.of(
            "value.is.out.of.range",
            f"Value {value} for {name} is out of range. Min value is {min_value}, max value is {max_value}",
        )

    @staticmethod
    def value_must_be_greater_or_equal(name: str, value, min_value) -> Error:
        return Error.of(
            "value.must.be.greater.or.equal",
            f"Value {value} for {name} must be greater than or equal to {min_value}",
        )
