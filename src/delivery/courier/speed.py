"""Speed value object — grid cells a courier covers per tick."""

from protean.fields import Integer

from delivery.domain import delivery
from delivery.kernel.quantity import ordered_by_value, positive_quantity
from delivery.shared.result import Result

MIN_SPEED = 1


@delivery.value_object(part_of="Courier")
@ordered_by_value
class Speed:
    """A positive integer speed, totally ordered. Not comparable with ``Volume``."""

    value = Integer(required=True, min_value=MIN_SPEED)

    @classmethod
    def create(cls, value: int) -> Result:
        return positive_quantity(cls, value, "value", MIN_SPEED)

    @classmethod
    def must_create(cls, value: int) -> "Speed":
        return cls.create(value).value_or_raise()


def as_speed(speed) -> Result:
    """Accept either a ``Speed`` or a raw integer and return a ``Result[Speed]``."""
    return positive_quantity(Speed, speed, "speed", MIN_SPEED)
