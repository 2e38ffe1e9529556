"""Volume value object — how much room an order needs or a storage place offers."""

from protean.fields import Integer

from delivery.domain import delivery
from delivery.kernel.quantity import ordered_by_value, positive_quantity
from delivery.shared.result import Result

MIN_VOLUME = 1


@delivery.value_object
@ordered_by_value
class Volume:
    """A positive integer volume, totally ordered."""

    value = Integer(required=True, min_value=MIN_VOLUME)

    @classmethod
    def create(cls, value: int) -> Result:
        return positive_quantity(cls, value, "value", MIN_VOLUME)

    @classmethod
    def must_create(cls, value: int) -> "Volume":
        return cls.create(value).value_or_raise()


def as_volume(volume, name: str = "volume") -> Result:
    """Accept either a ``Volume`` or a raw integer and return a ``Result[Volume]``."""
    return positive_quantity(Volume, volume, name, MIN_VOLUME)
