"""Location value object — a cell on the 10x10 delivery grid."""

import random

from protean.fields import Integer

from delivery.domain import delivery
from delivery.shared.errors import GeneralErrors
from delivery.shared.guard import require
from delivery.shared.result import Result

MIN_COORDINATE = 1
MAX_COORDINATE = 10


@delivery.value_object
class Location:
    """A position on the grid, both coordinates within ``[1, 10]``.

    Locations are compared by their coordinates. Use ``Location.create`` to
    get a ``Result``; constructing ``Location(x=..., y=...)`` directly with an
    out-of-range coordinate raises ``ValidationError``.
    """

    x = Integer(required=True, min_value=MIN_COORDINATE, max_value=MAX_COORDINATE)
    y = Integer(required=True, min_value=MIN_COORDINATE, max_value=MAX_COORDINATE)

    @classmethod
    def create(cls, x: int, y: int) -> Result:
        for name, value in (("x", x), ("y", y)):
            if value is None:
                return Result.failure(GeneralErrors.value_is_required(name))
            if value < MIN_COORDINATE or value > MAX_COORDINATE:
                return Result.failure(
                    GeneralErrors.value_is_out_of_range(name, value, MIN_COORDINATE, MAX_COORDINATE)
                )

        return Result.success(cls(x=x, y=y))

    @classmethod
    def must_create(cls, x: int, y: int) -> "Location":
        return cls.create(x, y).value_or_raise()

    @classmethod
    def minimum(cls) -> "Location":
        return cls(x=MIN_COORDINATE, y=MIN_COORDINATE)

    @classmethod
    def maximum(cls) -> "Location":
        return cls(x=MAX_COORDINATE, y=MAX_COORDINATE)

    @classmethod
    def random(cls) -> "Location":
        return cls(
            x=random.randint(MIN_COORDINATE, MAX_COORDINATE),
            y=random.randint(MIN_COORDINATE, MAX_COORDINATE),
        )

    def distance_to(self, target: "Location") -> int:
        """Manhattan distance to ``target``."""
        require(target, "target")
        return abs(self.x - target.x) + abs(self.y - target.y)
