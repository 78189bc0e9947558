"""Location value object — a point on the 10x10 delivery grid."""

import random

from protean.fields import Integer

from delivery.domain import delivery
from delivery.shared.errors import DeliveryError, ErrorKind

MIN_COORDINATE = 1
MAX_COORDINATE = 10


@delivery.value_object
class Location:
    """Immutable grid coordinate. Both axes run from 1 to 10 inclusive."""

    x = Integer(required=True, min_value=MIN_COORDINATE, max_value=MAX_COORDINATE)
    y = Integer(required=True, min_value=MIN_COORDINATE, max_value=MAX_COORDINATE)

    @classmethod
    def create(cls, x: int, y: int) -> "Location":
        for axis, value in (("x", x), ("y", y)):
            if value is None:
                raise DeliveryError(ErrorKind.INVALID_INPUT, axis, f"Coordinate {axis} is required")
            if not MIN_COORDINATE <= value <= MAX_COORDINATE:
                raise DeliveryError(
                    ErrorKind.OUT_OF_RANGE,
                    axis,
                    f"Coordinate {axis} must be between {MIN_COORDINATE} and {MAX_COORDINATE}, got {value}",
                )
        return cls(x=x, y=y)

    @classmethod
    def create_random(cls) -> "Location":
        """Random point on the grid, for synthetic data only."""
        return cls(
            x=random.randint(MIN_COORDINATE, MAX_COORDINATE),
            y=random.randint(MIN_COORDINATE, MAX_COORDINATE),
        )

    def distance_to(self, other: "Location") -> int:
        """Manhattan distance to another point."""
        if other is None:
            raise DeliveryError(ErrorKind.INVALID_INPUT, "location", "Target location is required")
        return abs(self.x - other.x) + abs(self.y - other.y)
