"""Courier aggregate (CQRS) — a courier and the storage places it carries.

A courier always owns at least one storage place: the default bag it is
registered with. Storage places hold one order each and never leave their
courier.

Movement is tick-based. Each ``move`` call advances the courier at most
``speed`` grid units toward a target, one unit at a time along whichever axis
is further off (ties go to X).
"""

from datetime import UTC, datetime

from protean.fields import DateTime, HasMany, Identifier, Integer, String, ValueObject

from delivery.courier.events import CourierMoved, CourierRegistered, StoragePlaceAdded
from delivery.domain import delivery, logger
from delivery.shared.errors import DeliveryError, ErrorKind
from delivery.shared.location import Location

DEFAULT_STORAGE_NAME = "Bag"
DEFAULT_STORAGE_VOLUME = 10


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@delivery.entity(part_of="Courier")
class StoragePlace:
    """A cargo slot on a courier, holding at most one order."""

    name = String(required=True, max_length=100)
    total_volume = Integer(required=True, min_value=1)
    order_id = Identifier()

    @classmethod
    def create(cls, name: str, volume: int):
        if not name or not name.strip():
            raise DeliveryError(ErrorKind.INVALID_INPUT, "name", "Storage place name is required")
        if volume is None or volume <= 0:
            raise DeliveryError(ErrorKind.INVALID_INPUT, "total_volume", "Volume must be greater than 0")
        return cls(name=name, total_volume=volume)

    @property
    def is_occupied(self) -> bool:
        return self.order_id is not None

    def can_store(self, volume: int) -> bool:
        if volume is None or volume <= 0:
            raise DeliveryError(ErrorKind.INVALID_INPUT, "volume", "Volume must be greater than 0")
        if self.is_occupied:
            return False
        return self.total_volume >= volume

    def store(self, order_id: str, volume: int) -> None:
        if volume > self.total_volume:
            raise DeliveryError(
                ErrorKind.CAPACITY_EXCEEDED,
                "volume",
                f"Order volume {volume} exceeds storage volume {self.total_volume}",
            )
        if self.is_occupied:
            raise DeliveryError(ErrorKind.ALREADY_OCCUPIED, "order_id", "Storage place is occupied")
        self.order_id = str(order_id)

    def clear(self, order_id: str) -> None:
        if not self.is_occupied or str(self.order_id) != str(order_id):
            raise DeliveryError(ErrorKind.MISMATCH, "order_id", "This order is not in the storage place")
        self.order_id = None


# ---------------------------------------------------------------------------
# Aggregate Root (CQRS)
# ---------------------------------------------------------------------------
@delivery.aggregate
class Courier:
    name = String(required=True, max_length=100)
    speed = Integer(required=True, min_value=1)
    location = ValueObject(Location, required=True)
    storage_places = HasMany(StoragePlace)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, name: str, speed: int, location: Location):
        """Register a courier with the default bag as its first storage place."""
        if not name or not name.strip():
            raise DeliveryError(ErrorKind.INVALID_INPUT, "name", "Courier name is required")
        if speed is None or speed <= 0:
            raise DeliveryError(ErrorKind.INVALID_INPUT, "speed", "Speed must be greater than 0")
        if location is None:
            raise DeliveryError(ErrorKind.INVALID_INPUT, "location", "Courier location is required")

        bag = StoragePlace.create(DEFAULT_STORAGE_NAME, DEFAULT_STORAGE_VOLUME)

        now = datetime.now(UTC)
        courier = cls(
            name=name,
            speed=speed,
            location=location,
            created_at=now,
            updated_at=now,
        )
        courier.add_storage_places(bag)
        courier.raise_(
            CourierRegistered(
                courier_id=str(courier.id),
                name=name,
                speed=speed,
                x=location.x,
                y=location.y,
                registered_at=now,
            )
        )
        return courier

    # -------------------------------------------------------------------
    # Storage
    # -------------------------------------------------------------------
    @property
    def is_available(self) -> bool:
        """True when no storage place is carrying an order."""
        return all(not place.is_occupied for place in self.storage_places or [])

    def add_storage_place(self, name: str, volume: int) -> StoragePlace:
        place = StoragePlace.create(name, volume)
        self.add_storage_places(place)
        self.updated_at = datetime.now(UTC)
        self.raise_(
            StoragePlaceAdded(
                courier_id=str(self.id),
                storage_place_id=str(place.id),
                name=name,
                total_volume=volume,
            )
        )
        return place

    def storage_place_for(self, order_id: str) -> StoragePlace | None:
        return next(
            (p for p in self.storage_places or [] if p.is_occupied and str(p.order_id) == str(order_id)),
            None,
        )

    # -------------------------------------------------------------------
    # Orders
    # -------------------------------------------------------------------
    def can_take_order(self, order) -> bool:
        """Whether any storage place has room for the order.

        A courier without room is a valid negative answer, not an error.
        """
        if order is None:
            raise DeliveryError(ErrorKind.INVALID_INPUT, "order", "Order is required")
        return any(place.can_store(order.volume) for place in self.storage_places or [])

    def take_order(self, order) -> None:
        """Assign the order to this courier and stow it in the first free place that fits."""
        if order is None:
            raise DeliveryError(ErrorKind.INVALID_INPUT, "order", "Order is required")

        place = next((p for p in self.storage_places or [] if p.can_store(order.volume)), None)
        if place is None:
            raise DeliveryError(
                ErrorKind.NO_AVAILABLE_STORAGE,
                "storage_places",
                "No storage place has enough volume for this order",
            )

        # The order must accept the courier before any storage is touched
        order.assign(self)
        place.store(order.id, order.volume)
        self.updated_at = datetime.now(UTC)

    def complete_order(self, order) -> None:
        """Mark the order delivered and free the storage place it occupied."""
        if order is None:
            raise DeliveryError(ErrorKind.INVALID_INPUT, "order", "Order is required")

        place = self.storage_place_for(order.id)
        if place is None:
            logger.error(
                "Storage place for assigned order not found",
                courier_id=str(self.id),
                order_id=str(order.id),
            )
            raise DeliveryError(
                ErrorKind.NOT_FOUND,
                "order_id",
                f"Courier {self.id} carries no storage place holding order {order.id}",
            )

        order.complete()
        place.clear(order.id)
        self.updated_at = datetime.now(UTC)

    # -------------------------------------------------------------------
    # Movement
    # -------------------------------------------------------------------
    def calculate_time_to_location(self, location: Location) -> float:
        if location is None:
            raise DeliveryError(ErrorKind.INVALID_INPUT, "location", "Target location is required")
        return self.location.distance_to(location) / self.speed

    def move(self, target: Location) -> None:
        """Advance up to ``speed`` grid units toward ``target``."""
        if target is None:
            raise DeliveryError(ErrorKind.INVALID_INPUT, "location", "Target location is required")
        if self.location == target:
            return

        x, y = self.location.x, self.location.y
        for _ in range(self.speed):
            dx, dy = target.x - x, target.y - y
            if dx == 0 and dy == 0:
                break
            if abs(dx) >= abs(dy):
                x += 1 if dx > 0 else -1
            else:
                y += 1 if dy > 0 else -1

        previous = self.location
        now = datetime.now(UTC)
        self.location = Location(x=x, y=y)
        self.updated_at = now
        self.raise_(
            CourierMoved(
                courier_id=str(self.id),
                from_x=previous.x,
                from_y=previous.y,
                to_x=x,
                to_y=y,
                moved_at=now,
            )
        )
