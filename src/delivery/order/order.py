"""Order aggregate (CQRS) — a delivery request waiting for, or carried by, a courier.

The order keeps only the id of the courier carrying it. The courier owns the
storage place holding the order, so the two aggregates never reference each
other as objects.

State Machine:
    CREATED → ASSIGNED → COMPLETED
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Identifier, Integer, String, ValueObject

from delivery.domain import delivery
from delivery.order.events import OrderAssigned, OrderCompleted, OrderCreated
from delivery.shared.errors import DeliveryError, ErrorKind
from delivery.shared.location import Location


class OrderStatus(Enum):
    CREATED = "Created"
    ASSIGNED = "Assigned"
    COMPLETED = "Completed"


@delivery.aggregate
class Order:
    location = ValueObject(Location, required=True)
    volume = Integer(required=True, min_value=1)
    status = String(choices=OrderStatus, default=OrderStatus.CREATED.value)
    courier_id = Identifier()
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, order_id: str, location: Location, volume: int):
        """Create a new order under an id supplied by the basket service."""
        if not order_id:
            raise DeliveryError(ErrorKind.INVALID_INPUT, "order_id", "Order id is required")
        if location is None:
            raise DeliveryError(ErrorKind.INVALID_INPUT, "location", "Order location is required")
        if volume is None or volume <= 0:
            raise DeliveryError(ErrorKind.INVALID_INPUT, "volume", "Volume must be greater than 0")

        now = datetime.now(UTC)
        order = cls(
            id=order_id,
            location=location,
            volume=volume,
            status=OrderStatus.CREATED.value,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderCreated(
                order_id=str(order.id),
                x=location.x,
                y=location.y,
                volume=volume,
                created_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Assignment
    # -------------------------------------------------------------------
    def assign(self, courier) -> None:
        """Record the courier carrying this order. Allowed once, from CREATED."""
        if courier is None:
            raise DeliveryError(ErrorKind.INVALID_INPUT, "courier", "Courier is required")
        if self.courier_id is not None:
            raise DeliveryError(ErrorKind.ALREADY_ASSIGNED, "courier_id", "Order is already assigned to a courier")
        if OrderStatus(self.status) != OrderStatus.CREATED:
            raise DeliveryError(
                ErrorKind.INVALID_STATE,
                "status",
                f"Order must be in Created state to be assigned, is {self.status}",
            )

        now = datetime.now(UTC)
        self.courier_id = str(courier.id)
        self.status = OrderStatus.ASSIGNED.value
        self.updated_at = now
        self.raise_(
            OrderAssigned(
                order_id=str(self.id),
                courier_id=str(courier.id),
                assigned_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Completion
    # -------------------------------------------------------------------
    def complete(self) -> None:
        if OrderStatus(self.status) != OrderStatus.ASSIGNED:
            raise DeliveryError(
                ErrorKind.INVALID_STATE,
                "status",
                f"Order must be in Assigned state to be completed, is {self.status}",
            )

        now = datetime.now(UTC)
        self.status = OrderStatus.COMPLETED.value
        self.updated_at = now
        self.raise_(
            OrderCompleted(
                order_id=str(self.id),
                courier_id=str(self.courier_id),
                completed_at=now,
            )
        )
