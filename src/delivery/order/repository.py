"""Repository for the Order aggregate."""

from protean.exceptions import ObjectNotFoundError

from delivery.domain import delivery
from delivery.order.order import Order, OrderStatus


@delivery.repository(part_of=Order)
class OrderRepository:
    """Standard CRUD from the base repository, plus status queries."""

    def get_any_created(self) -> Order:
        """Any one order still waiting for a courier."""
        orders = self._dao.query.filter(status=OrderStatus.CREATED.value).limit(1).all().items
        if not orders:
            raise ObjectNotFoundError("No order in Created status")
        return orders[0]

    def get_by_status(self, status: OrderStatus | str) -> list[Order]:
        """Every order with the given status, without the default page limit."""
        value = status.value if isinstance(status, OrderStatus) else status
        return self._dao.query.filter(status=value).limit(None).all().items
