"""Courier movement — one tick of the delivery clock.

Every courier carrying orders moves one tick toward the first of them. Orders
whose location the courier has reached are completed and their storage places
freed.
"""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from delivery.courier.courier import Courier
from delivery.domain import delivery, logger
from delivery.order.order import Order, OrderStatus


@delivery.command(part_of="Courier")
class MoveCouriers:
    """Advance busy couriers one tick. Limit to a single courier by passing its id."""

    courier_id = Identifier()


@delivery.command_handler(part_of=Courier)
class CourierMovementHandler:
    @handle(MoveCouriers)
    def move_couriers(self, command):
        order_repo = current_domain.repository_for(Order)
        courier_repo = current_domain.repository_for(Courier)

        orders_by_courier: dict[str, list[Order]] = {}
        for order in order_repo.get_by_status(OrderStatus.ASSIGNED):
            orders_by_courier.setdefault(str(order.courier_id), []).append(order)

        if command.courier_id:
            courier_id = str(command.courier_id)
            orders_by_courier = {courier_id: orders_by_courier.get(courier_id, [])}

        completed = 0
        for courier_id, orders in orders_by_courier.items():
            if not orders:
                continue
            courier = courier_repo.get(courier_id)
            courier.move(orders[0].location)

            for order in orders:
                if courier.location == order.location:
                    courier.complete_order(order)
                    order_repo.add(order)
                    completed += 1

            courier_repo.add(courier)

        logger.info("Couriers moved", couriers=len(orders_by_courier), completed=completed)
        return completed
