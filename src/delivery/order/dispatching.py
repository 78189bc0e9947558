"""Order dispatch — command and handler.

Loads one waiting order and the available couriers, runs the dispatch policy,
and persists both the order and the chosen courier. The handler runs inside a
single unit of work, so either both aggregates are saved or neither is.
"""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from delivery.courier.courier import Courier
from delivery.dispatch.service import DispatchService
from delivery.domain import delivery
from delivery.order.order import Order


@delivery.command(part_of="Order")
class DispatchOrder:
    """Assign an order to the best courier. Without an id, any waiting order is taken."""

    order_id = Identifier()


@delivery.command_handler(part_of=Order)
class DispatchOrderHandler:
    @handle(DispatchOrder)
    def dispatch_order(self, command):
        order_repo = current_domain.repository_for(Order)
        courier_repo = current_domain.repository_for(Courier)

        if command.order_id:
            order = order_repo.get(command.order_id)
        else:
            order = order_repo.get_any_created()

        couriers = courier_repo.get_available()
        courier = DispatchService().dispatch(order, couriers)

        order_repo.add(order)
        courier_repo.add(courier)
        return {"order_id": str(order.id), "courier_id": str(courier.id)}
