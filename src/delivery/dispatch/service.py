"""Dispatch policy — choose the courier that reaches an order soonest.

The service is stateless: it looks only at the order and the couriers it is
handed. Loading candidates and persisting the outcome in one unit of work is
the caller's job (see ``delivery.order.dispatching``).
"""

from protean.exceptions import ValidationError

from delivery.courier.courier import Courier
from delivery.domain import logger
from delivery.order.order import Order, OrderStatus
from delivery.shared.errors import DeliveryError, ErrorKind


class DispatchService:
    """Greedy nearest-eligible-courier selection.

    Couriers are scanned in the order supplied. A courier that cannot carry
    the order, or whose travel time cannot be computed, is skipped. Only a
    strictly shorter travel time displaces the current best, so the courier
    listed first wins a tie.
    """

    def dispatch(self, order: Order, couriers: list[Courier]) -> Courier:
        if order is None:
            raise DeliveryError(ErrorKind.INVALID_INPUT, "order", "Order is required")
        if not couriers:
            raise DeliveryError(ErrorKind.INVALID_INPUT, "couriers", "Provide one or more available couriers")
        if OrderStatus(order.status) != OrderStatus.CREATED:
            raise DeliveryError(ErrorKind.INVALID_STATE, "status", "Provide an order in Created status")

        best_courier = None
        best_time = float("inf")
        for courier in couriers:
            try:
                if not courier.can_take_order(order):
                    continue
                time_to_order = courier.calculate_time_to_location(order.location)
            except ValidationError as exc:
                logger.debug(
                    "Skipping courier during dispatch",
                    courier_id=str(courier.id),
                    order_id=str(order.id),
                    reason=str(exc),
                )
                continue

            if time_to_order < best_time:
                best_courier = courier
                best_time = time_to_order

        if best_courier is None:
            raise DeliveryError(
                ErrorKind.NO_ELIGIBLE_COURIER,
                "couriers",
                "No courier available with sufficient space",
            )

        best_courier.take_order(order)
        logger.info(
            "Order dispatched",
            order_id=str(order.id),
            courier_id=str(best_courier.id),
            travel_time=best_time,
        )
        return best_courier
