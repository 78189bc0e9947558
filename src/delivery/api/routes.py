"""FastAPI routes for the Delivery domain."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from delivery.api.schemas import (
    AddStoragePlaceRequest,
    CourierIdResponse,
    CourierView,
    CreateOrderRequest,
    DispatchOrderRequest,
    DispatchResponse,
    LocationView,
    MoveCouriersRequest,
    MoveCouriersResponse,
    OrderIdResponse,
    OrderView,
    RegisterCourierRequest,
    StatusResponse,
    StoragePlaceView,
)
from delivery.courier.courier import Courier
from delivery.courier.movement import MoveCouriers
from delivery.courier.registration import AddStoragePlace, RegisterCourier
from delivery.order.creation import CreateOrder
from delivery.order.dispatching import DispatchOrder
from delivery.order.order import Order, OrderStatus


def _courier_view(courier: Courier) -> CourierView:
    return CourierView(
        id=str(courier.id),
        name=courier.name,
        speed=courier.speed,
        location=LocationView(x=courier.location.x, y=courier.location.y),
        storage_places=[
            StoragePlaceView(
                id=str(place.id),
                name=place.name,
                total_volume=place.total_volume,
                order_id=str(place.order_id) if place.order_id else None,
            )
            for place in courier.storage_places or []
        ],
    )


def _order_view(order: Order) -> OrderView:
    return OrderView(
        id=str(order.id),
        location=LocationView(x=order.location.x, y=order.location.y),
        volume=order.volume,
        status=order.status,
        courier_id=str(order.courier_id) if order.courier_id else None,
    )


# ---------------------------------------------------------------------------
# Courier Router
# ---------------------------------------------------------------------------
courier_router = APIRouter(prefix="/couriers", tags=["couriers"])


@courier_router.post("", status_code=201, response_model=CourierIdResponse)
async def register_courier(body: RegisterCourierRequest) -> CourierIdResponse:
    """Register a courier with its default bag."""
    command = RegisterCourier(name=body.name, speed=body.speed, x=body.x, y=body.y)
    result = current_domain.process(command, asynchronous=False)
    return CourierIdResponse(courier_id=result)


@courier_router.get("", response_model=list[CourierView])
async def list_couriers() -> list[CourierView]:
    couriers = current_domain.repository_for(Courier).get_all()
    return [_courier_view(courier) for courier in couriers]


@courier_router.post("/move", response_model=MoveCouriersResponse)
async def move_couriers(body: MoveCouriersRequest | None = None) -> MoveCouriersResponse:
    """Advance busy couriers one tick and complete the orders they reach."""
    command = MoveCouriers(courier_id=body.courier_id if body else None)
    completed = current_domain.process(command, asynchronous=False)
    return MoveCouriersResponse(completed=completed or 0)


@courier_router.post("/{courier_id}/storage-places", response_model=StatusResponse)
async def add_storage_place(courier_id: str, body: AddStoragePlaceRequest) -> StatusResponse:
    command = AddStoragePlace(courier_id=courier_id, name=body.name, volume=body.volume)
    current_domain.process(command, asynchronous=False)
    return StatusResponse(status="storage_place_added")


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderIdResponse)
async def create_order(body: CreateOrderRequest) -> OrderIdResponse:
    command = CreateOrder(order_id=body.order_id, x=body.x, y=body.y, volume=body.volume)
    result = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=result)


@order_router.post("/dispatch", response_model=DispatchResponse)
async def dispatch_order(body: DispatchOrderRequest | None = None) -> DispatchResponse:
    """Assign an order (or any waiting order) to the fastest eligible courier."""
    command = DispatchOrder(order_id=body.order_id if body else None)
    result = current_domain.process(command, asynchronous=False)
    return DispatchResponse(**result)


@order_router.get("", response_model=list[OrderView])
async def list_orders(status: str | None = None) -> list[OrderView]:
    """Orders with the given status; without one, every order not yet completed."""
    repo = current_domain.repository_for(Order)
    if status:
        orders = repo.get_by_status(status)
    else:
        orders = repo.get_by_status(OrderStatus.CREATED) + repo.get_by_status(OrderStatus.ASSIGNED)
    return [_order_view(order) for order in orders]
