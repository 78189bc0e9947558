"""Pydantic API schemas for the Delivery domain.

These are the external API contracts — separate from domain commands.
The API layer translates between these schemas and domain commands.
"""

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------
class RegisterCourierRequest(BaseModel):
    name: str
    speed: int
    x: int
    y: int


class AddStoragePlaceRequest(BaseModel):
    name: str
    volume: int


class MoveCouriersRequest(BaseModel):
    courier_id: str | None = None


class CreateOrderRequest(BaseModel):
    order_id: str
    x: int
    y: int
    volume: int


class DispatchOrderRequest(BaseModel):
    order_id: str | None = None


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------
class CourierIdResponse(BaseModel):
    courier_id: str


class OrderIdResponse(BaseModel):
    order_id: str


class DispatchResponse(BaseModel):
    order_id: str
    courier_id: str


class MoveCouriersResponse(BaseModel):
    completed: int


class StatusResponse(BaseModel):
    status: str


class LocationView(BaseModel):
    x: int
    y: int


class StoragePlaceView(BaseModel):
    id: str
    name: str
    total_volume: int
    order_id: str | None = None


class CourierView(BaseModel):
    id: str
    name: str
    speed: int
    location: LocationView
    storage_places: list[StoragePlaceView]


class OrderView(BaseModel):
    id: str
    location: LocationView
    volume: int
    status: str
    courier_id: str | None = None
