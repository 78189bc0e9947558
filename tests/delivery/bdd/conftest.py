"""Shared BDD fixtures and step definitions for the Delivery domain."""

from uuid import uuid4

import pytest
from delivery.courier.courier import Courier
from delivery.order.order import Order
from delivery.shared.errors import DeliveryError
from delivery.shared.location import Location
from pytest_bdd import given, parsers, then


@pytest.fixture()
def fleet():
    """Couriers by name, in registration order."""
    return {}


@pytest.fixture()
def error():
    """Container for captured delivery errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a courier "{name}" with speed {speed:d} at ({x:d}, {y:d})'))
def courier_at(fleet, name, speed, x, y):
    fleet[name] = Courier.create(name=name, speed=speed, location=Location.create(x, y))


@given(parsers.cfparse('courier "{name}" has a storage place "{place}" of volume {volume:d}'))
def courier_has_storage_place(fleet, name, place, volume):
    fleet[name].add_storage_place(place, volume)


@given(parsers.cfparse("an order of volume {volume:d} at ({x:d}, {y:d})"), target_fixture="order")
def order_at(volume, x, y):
    return Order.create(order_id=str(uuid4()), location=Location.create(x, y), volume=volume)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(order, status):
    assert order.status == status


@then(parsers.cfparse('the order is assigned to "{name}"'))
def order_assigned_to(order, fleet, name):
    assert str(order.courier_id) == str(fleet[name].id)


@then(parsers.cfparse('courier "{name}" carries no order'))
def courier_carries_no_order(fleet, name):
    assert fleet[name].is_available


@then(parsers.cfparse('courier "{name}" is at ({x:d}, {y:d})'))
def courier_is_at(fleet, name, x, y):
    assert fleet[name].location == Location.create(x, y)


@then(parsers.cfparse('the action fails with "{kind}"'))
def action_fails_with(error, kind):
    assert error["exc"] is not None, "Expected a delivery error but none was raised"
    assert isinstance(error["exc"], DeliveryError)
    assert error["exc"].kind.name == kind
