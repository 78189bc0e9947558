"""Application tests for the custom repository queries."""

from uuid import uuid4

import pytest
from delivery.courier.courier import Courier
from delivery.courier.registration import RegisterCourier
from delivery.order.creation import CreateOrder
from delivery.order.dispatching import DispatchOrder
from delivery.order.order import Order, OrderStatus
from delivery.shared.location import Location
from protean import current_domain
from protean.exceptions import ObjectNotFoundError


def _register_courier(name="Alice", x=1, y=1):
    return current_domain.process(RegisterCourier(name=name, speed=2, x=x, y=y), asynchronous=False)


def _create_order(volume=3):
    return current_domain.process(
        CreateOrder(order_id=str(uuid4()), x=5, y=5, volume=volume),
        asynchronous=False,
    )


class TestCourierRepository:
    def test_get_all_returns_every_courier(self):
        ids = {_register_courier("Alice"), _register_courier("Bob")}
        couriers = current_domain.repository_for(Courier).get_all()
        assert {str(c.id) for c in couriers} == ids

    def test_get_available_excludes_busy_couriers(self):
        busy_id = _register_courier("Busy", x=5, y=5)
        current_domain.process(DispatchOrder(order_id=_create_order()), asynchronous=False)
        free_id = _register_courier("Free")

        available = current_domain.repository_for(Courier).get_available()

        assert [str(c.id) for c in available] == [free_id]
        assert busy_id not in [str(c.id) for c in available]

    def test_get_available_empty_fleet(self):
        assert current_domain.repository_for(Courier).get_available() == []


class TestOrderRepository:
    def test_get_any_created_returns_waiting_order(self):
        order_id = _create_order()
        order = current_domain.repository_for(Order).get_any_created()
        assert str(order.id) == order_id

    def test_get_any_created_skips_assigned_orders(self):
        _register_courier()
        assigned_id = _create_order()
        current_domain.process(DispatchOrder(order_id=assigned_id), asynchronous=False)
        waiting_id = _create_order()

        order = current_domain.repository_for(Order).get_any_created()
        assert str(order.id) == waiting_id

    def test_get_any_created_without_waiting_orders_fails(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.repository_for(Order).get_any_created()

    def test_get_by_status(self):
        _register_courier()
        assigned_id = _create_order()
        current_domain.process(DispatchOrder(order_id=assigned_id), asynchronous=False)
        waiting_id = _create_order()

        repo = current_domain.repository_for(Order)
        assert [str(o.id) for o in repo.get_by_status(OrderStatus.ASSIGNED)] == [assigned_id]
        assert [str(o.id) for o in repo.get_by_status("Created")] == [waiting_id]
        assert repo.get_by_status(OrderStatus.COMPLETED) == []


def _add_courier(index, busy=False):
    courier = Courier.create(name=f"Courier {index}", speed=1, location=Location.create(1, 1))
    if busy:
        courier.take_order(Order.create(order_id=str(uuid4()), location=Location.create(2, 2), volume=1))
    current_domain.repository_for(Courier).add(courier)
    return str(courier.id)


class TestQueriesBeyondDefaultLimit:
    def test_get_all_returns_more_than_one_hundred_couriers(self):
        for i in range(105):
            _add_courier(i)
        assert len(current_domain.repository_for(Courier).get_all()) == 105

    def test_free_courier_after_one_hundred_busy_ones_is_available(self):
        for i in range(100):
            _add_courier(i, busy=True)
        free_id = _add_courier(100)

        available = current_domain.repository_for(Courier).get_available()

        assert [str(c.id) for c in available] == [free_id]

    def test_get_by_status_returns_more_than_one_hundred_orders(self):
        repo = current_domain.repository_for(Order)
        for _ in range(101):
            repo.add(Order.create(order_id=str(uuid4()), location=Location.create(5, 5), volume=1))
        assert len(repo.get_by_status(OrderStatus.CREATED)) == 101
