"""Order domain events — immutable facts about order state changes."""

from protean.fields import DateTime, Identifier, Integer

from delivery.domain import delivery


@delivery.event(part_of="Order")
class OrderCreated:
    """A delivery order was accepted into the system."""

    __version__ = 1

    order_id = Identifier(required=True)
    x = Integer(required=True)
    y = Integer(required=True)
    volume = Integer(required=True)
    created_at = DateTime(required=True)


@delivery.event(part_of="Order")
class OrderAssigned:
    """An order was handed to a courier."""

    __version__ = 1

    order_id = Identifier(required=True)
    courier_id = Identifier(required=True)
    assigned_at = DateTime(required=True)


@delivery.event(part_of="Order")
class OrderCompleted:
    """A courier delivered the order and freed its storage place."""

    __version__ = 1

    order_id = Identifier(required=True)
    courier_id = Identifier(required=True)
    completed_at = DateTime(required=True)
