"""Courier domain events — facts about the courier fleet."""

from protean.fields import DateTime, Identifier, Integer, String

from delivery.domain import delivery


@delivery.event(part_of="Courier")
class CourierRegistered:
    """A courier joined the fleet with its default storage place."""

    __version__ = 1

    courier_id = Identifier(required=True)
    name = String(required=True)
    speed = Integer(required=True)
    x = Integer(required=True)
    y = Integer(required=True)
    registered_at = DateTime(required=True)


@delivery.event(part_of="Courier")
class StoragePlaceAdded:
    """A courier gained an additional storage place."""

    __version__ = 1

    courier_id = Identifier(required=True)
    storage_place_id = Identifier(required=True)
    name = String(required=True)
    total_volume = Integer(required=True)


@delivery.event(part_of="Courier")
class CourierMoved:
    """A courier moved one tick across the grid."""

    __version__ = 1

    courier_id = Identifier(required=True)
    from_x = Integer(required=True)
    from_y = Integer(required=True)
    to_x = Integer(required=True)
    to_y = Integer(required=True)
    moved_at = DateTime(required=True)
