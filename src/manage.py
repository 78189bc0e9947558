"""Courier dispatch management CLI.

Creates and drops the database schema, seeds synthetic couriers and orders,
and runs the dispatch/move cycle that the background jobs perform in
production.

Usage:
    python src/manage.py setup-db               # Create all tables
    python src/manage.py drop-db                # Drop all tables
    python src/manage.py seed --couriers 5 --orders 10
    python src/manage.py tick --ticks 3         # Dispatch waiting orders, then move couriers
"""

import argparse
import sys
from uuid import uuid4


def _domain():
    from delivery.domain import delivery

    delivery.init()
    return delivery


def setup_database():
    from delivery.utils.db import setup_db

    domain = _domain()
    print("Creating delivery database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    from delivery.utils.db import drop_db

    domain = _domain()
    print("Dropping delivery database schema...")
    drop_db(domain)
    print("Done.")


def seed(courier_count, order_count):
    """Register couriers and create orders at random grid points."""
    from delivery.courier.registration import RegisterCourier
    from delivery.order.creation import CreateOrder
    from delivery.shared.location import Location

    domain = _domain()
    with domain.domain_context():
        for i in range(1, courier_count + 1):
            location = Location.create_random()
            domain.process(
                RegisterCourier(name=f"Courier {i}", speed=(i % 3) + 1, x=location.x, y=location.y),
                asynchronous=False,
            )
        for i in range(1, order_count + 1):
            location = Location.create_random()
            domain.process(
                CreateOrder(order_id=str(uuid4()), x=location.x, y=location.y, volume=(i % 5) + 1),
                asynchronous=False,
            )
    print(f"Seeded {courier_count} couriers and {order_count} orders.")


def tick(ticks):
    """Dispatch every order that can be placed, then move couriers, ``ticks`` times."""
    from delivery.courier.movement import MoveCouriers
    from delivery.order.dispatching import DispatchOrder
    from delivery.order.order import Order, OrderStatus
    from delivery.shared.errors import DeliveryError, ErrorKind

    domain = _domain()
    with domain.domain_context():
        for n in range(1, ticks + 1):
            dispatched = 0
            for order in domain.repository_for(Order).get_by_status(OrderStatus.CREATED):
                try:
                    domain.process(DispatchOrder(order_id=str(order.id)), asynchronous=False)
                except DeliveryError as exc:
                    # No free courier can carry this order this tick
                    if exc.kind not in (ErrorKind.NO_ELIGIBLE_COURIER, ErrorKind.INVALID_INPUT):
                        raise
                    continue
                dispatched += 1

            completed = domain.process(MoveCouriers(), asynchronous=False)
            print(f"Tick {n}: dispatched {dispatched}, completed {completed}.")


def main():
    parser = argparse.ArgumentParser(description="Courier dispatch management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    seed_parser = subparsers.add_parser("seed", help="Create synthetic couriers and orders")
    seed_parser.add_argument("--couriers", type=int, default=5)
    seed_parser.add_argument("--orders", type=int, default=10)

    tick_parser = subparsers.add_parser("tick", help="Run dispatch and movement cycles")
    tick_parser.add_argument("--ticks", type=int, default=1)

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed(args.couriers, args.orders)
    elif args.command == "tick":
        tick(args.ticks)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
