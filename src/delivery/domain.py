"""Delivery bounded context — Couriers, Orders and Dispatch.

Assigns delivery orders to couriers on a 10x10 grid. Couriers carry orders in
storage places; the dispatch service picks the eligible courier that reaches an
order soonest and commits the assignment to both aggregates.
"""

from protean.domain import Domain

from delivery.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

delivery = Domain(name="delivery")
