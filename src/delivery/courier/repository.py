"""Repository for the Courier aggregate."""

from delivery.courier.courier import Courier
from delivery.domain import delivery


@delivery.repository(part_of=Courier)
class CourierRepository:
    """Standard CRUD from the base repository, plus fleet queries.

    Fleet queries lift the default aggregate limit of 100 rows: dispatch has
    to see every courier, not the first page.
    """

    def get_available(self) -> list[Courier]:
        """Couriers whose storage places are all empty."""
        return [courier for courier in self.get_all() if courier.is_available]

    def get_all(self) -> list[Courier]:
        return self._dao.query.limit(None).all().items
