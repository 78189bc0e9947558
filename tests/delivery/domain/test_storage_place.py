"""Tests for the StoragePlace entity."""

import pytest
from delivery.courier.courier import StoragePlace
from delivery.shared.errors import DeliveryError, ErrorKind


def _make_place(name="Trunk", volume=20):
    return StoragePlace.create(name, volume)


class TestStoragePlaceCreation:
    @pytest.mark.parametrize("name, volume", [("Bag", 10), ("Trunk", 1), ("Cargo box", 250)])
    def test_create_round_trips_name_and_volume(self, name, volume):
        place = StoragePlace.create(name, volume)
        assert place.name == name
        assert place.total_volume == volume

    def test_new_place_is_empty(self):
        place = _make_place()
        assert place.order_id is None
        assert place.is_occupied is False

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name_fails(self, name):
        with pytest.raises(DeliveryError) as exc:
            StoragePlace.create(name, 10)
        assert exc.value.kind == ErrorKind.INVALID_INPUT

    @pytest.mark.parametrize("volume", [0, -1, None])
    def test_non_positive_volume_fails(self, volume):
        with pytest.raises(DeliveryError) as exc:
            StoragePlace.create("Bag", volume)
        assert exc.value.kind == ErrorKind.INVALID_INPUT


class TestCanStore:
    def test_can_store_smaller_volume(self):
        assert _make_place(volume=20).can_store(5) is True

    def test_can_store_exact_volume(self):
        assert _make_place(volume=20).can_store(20) is True

    def test_cannot_store_larger_volume(self):
        assert _make_place(volume=20).can_store(21) is False

    @pytest.mark.parametrize("volume", [1, 5, 20, 100])
    def test_occupied_place_cannot_store_anything(self, volume):
        place = _make_place(volume=20)
        place.store("ord-001", 5)
        assert place.can_store(volume) is False

    @pytest.mark.parametrize("volume", [0, -5])
    def test_non_positive_volume_fails(self, volume):
        with pytest.raises(DeliveryError) as exc:
            _make_place().can_store(volume)
        assert exc.value.kind == ErrorKind.INVALID_INPUT


class TestStore:
    def test_store_occupies_place(self):
        place = _make_place()
        place.store("ord-001", 5)
        assert place.is_occupied is True
        assert str(place.order_id) == "ord-001"

    def test_store_over_capacity_fails(self):
        place = _make_place(volume=10)
        with pytest.raises(DeliveryError) as exc:
            place.store("ord-001", 11)
        assert exc.value.kind == ErrorKind.CAPACITY_EXCEEDED
        assert place.order_id is None

    def test_store_into_occupied_place_fails(self):
        place = _make_place()
        place.store("ord-001", 5)
        with pytest.raises(DeliveryError) as exc:
            place.store("ord-002", 5)
        assert exc.value.kind == ErrorKind.ALREADY_OCCUPIED
        assert str(place.order_id) == "ord-001"


class TestClear:
    def test_clear_frees_place(self):
        place = _make_place()
        place.store("ord-001", 5)
        place.clear("ord-001")
        assert place.order_id is None
        assert place.can_store(5) is True

    def test_clear_with_other_order_fails(self):
        place = _make_place()
        place.store("ord-001", 5)
        with pytest.raises(DeliveryError) as exc:
            place.clear("ord-002")
        assert exc.value.kind == ErrorKind.MISMATCH
        assert str(place.order_id) == "ord-001"

    def test_clear_empty_place_fails(self):
        with pytest.raises(DeliveryError) as exc:
            _make_place().clear("ord-001")
        assert exc.value.kind == ErrorKind.MISMATCH
