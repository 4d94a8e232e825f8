"""
Reservation repository tests, run against both stores
"""
import pytest
from datetime import date

from bookingmx.models.reservation import Reservation, ReservationStatus
from bookingmx.repositories import InMemoryReservationRepository, create_reservation_repository


@pytest.fixture(params=["memory", "sql"])
def store(request):
    if request.param == "memory":
        return request.getfixturevalue("repository")
    return request.getfixturevalue("sql_repository")


def _new(guest="Ana", hotel="Hotel Verde"):
    return Reservation(
        id=None,
        guest_name=guest,
        hotel_name=hotel,
        check_in=date(2031, 3, 1),
        check_out=date(2031, 3, 4),
    )


def test_save_assigns_sequential_ids(store):
    first = store.save(_new())
    second = store.save(_new("Luis"))

    assert (first.id, second.id) == (1, 2)


def test_find_by_id(store):
    saved = store.save(_new())

    found = store.find_by_id(saved.id)

    assert found == saved
    assert found.guest_name == "Ana"
    assert found.status == ReservationStatus.ACTIVE


def test_find_by_id_missing(store):
    assert store.find_by_id(123) is None


def test_find_all_in_id_order(store):
    for name in ("Ana", "Luis", "Sofía"):
        store.save(_new(name))

    assert [r.guest_name for r in store.find_all()] == ["Ana", "Luis", "Sofía"]


def test_save_existing_overwrites(store):
    saved = store.save(_new())
    saved.hotel_name = "Hotel Azul"
    saved.status = ReservationStatus.CANCELED

    store.save(saved)

    found = store.find_by_id(saved.id)
    assert found.hotel_name == "Hotel Azul"
    assert found.status == ReservationStatus.CANCELED
    assert len(store.find_all()) == 1


def test_update_if_active(store):
    saved = store.save(_new())
    changes = _new("Luis", "Hotel Azul")
    changes.id = saved.id
    changes.check_out = date(2031, 3, 9)

    updated = store.update_if_active(changes)

    assert updated.guest_name == "Luis"
    found = store.find_by_id(saved.id)
    assert (found.hotel_name, found.check_out) == ("Hotel Azul", date(2031, 3, 9))
    assert found.status == ReservationStatus.ACTIVE


def test_update_if_active_keeps_canceled_record(store):
    saved = store.save(_new())
    stale = store.find_by_id(saved.id)
    canceled = store.find_by_id(saved.id)
    canceled.status = ReservationStatus.CANCELED
    store.save(canceled)

    stale.guest_name = "Luis"

    assert store.update_if_active(stale) is None
    found = store.find_by_id(saved.id)
    assert found.status == ReservationStatus.CANCELED
    assert found.guest_name == "Ana"


def test_update_if_active_missing(store):
    missing = _new()
    missing.id = 77

    assert store.update_if_active(missing) is None
    assert store.find_all() == []


def test_delete(store):
    saved = store.save(_new())

    store.delete(saved.id)
    store.delete(saved.id)

    assert store.find_by_id(saved.id) is None
    assert store.find_all() == []


def test_ids_never_reused(store):
    first = store.save(_new())
    store.delete(first.id)

    assert store.save(_new()).id == first.id + 1


def test_memory_store_returns_copies():
    repository = InMemoryReservationRepository()
    saved = repository.save(_new())

    found = repository.find_by_id(saved.id)
    found.guest_name = "changed outside the store"

    assert repository.find_by_id(saved.id).guest_name == "Ana"


def test_create_repository_memory():
    assert isinstance(create_reservation_repository("memory"), InMemoryReservationRepository)


def test_create_repository_sql(tmp_path):
    repository = create_reservation_repository("sql", f"sqlite:///{tmp_path / 'bookings.db'}")

    saved = repository.save(_new())

    assert repository.find_by_id(saved.id).guest_name == "Ana"


def test_create_repository_unknown():
    with pytest.raises(ValueError):
        create_reservation_repository("redis")
