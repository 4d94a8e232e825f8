"""
In-memory reservation store
"""
import logging
import threading
from dataclasses import replace
from typing import Dict, List, Optional

from bookingmx.models.reservation import Reservation
from bookingmx.repositories.base import ReservationRepository

logger = logging.getLogger(__name__)


class InMemoryReservationRepository(ReservationRepository):
    """
    Process-local reservation store - thread safe

    The id sequence belongs to the instance and only advances under the same
    lock that guards the map. Records go in and come out as copies, so stored
    state only changes through save(). Conflicting saves: last write wins.
    """

    def __init__(self, start_id: int = 1):
        self._store: Dict[int, Reservation] = {}
        self._next_id = start_id
        self._lock = threading.Lock()

    def find_all(self) -> List[Reservation]:
        with self._lock:
            return [replace(r) for r in self._store.values()]

    def find_by_id(self, reservation_id: int) -> Optional[Reservation]:
        with self._lock:
            stored = self._store.get(reservation_id)
            return replace(stored) if stored is not None else None

    def save(self, reservation: Reservation) -> Reservation:
        with self._lock:
            if reservation.id is None:
                reservation.id = self._next_id
                self._next_id += 1
                logger.debug(f"Assigned reservation id {reservation.id}")
            self._store[reservation.id] = replace(reservation)
        return reservation

    def update_if_active(self, reservation: Reservation) -> Optional[Reservation]:
        with self._lock:
            stored = self._store.get(reservation.id)
            if stored is None or not stored.is_active:
                return None
            updated = replace(
                stored,
                guest_name=reservation.guest_name,
                hotel_name=reservation.hotel_name,
                check_in=reservation.check_in,
                check_out=reservation.check_out,
            )
            self._store[updated.id] = updated
            return replace(updated)

    def delete(self, reservation_id: int) -> None:
        with self._lock:
            self._store.pop(reservation_id, None)
