"""
Reservation repository contract
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from bookingmx.models.reservation import Reservation


class ReservationRepository(ABC):
    """
    Keyed collection of reservations.

    Implementations assign ids on the first save and never hand the same id
    out twice, even after a delete.
    """

    @abstractmethod
    def find_all(self) -> List[Reservation]:
        """All reservations in id order"""
        ...

    @abstractmethod
    def find_by_id(self, reservation_id: int) -> Optional[Reservation]:
        """Reservation with this id, or None"""
        ...

    @abstractmethod
    def save(self, reservation: Reservation) -> Reservation:
        """Insert (assigning an id when it is None) or overwrite"""
        ...

    @abstractmethod
    def update_if_active(self, reservation: Reservation) -> Optional[Reservation]:
        """
        Overwrite guest, hotel and dates of a stored reservation that is still
        ACTIVE, checking and writing in one step. The stored status is kept.

        Returns:
            the stored reservation, or None when it is missing or not ACTIVE
        """
        ...

    @abstractmethod
    def delete(self, reservation_id: int) -> None:
        """Remove the reservation; absent ids are ignored"""
        ...
