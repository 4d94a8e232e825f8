"""
Reservation domain object
"""
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


class ReservationStatus(str, Enum):
    """Reservation status"""
    ACTIVE = "ACTIVE"
    CANCELED = "CANCELED"  # terminal


@dataclass(eq=False)
class Reservation:
    """
    A booking of one guest at one hotel for a date range.

    `id` stays None until the repository stores the record for the first time.
    Two reservations are equal when their ids are equal.
    """
    id: Optional[int]
    guest_name: str
    hotel_name: str
    check_in: Optional[date]
    check_out: Optional[date]
    status: ReservationStatus = field(default=ReservationStatus.ACTIVE)

    @property
    def is_active(self) -> bool:
        return self.status == ReservationStatus.ACTIVE

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, Reservation):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
