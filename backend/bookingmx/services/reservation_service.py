"""
Reservation service - business rules on top of the repository
"""
import logging
from datetime import date
from typing import Callable, List, Optional

from bookingmx.exceptions import NotFoundError, ValidationError
from bookingmx.models.reservation import Reservation, ReservationStatus
from bookingmx.repositories.base import ReservationRepository

logger = logging.getLogger(__name__)


def validate_dates(check_in: Optional[date], check_out: Optional[date], today: date) -> None:
    """
    Check a stay's date range, first failing rule wins.

    Raises:
        ValidationError: a date is missing, the range is empty or reversed,
            or either date is not strictly after today
    """
    if check_in is None or check_out is None:
        raise ValidationError("Dates cannot be null")
    if check_out <= check_in:
        raise ValidationError("Check-out must be after check-in")
    if check_in <= today:
        raise ValidationError("Check-in must be in the future")
    if check_out <= today:
        raise ValidationError("Check-out must be in the future")


class ReservationService:
    """Reservation service"""

    def __init__(self, repository: ReservationRepository,
                 clock: Callable[[], date] = date.today):
        self.repository = repository
        self.clock = clock

    def list_reservations(self) -> List[Reservation]:
        """List reservations"""
        return self.repository.find_all()

    def get_reservation(self, reservation_id: int) -> Reservation:
        """Get a single reservation"""
        reservation = self.repository.find_by_id(reservation_id)
        if reservation is None:
            raise NotFoundError("Reservation not found")
        return reservation

    def create_reservation(self, guest_name: str, hotel_name: str,
                           check_in: Optional[date], check_out: Optional[date]) -> Reservation:
        """Create a reservation, always ACTIVE"""
        validate_dates(check_in, check_out, self.clock())

        reservation = Reservation(
            id=None,
            guest_name=guest_name,
            hotel_name=hotel_name,
            check_in=check_in,
            check_out=check_out,
            status=ReservationStatus.ACTIVE,
        )
        saved = self.repository.save(reservation)
        logger.info(f"Created reservation {saved.id} for {guest_name} at {hotel_name}")
        return saved

    def update_reservation(self, reservation_id: int, guest_name: str, hotel_name: str,
                           check_in: Optional[date], check_out: Optional[date]) -> Reservation:
        """Overwrite guest, hotel and dates of an active reservation"""
        existing = self.get_reservation(reservation_id)
        if not existing.is_active:
            raise ValidationError("Cannot update a canceled reservation")

        validate_dates(check_in, check_out, self.clock())

        existing.guest_name = guest_name
        existing.hotel_name = hotel_name
        existing.check_in = check_in
        existing.check_out = check_out

        # A cancel may have landed since the read; it must not be undone
        saved = self.repository.update_if_active(existing)
        if saved is None:
            if self.repository.find_by_id(reservation_id) is None:
                raise NotFoundError("Reservation not found")
            raise ValidationError("Cannot update a canceled reservation")
        logger.info(f"Updated reservation {saved.id}")
        return saved

    def cancel_reservation(self, reservation_id: int) -> Reservation:
        """Cancel a reservation; canceling twice is allowed"""
        existing = self.get_reservation(reservation_id)
        existing.status = ReservationStatus.CANCELED

        saved = self.repository.save(existing)
        logger.info(f"Canceled reservation {saved.id}")
        return saved
