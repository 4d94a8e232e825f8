# Domain models
from bookingmx.models.reservation import Reservation, ReservationStatus

__all__ = ['Reservation', 'ReservationStatus']
