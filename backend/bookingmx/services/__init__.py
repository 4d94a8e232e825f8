# Services
from bookingmx.services.reservation_service import ReservationService, validate_dates

__all__ = ['ReservationService', 'validate_dates']
