# API Routers
from bookingmx.routers import cities, reservations

__all__ = ['cities', 'reservations']
