"""
Reservation repositories

`memory` keeps reservations in the process; `sql` stores them through SQLAlchemy.
"""
from bookingmx.repositories.base import ReservationRepository
from bookingmx.repositories.memory import InMemoryReservationRepository


def create_reservation_repository(store: str, database_url: str = None) -> ReservationRepository:
    """Build the repository selected by RESERVATION_STORE"""
    if store == "memory":
        return InMemoryReservationRepository()
    if store == "sql":
        from bookingmx.database import create_db_engine, create_session_factory, init_db
        from bookingmx.repositories.sql import SqlReservationRepository

        engine = create_db_engine(database_url)
        init_db(engine)
        return SqlReservationRepository(create_session_factory(engine))
    raise ValueError(f"Unknown reservation store: {store}")


__all__ = [
    "ReservationRepository",
    "InMemoryReservationRepository",
    "create_reservation_repository",
]
