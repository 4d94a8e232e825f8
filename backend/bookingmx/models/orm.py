"""
SQLAlchemy table for the sql reservation store
"""
from sqlalchemy import Column, Integer, String, Date, Enum as SQLEnum

from bookingmx.database import Base
from bookingmx.models.reservation import ReservationStatus


class ReservationRecord(Base):
    """Persisted reservation row"""
    __tablename__ = "reservations"
    # AUTOINCREMENT keeps SQLite from handing out ids of deleted rows again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    guest_name = Column(String(100), nullable=False)
    hotel_name = Column(String(100), nullable=False)
    check_in = Column(Date, nullable=False)
    check_out = Column(Date, nullable=False)
    status = Column(SQLEnum(ReservationStatus), nullable=False, default=ReservationStatus.ACTIVE)
