"""
SQLAlchemy-backed reservation store
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import sessionmaker

from bookingmx.models.orm import ReservationRecord
from bookingmx.models.reservation import Reservation, ReservationStatus
from bookingmx.repositories.base import ReservationRepository

logger = logging.getLogger(__name__)


def _to_domain(record: ReservationRecord) -> Reservation:
    return Reservation(
        id=record.id,
        guest_name=record.guest_name,
        hotel_name=record.hotel_name,
        check_in=record.check_in,
        check_out=record.check_out,
        status=record.status,
    )


class SqlReservationRepository(ReservationRepository):
    """Reservation store on a relational table, one session per call"""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def find_all(self) -> List[Reservation]:
        with self._session_factory() as db:
            records = db.query(ReservationRecord).order_by(ReservationRecord.id).all()
            return [_to_domain(r) for r in records]

    def find_by_id(self, reservation_id: int) -> Optional[Reservation]:
        with self._session_factory() as db:
            record = db.get(ReservationRecord, reservation_id)
            return _to_domain(record) if record else None

    def save(self, reservation: Reservation) -> Reservation:
        with self._session_factory() as db:
            record = None
            if reservation.id is not None:
                record = db.get(ReservationRecord, reservation.id)
            if record is None:
                record = ReservationRecord(id=reservation.id)
                db.add(record)

            record.guest_name = reservation.guest_name
            record.hotel_name = reservation.hotel_name
            record.check_in = reservation.check_in
            record.check_out = reservation.check_out
            record.status = reservation.status

            db.commit()
            db.refresh(record)
            if reservation.id is None:
                logger.debug(f"Assigned reservation id {record.id}")
            reservation.id = record.id
        return reservation

    def update_if_active(self, reservation: Reservation) -> Optional[Reservation]:
        with self._session_factory() as db:
            count = db.query(ReservationRecord).filter(
                ReservationRecord.id == reservation.id,
                ReservationRecord.status == ReservationStatus.ACTIVE
            ).update({
                ReservationRecord.guest_name: reservation.guest_name,
                ReservationRecord.hotel_name: reservation.hotel_name,
                ReservationRecord.check_in: reservation.check_in,
                ReservationRecord.check_out: reservation.check_out,
            }, synchronize_session=False)
            db.commit()
            if not count:
                return None
            return _to_domain(db.get(ReservationRecord, reservation.id))

    def delete(self, reservation_id: int) -> None:
        with self._session_factory() as db:
            record = db.get(ReservationRecord, reservation_id)
            if record:
                db.delete(record)
                db.commit()
