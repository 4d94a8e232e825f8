"""
Reservation routes
"""
from typing import List
from fastapi import APIRouter, Depends

from bookingmx.dependencies import get_reservation_service
from bookingmx.models.schemas import ReservationRequest, ReservationResponse
from bookingmx.services.reservation_service import ReservationService

router = APIRouter(prefix="/reservations", tags=["reservations"])


@router.get("", response_model=List[ReservationResponse])
def list_reservations(service: ReservationService = Depends(get_reservation_service)):
    """List reservations"""
    return [ReservationResponse.model_validate(r) for r in service.list_reservations()]


@router.get("/{reservation_id}", response_model=ReservationResponse)
def get_reservation(
    reservation_id: int,
    service: ReservationService = Depends(get_reservation_service)
):
    """Get a reservation"""
    return ReservationResponse.model_validate(service.get_reservation(reservation_id))


@router.post("", response_model=ReservationResponse)
def create_reservation(
    data: ReservationRequest,
    service: ReservationService = Depends(get_reservation_service)
):
    """Create a reservation"""
    reservation = service.create_reservation(
        data.guest_name, data.hotel_name, data.check_in, data.check_out
    )
    return ReservationResponse.model_validate(reservation)


@router.put("/{reservation_id}", response_model=ReservationResponse)
def update_reservation(
    reservation_id: int,
    data: ReservationRequest,
    service: ReservationService = Depends(get_reservation_service)
):
    """Update a reservation"""
    reservation = service.update_reservation(
        reservation_id, data.guest_name, data.hotel_name, data.check_in, data.check_out
    )
    return ReservationResponse.model_validate(reservation)


@router.delete("/{reservation_id}", response_model=ReservationResponse)
def cancel_reservation(
    reservation_id: int,
    service: ReservationService = Depends(get_reservation_service)
):
    """Cancel a reservation (the record is kept with status CANCELED)"""
    return ReservationResponse.model_validate(service.cancel_reservation(reservation_id))
