"""
Pydantic schemas
Request/response validation for the API; JSON keys are camelCase
"""
from datetime import date
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from bookingmx.models.reservation import ReservationStatus


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============== Reservation Schemas ==============

class ReservationRequest(CamelModel):
    guest_name: str
    hotel_name: str
    # Missing dates are rejected by the service with its own message
    check_in: Optional[date] = None
    check_out: Optional[date] = None

    @field_validator("guest_name", "hotel_name")
    @classmethod
    def not_blank(cls, v: str, info: ValidationInfo) -> str:
        if not v or not v.strip():
            raise ValueError(f"{to_camel(info.field_name)} must not be blank")
        return v


class ReservationResponse(CamelModel):
    id: int
    guest_name: str
    hotel_name: str
    check_in: date
    check_out: date
    status: ReservationStatus
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


# ============== City Graph Schemas ==============

class EdgeResponse(BaseModel):
    source: str = Field(alias="from")
    to: str
    distance: float
    model_config = ConfigDict(populate_by_name=True)


class GraphDataResponse(BaseModel):
    cities: List[str]
    edges: List[EdgeResponse]


class NearbyCityResponse(BaseModel):
    city: str
    distance: float
    model_config = ConfigDict(from_attributes=True)
