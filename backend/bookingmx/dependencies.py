"""
Dependency providers for the routers
Tests replace these through app.dependency_overrides
"""
from functools import lru_cache
from typing import Any, Dict, Optional

from fastapi import Depends

from bookingmx.config import settings
from bookingmx.graph import SAMPLE_DATA, CityGraph, load_city_graph, load_dataset_file
from bookingmx.repositories import ReservationRepository, create_reservation_repository
from bookingmx.services.reservation_service import ReservationService


@lru_cache
def get_reservation_repository() -> ReservationRepository:
    """Process-wide reservation store"""
    return create_reservation_repository(settings.RESERVATION_STORE, settings.DATABASE_URL)


def get_reservation_service(
    repository: ReservationRepository = Depends(get_reservation_repository),
) -> ReservationService:
    return ReservationService(repository)


@lru_cache
def get_city_dataset() -> Dict[str, Any]:
    """Dataset behind the city graph: CITY_DATASET_PATH, else the bundled sample"""
    if settings.CITY_DATASET_PATH:
        return load_dataset_file(settings.CITY_DATASET_PATH)
    return SAMPLE_DATA


@lru_cache
def get_city_graph() -> Optional[CityGraph]:
    """Graph built once from the dataset; None when the dataset is invalid"""
    return load_city_graph(get_city_dataset())
