"""
City routes - dataset and nearby-city lookup
"""
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Depends, Query

from bookingmx.config import settings
from bookingmx.dependencies import get_city_dataset, get_city_graph
from bookingmx.graph import CityGraph, get_nearby_cities
from bookingmx.models.schemas import GraphDataResponse, NearbyCityResponse

router = APIRouter(prefix="/cities", tags=["cities"])


@router.get("", response_model=GraphDataResponse)
def get_dataset(dataset: Dict[str, Any] = Depends(get_city_dataset)):
    """Cities and edges the graph was built from"""
    return GraphDataResponse.model_validate(dataset)


@router.get("/nearby", response_model=List[NearbyCityResponse])
def nearby_cities(
    destination: str,
    max_distance_km: Optional[float] = Query(None, alias="maxDistanceKm", ge=0),
    graph: Optional[CityGraph] = Depends(get_city_graph)
):
    """Direct neighbours of a destination, closest first"""
    if graph is None:
        return []
    if max_distance_km is None:
        max_distance_km = settings.DEFAULT_MAX_DISTANCE_KM
    results = get_nearby_cities(graph, destination, max_distance_km)
    return [NearbyCityResponse.model_validate(r) for r in results]
