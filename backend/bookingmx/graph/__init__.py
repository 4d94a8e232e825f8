"""
City graph - nearby-city lookup over a small adjacency dataset
"""
from bookingmx.graph.city_graph import (
    DEFAULT_MAX_DISTANCE_KM,
    CityGraph,
    GraphValidation,
    NearbyCity,
    Neighbor,
    build_graph,
    get_nearby_cities,
    validate_graph_data,
)
from bookingmx.graph.dataset import SAMPLE_DATA, load_city_graph, load_dataset_file

__all__ = [
    "DEFAULT_MAX_DISTANCE_KM",
    "CityGraph",
    "GraphValidation",
    "NearbyCity",
    "Neighbor",
    "build_graph",
    "get_nearby_cities",
    "validate_graph_data",
    "SAMPLE_DATA",
    "load_city_graph",
    "load_dataset_file",
]
