"""
City datasets - the bundled sample and JSON file loading
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from bookingmx.exceptions import ValidationError
from bookingmx.graph.city_graph import CityGraph, build_graph, validate_graph_data

logger = logging.getLogger(__name__)

# Guadalajara metro area and nearby regional hubs
SAMPLE_DATA: Dict[str, Any] = {
    "cities": [
        "Guadalajara", "Tlaquepaque", "Zapopan", "Tepatitlán",
        "Lagos de Moreno", "Tala", "Tequila",
    ],
    "edges": [
        {"from": "Guadalajara", "to": "Zapopan", "distance": 12},
        {"from": "Guadalajara", "to": "Tlaquepaque", "distance": 10},
        {"from": "Guadalajara", "to": "Tepatitlán", "distance": 78},
        {"from": "Guadalajara", "to": "Tequila", "distance": 60},
        {"from": "Zapopan", "to": "Tala", "distance": 35},
        {"from": "Tepatitlán", "to": "Lagos de Moreno", "distance": 85},
    ],
}


def load_dataset_file(path: str) -> Dict[str, Any]:
    """
    Read a {cities, edges} dataset from a JSON file.

    Raises:
        ValidationError: the file can't be read or is not valid JSON
    """
    try:
        with Path(path).open(encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise ValidationError(f"Cannot read city dataset {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ValidationError(f"City dataset {path} is not valid JSON: {e}") from e


def load_city_graph(data: Any) -> Optional[CityGraph]:
    """Validate then build; an invalid dataset yields None instead of a graph"""
    result = validate_graph_data(data)
    if not result.ok:
        logger.warning(f"City dataset rejected: {result.reason}")
        return None

    graph = build_graph(data["cities"], data["edges"])
    logger.info(f"City graph loaded ({len(graph)} cities, {len(data['edges'])} edges)")
    return graph
