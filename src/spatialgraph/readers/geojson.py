"""GeoJSON reader.

GeoJSON positions are stored longitude first; nodes store latitude first, so
each position is reversed when it is read.
"""

import json
import logging
from numbers import Real
from typing import Optional

from spatialgraph import constants
from spatialgraph.models import Node

logger = logging.getLogger(__name__)


def read_geojson(geojson_path: str) -> list[Node]:
    """Read the point features of a GeoJSON file as nodes."""
    with open(geojson_path, encoding="utf-8") as geojson_file:
        return nodes_from_geojson(json.load(geojson_file))


def nodes_from_geojson(document: dict) -> list[Node]:
    """Build one node per point feature of a GeoJSON FeatureCollection.

    Features without a geometry, or whose coordinates are not a single
    position, are skipped.

    Args:
        document: Parsed GeoJSON FeatureCollection

    Returns:
        Nodes in feature order, coordinates as (lat, lon)
    """
    nodes = []
    for feature in document.get("features") or []:
        coordinates = feature_coordinates(feature)
        if coordinates is None:
            logger.debug(f"Skipping feature without a point position: {feature.get('id')}")
            continue
        nodes.append(Node(coordinates, feature_name(feature)))

    return nodes


def feature_coordinates(feature: dict) -> Optional[tuple]:
    geometry = feature.get("geometry") or {}
    position = geometry.get("coordinates")
    if not position or len(position) < 2:
        return None
    if not all(isinstance(c, Real) for c in position[:2]):
        return None

    lon, lat = position[0], position[1]
    return (float(lat), float(lon))


def feature_name(feature: dict) -> Optional[str]:
    """Name of the feature; later keys of GEOJSON_NAME_KEYS win."""
    properties = feature.get("properties") or {}
    name = None
    for key in constants.GEOJSON_NAME_KEYS:
        if properties.get(key):
            name = str(properties[key])

    return name
