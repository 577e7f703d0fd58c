"""
Distance on the surface of the Earth.

The distance is an equirectangular approximation of the great-circle
distance. Edge generation only needs distances that are consistent relative
to each other, so the approximation is kept as is.
"""

import math

from spatialgraph import constants
from spatialgraph.models import Coordinate, Node


def degree_to_rad(d: float) -> float:
    return d * math.pi / 180


def sign(x: float) -> float:
    if math.isnan(x):
        return math.nan
    if x == 0:
        return 0
    return -1 if x < 0 else 1


def diff_angle(r2: float, r1: float) -> float:
    """
    Difference r2 - r1 of two angles in radians, brought into [-pi/2, pi/2]
    by shifting r1 by pi until the difference fits.

    Non-finite input never fits, so it yields nan.
    """
    if not (math.isfinite(r2) and math.isfinite(r1)):
        return math.nan

    while abs(r2 - r1) > math.pi / 2:
        r1 = r1 + sign(r2 - r1) * math.pi
    return r2 - r1


def distance_on_earth(x: Coordinate, y: Coordinate) -> float:
    """
    Approximate great-circle distance between two (lat, lon) coordinates in
    degrees, using an Earth radius of 6371.009 units.

    Returns nan when either coordinate is missing or not numeric.
    """
    try:
        lat1 = degree_to_rad(float(x[0]))
        lat2 = degree_to_rad(float(y[0]))
        lon1 = degree_to_rad(float(x[1]))
        lon2 = degree_to_rad(float(y[1]))
    except (TypeError, ValueError, IndexError):
        return math.nan

    # Both call orders must evaluate the same expression.
    if (lat2, lon2) < (lat1, lon1):
        lat1, lon1, lat2, lon2 = lat2, lon2, lat1, lon1

    return constants.EARTH_RADIUS * math.sqrt(
        diff_angle(lat2, lat1) ** 2
        + (math.cos((lat2 + lat1) / 2) * diff_angle(lon2, lon1)) ** 2
    )


def node_distance(x: Node, y: Node) -> float:
    return distance_on_earth(x.coordinates, y.coordinates)
