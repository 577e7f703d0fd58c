"""
Data models for the spatialgraph package.

Nodes and edges are immutable value objects. Edges refer to their endpoints
by coordinate value, not by node, so an edge can outlive the node it was
generated from.
"""

import dataclasses
import json
from numbers import Real
from typing import Optional, Tuple

# (latitude, longitude) in degrees
Coordinate = Tuple[float, float]


@dataclasses.dataclass(frozen=True)
class Node:
    """
    A point of the graph.

    A node without coordinates is accepted by the graph but never matches
    anything during distance computation or export lookups.
    """

    coordinates: Optional[Coordinate]
    name: Optional[str] = None


@dataclasses.dataclass(frozen=True)
class Edge:
    """
    A directed connection between two coordinates.
    """

    source: Coordinate
    target: Coordinate


def _encode_coordinates(coordinates):
    if coordinates is None:
        return None
    return [float(c) if isinstance(c, Real) else c for c in coordinates]


def canonical_key(record) -> str:
    """
    Returns the canonical serialization of a node or an edge. Two records are
    duplicates exactly when their canonical keys are equal.
    """
    if isinstance(record, Node):
        fields = {
            'coordinates': _encode_coordinates(record.coordinates),
            'name': record.name,
        }
    elif isinstance(record, Edge):
        fields = {
            'from': _encode_coordinates(record.source),
            'to': _encode_coordinates(record.target),
        }
    else:
        raise TypeError(f'Cannot build a canonical key for {type(record).__name__}')

    return json.dumps(fields)


def has_position(node: Node) -> bool:
    """
    True when the node holds a numeric (latitude, longitude) pair.
    """
    return (
        isinstance(node.coordinates, (tuple, list))
        and len(node.coordinates) == 2
        and all(isinstance(c, Real) for c in node.coordinates)
    )


def same_coordinates(a: Optional[Coordinate], b: Optional[Coordinate]) -> bool:
    """
    Value equality of two coordinates; a missing coordinate equals nothing.
    """
    if a is None or b is None:
        return False
    return tuple(a) == tuple(b)
