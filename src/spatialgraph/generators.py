"""
Edge generation models.

Both generators are stateless: they take a sequence of nodes and return the
list of edges the model produces, leaving it to the caller to store them.
"""

import logging
import math
from typing import Callable, Optional, Sequence

import numpy as np

from spatialgraph.models import Edge, Node

logger = logging.getLogger(__name__)


def nearest_distance(
    index: int, nodes: Sequence[Node], dist: Callable[[Node, Node], float]
) -> float:
    """
    Smallest distance from nodes[index] to any other node. Distances that
    cannot be compared (nan) are ignored, so a node without usable neighbours
    gets an infinite nearest distance.
    """
    dist_min = math.inf
    for j, other in enumerate(nodes):
        if j == index:
            continue
        d = dist(nodes[index], other)
        if d < dist_min:
            dist_min = d
    return dist_min


def sisg_edges(
    nodes: Sequence[Node], k: float, dist: Callable[[Node, Node], float]
) -> list[Edge]:
    """
    Compute edges according to the Scale-Invariant Spatial Graph (SISG) model.

    Every node is connected to all other nodes lying within k times the
    distance to its own nearest neighbour. Each node uses its own threshold,
    so the relation is not symmetric: an edge may be generated in one
    direction only.

    Parameters:
    -----------
    nodes : sequence of Node
        The nodes to connect
    k : float
        Multiple of the nearest neighbour distance, must not be negative
    dist : callable
        Distance between two nodes

    Returns:
    --------
    list of Edge : one edge per (node, neighbour) pair within the threshold
    """
    if k < 0:
        raise ValueError(f'The SISG parameter k must not be negative, got {k}')

    edges = []
    for i, node in enumerate(nodes):
        dist_min = nearest_distance(i, nodes, dist)
        if dist_min == math.inf:
            continue
        threshold = k * dist_min
        for j, other in enumerate(nodes):
            if i != j and dist(node, other) <= threshold:
                edges.append(Edge(node.coordinates, other.coordinates))

    logger.debug(f'SISG model (k={k}) produced {len(edges)} edges for {len(nodes)} nodes')
    return edges


def gilbert_edges(
    nodes: Sequence[Node], probability: float, rng: Optional[np.random.Generator] = None
) -> list[Edge]:
    """
    Compute random edges according to the Gilbert model.

    Each unordered pair of nodes (i, j) with j < i is visited once and
    connected when a uniform draw from rng is at most the given probability.
    The random source only needs a random() method returning a float in
    [0, 1); it defaults to a fresh numpy generator.
    """
    if not 0 <= probability <= 1:
        raise ValueError(f'The Gilbert probability must be within [0, 1], got {probability}')
    if rng is None:
        rng = np.random.default_rng()

    edges = []
    for i, node in enumerate(nodes):
        for j in range(i):
            if rng.random() <= probability:
                edges.append(Edge(node.coordinates, nodes[j].coordinates))

    logger.debug(f'Gilbert model (p={probability}) produced {len(edges)} edges for {len(nodes)} nodes')
    return edges
