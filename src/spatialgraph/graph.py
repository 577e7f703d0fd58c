"""
The spatial graph: an ordered set of nodes and an ordered set of edges.

The graph owns both collections. Readers read them through the `nodes` and
`edges` accessors, which return copies; every mutation goes through a method,
and every mutating method returns the graph itself so calls can be chained:

    Graph().add_nodes_random(100, (50, 52), (6, 9)).add_edges_sisg(2).csv()

Nodes are never removed one by one and never updated in place. Edges are
only produced by the edge generation models.
"""

import logging
from typing import Iterable, Optional

from funcy import distinct

from spatialgraph import exporters, generators, geo
from spatialgraph.models import Coordinate, Edge, Node, canonical_key, has_position
from spatialgraph.readers import csv, geojson, random_nodes

logger = logging.getLogger(__name__)


class Graph:
    def __init__(self):
        self._nodes: list[Node] = []
        self._edges: list[Edge] = []

    def __repr__(self):
        return f'Graph(nodes={len(self._nodes)}, edges={len(self._edges)})'

    # ------------------------------------------------------------------
    # Basic data of the graph

    @property
    def nodes(self) -> tuple[Node, ...]:
        return tuple(self._nodes)

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    def bounding_box(self) -> Optional[tuple[Coordinate, Coordinate]]:
        """
        Returns ((min lat, min lon), (max lat, max lon)) over all nodes with a
        (lat, lon) pair, or None if there are none. Latitude and longitude are
        bounded independently; this is not a geodesic bound.
        """
        located = [n.coordinates for n in self._nodes if has_position(n)]
        if not located:
            return None

        lats = [c[0] for c in located]
        lons = [c[1] for c in located]
        return (min(lats), min(lons)), (max(lats), max(lons))

    # ------------------------------------------------------------------
    # Basic modification of the graph

    def add_nodes(self, nodes: Iterable[Node]) -> 'Graph':
        before = len(self._nodes)
        self._nodes.extend(nodes)
        offered = len(self._nodes) - before
        self.dedupe_nodes()
        logger.debug(f'Added {len(self._nodes) - before} of {offered} nodes')
        return self

    def clear_graph(self) -> 'Graph':
        self._nodes = []
        self._edges = []
        return self

    def clear_edges(self) -> 'Graph':
        self._edges = []
        return self

    def dedupe_nodes(self) -> 'Graph':
        """Drop structurally duplicate nodes, keeping the first occurrence."""
        self._nodes = list(distinct(self._nodes, canonical_key))
        return self

    def dedupe_edges(self) -> 'Graph':
        """Drop structurally duplicate edges, keeping the first occurrence."""
        self._edges = list(distinct(self._edges, canonical_key))
        return self

    # ------------------------------------------------------------------
    # Add nodes

    def add_nodes_random(self, count: int, lat_range, lon_range, rng=None) -> 'Graph':
        return self.add_nodes(random_nodes.random_nodes(count, lat_range, lon_range, rng))

    def add_nodes_geojson(self, document: dict) -> 'Graph':
        return self.add_nodes(geojson.nodes_from_geojson(document))

    def add_nodes_csv(self, text: str) -> 'Graph':
        return self.add_nodes(csv.nodes_from_csv(text))

    # ------------------------------------------------------------------
    # Generation of edges

    def add_edges_sisg(self, k: float) -> 'Graph':
        """
        Add the edges of the Scale-Invariant Spatial Graph (SISG) model,
        using the distance on Earth between the node coordinates.
        """
        self._edges.extend(generators.sisg_edges(self.nodes, k, geo.node_distance))
        return self.dedupe_edges()

    def add_edges_gilbert(self, probability: float, rng=None) -> 'Graph':
        """Add random edges according to the Gilbert model."""
        self._edges.extend(generators.gilbert_edges(self.nodes, probability, rng))
        return self.dedupe_edges()

    # ------------------------------------------------------------------
    # Export

    def csv(self) -> str:
        return exporters.to_csv(self)

    def tgf(self) -> str:
        return exporters.to_tgf(self)
