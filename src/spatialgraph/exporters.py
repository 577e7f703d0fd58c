"""
Text exports of a graph.

Edge endpoints are resolved to the index of the first node with the same
coordinates. Endpoints without a matching node (e.g. edges generated before
the nodes were cleared) are reported as -1.
"""

import math

from spatialgraph import constants
from spatialgraph.models import same_coordinates


def node_index(nodes, coordinates) -> int:
    for index, node in enumerate(nodes):
        if same_coordinates(node.coordinates, coordinates):
            return index
    return constants.NOT_FOUND_INDEX


def format_number(value) -> str:
    """
    Formats a coordinate value without a trailing '.0' for integral floats,
    so 52.0 is written as 52.
    """
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def format_coordinates(coordinates) -> str:
    if coordinates is None:
        return ''
    return ','.join(format_number(c) for c in coordinates)


def edge_indices(graph):
    nodes = graph.nodes
    return [
        (node_index(nodes, e.source), node_index(nodes, e.target))
        for e in graph.edges
    ]


def to_csv(graph) -> str:
    """
    Returns the edges of the graph as CSV rows of node indices, with a
    'from, to' header row.
    """
    rows = [constants.CSV_HEADER] + edge_indices(graph)
    return '\n'.join(constants.CSV_SEPARATOR.join(str(v) for v in row) for row in rows)


def to_tgf(graph) -> str:
    """
    Returns the graph in the Trivial Graph Format: one line per node with its
    index, optional name and coordinates, a '#' line, then one line per edge.
    """
    rows = []
    for index, node in enumerate(graph.nodes):
        name = f'{node.name}{constants.TGF_NAME_SEPARATOR}' if node.name else ''
        rows.append(f'{index} {name}{format_coordinates(node.coordinates)}')
    rows.append(constants.TGF_SECTION_SEPARATOR)
    for source, target in edge_indices(graph):
        rows.append(f'{source} {target}')
    return '\n'.join(rows)
