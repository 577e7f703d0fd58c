"""
Optional checks of node data quality.

The graph itself accepts any node. These checks report nodes that will not
take part in edge generation or that lie outside the valid coordinate ranges,
without changing anything.
"""

import math

from spatialgraph.models import Node, has_position


def validate_nodes(nodes: list[Node]):
    """
    Validates the coordinates of each node. Returns a (valid, errors) pair,
    where errors holds one message per failed check.
    """
    validations = [
        [lambda n: has_position(n), 'has no (latitude, longitude) coordinates'],
        [lambda n: not has_position(n) or all(math.isfinite(c) for c in n.coordinates),
         'has non-finite coordinates'],
        [lambda n: not has_position(n) or not math.isfinite(n.coordinates[0])
         or -90 <= n.coordinates[0] <= 90, 'has a latitude outside [-90, 90]'],
        [lambda n: not has_position(n) or not math.isfinite(n.coordinates[1])
         or -180 <= n.coordinates[1] <= 180, 'has a longitude outside [-180, 180]'],
    ]
    errors = [f'Node {index} ({node.name or node.coordinates}) {msg}.'
              for index, node in enumerate(nodes)
              for fn, msg in validations if not fn(node)]
    return len(errors) == 0, errors
