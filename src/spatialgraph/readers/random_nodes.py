"""Random node sampler."""

from typing import Optional

import numpy as np

from spatialgraph.models import Node


def random_nodes(
    count: int,
    lat_range: tuple,
    lon_range: tuple,
    rng: Optional[np.random.Generator] = None,
) -> list[Node]:
    """
    Sample unnamed nodes uniformly within the given latitude and longitude
    ranges. Latitude is drawn before longitude for every node. The random
    source only needs a random() method and defaults to a fresh numpy
    generator.
    """
    if count < 0:
        raise ValueError(f"The number of random nodes must not be negative, got {count}")
    if rng is None:
        rng = np.random.default_rng()

    def draw(value_range):
        lo, hi = value_range
        return lo + (hi - lo) * rng.random()

    nodes = []
    for _ in range(count):
        lat = draw(lat_range)
        lon = draw(lon_range)
        nodes.append(Node((float(lat), float(lon))))

    return nodes
