"""
Node producers: readers turning GeoJSON documents, delimited text and random
sampling into lists of nodes ready to be added to a graph.

Use registry.lookup to choose the file reader for a given path.
"""

from spatialgraph.readers import csv, geojson, random_nodes, registry

__all__ = ["csv", "geojson", "random_nodes", "registry"]
