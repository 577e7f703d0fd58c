import os.path
from collections.abc import Callable

from spatialgraph.models import Node
from spatialgraph.readers import csv, geojson


def lookup(path: str) -> Callable[[str], list[Node]]:
    """
    Determine which file reader to use for the given input file extension.
    """
    readers = {
        ".geojson": geojson.read_geojson,
        ".json": geojson.read_geojson,
        ".csv": csv.read_csv,
        ".tsv": csv.read_csv,
        ".txt": csv.read_csv,
    }

    extension = os.path.splitext(path)[1].lower()
    if extension not in readers:
        raise ValueError(f"No node reader for files with extension '{extension}'")

    return readers[extension]
