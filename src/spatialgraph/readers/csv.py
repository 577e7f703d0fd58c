"""Delimited text reader.

Each line holds a latitude, a longitude and an optional name separated by
commas, spaces or tabs. Lines without a numeric latitude and longitude are
dropped.
"""

import logging
import re

import pandas as pd

from spatialgraph.models import Node

logger = logging.getLogger(__name__)

LINE_SEPARATOR = re.compile(r"\r?\n")
FIELD_SEPARATOR = re.compile(r"[ \t]*,[ \t]*|[ \t]+")


def read_csv(csv_path: str) -> list[Node]:
    with open(csv_path, encoding="utf-8") as csv_file:
        return nodes_from_csv(csv_file.read())


def split_fields(line: str) -> list:
    fields = FIELD_SEPARATOR.split(line.strip())
    return (fields + [None, None, None])[:3]


def nodes_from_csv(text: str) -> list[Node]:
    lines = [line for line in LINE_SEPARATOR.split(text) if line.strip()]
    if not lines:
        return []

    df = pd.DataFrame([split_fields(line) for line in lines], columns=["lat", "lon", "name"])
    df["lat"] = pd.to_numeric(df["lat"], errors="coerce")
    df["lon"] = pd.to_numeric(df["lon"], errors="coerce")

    parsed = df.dropna(subset=["lat", "lon"])
    dropped = len(df) - len(parsed)
    if dropped:
        logger.debug(f"Dropped {dropped} line(s) without a numeric latitude and longitude")

    return [
        Node((float(lat), float(lon)), name if isinstance(name, str) and name else None)
        for lat, lon, name in parsed.itertuples(index=False)
    ]
