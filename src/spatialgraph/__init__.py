__version__ = "v0.10.0"


__all__ = [
    "__version__",
    "cli",
    "config",
    "constants",
    "exporters",
    "generators",
    "geo",
    "graph",
    "models",
    "readers",
    "sgraph",
    "validation",
]

from . import constants
from . import models
from . import geo
from . import generators
from . import exporters
from . import readers
from . import validation
from . import graph
from . import config
from . import sgraph
from . import cli
