"""
Campus way-finding on top of a generic directed graph and Dijkstra search.

The package is organized bottom-up:
`model.graph` holds the graph and its edges,
`search` finds shortest paths over anything that can list outgoing edges,
and `campus` turns building and walkway records into named route queries.
"""

import logging

from . import (
    campus,
    constants,
    dumpers,
    errors,
    helpers,
    loaders,
    model,
    search,
    typing,
)
from .campus import CampusMap

__all__ = [
    "campus",
    "constants",
    "dumpers",
    "errors",
    "helpers",
    "loaders",
    "model",
    "search",
    "typing",
    "CampusMap",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
