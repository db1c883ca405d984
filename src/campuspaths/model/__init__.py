from . import graph, path, records
from .graph import Edge, Graph
from .path import Path, Point, Segment
from .records import BuildingRecord, PathRecord

__all__ = [
    "graph",
    "path",
    "records",
    "Edge",
    "Graph",
    "Path",
    "Point",
    "Segment",
    "BuildingRecord",
    "PathRecord",
]
