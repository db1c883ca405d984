"""
The campus map answers way-finding queries between buildings.

Buildings and walkways are loaded once into a directed graph whose nodes are
coordinates and whose edge weights are walking distances.
Afterwards, the map is only read, so queries can safely be shared.
"""

from collections.abc import Iterable, Mapping

from frozendict import frozendict

from . import loaders
from .constants import CHECK_INVARIANTS
from .errors import NotFound, PreconditionViolation
from .helpers import get_logger
from .model.graph import Graph
from .model.path import Path, Point
from .model.records import BuildingRecord, PathRecord
from .search import shortest_path
from .typing import FilePath, SearchFunc

__all__ = [
    "CampusMap",
]

logger = get_logger(__name__)


class CampusMap:
    """
    Campus with buildings that may be connected through walkways.

    Args:
        buildings: Building records, the short name is the unique key.
        paths: Walkway records, each one creates a single directed edge.
        search_func: Shortest-path search used for route queries.
        check_invariants: Verify the graph invariants after every mutation.

    Examples:
        >>> from campuspaths.model.records import BuildingRecord, PathRecord
        >>> campus = CampusMap(
        ...     [
        ...         BuildingRecord(short_name="A", long_name="Alpha", x=0, y=0),
        ...         BuildingRecord(short_name="B", long_name="Beta", x=3, y=4),
        ...     ],
        ...     [PathRecord(x1=0, y1=0, x2=3, y2=4, distance=5)],
        ... )
        >>> campus.find_shortest_path("A", "B").total_cost
        5.0
    """

    __slots__ = ("_graph", "_buildings", "_search_func")

    _graph: Graph[Point, float]
    _buildings: dict[str, BuildingRecord]
    _search_func: SearchFunc[Point, float]

    def __init__(
        self,
        buildings: Iterable[BuildingRecord],
        paths: Iterable[PathRecord],
        search_func: SearchFunc[Point, float] = shortest_path,
        check_invariants: bool = CHECK_INVARIANTS,
    ) -> None:
        self._graph = Graph(check_invariants=check_invariants)
        self._buildings = {}
        self._search_func = search_func

        for building in buildings:
            if building.short_name in self._buildings:
                logger.warning(
                    f"Duplicate building {building.short_name}, keeping the last record"
                )

            self._buildings[building.short_name] = building
            self._graph.add_node(building.point)

        total_paths = 0

        for path in paths:
            self._graph.add_edge(path.start, path.end, path.distance)
            total_paths += 1

        logger.info(
            f"Loaded {len(self._buildings)} buildings and {total_paths} paths "
            f"into a graph with {len(self._graph)} nodes"
        )

    @classmethod
    def from_files(
        cls,
        buildings_path: FilePath,
        paths_path: FilePath,
        **kwargs,
    ) -> "CampusMap":
        return cls(loaders.buildings(buildings_path), loaders.paths(paths_path), **kwargs)

    @property
    def graph(self) -> Graph[Point, float]:
        return self._graph

    def short_name_exists(self, short_name: str) -> bool:
        return short_name in self._buildings

    def building_for_short(self, short_name: str) -> BuildingRecord:
        if short_name is None:
            raise PreconditionViolation("short name must be given")

        try:
            return self._buildings[short_name]
        except KeyError as e:
            raise NotFound(short_name) from e

    def long_name_for_short(self, short_name: str) -> str:
        return self.building_for_short(short_name).long_name

    def building_names(self) -> Mapping[str, str]:
        return frozendict(
            (short_name, building.long_name)
            for short_name, building in self._buildings.items()
        )

    def find_shortest_path(self, start_short_name: str, end_short_name: str) -> Path:
        """
        Find the cheapest route between two buildings.

        If the end cannot be reached, the returned path has no segments and costs nothing.

        Raises:
            PreconditionViolation: If a name is missing.
            NotFound: If a name does not belong to a building.
        """

        if start_short_name is None or end_short_name is None:
            raise PreconditionViolation("start and end must be given")

        start = self.building_for_short(start_short_name).point
        end = self.building_for_short(end_short_name).point
        edges = self._search_func(self._graph, start, end)

        if edges is None:
            logger.debug(f"No route from {start_short_name} to {end_short_name}")

            return Path(start=start)

        return Path.build(start, edges)
