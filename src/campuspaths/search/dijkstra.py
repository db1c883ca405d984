import heapq
import itertools
from dataclasses import dataclass, field

from ..helpers import get_logger
from ..model.graph import Edge
from ..typing import NeighborProvider, SearchFunc, WeightFunc

__all__ = [
    "PriorityState",
    "build",
    "shortest_path",
]

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True, order=True)
class PriorityState[N]:
    priority: float
    # insertion counter, keeps the order total for labels that cannot be compared
    counter: int
    node: N = field(compare=False)


@dataclass(slots=True, frozen=True)
class build[N, E](SearchFunc[N, E]):
    """
    Dijkstra's algorithm over any object that can list the outgoing edges of a node.

    The frontier is a binary heap with lazy deletion: improved distances are pushed
    as new entries and outdated entries are skipped when popped.
    Edge weights must not be negative, this is not checked.

    Args:
        weight_func: Converts an edge weight into a float cost.

    Returns:
        The edges from source to target in travel order, an empty list if both are the same,
        or None if the target cannot be reached.

    Examples:
        >>> from campuspaths.model.graph import Graph
        >>> g = Graph.build([("a", "b", 1), ("b", "c", 2), ("a", "c", 5)])
        >>> [(e.source, e.target) for e in build()(g, "a", "c")]
        [('a', 'b'), ('b', 'c')]
    """

    weight_func: WeightFunc[E] = float

    def __call__(
        self,
        provider: NeighborProvider[N, E],
        source: N,
        target: N,
    ) -> list[Edge[N, E]] | None:
        distances: dict[N, float] = {source: 0.0}
        parents: dict[N, Edge[N, E]] = {}
        counter = itertools.count()
        frontier: list[PriorityState[N]] = [PriorityState(0.0, next(counter), source)]
        settled = 0

        while frontier:
            current = heapq.heappop(frontier)

            if current.priority > distances[current.node]:
                continue

            settled += 1

            if current.node == target:
                break

            for edge in provider.outgoing_edges(current.node):
                cost = current.priority + self.weight_func(edge.weight)
                known_cost = distances.get(edge.target)

                if known_cost is None or cost < known_cost:
                    distances[edge.target] = cost
                    parents[edge.target] = edge
                    heapq.heappush(frontier, PriorityState(cost, next(counter), edge.target))

        logger.debug(f"Settled {settled} nodes, {len(frontier)} frontier entries left")

        if source == target:
            return []

        if target not in parents:
            return None

        edges: list[Edge[N, E]] = []
        node = target

        while node != source:
            edge = parents[node]
            edges.append(edge)
            node = edge.source

        edges.reverse()

        return edges


default_search: build = build()


def shortest_path[N, E](
    provider: NeighborProvider[N, E],
    source: N,
    target: N,
) -> list[Edge[N, E]] | None:
    """Shortcut for `build()(provider, source, target)` with float weights"""

    return default_search(provider, source, target)
