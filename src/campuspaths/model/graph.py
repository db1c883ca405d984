from __future__ import annotations

from collections.abc import Iterable, Iterator, KeysView, Set
from dataclasses import dataclass, field
from typing import Any

from ..constants import CHECK_INVARIANTS
from ..errors import PreconditionViolation
from ..helpers import optional_dependencies
from ..typing import NeighborProvider

__all__ = [
    "Edge",
    "Graph",
    "to_networkx",
]


@dataclass(slots=True, frozen=True)
class Edge[N, E]:
    """Directed edge from `source` to `target`, compared by value."""

    source: N
    target: N
    weight: E


@dataclass(slots=True)
class NodeRecord[N, E]:
    label: N
    # dicts are used as insertion-ordered sets
    outgoing: dict[Edge[N, E], None] = field(default_factory=dict)
    incoming: dict[Edge[N, E], None] = field(default_factory=dict)


def _require(value: Any, name: str) -> None:
    if value is None:
        raise PreconditionViolation(f"{name} must not be None")


@dataclass(slots=True, eq=False)
class Graph[N, E](NeighborProvider[N, E]):
    """
    Mutable directed graph with labeled nodes and weighted edges.

    Node labels are stored in an index that maps every label to an internal
    integer id. Each id owns a record with its outgoing and incoming edges,
    so an edge is always reachable from both of its endpoints.
    Two edges are the same if source, target and weight are equal,
    so parallel edges with different weights can coexist.

    Args:
        check_invariants: Verify the adjacency invariant after every mutation.
            Expensive, meant for tests and debugging.

    Examples:
        >>> g = Graph()
        >>> g.add_edge("a", "b", 1.0)
        True
        >>> g.add_edge("a", "b", 1.0)
        False
        >>> sorted(g.successors("a"))
        ['b']
    """

    check_invariants: bool = CHECK_INVARIANTS
    _index: dict[N, int] = field(default_factory=dict, init=False, repr=False)
    _records: dict[int, NodeRecord[N, E]] = field(
        default_factory=dict, init=False, repr=False
    )
    _next_id: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        self._check_rep()

    @classmethod
    def build(
        cls,
        edges: Iterable[tuple[N, N, E]],
        nodes: Iterable[N] = (),
        check_invariants: bool = CHECK_INVARIANTS,
    ) -> Graph[N, E]:
        g: Graph[N, E] = cls(check_invariants=check_invariants)

        for node in nodes:
            g.add_node(node)

        for source, target, weight in edges:
            g.add_edge(source, target, weight)

        return g

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[N]:
        return iter(self._index)

    def __contains__(self, label: object) -> bool:
        return label in self._index

    def add_node(self, label: N) -> bool:
        """Add an isolated node, returns False if it already exists"""

        _require(label, "label")

        if label in self._index:
            return False

        self._index[label] = self._next_id
        self._records[self._next_id] = NodeRecord(label)
        self._next_id += 1

        self._check_rep()
        return True

    def add_edge(self, source: N, target: N, weight: E) -> bool:
        """Add an edge and any missing endpoint, returns False if the edge already exists"""

        _require(source, "source")
        _require(target, "target")
        _require(weight, "weight")

        edge = Edge(source, target, weight)

        if self.contains_edge(source, target, weight):
            return False

        self.add_node(source)
        self.add_node(target)
        self._record(source).outgoing[edge] = None
        self._record(target).incoming[edge] = None

        self._check_rep()
        return True

    def remove_node(self, label: N) -> bool:
        """Remove a node together with all edges that start or end at it"""

        _require(label, "label")

        if label not in self._index:
            return False

        record = self._record(label)

        for edge in (*record.outgoing, *record.incoming):
            self.remove_edge(edge.source, edge.target, edge.weight)

        del self._records[self._index.pop(label)]

        self._check_rep()
        return True

    def remove_edge(self, source: N, target: N, weight: E) -> bool:
        _require(source, "source")
        _require(target, "target")
        _require(weight, "weight")

        if not self.contains_edge(source, target, weight):
            return False

        edge = Edge(source, target, weight)
        del self._record(source).outgoing[edge]
        del self._record(target).incoming[edge]

        self._check_rep()
        return True

    def contains_node(self, label: N) -> bool:
        _require(label, "label")

        return label in self._index

    def contains_edge(self, source: N, target: N, weight: E) -> bool:
        _require(source, "source")
        _require(target, "target")
        _require(weight, "weight")

        if source not in self._index or target not in self._index:
            return False

        return Edge(source, target, weight) in self._record(source).outgoing

    def outgoing_edges(self, node: N) -> Set[Edge[N, E]]:
        """Read-only view of the edges leaving `node`"""

        return self._existing_record(node).outgoing.keys()

    def incoming_edges(self, node: N) -> Set[Edge[N, E]]:
        """Read-only view of the edges entering `node`"""

        return self._existing_record(node).incoming.keys()

    def successors(self, node: N) -> Set[N]:
        """Distinct labels reachable from `node` over a single edge"""

        record = self._existing_record(node)

        return dict.fromkeys(edge.target for edge in record.outgoing).keys()

    def predecessors(self, node: N) -> Set[N]:
        """Distinct labels that reach `node` over a single edge"""

        record = self._existing_record(node)

        return dict.fromkeys(edge.source for edge in record.incoming).keys()

    def nodes(self) -> KeysView[N]:
        return self._index.keys()

    def edges(self) -> Iterator[Edge[N, E]]:
        for record in self._records.values():
            yield from record.outgoing

    def is_empty(self) -> bool:
        return not self._index

    def has_no_edges(self) -> bool:
        return all(
            not record.outgoing and not record.incoming
            for record in self._records.values()
        )

    def clear(self) -> None:
        """Remove all nodes and edges"""

        self._index.clear()
        self._records.clear()

        self._check_rep()

    def clear_edges(self) -> None:
        """Remove all edges but keep the nodes"""

        for record in self._records.values():
            record.outgoing.clear()
            record.incoming.clear()

        self._check_rep()

    def _record(self, label: N) -> NodeRecord[N, E]:
        return self._records[self._index[label]]

    def _existing_record(self, label: N) -> NodeRecord[N, E]:
        _require(label, "node")

        if label not in self._index:
            raise PreconditionViolation(f"Node {label!r} is not part of the graph")

        return self._record(label)

    def _check_rep(self) -> None:
        if not self.check_invariants:
            return

        assert len(self._index) == len(self._records), "index and records diverged"

        for label, node_id in self._index.items():
            assert label is not None, "node labels cannot be None"
            record = self._records[node_id]
            assert record.label == label, f"record of {label!r} has a foreign label"

            for edge in record.outgoing:
                assert edge.source == label, f"{edge} stored as outgoing of {label!r}"
                assert edge.target in self._index, f"{edge} points to a missing node"
                assert edge in self._record(edge.target).incoming, (
                    f"{edge} is missing from the incoming edges of its target"
                )

            for edge in record.incoming:
                assert edge.target == label, f"{edge} stored as incoming of {label!r}"
                assert edge.source in self._index, f"{edge} starts at a missing node"
                assert edge in self._record(edge.source).outgoing, (
                    f"{edge} is missing from the outgoing edges of its source"
                )


with optional_dependencies():
    import networkx as nx

    def to_networkx[N, E](g: Graph[N, E]) -> nx.MultiDiGraph:
        """Export the graph, storing edge weights under the `weight` attribute."""

        ng = nx.MultiDiGraph()
        ng.add_nodes_from(g.nodes())
        ng.add_edges_from(
            (edge.source, edge.target, {"weight": edge.weight}) for edge in g.edges()
        )

        return ng
