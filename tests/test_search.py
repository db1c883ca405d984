import random
from collections.abc import Collection, Mapping
from dataclasses import dataclass, field

import pytest

import campuspaths
from campuspaths.model.graph import Edge, Graph
from campuspaths.search import shortest_path


def total_cost(edges) -> float:
    return sum(edge.weight for edge in edges)


@dataclass(slots=True, frozen=True)
class AdjacencyProvider[N, E]:
    """Minimal neighbor provider without any graph class behind it."""

    adjacency: Mapping[N, list[tuple[N, E]]]
    calls: list[N] = field(default_factory=list)

    def outgoing_edges(self, node: N) -> Collection[Edge[N, E]]:
        self.calls.append(node)
        return [Edge(node, target, weight) for target, weight in self.adjacency.get(node, [])]


class Label:
    """Node label without an ordering."""

    def __init__(self, name: str) -> None:
        self.name = name


def test_diamond(diamond_graph):
    edges = shortest_path(diamond_graph, "A", "D")

    assert edges == [
        Edge("A", "B", 1.0),
        Edge("B", "C", 2.0),
        Edge("C", "D", 1.0),
    ]
    assert total_cost(edges) == pytest.approx(4.0)


def test_same_node(diamond_graph):
    assert shortest_path(diamond_graph, "A", "A") == []
    assert shortest_path(diamond_graph, "D", "D") == []


def test_unreachable(diamond_graph):
    # edges are directed, nothing leads back to A
    assert shortest_path(diamond_graph, "D", "A") is None

    diamond_graph.add_node("E")
    assert shortest_path(diamond_graph, "A", "E") is None


def test_parallel_edges_prefer_cheaper(empty_graph):
    empty_graph.add_edge("A", "B", 7.0)
    empty_graph.add_edge("A", "B", 2.0)
    empty_graph.add_edge("A", "B", 5.0)

    assert shortest_path(empty_graph, "A", "B") == [Edge("A", "B", 2.0)]


def test_zero_weight_cycle(empty_graph):
    empty_graph.add_edge("A", "B", 0.0)
    empty_graph.add_edge("B", "A", 0.0)
    empty_graph.add_edge("B", "C", 3.0)

    edges = shortest_path(empty_graph, "A", "C")

    assert edges == [Edge("A", "B", 0.0), Edge("B", "C", 3.0)]


def test_equal_cost_paths_only_cost_matters(empty_graph):
    empty_graph.add_edge("S", "L", 1.0)
    empty_graph.add_edge("S", "R", 1.0)
    empty_graph.add_edge("L", "T", 1.0)
    empty_graph.add_edge("R", "T", 1.0)

    edges = shortest_path(empty_graph, "S", "T")

    assert edges is not None
    assert len(edges) == 2
    assert edges[0].source == "S"
    assert edges[-1].target == "T"
    assert total_cost(edges) == pytest.approx(2.0)


def test_stale_frontier_entries(empty_graph):
    # C is first reached with cost 10 and later improved to 3
    empty_graph.add_edge("A", "C", 10.0)
    empty_graph.add_edge("A", "B", 1.0)
    empty_graph.add_edge("B", "C", 2.0)
    empty_graph.add_edge("C", "D", 1.0)

    edges = shortest_path(empty_graph, "A", "D")

    assert edges is not None
    assert total_cost(edges) == pytest.approx(4.0)
    assert [edge.target for edge in edges] == ["B", "C", "D"]


def test_search_stops_at_target():
    provider = AdjacencyProvider(
        {
            "A": [("B", 1), ("C", 100)],
            "B": [("T", 1)],
            "C": [("D", 1)],
            "D": [("E", 1)],
        }
    )

    edges = shortest_path(provider, "A", "T")

    assert edges == [Edge("A", "B", 1), Edge("B", "T", 1)]
    # C is far more expensive than T and never expanded
    assert "C" not in provider.calls
    assert "T" not in provider.calls


def test_neighbor_provider_without_graph():
    provider = AdjacencyProvider({"x": [("y", 2)], "y": [("z", 3)]})

    assert shortest_path(provider, "x", "z") == [Edge("x", "y", 2), Edge("y", "z", 3)]
    assert shortest_path(provider, "z", "x") is None


def test_unorderable_labels(empty_graph):
    a, b, c = Label("a"), Label("b"), Label("c")
    empty_graph.add_edge(a, b, 1.0)
    empty_graph.add_edge(a, c, 1.0)
    empty_graph.add_edge(b, c, 1.0)

    assert shortest_path(empty_graph, a, c) == [Edge(a, c, 1.0)]


def test_custom_weight_func(empty_graph):
    empty_graph.add_edge("A", "B", "5 min")
    empty_graph.add_edge("A", "C", "1 min")
    empty_graph.add_edge("C", "B", "1 min")

    search = campuspaths.search.dijkstra.build(weight_func=lambda w: float(w.split()[0]))

    assert [edge.target for edge in search(empty_graph, "A", "B")] == ["C", "B"]


def test_matches_networkx():
    nx = pytest.importorskip("networkx")
    rng = random.Random(7)

    for _ in range(20):
        g: Graph[int, float] = Graph()
        nodes = range(15)

        for node in nodes:
            g.add_node(node)

        for _ in range(40):
            g.add_edge(rng.choice(nodes), rng.choice(nodes), float(rng.randint(0, 9)))

        ng = campuspaths.model.graph.to_networkx(g)

        for source, target in [(rng.choice(nodes), rng.choice(nodes)) for _ in range(10)]:
            edges = shortest_path(g, source, target)

            if not nx.has_path(ng, source, target):
                assert edges is None
                continue

            assert edges is not None
            assert total_cost(edges) == pytest.approx(
                nx.dijkstra_path_length(ng, source, target)
            )

            # edges must form a chain from source to target
            node = source
            for edge in edges:
                assert edge.source == node
                assert g.contains_edge(edge.source, edge.target, edge.weight)
                node = edge.target

            assert node == target
