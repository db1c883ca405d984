"""Shared fixtures and helpers for campuspaths tests."""

from pathlib import Path

import pytest

import campuspaths
from campuspaths.model import BuildingRecord, Graph, PathRecord

DATA_DIR = Path(__file__).parent.parent / "data"


def assert_consistent[N, E](g: Graph[N, E]) -> None:
    """Check the adjacency invariant through the public interface only."""

    for node in g.nodes():
        for edge in g.outgoing_edges(node):
            assert edge.source == node
            assert edge in g.incoming_edges(edge.target)

        for edge in g.incoming_edges(node):
            assert edge.target == node
            assert edge in g.outgoing_edges(edge.source)


# --- Graph fixtures ---


@pytest.fixture
def empty_graph() -> Graph[str, float]:
    return Graph(check_invariants=True)


@pytest.fixture
def diamond_graph() -> Graph[str, float]:
    """A→B(1), A→C(4), B→C(2), B→D(5), C→D(1)"""
    return Graph.build(
        [
            ("A", "B", 1.0),
            ("A", "C", 4.0),
            ("B", "C", 2.0),
            ("B", "D", 5.0),
            ("C", "D", 1.0),
        ],
        check_invariants=True,
    )


# --- Campus fixtures ---


@pytest.fixture(scope="session")
def buildings_path() -> Path:
    return DATA_DIR / "campus_buildings.csv"


@pytest.fixture(scope="session")
def paths_path() -> Path:
    return DATA_DIR / "campus_paths.csv"


@pytest.fixture(scope="session")
def building_records() -> list[BuildingRecord]:
    return [
        BuildingRecord(short_name="A", long_name="Alpha Hall", x=0, y=0),
        BuildingRecord(short_name="B", long_name="Beta Hall", x=1, y=0),
        BuildingRecord(short_name="C", long_name="Gamma Hall", x=1, y=1),
        BuildingRecord(short_name="D", long_name="Delta Hall", x=2, y=1),
        BuildingRecord(short_name="Z", long_name="Zeta Annex", x=50, y=50),
    ]


@pytest.fixture(scope="session")
def path_records() -> list[PathRecord]:
    def record(x1, y1, x2, y2, distance) -> PathRecord:
        return PathRecord(x1=x1, y1=y1, x2=x2, y2=y2, distance=distance)

    # same shape as the diamond graph, A=(0,0) B=(1,0) C=(1,1) D=(2,1)
    return [
        record(0, 0, 1, 0, 1),
        record(0, 0, 1, 1, 4),
        record(1, 0, 1, 1, 2),
        record(1, 0, 2, 1, 5),
        record(1, 1, 2, 1, 1),
    ]


@pytest.fixture
def campus(building_records, path_records) -> campuspaths.CampusMap:
    return campuspaths.CampusMap(
        building_records, path_records, check_invariants=True
    )


@pytest.fixture
def campus_from_files(buildings_path, paths_path) -> campuspaths.CampusMap:
    return campuspaths.CampusMap.from_files(
        buildings_path, paths_path, check_invariants=True
    )
