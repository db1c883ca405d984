from collections.abc import Callable, Collection
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .model.graph import Edge

__all__ = [
    "ConversionFunc",
    "FilePath",
    "NeighborProvider",
    "SearchFunc",
    "WeightFunc",
]

type FilePath = str | Path
type WeightFunc[E] = Callable[[E], float]


class ConversionFunc[U, V](Protocol):
    """Converts a single value from type U to type V."""

    def __call__(
        self,
        batch: U,
        /,
    ) -> V: ...


class NeighborProvider[N, E](Protocol):
    """Anything that can enumerate the edges leaving a node."""

    def outgoing_edges(
        self,
        node: N,
        /,
    ) -> Collection["Edge[N, E]"]: ...


class SearchFunc[N, E](Protocol):
    """Finds a minimum-cost edge sequence between two nodes, or None if unreachable."""

    def __call__(
        self,
        provider: NeighborProvider[N, E],
        source: N,
        target: N,
        /,
    ) -> "list[Edge[N, E]] | None": ...
