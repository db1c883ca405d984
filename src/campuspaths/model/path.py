from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from .graph import Edge

__all__ = [
    "Point",
    "Segment",
    "Path",
]


class Point(BaseModel):
    model_config = ConfigDict(frozen=True)
    x: float
    y: float


class Segment(BaseModel):
    model_config = ConfigDict(frozen=True)
    start: Point
    end: Point
    cost: float


class Path(BaseModel):
    """
    Route that starts at `start` and follows `segments` in order.

    Segments are chained, i.e. every segment starts where the previous one ends.
    A path without segments stays at its start and costs nothing.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)
    start: Point
    segments: tuple[Segment, ...] = Field(default=(), alias="path")
    total_cost: float = Field(default=0.0, alias="totalCost")

    @property
    def end(self) -> Point:
        if not self.segments:
            return self.start

        return self.segments[-1].end

    def extend(self, point: Point, cost: float) -> "Path":
        """Return a new path that additionally travels from `end` to `point`.

        Part of the public API for building routes by hand, route queries use `build`.
        """

        return Path(
            start=self.start,
            segments=(*self.segments, Segment(start=self.end, end=point, cost=cost)),
            total_cost=self.total_cost + cost,
        )

    @classmethod
    def build(cls, start: Point, edges: Iterable[Edge[Point, float]]) -> "Path":
        segments = tuple(
            Segment(start=edge.source, end=edge.target, cost=edge.weight)
            for edge in edges
        )

        return cls(
            start=start,
            segments=segments,
            total_cost=sum(segment.cost for segment in segments),
        )
