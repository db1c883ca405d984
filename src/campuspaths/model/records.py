from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat

from .path import Point

__all__ = [
    "BuildingRecord",
    "PathRecord",
]


class BuildingRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    short_name: str = Field(alias="shortName", min_length=1)
    long_name: str = Field(alias="longName")
    x: float
    y: float

    @property
    def point(self) -> Point:
        return Point(x=self.x, y=self.y)


class PathRecord(BaseModel):
    """A single directed walkway between two coordinates."""

    model_config = ConfigDict(frozen=True)
    x1: float
    y1: float
    x2: float
    y2: float
    distance: NonNegativeFloat

    @property
    def start(self) -> Point:
        return Point(x=self.x1, y=self.y1)

    @property
    def end(self) -> Point:
        return Point(x=self.x2, y=self.y2)
