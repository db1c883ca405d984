"""
This module provides loaders that read building and walkway records from csv, json, or yaml files.
Every row is validated against a Pydantic model before it reaches the campus map.
"""

import csv as csvlib
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, BinaryIO, TextIO

import orjson
import yaml as yamllib
from pydantic import BaseModel

from .model.records import BuildingRecord, PathRecord
from .typing import ConversionFunc, FilePath

__all__ = [
    "buildings",
    "csv",
    "file",
    "json",
    "paths",
    "records",
    "validate",
    "yaml",
]

ReadableType = str | bytes | TextIO | BinaryIO
type Rows = list[dict[str, Any]]


def read(data: ReadableType) -> str:
    if isinstance(data, str):
        return data

    elif isinstance(data, bytes | bytearray):
        return data.decode("utf-8-sig")

    return read(data.read())  # pyright: ignore


def _rows(data: Any) -> Rows:
    if isinstance(data, Mapping):
        return list(data.values())
    elif isinstance(data, list):
        return data

    raise TypeError(f"Invalid data type: {type(data)}")


@dataclass(slots=True, frozen=True)
class csv(ConversionFunc[Iterable[str] | ReadableType, Rows]):
    """Reads a csv file with a header row into a list of rows"""

    def __call__(self, source: Iterable[str] | ReadableType) -> Rows:
        if isinstance(source, str | bytes | bytearray) or hasattr(source, "read"):
            source = read(source).splitlines()  # pyright: ignore

        reader = csvlib.DictReader(source)  # pyright: ignore

        return [
            {
                key.strip(): value.strip() if isinstance(value, str) else value
                for key, value in row.items()
                if key is not None
            }
            for row in reader
        ]


@dataclass(slots=True, frozen=True)
class json(ConversionFunc[ReadableType, Rows]):
    """Reads a json array (or an object of rows) into a list of rows"""

    def __call__(self, source: ReadableType) -> Rows:
        return _rows(orjson.loads(read(source)))


@dataclass(slots=True, frozen=True)
class yaml(ConversionFunc[ReadableType, Rows]):
    """Reads a yaml sequence (or a mapping of rows) into a list of rows"""

    def __call__(self, source: ReadableType) -> Rows:
        return _rows(yamllib.safe_load(read(source)))


StructuredLoader = Callable[[ReadableType], Rows]

structured_loaders: dict[str, StructuredLoader] = {
    ".csv": csv(),
    ".json": json(),
    ".yaml": yaml(),
    ".yml": yaml(),
}


def file(path: FilePath, loader: StructuredLoader | None = None) -> Rows:
    """Reads the rows of a file. The file can be of type csv, json, yaml, or yml.

    Args:
        path: Path of the file.
        loader: Custom loader, by default it is chosen by the file suffix.

    Returns:
        Returns the rows as a list of dicts.
    """
    if isinstance(path, str):
        path = Path(path)

    if not path.is_file():
        raise FileNotFoundError(path)

    if loader is None and path.suffix not in structured_loaders:
        raise ValueError(f"Unsupported file type: {path.suffix}")

    if loader is None:
        loader = structured_loaders[path.suffix]

    with path.open("rb") as fp:
        return loader(fp)


def validate[V: BaseModel](rows: Iterable[Any], model: type[V]) -> list[V]:
    """Validates every row against a Pydantic model.

    Examples:
        >>> validate([{"x1": 0, "y1": 0, "x2": 1, "y2": 0, "distance": 1}], PathRecord)
        [PathRecord(x1=0.0, y1=0.0, x2=1.0, y2=0.0, distance=1.0)]
    """

    return [model.model_validate(row) for row in rows]


def records[V: BaseModel](path: FilePath, model: type[V]) -> Sequence[V]:
    return validate(file(path), model)


def buildings(path: FilePath) -> Sequence[BuildingRecord]:
    return records(path, BuildingRecord)


def paths(path: FilePath) -> Sequence[PathRecord]:
    return records(path, PathRecord)
