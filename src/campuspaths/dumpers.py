from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import orjson
import yaml as yamllib
from pydantic import BaseModel

from .typing import ConversionFunc, FilePath

__all__ = [
    "json",
    "yaml",
    "file",
]


def default_conversion_func(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", by_alias=True)

    if isinstance(obj, Mapping):
        return {str(k): default_conversion_func(v) for k, v in obj.items()}

    if isinstance(obj, list | tuple):
        return [default_conversion_func(v) for v in obj]

    return obj


@dataclass(slots=True, frozen=True)
class yaml(ConversionFunc[Any, str]):
    """Writes an object to yaml."""

    conversion_func: ConversionFunc[Any, Any] = default_conversion_func

    def __call__(self, obj: Any) -> str:
        return yamllib.safe_dump(self.conversion_func(obj), sort_keys=False)


@dataclass(slots=True, frozen=True)
class json(ConversionFunc[Any, bytes]):
    """Writes an object to json bytes.

    Args:
        default: Function to serialize arbitrary objects, see orjson documentation.
        option: Serialization options, see orjson documentation.
            Multiple options can be combined using the bitwise OR operator `|`.
    """

    default: Callable[[Any], Any] | None = None
    option: int | None = None
    conversion_func: ConversionFunc[Any, Any] = default_conversion_func

    def __call__(self, obj: Any) -> bytes:
        return orjson.dumps(
            self.conversion_func(obj),
            default=self.default,
            option=self.option,
        )


Dumper = Callable[[Any], str | bytes]


dumpers: dict[str, Dumper] = {
    ".json": json(),
    ".yaml": yaml(),
    ".yml": yaml(),
}


def file(
    path: FilePath,
    data: Any,
    dumper: Dumper | None = None,
) -> None:
    """Writes arbitrary data to a file.

    Args:
        path: Path of the output file.
        data: Data to write to the file.
        dumper: Function to use, by default it is chosen by the file suffix.
    """
    if isinstance(path, str):
        path = Path(path)

    if dumper is None and path.suffix not in dumpers:
        raise ValueError(f"Unsupported file type: {path.suffix}")

    if dumper is None:
        dumper = dumpers[path.suffix]

    encoded_data = dumper(data)

    if isinstance(encoded_data, str):
        with open(path, "w") as f:
            f.write(encoded_data)

    elif isinstance(encoded_data, bytes):
        with open(path, "wb") as f:
            f.write(encoded_data)

    else:
        raise ValueError("Invalid dumper output type")
