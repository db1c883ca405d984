import logging
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any, Literal

__all__ = [
    "get_logger",
    "optional_dependencies",
]


@contextmanager
def optional_dependencies(
    error_handling: Literal["ignore", "raise"] = "ignore",
    extras_name: str | None = None,
) -> Generator[None, Any, None]:
    try:
        yield None
    except (ImportError, ModuleNotFoundError) as e:
        match error_handling:
            case "raise":
                if extras_name is not None:
                    print(f"Please install `campuspaths[{extras_name}]`")

                raise e
            case "ignore":
                pass


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
