import os
import sys
from pathlib import Path
from typing import Annotated

import orjson

import campuspaths

with campuspaths.helpers.optional_dependencies("raise", "cli"):
    import typer
    from rich import print


__all__ = ["app"]

app = typer.Typer(pretty_exceptions_enable=False)


@app.callback()
def app_callback():
    pass


@app.command()
def buildings(buildings_path: Path) -> None:
    for building in campuspaths.loaders.buildings(buildings_path):
        print(f"{building.short_name}: {building.long_name}")


@app.command()
def route(
    buildings_path: Path,
    paths_path: Path,
    start: str,
    end: str,
    output_path: Annotated[Path | None, typer.Option()] = None,
) -> None:
    campus = campuspaths.campus.CampusMap.from_files(buildings_path, paths_path)

    try:
        result = campus.find_shortest_path(start, end)
    except campuspaths.errors.NotFound as e:
        print(f"Unknown building: {e.key}", file=sys.stderr)
        raise typer.Exit(code=1) from e

    if output_path:
        campuspaths.dumpers.file(output_path, result)

    print(
        f"Path from {campus.long_name_for_short(start)} "
        f"to {campus.long_name_for_short(end)}:"
    )

    for segment in result.segments:
        print(
            f"  ({segment.start.x:.4f}, {segment.start.y:.4f}) -> "
            f"({segment.end.x:.4f}, {segment.end.y:.4f}): {segment.cost:.3f}"
        )

    print(f"Total cost: {result.total_cost:.3f}")


@app.command()
def serve(
    buildings_path: Annotated[Path | None, typer.Option()] = None,
    paths_path: Annotated[Path | None, typer.Option()] = None,
    host: str = "0.0.0.0",
    port: int = 8080,
    reload: bool = False,
    root_path: str = "",
) -> None:
    import uvicorn

    if buildings_path is not None:
        os.environ["CAMPUSPATHS_BUILDINGS_PATH"] = str(buildings_path)

    if paths_path is not None:
        os.environ["CAMPUSPATHS_PATHS_PATH"] = str(paths_path)

    uvicorn.run(
        "campuspaths.api:app",
        host=host,
        port=port,
        reload=reload,
        root_path=root_path,
    )


@app.command()
def openapi(file: Path | None = None):
    from campuspaths.api import app

    schema = orjson.dumps(
        app.openapi(),
        option=orjson.OPT_INDENT_2,
    )

    if file is None:
        print(schema.decode())

    else:
        print(f"Writing OpenAPI schema to {file}")

        with file.open("wb") as fp:
            fp.write(schema)


if __name__ == "__main__":
    app()
