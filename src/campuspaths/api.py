from collections.abc import Mapping
from functools import cache
from pathlib import Path
from typing import Annotated

import campuspaths

with campuspaths.helpers.optional_dependencies("raise", "api"):
    from fastapi import Depends, FastAPI, HTTPException, Query
    from fastapi.middleware.cors import CORSMiddleware
    from fastapi.openapi.utils import get_openapi
    from pydantic_settings import BaseSettings, SettingsConfigDict

logger = campuspaths.helpers.get_logger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="campuspaths_")
    buildings_path: Path = campuspaths.constants.DATA_DIR / "campus_buildings.csv"
    paths_path: Path = campuspaths.constants.DATA_DIR / "campus_paths.csv"


@cache
def get_settings() -> Settings:
    return Settings()


@cache
def get_campus() -> campuspaths.campus.CampusMap:
    settings = get_settings()
    logger.info(
        f"Loading campus from {settings.buildings_path} and {settings.paths_path}"
    )

    return campuspaths.campus.CampusMap.from_files(
        settings.buildings_path, settings.paths_path
    )


Campus = Annotated[campuspaths.campus.CampusMap, Depends(get_campus)]

app = FastAPI()
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["Content-Type"],
    max_age=3600,
)


@app.get("/buildings")
def buildings(campus: Campus) -> Mapping[str, str]:
    return dict(campus.building_names())


@app.get("/building")
def building(
    campus: Campus,
    name: Annotated[str | None, Query()] = None,
) -> campuspaths.model.BuildingRecord:
    if name is None:
        raise HTTPException(status_code=400, detail="Missing building name")

    try:
        return campus.building_for_short(name)
    except campuspaths.errors.NotFound as e:
        raise HTTPException(status_code=400, detail="Nonexistent building") from e


@app.get("/path")
def path(
    campus: Campus,
    start: Annotated[str | None, Query()] = None,
    end: Annotated[str | None, Query()] = None,
) -> campuspaths.model.Path:
    if start is None or end is None:
        raise HTTPException(status_code=400, detail="Missing start or end")

    try:
        return campus.find_shortest_path(start, end)
    except campuspaths.errors.NotFound as e:
        raise HTTPException(status_code=400, detail="Nonexistent building") from e


def openapi_generator():
    if not app.openapi_schema:
        app.openapi_schema = get_openapi(
            title="campuspaths",
            version="0.1.0",
            summary="API for campuspaths",
            description="Finds the shortest walking routes between campus buildings.",
            routes=app.routes,
        )

    return app.openapi_schema


app.openapi = openapi_generator
