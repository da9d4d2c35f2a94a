"""
animal_rescue.gateway.loader

Load, validate and serialize the gateway route configuration.
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path

from pydantic import ValidationError

from animal_rescue.gateway.models import RouteConfig

PACKAGED_ROUTES = "routes.json"


class RouteConfigError(Exception):
    pass


def read_packaged_routes() -> str:
    return resources.files("animal_rescue.gateway").joinpath(PACKAGED_ROUTES).read_text(
        encoding="utf-8"
    )


def parse_route_config(raw: str) -> RouteConfig:
    try:
        return RouteConfig.model_validate_json(raw)
    except ValidationError as e:
        raise RouteConfigError(str(e)) from e


def load_route_config(path: str | Path | None = None) -> RouteConfig:
    """
    Load the route configuration from `path`, or the one shipped with the package.
    """

    if path is None:
        return parse_route_config(read_packaged_routes())
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise RouteConfigError(f"cannot read {path}: {e}") from e
    return parse_route_config(raw)


def dump_route_config(config: RouteConfig) -> str:
    # exclude_unset keeps optional keys absent when the source omitted them.
    data = config.model_dump(mode="json", by_alias=True, exclude_unset=True)
    return json.dumps(data, indent=2) + "\n"
