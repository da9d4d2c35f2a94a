"""
animal_rescue.gateway.__main__

Validate the gateway route configuration: `python -m animal_rescue.gateway`.
"""

from __future__ import annotations

import argparse
import sys

from animal_rescue.gateway.loader import RouteConfigError, dump_route_config, load_route_config
from animal_rescue.gateway.models import RouteConfig


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="python -m animal_rescue.gateway",
        description="Validate and print the API gateway route configuration.",
    )
    p.add_argument("--file", help="route config JSON (defaults to the packaged routes.json)")
    p.add_argument("--json", action="store_true", help="print the normalized JSON document")
    return p.parse_args(argv)


def format_summary(config: RouteConfig) -> str:
    lines = []
    for route in config.routes:
        methods = ",".join(sorted(route.methods)) or "*"
        limit = route.rate_limit
        flags = []
        if route.token_relay:
            flags.append("token-relay")
        if limit is not None:
            flags.append(f"{limit.limit}/{limit.window.total_seconds():g}s")
        lines.append(
            f"{methods:<8} {' '.join(route.paths):<60} {' '.join(flags):<24} {route.title or ''}"
        )
    lines.append(f"{len(config.routes)} route(s) OK")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        config = load_route_config(args.file)
    except RouteConfigError as e:
        print(f"Invalid route config: {e}", file=sys.stderr)
        return 1

    if args.json:
        sys.stdout.write(dump_route_config(config))
    else:
        print(format_summary(config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
