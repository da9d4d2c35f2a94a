"""
animal_rescue.gateway.models

Typed view of the gateway route configuration.

Each route is matched by predicates such as `Path=/api/animals` and
`Method=GET`, optionally transformed by filters such as `StripPrefix=1` or
`RateLimit=10,2s`, and may ask the gateway to relay the caller's token to this
service. Keys the models do not know about are kept as-is so a load/dump cycle
never drops gateway vocabulary.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_PREDICATE_RE = re.compile(r"^(?P<name>[A-Z][A-Za-z]*)=(?P<args>\S.*)$")
_FILTER_RE = re.compile(r"^(?P<name>[A-Z][A-Za-z]*)(=(?P<args>.*))?$")
_WINDOW_RE = re.compile(r"^(?P<amount>\d+)(?P<unit>ms|s|m|h)$")

_WINDOW_UNITS = {
    "ms": timedelta(milliseconds=1),
    "s": timedelta(seconds=1),
    "m": timedelta(minutes=1),
    "h": timedelta(hours=1),
}

HTTP_METHODS = frozenset({"GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"})


def split_definition(definition: str) -> tuple[str, list[str]]:
    """
    Split `Name=a,b` into `("Name", ["a", "b"])`; a bare `Name` has no args.
    """

    name, _, args = definition.partition("=")
    return name, [a.strip() for a in args.split(",")] if args else []


@dataclass(frozen=True, slots=True)
class RateLimit:
    limit: int
    window: timedelta

    @classmethod
    def parse(cls, definition: str) -> RateLimit:
        name, args = split_definition(definition)
        if name != "RateLimit":
            raise ValueError(f"not a RateLimit filter: {definition!r}")
        if len(args) != 2:
            raise ValueError(f"RateLimit takes a limit and a window: {definition!r}")
        if not args[0].isdigit() or int(args[0]) < 1:
            raise ValueError(f"rate limit must be a positive integer: {definition!r}")
        m = _WINDOW_RE.match(args[1])
        if m is None:
            raise ValueError(f"invalid rate limit window: {definition!r}")
        window = _WINDOW_UNITS[m["unit"]] * int(m["amount"])
        if not window:
            raise ValueError(f"rate limit window must be positive: {definition!r}")
        return cls(limit=int(args[0]), window=window)


class _GatewayModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class RouteModel(_GatewayModel):
    """
    OpenAPI-style documentation of a route: a request body and responses keyed
    by status code, each holding JSON Schema fragments.
    """

    request_body: dict[str, Any] | None = None
    responses: dict[str, dict[str, Any]] = Field(default_factory=dict)

    @field_validator("responses")
    @classmethod
    def _status_keys(cls, v: dict[str, dict[str, Any]]) -> dict[str, dict[str, Any]]:
        for code in v:
            if not (code.isdigit() and 100 <= int(code) <= 599):
                raise ValueError(f"response key must be an HTTP status code: {code!r}")
        return v


class Route(_GatewayModel):
    predicates: list[str] = Field(min_length=1)
    filters: list[str] = Field(default_factory=list)
    token_relay: bool | None = None
    tags: list[str] = Field(default_factory=list)
    title: str | None = None
    description: str | None = None
    model: RouteModel | None = None

    @field_validator("predicates")
    @classmethod
    def _check_predicates(cls, v: list[str]) -> list[str]:
        for p in v:
            if _PREDICATE_RE.match(p) is None:
                raise ValueError(f"malformed predicate: {p!r}")
            name, args = split_definition(p)
            if name == "Method":
                unknown = {a.upper() for a in args} - HTTP_METHODS
                if unknown:
                    raise ValueError(f"unknown HTTP method(s) in {p!r}: {sorted(unknown)}")
            if name == "Path" and not all(a.startswith("/") for a in args):
                raise ValueError(f"path patterns must start with '/': {p!r}")
        if not any(split_definition(p)[0] == "Path" for p in v):
            raise ValueError("route needs a Path predicate")
        return v

    @field_validator("filters")
    @classmethod
    def _check_filters(cls, v: list[str]) -> list[str]:
        for f in v:
            if _FILTER_RE.match(f) is None:
                raise ValueError(f"malformed filter: {f!r}")
            name, args = split_definition(f)
            if name == "RateLimit":
                RateLimit.parse(f)
            elif name == "StripPrefix" and (len(args) != 1 or not args[0].isdigit()):
                raise ValueError(f"StripPrefix takes one non-negative integer: {f!r}")
        return v

    def _args_of(self, definitions: list[str], name: str) -> list[str]:
        out: list[str] = []
        for d in definitions:
            n, args = split_definition(d)
            if n == name:
                out.extend(args)
        return out

    @property
    def paths(self) -> list[str]:
        return self._args_of(self.predicates, "Path")

    @property
    def methods(self) -> frozenset[str]:
        """Methods this route accepts; empty means any method."""
        return frozenset(m.upper() for m in self._args_of(self.predicates, "Method"))

    @property
    def rate_limit(self) -> RateLimit | None:
        for f in self.filters:
            if split_definition(f)[0] == "RateLimit":
                return RateLimit.parse(f)
        return None

    @property
    def strip_prefix(self) -> int:
        parts = self._args_of(self.filters, "StripPrefix")
        return sum(int(p) for p in parts)

    @property
    def downstream_paths(self) -> list[str]:
        """Path patterns as they reach this service after StripPrefix."""
        n = self.strip_prefix
        out: list[str] = []
        for path in self.paths:
            segments = [s for s in path.split("/") if s]
            out.append("/" + "/".join(segments[n:]))
        return out


class RouteConfig(_GatewayModel):
    routes: list[Route] = Field(default_factory=list)


# --- Module Notes -----------------------------------------------------------
# Only syntax is checked here. Whether a pattern matches is the gateway's call.
