"""
animal_rescue.observability.logging

Structured logging for the adoption backend.

Responsibilities:
- Configure `structlog`: JSON lines for deployed environments, a colourless
  console renderer for local development.
- Name the events the service emits so dashboards can filter on them.
"""

from __future__ import annotations

import enum
import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor


class LogEvent(enum.StrEnum):
    startup = "startup"
    shutdown = "shutdown"
    sample_animals_seeded = "sample_animals_seeded"
    invalid_token_ignored = "invalid_token_ignored"
    readiness_check_failed = "readiness_check_failed"

    list_animals = "list_animals"
    submit_adoption_request = "submit_adoption_request"
    adoption_request_created = "adoption_request_created"
    edit_adoption_request = "edit_adoption_request"
    delete_adoption_request = "delete_adoption_request"
    adoption_request_rejected = "adoption_request_rejected"


def build_processors(*, service_name: str, json_logs: bool) -> list[Processor]:
    shared: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _add_service_name(service_name),
    ]
    if json_logs:
        return [*shared, structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    return [*shared, structlog.dev.ConsoleRenderer(colors=False)]


def configure_logging(*, service_name: str, level: str, json_logs: bool = True) -> None:
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=build_processors(service_name=service_name, json_logs=json_logs),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _add_service_name(service_name: str) -> Processor:
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# --- Module Notes -----------------------------------------------------------
# Request ids, paths and methods are merged in from contextvars bound by
# `observability.middleware`; handlers only add the adopter and ids they act on.
