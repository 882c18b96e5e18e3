"""Middleware chains around job event handlers."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable

from . import node as _chain
from .node import HandlerFunc, MiddlewareFunc


class EventType(str, Enum):
    """Events a job handler may be called for: state change, progress, client read."""

    STATE_CHANGE = "STATE_CHANGE"
    PROGRESS = "PROGRESS"
    READ = "READ"


def noop_handler(event_type: Any, job: Any) -> Any:
    """Accept any event and hand the job back unchanged."""
    return job


def apply_middleware(
    handler: HandlerFunc, middlewares: Iterable[MiddlewareFunc]
) -> HandlerFunc:
    """Wrap a job handler so that the middlewares run first, in list order."""
    return _chain.apply_middleware(handler, middlewares)