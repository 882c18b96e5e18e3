"""Middleware chains around task event handlers."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable

from . import node as _chain
from .node import HandlerFunc, MiddlewareFunc


class EventType(str, Enum):
    """Events a task handler may be called for.

    STARTED: a worker began processing the task; STATE_CHANGE: its state
    changed; PROGRESS: its progress changed; READ: a client read it.
    """

    STARTED = "STARTED"
    STATE_CHANGE = "STATE_CHANGE"
    PROGRESS = "PROGRESS"
    READ = "READ"


def noop_handler(event_type: Any, task: Any) -> Any:
    """Accept any event and hand the task back unchanged."""
    return task


def apply_middleware(
    handler: HandlerFunc, middlewares: Iterable[MiddlewareFunc]
) -> HandlerFunc:
    """Wrap a task handler so that the middlewares run first, in list order."""
    return _chain.apply_middleware(handler, middlewares)