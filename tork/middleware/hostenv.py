"""Middleware that copies host environment variables into running tasks."""

from __future__ import annotations

import os
from typing import Any

from .task import EventType, HandlerFunc

_TASK_STATE_RUNNING = "RUNNING"


class HostEnv:
    """Injects selected host environment variables into a task's env.

    Each spec is either ``NAME`` or ``NAME:ALIAS``; the host's ``NAME`` is
    exposed to the task as ``ALIAS`` (or ``NAME`` when no alias is given).
    """

    def __init__(self, *specs: str) -> None:
        self._vars: dict[str, str] = {}
        for spec in specs:
            parts = spec.split(":")
            if len(parts) == 1:
                self._vars[spec] = spec
            elif len(parts) == 2:
                self._vars[parts[0]] = parts[1]
            else:
                raise ValueError(f"invalid env var spec: {spec}")

    def execute(self, next_handler: HandlerFunc) -> HandlerFunc:
        """Middleware: set host variables when a task changes to running."""

        def handler(event_type: Any, task: Any) -> Any:
            if event_type == EventType.STATE_CHANGE and task.state == _TASK_STATE_RUNNING:
                self._set_host_vars(task)
            return next_handler(event_type, task)

        return handler

    def _set_host_vars(self, task: Any) -> None:
        if task.env is None:
            task.env = {}
        for name, alias in self._vars.items():
            task.env[alias] = os.environ.get(name, "")
        for pre in task.pre or ():
            self._set_host_vars(pre)
        for post in task.post or ():
            self._set_host_vars(post)