"""Jobs, scheduled jobs and their supporting records."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from enum import Enum
from typing import Any, Iterable, TypeVar

from .roles import Role

_T = TypeVar("_T")


class JobState(str, Enum):
    """Lifecycle state of a job."""

    PENDING = "PENDING"
    SCHEDULED = "SCHEDULED"
    RUNNING = "RUNNING"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    RESTART = "RESTART"


class ScheduledJobState(str, Enum):
    """State of a scheduled job."""

    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"


def _clone_value(value: Any) -> Any:
    """Copy a value, using its own clone() when it has one."""
    if value is None:
        return None
    clone = getattr(value, "clone", None)
    if callable(clone):
        return clone()
    return copy.deepcopy(value)


def _clone_dict(value: dict[str, str] | None) -> dict[str, str] | None:
    return dict(value) if value is not None else None


def _copy_list(value: list | None) -> list | None:
    return list(value) if value is not None else None


def clone_tasks(tasks: Iterable[Any] | None) -> list:
    """Return deep copies of the given tasks."""
    return [_clone_value(t) for t in tasks or ()]


@dataclass
class JobSchedule:
    """The schedule a job was started from."""

    id: str = ""
    cron: str = ""

    def clone(self) -> JobSchedule:
        return replace(self)


@dataclass
class Permission:
    """Access granted to a role or to a user."""

    role: Role | None = None
    user: Any = None

    def clone(self) -> Permission:
        if self.role is not None:
            return Permission(role=self.role.clone())
        return Permission(user=_clone_value(self.user))


@dataclass
class AutoDelete:
    """How long after completion a job is deleted."""

    after: str = ""

    def clone(self) -> AutoDelete:
        return replace(self)


@dataclass
class JobContext:
    """Values available to expressions evaluated within a job."""

    job: dict[str, str] | None = None
    inputs: dict[str, str] | None = None
    secrets: dict[str, str] | None = None
    tasks: dict[str, str] | None = None

    def clone(self) -> JobContext:
        return JobContext(**{k: _clone_dict(v) for k, v in self.as_map().items()})

    def as_map(self) -> dict[str, Any]:
        """Return the context as a mapping for template evaluation."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class JobDefaults:
    """Defaults applied to every task of a job."""

    retry: Any = None
    limits: Any = None
    timeout: str = ""
    queue: str = ""
    priority: int = 0

    def clone(self) -> JobDefaults:
        return replace(
            self, retry=_clone_value(self.retry), limits=_clone_value(self.limits)
        )


@dataclass
class Webhook:
    """A callback invoked on job or task events."""

    url: str = ""
    headers: dict[str, str] | None = None
    event: str = ""
    if_: str = ""

    def clone(self) -> Webhook:
        return replace(self, headers=_clone_dict(self.headers))


def clone_webhooks(webhooks: Iterable[Webhook] | None) -> list[Webhook]:
    """Return copies of the given webhooks."""
    return [w.clone() for w in webhooks or ()]


def clone_permissions(permissions: Iterable[Permission] | None) -> list[Permission]:
    """Return copies of the given permissions."""
    return [p.clone() for p in permissions or ()]


def _cloned_definition(obj: Any) -> dict[str, Any]:
    """Deep copies of the fields jobs and scheduled jobs have in common."""
    return {
        "tags": _copy_list(obj.tags),
        "created_by": _clone_value(obj.created_by),
        "tasks": clone_tasks(obj.tasks),
        "inputs": _clone_dict(obj.inputs),
        "secrets": _clone_dict(obj.secrets),
        "defaults": _clone_value(obj.defaults),
        "webhooks": clone_webhooks(obj.webhooks),
        "permissions": clone_permissions(obj.permissions),
        "auto_delete": _clone_value(obj.auto_delete),
    }


@dataclass
class Job:
    """A job: an ordered list of tasks and its execution state."""

    id: str = ""
    parent_id: str = ""
    name: str = ""
    description: str = ""
    tags: list[str] | None = None
    state: str = ""
    created_at: datetime | None = None
    created_by: Any = None
    started_at: datetime | None = None
    completed_at: datetime | None = None
    failed_at: datetime | None = None
    tasks: list = field(default_factory=list)
    execution: list = field(default_factory=list)
    position: int = 0
    inputs: dict[str, str] | None = None
    context: JobContext = field(default_factory=JobContext)
    task_count: int = 0
    output: str = ""
    result: str = ""
    error: str = ""
    defaults: JobDefaults | None = None
    webhooks: list[Webhook] | None = None
    permissions: list[Permission] | None = None
    auto_delete: AutoDelete | None = None
    delete_at: datetime | None = None
    secrets: dict[str, str] | None = None
    progress: float = 0.0
    schedule: JobSchedule | None = None

    def clone(self) -> Job:
        """Return a deep copy of the job; the deletion time is not carried over."""
        return replace(
            self,
            **_cloned_definition(self),
            execution=clone_tasks(self.execution),
            context=self.context.clone(),
            schedule=_clone_value(self.schedule),
            delete_at=None,
        )


@dataclass
class ScheduledJob:
    """A job definition that is started on a cron schedule."""

    id: str = ""
    name: str = ""
    description: str = ""
    cron: str = ""
    state: str = ""
    inputs: dict[str, str] | None = None
    tasks: list = field(default_factory=list)
    created_by: Any = None
    defaults: JobDefaults | None = None
    auto_delete: AutoDelete | None = None
    webhooks: list[Webhook] | None = None
    permissions: list[Permission] | None = None
    created_at: datetime | None = None
    tags: list[str] | None = None
    secrets: dict[str, str] | None = None
    output: str = ""

    def clone(self) -> ScheduledJob:
        return replace(self, **_cloned_definition(self))


@dataclass
class JobSummary:
    """A lightweight view of a job without its tasks."""

    id: str = ""
    created_by: Any = None
    parent_id: str = ""
    inputs: dict[str, str] | None = None
    name: str = ""
    description: str = ""
    tags: list[str] | None = None
    state: str = ""
    created_at: datetime | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None
    failed_at: datetime | None = None
    position: int = 0
    task_count: int = 0
    result: str = ""
    error: str = ""
    progress: float = 0.0
    schedule: JobSchedule | None = None


@dataclass
class ScheduledJobSummary:
    """A lightweight view of a scheduled job."""

    id: str = ""
    created_by: Any = None
    inputs: dict[str, str] | None = None
    state: str = ""
    name: str = ""
    description: str = ""
    tags: list[str] | None = None
    created_at: datetime | None = None
    cron: str = ""


def _summarize(summary_cls: type[_T], source: Any) -> _T:
    """Fill a summary from the same-named fields of ``source``, copying its inputs."""
    values = {f.name: getattr(source, f.name) for f in fields(summary_cls)}
    values["inputs"] = _clone_dict(source.inputs)
    return summary_cls(**values)


def new_job_summary(job: Job) -> JobSummary:
    """Build a summary of a job."""
    return _summarize(JobSummary, job)


def new_scheduled_job_summary(scheduled_job: ScheduledJob) -> ScheduledJobSummary:
    """Build a summary of a scheduled job."""
    return _summarize(ScheduledJobSummary, scheduled_job)