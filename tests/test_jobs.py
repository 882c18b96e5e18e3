from dataclasses import dataclass, field
from datetime import datetime, timezone

from tork.jobs import (
    AutoDelete,
    Job,
    JobContext,
    JobDefaults,
    JobSchedule,
    JobState,
    Permission,
    ScheduledJob,
    ScheduledJobState,
    Webhook,
    clone_permissions,
    clone_tasks,
    clone_webhooks,
    new_job_summary,
    new_scheduled_job_summary,
)
from tork.roles import Role


@dataclass
class _Task:
    env: dict = field(default_factory=dict)


@dataclass
class _Limits:
    cpus: str = ""

    def clone(self):
        return _Limits(cpus=self.cpus + "")


@dataclass
class _User:
    username: str = ""

    def clone(self):
        return _User(username=self.username)


def test_clone():
    j1 = Job(
        context=JobContext(
            inputs={"INPUT1": "VAL1"},
            job={"id": "some-id", "name": "my job"},
        ),
        tasks=[_Task(env={"VAR1": "VAL1"})],
        execution=[_Task(env={"EVAR1": "EVAL1"})],
    )
    j2 = j1.clone()

    assert j1.context.inputs == j2.context.inputs
    assert j1.context.job == j2.context.job
    assert j1.tasks[0].env == j2.tasks[0].env
    assert j1.execution[0].env == j2.execution[0].env

    j2.context.inputs["INPUT2"] = "VAL2"
    j2.tasks[0].env["VAR2"] = "VAL2"
    j2.execution[0].env["EVAR2"] = "VAL2"
    assert j1.context.inputs != j2.context.inputs
    assert j1.tasks[0].env != j2.tasks[0].env
    assert j1.execution[0].env != j2.execution[0].env


def test_job_clone_nested_records():
    j1 = Job(
        id="1234",
        state=JobState.COMPLETED,
        created_by=_User(username="someone"),
        defaults=JobDefaults(limits=_Limits(cpus="1"), queue="q", priority=2),
        auto_delete=AutoDelete(after="1h"),
        schedule=JobSchedule(id="s1", cron="* * * * *"),
        webhooks=[Webhook(url="http://localhost", headers={"my-header": "my-value"})],
        permissions=[Permission(role=Role(slug="public"))],
    )
    j2 = j1.clone()
    assert j2.id == "1234"
    assert j2.state == "COMPLETED"
    assert j2.created_by == j1.created_by and j2.created_by is not j1.created_by
    assert j2.defaults == j1.defaults and j2.defaults.limits is not j1.defaults.limits
    assert j2.auto_delete == j1.auto_delete and j2.auto_delete is not j1.auto_delete
    assert j2.schedule == j1.schedule and j2.schedule is not j1.schedule
    j2.webhooks[0].headers["my-header"] = "other"
    assert j1.webhooks[0].headers["my-header"] == "my-value"
    assert j2.permissions[0].role == j1.permissions[0].role
    assert j2.permissions[0].role is not j1.permissions[0].role


def test_job_clone_drops_delete_at():
    when = datetime(2024, 1, 1, tzinfo=timezone.utc)
    j = Job(id="1", delete_at=when)
    assert j.clone().delete_at is None


def test_context_as_map_and_clone():
    ctx = JobContext(secrets={"some_key": "1234-5678"})
    m = ctx.as_map()
    assert set(m) == {"inputs", "secrets", "tasks", "job"}
    assert m["secrets"] == {"some_key": "1234-5678"}
    assert m["inputs"] is None
    assert ctx.clone() == ctx


def test_permission_clone_user():
    p = Permission(user=_User(username="someone"))
    c = p.clone()
    assert c.role is None
    assert c.user == p.user and c.user is not p.user


def test_clone_helpers_handle_none():
    assert clone_tasks(None) == []
    assert clone_webhooks(None) == []
    assert clone_permissions(None) == []


def test_new_job_summary():
    j = Job(id="1234", state=JobState.COMPLETED, inputs={"k": "v"}, position=2, progress=75.0)
    s = new_job_summary(j)
    assert (s.id, s.state, s.position, s.progress) == ("1234", "COMPLETED", 2, 75.0)
    s.inputs["k2"] = "v2"
    assert j.inputs == {"k": "v"}


def test_new_scheduled_job_summary():
    sj = ScheduledJob(id="sj", cron="0 * * * *", state=ScheduledJobState.PAUSED, inputs={"a": "b"})
    s = new_scheduled_job_summary(sj)
    assert (s.id, s.cron, s.state) == ("sj", "0 * * * *", "PAUSED")
    assert s.inputs == sj.inputs and s.inputs is not sj.inputs