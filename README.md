# tork

Building blocks for a distributed task workflow engine. The package has no
dependencies outside the standard library.

## What is in the package

### Data model

- `tork.jobs`: `Job`, `ScheduledJob`, `JobSummary`, `ScheduledJobSummary`,
  `JobContext`, `JobDefaults`, `Webhook`, `Permission`, `AutoDelete` and
  `JobSchedule`, along with the `JobState` and `ScheduledJobState` enums.
  - `Job.clone()` and `ScheduledJob.clone()` return deep copies. Tasks are
    copied with their own `clone()` when they have one, and with
    `copy.deepcopy` when they do not. `Job.clone()` does not copy `delete_at`.
  - `JobContext.as_map()` returns the context as a dict with the keys
    `job`, `inputs`, `secrets` and `tasks`.
  - `new_job_summary(job)` and `new_scheduled_job_summary(scheduled_job)`
    build summaries. Each summary gets its own copy of the inputs.
  - `clone_tasks`, `clone_webhooks` and `clone_permissions` copy lists.
- `tork.nodes`: `Node`, which has `clone()`, and `NodeStatus`. It also holds
  the `HEARTBEAT_RATE` constant (30 seconds) and the `LAST_HEARTBEAT_TIMEOUT`
  constant (5 minutes).
- `tork.roles`: `Role`, which has `clone()`, `UserRole` and the constant
  `ROLE_PUBLIC`.
- `tork.mounts`: `Mount` and `MountType` (`volume`, `bind`, `tmpfs`).

### Locking

`tork.locker` defines the `Locker` and `Lock` abstract classes and
`InMemoryLocker`, which holds named, exclusive locks inside the current
process.

- `acquire_lock(key)` raises `LockError` if the key is already held.
- `Lock.release_lock()` raises `LockError` if the lock was already released.
- A `Lock` is a context manager and releases itself on exit.
- `hash_key(key)` maps a key to a signed 64-bit integer: the first 8 bytes of
  its SHA-256 digest, read big-endian.

```python
from tork.locker import InMemoryLocker, LockError

locker = InMemoryLocker()
with locker.acquire_lock("job-1"):
    try:
        locker.acquire_lock("job-1")
    except LockError as exc:
        print(exc)  # failed to acquire lock for key 'job-1'
# the lock is released here
```

### Wildcard matching

`tork.wildcard.match(pattern, s)` matches the whole string. In the pattern,
`*` stands for any run of characters, including an empty one.
`is_wild_pattern(pattern)` tells you whether a pattern contains `*`.

```python
from tork.wildcard import match

match("*.completed", "jobs.completed")   # True
match("jobs.*", "jobs.long.completed")   # True
match("tasks.*", "jobs.completed")       # False
```

### Middleware chains

`tork.middleware.job`, `tork.middleware.task` and `tork.middleware.node`
each provide `apply_middleware(handler, middlewares)`.

- A middleware is a function that takes the next handler and returns a new
  handler.
- The middlewares run in list order, before the handler.
- A middleware can stop the chain by raising an exception or by not calling
  the next handler.
- The job and task modules also define an `EventType` enum and
  `noop_handler(event_type, obj)`, which returns its second argument.

```python
from tork.middleware.job import EventType, apply_middleware, noop_handler

def logging_middleware(next_handler):
    def handler(event_type, job):
        print("event:", event_type)
        return next_handler(event_type, job)
    return handler

chain = apply_middleware(noop_handler, [logging_middleware])
chain(EventType.STATE_CHANGE, job)
```

`tork.middleware.hostenv.HostEnv(*specs)` copies environment variables from
the host into a task.

- Each spec is either `NAME` or `NAME:ALIAS`. The host variable `NAME` is set
  in the task as `ALIAS`, or as `NAME` when no alias is given.
- A spec with more than one colon raises `ValueError`.
- `HostEnv.execute` is the middleware. It sets the variables only on a
  `STATE_CHANGE` event for a task whose `state` is `"RUNNING"`, and it also
  sets them in the task's `pre` and `post` tasks.
- A task can be any object with `state`, `env`, `pre` and `post` attributes.
- Variables that are not set on the host are given an empty string.

## What this package does not do

The package has the parts listed above and nothing more:

- It defines no task class.
- It has no worker that runs tasks.
- It has no broker or queues.
- It has no datastore.
- It has no HTTP API or health endpoint.
- It makes no webhook calls.
- It does no expression evaluation.
- It does no redaction of secrets.
- It has no command-line program.

Locks live only in process memory. `LOCKER_POSTGRES` and `hash_key` are
provided, but there is no database-backed locker.

## Installation

```
pip install .
```

## Running the tests

```
pip install ".[test]"
pytest
```