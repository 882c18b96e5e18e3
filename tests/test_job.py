import pytest

from tork.jobs import Job
from tork.middleware.job import EventType, apply_middleware, noop_handler


def _tracing(name, log, after):
    def middleware(next_handler):
        def inner(event_type, job):
            if not after:
                log.append(name)
            result = next_handler(event_type, job)
            if after:
                log.append(name)
            return result

        return inner

    return middleware


@pytest.mark.parametrize(
    "after, expected",
    [(False, ["mw1", "mw2", "handler"]), (True, ["handler", "mw2", "mw1"])],
)
def test_middleware_order(after, expected):
    log = []

    def handler(event_type, job):
        log.append("handler")
        return "handled"

    hm = apply_middleware(handler, [_tracing("mw1", log, after), _tracing("mw2", log, after)])
    assert hm(EventType.STATE_CHANGE, Job()) == "handled"
    assert log == expected


def test_no_middleware():
    job = Job(id="1234")
    hm = apply_middleware(lambda et, j: (et, j), [])
    assert hm(EventType.STATE_CHANGE, job) == (EventType.STATE_CHANGE, job)


def test_middleware_error():
    err = RuntimeError("something bad happened")
    log = []

    def failing(next_handler):
        def inner(event_type, job):
            raise err

        return inner

    hm = apply_middleware(lambda et, j: log.append("handler"), [failing, _tracing("mw2", log, False)])
    with pytest.raises(RuntimeError) as exc_info:
        hm(EventType.STATE_CHANGE, Job())
    assert exc_info.value is err
    assert log == []


def test_noop_handler_passes_job_through():
    def rename(next_handler):
        def inner(event_type, job):
            job.name = f"seen {event_type.value}"
            return next_handler(event_type, job)

        return inner

    job = Job()
    assert apply_middleware(noop_handler, [rename])(EventType.READ, job) is job
    assert job.name == "seen READ"