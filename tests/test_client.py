from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from job_tracker.api.app import create_app
from job_tracker.client import JobClientError, JobStatusClient
from job_tracker.settings import Settings
from job_tracker.store import JobStore


def _client(store: JobStore, **kwargs) -> JobStatusClient:
    session = TestClient(create_app(store=store, settings=Settings()))
    return JobStatusClient(
        "http://testserver/", poll_interval=0, session=session, **kwargs
    )


def test_start_and_get_status(store: JobStore) -> None:
    c = _client(store)

    job_id = c.start_job()

    assert c.job_id == job_id
    assert c.get_status() == "pending"
    assert c.get_status(job_id) == "pending"


def test_get_status_without_job_raises(store: JobStore) -> None:
    with pytest.raises(JobClientError, match="Job ID is not set"):
        _client(store).get_status()


def test_unknown_job_raises_with_status_code(store: JobStore) -> None:
    with pytest.raises(JobClientError) as exc:
        _client(store).get_status("nope")
    assert exc.value.status_code == 400
    assert "nope" in str(exc.value)


def test_set_global_timeout(store: JobStore) -> None:
    c = _client(store)

    assert c.set_global_timeout(2500) == "Global timeout updated successfully"
    assert store.get_default_timeout() == 2500

    with pytest.raises(JobClientError) as exc:
        c.set_global_timeout(0)
    assert exc.value.status_code == 400


def test_poll_until_terminal(store: JobStore, clock) -> None:
    c = _client(store)
    c.start_job()
    seen: list[str] = []

    def on_status(status: str) -> None:
        seen.append(status)
        clock.advance(600)

    assert c.poll(on_status=on_status) == "completed"
    assert seen == ["pending", "pending", "completed"]


def test_poll_gives_up_after_max_retries(store: JobStore) -> None:
    c = _client(store, max_retries=3)
    c.start_job()
    seen: list[str] = []

    assert c.poll(on_status=seen.append) == "pending"
    assert len(seen) == 4


class _Response:
    def __init__(self, status_code: int, payload=None) -> None:
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if self._payload is None:
            raise ValueError("not json")
        return self._payload


class _Session:
    def __init__(self, response: _Response) -> None:
        self.response = response

    def request(self, method: str, url: str, **kwargs) -> _Response:
        return self.response


def _stub(response: _Response) -> JobStatusClient:
    return JobStatusClient("http://stub", poll_interval=0, session=_Session(response))


def test_non_json_success_body_raises_client_error() -> None:
    c = _stub(_Response(200))

    with pytest.raises(JobClientError, match="non-JSON"):
        c.start_job()
    with pytest.raises(JobClientError, match="non-JSON"):
        c.get_status("abc")


def test_missing_fields_raise_client_error() -> None:
    c = _stub(_Response(200, {"unexpected": True}))

    with pytest.raises(JobClientError, match="jobId"):
        c.start_job()
    with pytest.raises(JobClientError, match="status"):
        c.get_status("abc")
    assert c.job_id is None


def test_non_json_error_body_keeps_status_code() -> None:
    with pytest.raises(JobClientError) as exc:
        _stub(_Response(502)).get_status("abc")
    assert exc.value.status_code == 502
