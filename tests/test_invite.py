import json

import pytest

pytest.importorskip("PyQt6.QtCore")

import requests  # noqa: E402

import core.invite as invite  # noqa: E402
from core.errors import InviteServiceError  # noqa: E402


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None, reason="OK"):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)
        self.reason = reason
        self.url = "https://svc.example"

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


def test_search_sends_query_parameters(monkeypatch):
    calls = []

    def fake_get(url, params=None, timeout=None):
        calls.append((url, params, timeout))
        return FakeResponse(payload=[{"id": "room1"}])

    monkeypatch.setattr(invite.requests, "get", fake_get)
    result = invite.search_people("https://dir.example/search", "tok", "ada", timeout=5)

    assert result == [{"id": "room1"}]
    url, params, timeout = calls[0]
    assert url == "https://dir.example/search"
    assert params == {
        "query": "ada",
        "queryTypes": '["conferenceRooms","user","room"]',
        "jwt": "tok",
    }
    assert timeout == 5


def test_invite_posts_payload(monkeypatch):
    calls = []

    def fake_post(url, params=None, data=None, headers=None, timeout=None):
        calls.append((url, params, json.loads(data)))
        return FakeResponse(payload={"ok": True})

    monkeypatch.setattr(invite.requests, "post", fake_post)
    result = invite.invite_people(
        "https://invite.example", "https://meet.example/room", "tok", ({"id": 1},)
    )

    assert result == {"ok": True}
    assert calls == [
        (
            "https://invite.example",
            {"token": "tok"},
            {"invited": [{"id": 1}], "url": "https://meet.example/room"},
        )
    ]


def test_http_error_raises_reason(monkeypatch):
    monkeypatch.setattr(
        invite.requests,
        "get",
        lambda *a, **k: FakeResponse(status_code=403, text="nope", reason="Forbidden"),
    )
    with pytest.raises(InviteServiceError) as exc:
        invite.search_people("https://dir.example", "tok", "x")
    assert exc.value.reason == "Forbidden"


def test_transport_error_is_not_retried(monkeypatch):
    attempts = []

    def fake_post(*a, **k):
        attempts.append(1)
        raise requests.exceptions.ConnectionError("refused")

    monkeypatch.setattr(invite.requests, "post", fake_post)
    with pytest.raises(InviteServiceError) as exc:
        invite.invite_people("https://invite.example", "u", "tok", [])
    assert "refused" in exc.value.reason
    assert len(attempts) == 1


def test_invalid_json_raises(monkeypatch):
    monkeypatch.setattr(
        invite.requests, "get", lambda *a, **k: FakeResponse(payload=None, text="<html>")
    )
    with pytest.raises(InviteServiceError):
        invite.search_people("https://dir.example", "tok", "x")


def test_search_worker_emits_failure_once(monkeypatch):
    def fake_search(*a, **k):
        raise InviteServiceError("timeout")

    monkeypatch.setattr(invite, "search_people", fake_search)
    worker = invite.SearchWorker("https://dir.example", "tok", "x")
    ok, fail = [], []
    worker.finished_ok.connect(ok.append)
    worker.finished_fail.connect(fail.append)
    worker.run()
    assert ok == []
    assert fail == ["timeout"]


def test_invite_worker_emits_result(monkeypatch):
    monkeypatch.setattr(invite, "invite_people", lambda *a, **k: {"sent": 2})
    worker = invite.InviteWorker("https://invite.example", "u", "tok", ["a", "b"])
    ok = []
    worker.finished_ok.connect(ok.append)
    worker.run()
    assert ok == [{"sent": 2}]


def test_search_worker_reports_unexpected_errors(monkeypatch):
    def fake_search(*a, **k):
        raise KeyError("results")

    monkeypatch.setattr(invite, "search_people", fake_search)
    worker = invite.SearchWorker("https://dir.example", "tok", "x")
    ok, fail = [], []
    worker.finished_ok.connect(ok.append)
    worker.finished_fail.connect(fail.append)
    worker.run()
    assert ok == []
    assert len(fail) == 1


def test_invite_worker_reports_unexpected_errors(monkeypatch):
    def fake_invite(*a, **k):
        raise ValueError()

    monkeypatch.setattr(invite, "invite_people", fake_invite)
    worker = invite.InviteWorker("https://invite.example", "u", "tok", [])
    ok, fail = [], []
    worker.finished_ok.connect(ok.append)
    worker.finished_fail.connect(fail.append)
    worker.run()
    assert ok == []
    assert fail == ["ValueError"]


def test_invalid_request_arguments_raise_service_error(monkeypatch):
    def fake_get(*a, **k):
        raise ValueError("Timeout value connect was 15, but it must be an int")

    monkeypatch.setattr(invite.requests, "get", fake_get)
    with pytest.raises(InviteServiceError):
        invite.search_people("https://dir.example", "tok", "x", timeout="15")
