"""Tests for the requests-based transport."""

from __future__ import annotations

from unittest.mock import MagicMock

from assistant_proxy.services.transport import RequestsTransport


def make_session(status_code=200, json_body=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if json_body is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = json_body
    session = MagicMock()
    session.request.return_value = response
    return session


def test_sends_json_body():
    session = make_session(json_body={"id": "thread_1"})
    transport = RequestsTransport(session=session)

    result = transport.send("POST", "https://x/threads", {"Authorization": "Bearer k"}, {})

    session.request.assert_called_once_with(
        "POST", "https://x/threads", headers={"Authorization": "Bearer k"}, json={}
    )
    assert result.status_code == 200
    assert result.body == {"id": "thread_1"}
    assert result.ok


def test_get_without_body_or_timeout():
    session = make_session(json_body={"object": "list"})
    RequestsTransport(session=session).send("GET", "https://x/threads/t/messages", {})

    _, kwargs = session.request.call_args
    assert "json" not in kwargs
    assert "timeout" not in kwargs


def test_timeout_is_forwarded():
    session = make_session(json_body={})
    RequestsTransport(timeout=3.0, session=session).send("GET", "https://x", {})

    _, kwargs = session.request.call_args
    assert kwargs["timeout"] == 3.0


def test_non_json_body_falls_back_to_text():
    session = make_session(status_code=502, text="<html>Bad Gateway</html>")

    result = RequestsTransport(session=session).send("GET", "https://x", {})

    assert result.status_code == 502
    assert result.body == "<html>Bad Gateway</html>"
    assert not result.ok
