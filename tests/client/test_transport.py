import requests

from duphlux_client.messages import HttpRequest
from duphlux_client.transport import RequestsTransport


class FakeResponse:
    def __init__(self, content, status_code=200):
        self.content = content
        self.status_code = status_code


def _request(**overrides):
    values = dict(
        url="https://duphlux.com/webservice/authe/status.json",
        method="POST",
        headers={"token": "t"},
        body=b'{"transaction_reference":"abc"}',
        verify_peer=True,
    )
    values.update(overrides)
    return HttpRequest(**values)


def test_send_passes_request_fields(monkeypatch):
    """The transport forwards method, URL, headers, body, TLS flag and timeout.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None
    """
    captured = {}

    def fake_request(method, url, **kwargs):
        captured["method"] = method
        captured["url"] = url
        captured.update(kwargs)
        return FakeResponse(b'{"PayLoad":{}}', 200)

    monkeypatch.setattr(requests, "request", fake_request)

    result = RequestsTransport(timeout=3).send(_request(verify_peer=False))

    assert captured["method"] == "POST"
    assert captured["url"].endswith("/status.json")
    assert captured["headers"] == {"token": "t"}
    assert captured["data"] == b'{"transaction_reference":"abc"}'
    assert captured["verify"] is False
    assert captured["timeout"] == 3
    assert result.raw_body == b'{"PayLoad":{}}'
    assert result.status_code == 200
    assert result.error is None


def test_http_error_status_is_not_a_transport_error(monkeypatch):
    monkeypatch.setattr(requests, "request", lambda *a, **kw: FakeResponse(b'{"PayLoad":null}', 401))

    result = RequestsTransport().send(_request())

    assert result.error is None
    assert result.status_code == 401


def test_connection_error_is_reported(monkeypatch):
    def fail(*args, **kwargs):
        raise requests.ConnectionError("Connection refused")

    monkeypatch.setattr(requests, "request", fail)

    result = RequestsTransport().send(_request())

    assert result.raw_body is None
    assert result.error == "Connection refused"
