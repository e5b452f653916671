"""Mock transport implementation for development and tests."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .messages import HttpRequest, TransportResult


@dataclass
class MockTransport:
    """Lightweight fake transport returning canned Duphlux envelopes.

    ``responses`` maps an endpoint suffix (e.g. ``"/verify.json"``) to the
    decoded body to return. A missing suffix yields a successful envelope.
    Setting ``error`` makes every call fail as a connection error would.
    """

    responses: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None
    requests: List[HttpRequest] = field(default_factory=list)

    def send(self, request: HttpRequest) -> TransportResult:
        """Record the request and return the canned answer for its endpoint."""
        self.requests.append(request)
        if self.error:
            return TransportResult(error=self.error)

        for suffix, body in self.responses.items():
            if request.url.endswith(suffix):
                return TransportResult(raw_body=_as_bytes(body), status_code=200)

        return TransportResult(
            raw_body=_as_bytes({"PayLoad": {"status": "success", "errors": None, "data": {}}}),
            status_code=200,
        )

    @property
    def last_request(self) -> Optional[HttpRequest]:
        return self.requests[-1] if self.requests else None


def _as_bytes(body: Any) -> bytes:
    if isinstance(body, bytes):
        return body
    if isinstance(body, str):
        return body.encode("utf-8")
    return json.dumps(body).encode("utf-8")
