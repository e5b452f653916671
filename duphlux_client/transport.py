"""HTTP transport used by the request engine."""

from __future__ import annotations

import requests

from .constants import DEFAULT_TIMEOUT
from .messages import HttpRequest, TransportResult


class RequestsTransport:
    """Blocking one-request-per-call transport built on ``requests``."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        """Initialize the transport.

        Args:
            timeout: Socket timeout in seconds.
        """
        self.timeout = timeout

    def send(self, request: HttpRequest) -> TransportResult:
        """Perform the HTTP call.

        Network and TLS failures are returned as ``TransportResult.error``
        rather than raised. HTTP error status codes are not failures; their
        body is returned like any other.

        Args:
            request: Fully built request.

        Returns:
            TransportResult: Raw body and status code, or the error text.
        """
        try:
            response = requests.request(
                request.method,
                request.url,
                headers=request.headers,
                data=request.body,
                verify=request.verify_peer,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            return TransportResult(error=str(exc))
        return TransportResult(raw_body=response.content, status_code=response.status_code)
