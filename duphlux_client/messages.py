"""Request, response and state representations for the Duphlux client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class OperationSpec:
    """Endpoint and required parameters of one remote operation."""

    endpoint: str
    required_params: Tuple[str, ...] = ()


@dataclass
class HttpRequest:
    """Outgoing HTTP request handed to the transport."""

    url: str
    method: str
    headers: Dict[str, str]
    body: Any = None
    verify_peer: bool = True


@dataclass
class TransportResult:
    """Raw outcome of one transport call."""

    raw_body: Optional[bytes] = None
    error: Optional[str] = None
    status_code: Optional[int] = None


@dataclass
class UnwrappedResult:
    """Uniform status/error/data triple extracted from a response."""

    status: Any = None
    error: Any = None
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_error(self) -> bool:
        """True when the error field is non-empty or the status is falsy."""
        return bool(self.error) or not self.status


@dataclass
class ClientState:
    """Mutable per-instance request state."""

    request_method: Optional[str] = None
    request_options: Any = field(default_factory=dict)
    operation: Any = None
    operation_url: Optional[str] = None
    response: Any = None
    status: Any = None
    error: Any = None
    data: Any = None
    has_error: bool = False
    transport_failed: bool = False
