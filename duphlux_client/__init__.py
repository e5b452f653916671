"""Client SDK for the Duphlux phone-number verification service."""

from .client import DuphluxClient  # noqa: F401
from .config import ClientConfig, load_config  # noqa: F401
from .errors import (  # noqa: F401
    ConfigurationError,
    DuphluxError,
    InvalidHookError,
    MissingParameterError,
    OperationMismatchError,
    ProtocolError,
    TransportError,
    UnknownOperationError,
    ValidationError,
)
from .mock import MockTransport  # noqa: F401
from .transport import RequestsTransport  # noqa: F401

__all__ = [
    "DuphluxClient",
    "ClientConfig",
    "load_config",
    "MockTransport",
    "RequestsTransport",
    "DuphluxError",
    "ConfigurationError",
    "UnknownOperationError",
    "InvalidHookError",
    "ValidationError",
    "MissingParameterError",
    "OperationMismatchError",
    "TransportError",
    "ProtocolError",
]
