"""Exception taxonomy for the Duphlux client."""

from __future__ import annotations


class DuphluxError(Exception):
    """Base error for the Duphlux client."""


class ConfigurationError(DuphluxError):
    """Programmer error in the client setup."""


class UnknownOperationError(ConfigurationError):
    """Raised when an operation id is not present in the catalog."""

    def __init__(self, operation) -> None:
        super().__init__(f"Unknown operation: {operation!r}")
        self.operation = operation


class InvalidHookError(ConfigurationError):
    """Raised when a lifecycle hook is set to something that cannot be called."""

    def __init__(self, hook_name: str) -> None:
        super().__init__(f"{hook_name} property must be a callback")
        self.hook_name = hook_name


class ValidationError(DuphluxError):
    """Raised before any network I/O when request options are incomplete."""


class MissingParameterError(ValidationError):
    """A required request parameter is absent or blank."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} is Required for this operation")
        self.name = name


class OperationMismatchError(DuphluxError):
    """An outcome query was made against the wrong prior operation."""


class TransportError(DuphluxError):
    """Network or TLS failure reported by the transport.

    The engine records transport failures as client state; this class is only
    raised on request through ``DuphluxClient.raise_for_error``.
    """


class ProtocolError(DuphluxError):
    """The remote answered with an unusable envelope (e.g. an empty status)."""
