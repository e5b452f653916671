"""Single-slot operation state machine gating outcome queries."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional, Tuple

from .constants import (
    OP_INITIALIZE_NUMBER_VERIFICATION,
    OP_NUMBER_VERIFICATION_STATUS,
    OPERATION_MISMATCH_MESSAGE,
)
from .errors import OperationMismatchError


class Phase(Enum):
    """Lifecycle phases of a verification client."""

    UNINITIALIZED = "uninitialized"
    INITIATING = "initiating"
    INITIATED = "initiated"
    CHECKING_STATUS = "checking_status"
    STATUS_CHECKED = "status_checked"


# operation -> (phase while the call is running, phase once it returned)
VERIFICATION_TRANSITIONS: Mapping[Any, Tuple[Phase, Phase]] = {
    OP_INITIALIZE_NUMBER_VERIFICATION: (Phase.INITIATING, Phase.INITIATED),
    OP_NUMBER_VERIFICATION_STATUS: (Phase.CHECKING_STATUS, Phase.STATUS_CHECKED),
}


class OperationGuard:
    """Remembers the last operation started on a client.

    Only the most recent operation is kept; there is no history and no way
    back to :attr:`Phase.UNINITIALIZED`.
    """

    def __init__(self, transitions: Mapping[Any, Tuple[Phase, Phase]] = VERIFICATION_TRANSITIONS):
        self._transitions = dict(transitions)
        self._phase_operation = {}
        for operation, phases in self._transitions.items():
            for phase in phases:
                self._phase_operation[phase] = operation
        self.phase = Phase.UNINITIALIZED

    @property
    def current_operation(self):
        """Operation of the current phase, or ``None`` before any call."""
        return self._phase_operation.get(self.phase)

    def begin(self, operation) -> Phase:
        """Enter the running phase of ``operation``.

        Raises:
            KeyError: If the guard has no transitions for the operation.
        """
        self.phase = self._transitions[operation][0]
        return self.phase

    def complete(self, operation) -> Phase:
        """Enter the finished phase of ``operation``."""
        self.phase = self._transitions[operation][1]
        return self.phase

    def require(self, operation, message: Optional[str] = None) -> None:
        """Fail unless ``operation`` is the one last performed.

        Args:
            operation: Operation the caller needs.
            message: Optional override of the error message.

        Raises:
            OperationMismatchError: If another (or no) operation was performed.
        """
        if self.current_operation != operation:
            raise OperationMismatchError(message or OPERATION_MISMATCH_MESSAGE)
