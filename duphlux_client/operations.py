"""Static catalog of remote operations."""

from __future__ import annotations

from typing import Any, Dict, Iterator, Mapping, Tuple

from .constants import OP_INITIALIZE_NUMBER_VERIFICATION, OP_NUMBER_VERIFICATION_STATUS
from .errors import UnknownOperationError
from .messages import OperationSpec


class OperationCatalog(Mapping):
    """Read-only mapping from operation id to :class:`OperationSpec`."""

    def __init__(self, operations: Mapping[Any, OperationSpec]):
        self._operations: Dict[Any, OperationSpec] = dict(operations)

    def resolve(self, operation) -> OperationSpec:
        """Look up an operation.

        Args:
            operation: Operation identifier.

        Returns:
            OperationSpec: Endpoint and required parameters.

        Raises:
            UnknownOperationError: If the operation is not in the catalog.
        """
        try:
            return self._operations[operation]
        except KeyError:
            raise UnknownOperationError(operation) from None

    def endpoint(self, operation) -> str:
        return self.resolve(operation).endpoint

    def required_params(self, operation) -> Tuple[str, ...]:
        return self.resolve(operation).required_params

    def __getitem__(self, operation) -> OperationSpec:
        return self._operations[operation]

    def __iter__(self) -> Iterator:
        return iter(self._operations)

    def __len__(self) -> int:
        return len(self._operations)


DUPHLUX_OPERATIONS = OperationCatalog(
    {
        OP_INITIALIZE_NUMBER_VERIFICATION: OperationSpec(
            endpoint="/verify.json",
            required_params=("phone_number", "transaction_reference", "redirect_url"),
        ),
        OP_NUMBER_VERIFICATION_STATUS: OperationSpec(
            endpoint="/status.json",
            required_params=("transaction_reference",),
        ),
    }
)
