"""Required-parameter checks run before a request is dispatched."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import MissingParameterError
from .operations import OperationCatalog


def _is_blank(value: Any) -> bool:
    if value is None or value is False:
        return True
    return not str(value).strip()


def validate_options(options: Any, operation, catalog: OperationCatalog) -> None:
    """Ensure every parameter the operation requires is present and non-blank.

    Args:
        options: Caller-supplied request options.
        operation: Operation the options are meant for.
        catalog: Catalog holding the operation's required parameters.

    Raises:
        UnknownOperationError: If the operation is not in the catalog.
        MissingParameterError: For the first required parameter that is
            absent, ``None`` or whitespace only.
    """
    required = catalog.required_params(operation)
    if not isinstance(options, Mapping):
        options = {}

    for name in required:
        if name not in options or _is_blank(options[name]):
            raise MissingParameterError(name)
