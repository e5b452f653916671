"""Utility helpers for Duphlux request encoding/decoding."""

from __future__ import annotations

import json
import secrets
import string
from typing import Any, Dict

REFERENCE_ALPHABET = string.ascii_lowercase + string.digits + string.ascii_uppercase


def dict_to_json_bytes(data: Dict[str, Any]) -> bytes:
    """Serialize a dict to JSON bytes using compact separators.

    Args:
        data: Dictionary to encode.

    Returns:
        UTF-8 encoded JSON bytes.
    """
    return json.dumps(data, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def json_bytes_to_value(data: bytes) -> Any:
    """Parse a JSON response body.

    Args:
        data: UTF-8 JSON payload.

    Returns:
        Decoded value (usually a dictionary).

    Raises:
        ValueError: If the body is not valid JSON.
    """
    return json.loads(data.decode("utf-8"))


def generate_ref(length: int = 10) -> str:
    """Generate a random transaction reference.

    Args:
        length: Number of characters to generate.

    Returns:
        str: Random string over ``[a-z0-9A-Z]``.
    """
    if length < 1:
        raise ValueError("Reference length must be positive")
    return "".join(secrets.choice(REFERENCE_ALPHABET) for _ in range(length))
