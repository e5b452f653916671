"""Test configuration that ensures project modules are importable and shares client fixtures."""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path so `duphlux_client` and `client_cli` can be imported in tests.
ROOT = Path(__file__).resolve().parent.parent
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

from duphlux_client import DuphluxClient, MockTransport  # noqa: E402

VERIFY_URL = "https://duphlux.com/v/abc123"


def envelope(status="success", errors=None, data=None) -> dict:
    """Build a Duphlux response envelope.

    Returns:
        dict: Body in the ``PayLoad`` format.
    """
    return {"PayLoad": {"status": status, "errors": errors, "data": data if data is not None else {}}}


@pytest.fixture
def transport():
    """Return a mock transport answering both operations successfully.

    Returns:
        MockTransport: Transport with canned verify and status responses.
    """
    return MockTransport(
        responses={
            "/verify.json": envelope(data={"verification_url": VERIFY_URL, "expires_at": "2026-10-19 12:00:00"}),
            "/status.json": envelope(data={"verification_status": "verified"}),
        }
    )


@pytest.fixture
def client(transport, monkeypatch):
    """Return a client bound to the mock transport with a fixed token.

    Returns:
        DuphluxClient: Client under test.
    """
    for name in ("DUPHLUX_LIVE_ACCESS_TOKEN", "DUPHLUX_TEST_ACCESS_TOKEN", "DUPHLUX_ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)
    return DuphluxClient("secret-token", transport=transport)
