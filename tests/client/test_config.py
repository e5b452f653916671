import logging

import pytest

from duphlux_client.config import ClientConfig, _mask_sensitive, load_config

ENV_NAMES = (
    "DUPHLUX_LIVE_ACCESS_TOKEN",
    "DUPHLUX_TEST_ACCESS_TOKEN",
    "DUPHLUX_ENVIRONMENT",
    "DUPHLUX_BASE_URL",
    "DUPHLUX_VERIFY_PEER",
    "DUPHLUX_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove Duphlux variables from the environment for every test.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None
    """
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_load_config_from_yaml(tmp_path):
    path = tmp_path / "duphlux.yaml"
    path.write_text(
        "duphlux:\n"
        "  live_access_token: live-123\n"
        "  test_access_token: test-456\n"
        "  environment: test\n"
        "  verify_peer: false\n"
        "  timeout: 5\n",
        encoding="utf-8",
    )

    config = ClientConfig.from_mapping(load_config(path))

    assert config.live_access_token == "live-123"
    assert config.test_access_token == "test-456"
    assert config.environment == "TEST"
    assert config.verify_peer is False
    assert config.timeout == 5.0
    assert config.token_for("TEST") == "test-456"
    assert config.token_for("live") == "live-123"


def test_environment_overrides_file(tmp_path, monkeypatch):
    """Environment variables win over YAML values and URLs get a scheme.

    Args:
        tmp_path: Pytest temporary directory.
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None
    """
    path = tmp_path / "duphlux.yaml"
    path.write_text("duphlux:\n  live_access_token: from-file\n", encoding="utf-8")
    monkeypatch.setenv("DUPHLUX_LIVE_ACCESS_TOKEN", "from-env")
    monkeypatch.setenv("DUPHLUX_BASE_URL", "sandbox.duphlux.test/authe")
    monkeypatch.setenv("DUPHLUX_VERIFY_PEER", "0")

    cfg = load_config(path)
    config = ClientConfig.from_mapping(cfg)

    assert config.live_access_token == "from-env"
    assert config.base_url == "https://sandbox.duphlux.test/authe"
    assert config.verify_peer is False


def test_missing_file_gives_defaults(tmp_path):
    config = ClientConfig.from_mapping(load_config(tmp_path / "absent.yaml"))

    assert config == ClientConfig()
    assert config.environment == "LIVE"
    assert config.verify_peer is True


def test_non_mapping_file_is_ignored(tmp_path, caplog):
    path = tmp_path / "duphlux.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="duphlux_client"):
        cfg = load_config(path)

    assert cfg == {"duphlux": {}}
    assert "does not contain a mapping" in caplog.text


def test_tokens_are_masked_in_logs(tmp_path, monkeypatch, caplog):
    monkeypatch.setenv("DUPHLUX_TEST_ACCESS_TOKEN", "very-secret")

    with caplog.at_level(logging.INFO, logger="duphlux_client"):
        load_config(tmp_path / "absent.yaml")

    assert "very-secret" not in caplog.text
    assert _mask_sensitive({"duphlux": {"test_access_token": "x", "environment": "TEST"}}) == {
        "duphlux": {"test_access_token": "***", "environment": "TEST"}
    }


@pytest.mark.parametrize("line", ["verify_peer:", "verify_peer: ''", "verify_peer: null"])
def test_empty_verify_peer_keeps_verification_on(tmp_path, line):
    """A key with no value does not disable certificate checks.

    Args:
        tmp_path: Pytest temporary directory.
        line: YAML line under test.

    Returns:
        None
    """
    path = tmp_path / "duphlux.yaml"
    path.write_text(f"duphlux:\n  {line}\n", encoding="utf-8")

    assert ClientConfig.from_mapping(load_config(path)).verify_peer is True


@pytest.mark.parametrize("value", ["false", "0", "off"])
def test_explicit_verify_peer_false(monkeypatch, tmp_path, value):
    monkeypatch.setenv("DUPHLUX_VERIFY_PEER", value)

    assert ClientConfig.from_mapping(load_config(tmp_path / "absent.yaml")).verify_peer is False


def test_invalid_timeout_falls_back_to_default(tmp_path, monkeypatch, caplog):
    monkeypatch.setenv("DUPHLUX_TIMEOUT", "abc")

    with caplog.at_level(logging.WARNING, logger="duphlux_client"):
        config = ClientConfig.from_mapping(load_config(tmp_path / "absent.yaml"))

    assert config.timeout == 10.0
    assert "Invalid duphlux.timeout" in caplog.text


def test_numeric_timeout_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("DUPHLUX_TIMEOUT", "2.5")

    assert ClientConfig.from_mapping(load_config(tmp_path / "absent.yaml")).timeout == 2.5
