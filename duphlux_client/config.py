"""Credential and connection configuration for the Duphlux client."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import DEFAULT_TIMEOUT, ENV_LIVE
from .logging_config import log

CONFIG_SECTION = "duphlux"
SENSITIVE_KEYS = ("live_access_token", "test_access_token")

_ENV_OVERRIDES = {
    "DUPHLUX_LIVE_ACCESS_TOKEN": "live_access_token",
    "DUPHLUX_TEST_ACCESS_TOKEN": "test_access_token",
    "DUPHLUX_ENVIRONMENT": "environment",
    "DUPHLUX_BASE_URL": "base_url",
    "DUPHLUX_VERIFY_PEER": "verify_peer",
    "DUPHLUX_TIMEOUT": "timeout",
}


@dataclass(frozen=True)
class ClientConfig:
    """Settings shared by the clients of one process."""

    live_access_token: Optional[str] = None
    test_access_token: Optional[str] = None
    environment: str = ENV_LIVE
    base_url: Optional[str] = None
    verify_peer: bool = True
    timeout: float = DEFAULT_TIMEOUT

    def token_for(self, environment: str) -> Optional[str]:
        """Return the access token of an environment (``LIVE`` or anything else)."""
        if str(environment).lower() == ENV_LIVE.lower():
            return self.live_access_token
        return self.test_access_token

    @classmethod
    def from_mapping(cls, cfg: Dict[str, Any]) -> "ClientConfig":
        """Build a config from the output of :func:`load_config`.

        Args:
            cfg: Mapping with an optional ``duphlux`` section.

        Returns:
            ClientConfig: Parsed settings, defaults for missing values.
        """
        section = cfg.get(CONFIG_SECTION) or {}
        return cls(
            live_access_token=section.get("live_access_token"),
            test_access_token=section.get("test_access_token"),
            environment=str(section.get("environment") or ENV_LIVE).upper(),
            base_url=section.get("base_url"),
            verify_peer=_as_bool(section.get("verify_peer"), default=True),
            timeout=_as_timeout(section.get("timeout")),
        )


def load_config(path: str | Path = "duphlux.yaml") -> dict:
    """Build configuration from a local YAML file overlaid with environment variables.

    Args:
        path: YAML file to read; a missing file is not an error.

    Returns:
        dict: Configuration map with the client settings under ``duphlux``.
    """
    path = Path(path)
    cfg: dict = {}

    # First, load config from the YAML file if it exists
    try:
        if path.exists():
            with path.open("r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
            if not isinstance(data, dict):
                log.warning("Config file %s does not contain a mapping", path)
            else:
                cfg.update(data)
    except (OSError, yaml.YAMLError) as exc:
        log.warning("Failed to load config from %s: %s", path, exc)

    if not isinstance(cfg.get(CONFIG_SECTION), dict):
        cfg[CONFIG_SECTION] = {}
    section = cfg[CONFIG_SECTION]

    # Environment variables override file values
    for env_name, key in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            section[key] = value

    url = section.get("base_url")
    if isinstance(url, str):
        trimmed_url = url.strip()
        if trimmed_url and not trimmed_url.startswith(("http://", "https://")):
            section["base_url"] = f"https://{trimmed_url}"
            log.info("Normalized duphlux.base_url to %s", section["base_url"])

    log.info("Configuration loaded: %s", _mask_sensitive(cfg))
    return cfg


def _as_bool(value: Any, default: bool) -> bool:
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    if isinstance(value, str):
        return value.strip().lower() not in ("0", "false", "no", "off")
    return bool(value)


def _as_timeout(value: Any) -> float:
    if value is None or value == "":
        return float(DEFAULT_TIMEOUT)
    try:
        return float(value)
    except (TypeError, ValueError):
        log.warning("Invalid duphlux.timeout %r, using %s seconds", value, DEFAULT_TIMEOUT)
        return float(DEFAULT_TIMEOUT)


def _mask_sensitive(cfg: dict) -> dict:
    """Return a copy of the config with tokens replaced by ``***``."""
    masked = dict(cfg)
    section = masked.get(CONFIG_SECTION)
    if isinstance(section, dict):
        masked[CONFIG_SECTION] = {
            key: ("***" if key in SENSITIVE_KEYS and value else value) for key, value in section.items()
        }
    return masked
