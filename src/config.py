"""Application configuration for netcfg.

Settings are layered: built-in defaults, then the config file, then
environment variables, then command-line flags.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from client import DEFAULT_TIMEOUT

log = logging.getLogger(__name__)

DEFAULT_DEVICE_URL = "http://192.168.4.1"


class ConfigError(Exception):
    """Raised when the config file can't be read."""


def get_config_path() -> Path:
    """Get the config file path using XDG Base Directory spec."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config"))
    return Path(xdg_config) / "netcfg" / "config.json"


@dataclass(frozen=True)
class AppConfig:
    """Where the device is and how to talk to it."""

    device_url: str = DEFAULT_DEVICE_URL
    token: str | None = None
    username: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    verify_tls: bool = True

    def with_overrides(self, **overrides: Any) -> AppConfig:
        """Copy with non-None overrides applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def read_config_file(path: Path) -> dict[str, Any]:
    """Read the JSON config file; a missing file is an empty config."""
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text())
    except (OSError, ValueError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a JSON object")

    known = {f.name for f in fields(AppConfig)}
    for key in sorted(set(data) - known):
        log.warning(f"{path}: ignoring unknown key '{key}'")
    return {k: v for k, v in data.items() if k in known}


def read_env(environ: dict[str, str] | None = None) -> dict[str, Any]:
    """Pick up NETCFG_* environment overrides."""
    environ = os.environ if environ is None else environ
    values: dict[str, Any] = {}
    if environ.get("NETCFG_DEVICE"):
        values["device_url"] = environ["NETCFG_DEVICE"]
    if environ.get("NETCFG_TOKEN"):
        values["token"] = environ["NETCFG_TOKEN"]
    if environ.get("NETCFG_TIMEOUT"):
        try:
            values["timeout"] = float(environ["NETCFG_TIMEOUT"])
        except ValueError:
            log.warning(f"Ignoring invalid NETCFG_TIMEOUT: {environ['NETCFG_TIMEOUT']!r}")
    return values


def load_config(path: Path | None = None, environ: dict[str, str] | None = None) -> AppConfig:
    """Build the effective config from file and environment."""
    path = path or get_config_path()
    return AppConfig().with_overrides(**read_config_file(path)).with_overrides(**read_env(environ))
