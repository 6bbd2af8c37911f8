"""Configuration helpers for the golem-cloud CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from golem_cli.model import Format

DEFAULT_CONFIG_PATH = Path.home() / ".golem" / "config.toml"
DEFAULT_CLOUD_URL = "https://release.api.golem.cloud"
CLOUD_URL_ENV_VAR = "GOLEM_CLOUD_URL"
GATEWAY_URL_ENV_VAR = "GOLEM_GATEWAY_URL"
TOKEN_SECRET_ENV_VAR = "GOLEM_TOKEN_SECRET"


@dataclass(frozen=True)
class CLIConfig:
    cloud_url: str = DEFAULT_CLOUD_URL
    gateway_url: str = DEFAULT_CLOUD_URL
    format: Format = Format.YAML
    timeout: float = 30.0
    token_secret: str | None = None


class ConfigError(ValueError):
    """Raised when CLI config is invalid."""


def _load_toml(path: Path) -> dict[str, Any]:
    raw = path.read_text(encoding="utf-8")

    try:  # Python 3.11+
        import tomllib  # type: ignore[attr-defined]
        try:
            return tomllib.loads(raw)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML in {path}: {exc}") from exc
    except ModuleNotFoundError:
        try:
            import tomli
        except ModuleNotFoundError as exc:
            raise ConfigError("toml parser unavailable; install tomli for Python < 3.11") from exc
        try:
            return tomli.loads(raw)
        except tomli.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML in {path}: {exc}") from exc


def _url(value: Any, field_name: str) -> str:
    url = str(value).strip()
    if not url:
        raise ConfigError(f"{field_name} must not be empty")
    if not url.startswith(("http://", "https://")):
        raise ConfigError(f"{field_name} must be an http(s) URL")
    return url


def _env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None:
        return None
    return value.strip() or None


def load_cli_config(path: str | Path | None = None) -> CLIConfig:
    config_path = Path(path) if path else DEFAULT_CONFIG_PATH
    source: dict[str, Any] = {}
    if config_path.exists():
        parsed = _load_toml(config_path)
        section = parsed.get("cli")
        if isinstance(section, dict):
            source = section
        elif section is None:
            source = parsed
        else:
            raise ConfigError("[cli] must be a table")

    cloud_url = _url(_env(CLOUD_URL_ENV_VAR) or source.get("cloud_url", DEFAULT_CLOUD_URL), "cloud_url")
    gateway_url = _url(
        _env(GATEWAY_URL_ENV_VAR) or source.get("gateway_url", cloud_url), "gateway_url"
    )

    try:
        fmt = Format.parse(str(source.get("format", Format.YAML.value)).strip())
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc

    raw_timeout = source.get("timeout", 30.0)
    if isinstance(raw_timeout, bool) or not isinstance(raw_timeout, (int, float)):
        raise ConfigError("timeout must be a number of seconds")
    if raw_timeout <= 0:
        raise ConfigError("timeout must be positive")

    token_secret_raw = _env(TOKEN_SECRET_ENV_VAR) or source.get("token_secret")
    token_secret = str(token_secret_raw).strip() or None if token_secret_raw else None

    return CLIConfig(
        cloud_url=cloud_url,
        gateway_url=gateway_url,
        format=fmt,
        timeout=float(raw_timeout),
        token_secret=token_secret,
    )
