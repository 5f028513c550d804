from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from gh_app_token.errors import ConfigError

from .models import AppTokenConfig, ConfigFile


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}") from exc
    except OSError as exc:
        raise ConfigError(f"Unable to read {path}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}")
    return data


def _first_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error["loc"]) or "config"
    return f"{location}: {error['msg']}"


def load_config_file(path: str | Path) -> ConfigFile:
    """Load a YAML config file; a relative private_key is resolved against the file."""
    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")
    data = _load_yaml(config_path)
    private_key = data.get("private_key")
    if isinstance(private_key, str) and private_key and not Path(private_key).expanduser().is_absolute():
        data["private_key"] = str((config_path.parent / private_key).resolve())
    try:
        return ConfigFile.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file {config_path}: {_first_error(exc)}") from exc


def resolve_config(
    *,
    app_id: int | None = None,
    private_key_path: str | None = None,
    installation_id: int | None = None,
    org: str | None = None,
    repo: str | None = None,
    user: str | None = None,
    host: str | None = None,
    timeout_s: float | None = None,
    config_path: str | Path | None = None,
) -> AppTokenConfig:
    """Merge front-end values over the optional config file into one config.

    Values given on the command line (or through their environment variables)
    win over values from the file.
    """
    file_config = load_config_file(config_path) if config_path else ConfigFile()

    app_id = app_id or file_config.app_id
    private_key_path = private_key_path or file_config.private_key
    if not app_id:
        raise ConfigError("app ID is required (--app-id or GH_APP_TOKEN_APP_ID)")
    if not private_key_path:
        raise ConfigError("private key path is required (--private-key or GH_APP_TOKEN_PRIVATE_KEY)")

    values: dict[str, Any] = {
        "app_id": app_id,
        "private_key_path": str(Path(private_key_path).expanduser()),
        "installation_id": installation_id or None,
        "org": org or None,
        "repo": repo or None,
        "user": user or None,
        "host": host or file_config.host,
    }
    effective_timeout = timeout_s if timeout_s is not None else file_config.timeout_s
    if effective_timeout is not None:
        values["timeout_s"] = effective_timeout
    try:
        return AppTokenConfig.model_validate(values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {_first_error(exc)}") from exc
