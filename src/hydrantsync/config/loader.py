"""Config loading and validation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from hydrantsync.contracts.config import SyncConfig
from hydrantsync.contracts.exceptions import ConfigError


def _resolve_path(value: Path, *, base_dir: Path) -> Path:
    value = value.expanduser()
    if value.is_absolute():
        return value
    return (base_dir / value).resolve()


def _read_payload(config_path: Path) -> dict[str, Any]:
    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    if not isinstance(raw_payload, dict):
        raise ConfigError(f"config file root must be an object: {config_path}")
    return raw_payload


def load_config(path: str | Path | None = None, **overrides: Any) -> SyncConfig:
    """Build the run config from an optional JSON file plus overrides.

    Overrides set to ``None`` are ignored so CLI flags that were not given
    keep the file value. A relative ``gpx_file`` from the file is resolved
    against the file's directory; one from the overrides against the
    working directory.
    """
    payload: dict[str, Any] = {}
    base_dir = Path.cwd()
    if path is not None:
        config_path = Path(path).expanduser().resolve()
        payload = _read_payload(config_path)
        if "gpx_file" in payload and payload["gpx_file"] is not None:
            payload["gpx_file"] = _resolve_path(Path(payload["gpx_file"]), base_dir=config_path.parent)

    for key, value in overrides.items():
        if value is None:
            continue
        if key == "gpx_file":
            value = _resolve_path(Path(value), base_dir=base_dir)
        payload[key] = value

    try:
        return SyncConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc
