"""SDK configuration loader."""
from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from shopappstore.core import config as core_config
from .errors import ConfigError


@dataclass
class SdkConfig:
    entrypoint: Optional[str] = None
    token: Optional[str] = None
    timeout: float = core_config.DEFAULT_TIMEOUT
    bulk_path: str = core_config.BULK_PATH


DEFAULT_CONFIG_PATH = Path.home() / ".shopappstore" / "config.toml"


def _load_toml(path: Path) -> dict:
    if not path.exists():
        return {}
    data = path.read_bytes()
    try:
        return tomllib.loads(data.decode("utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid config file {path}: {exc}") from exc


def _parse_timeout(value: object) -> float:
    try:
        timeout = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid timeout: {value}") from exc
    if timeout <= 0:
        raise ConfigError(f"Timeout must be positive: {value}")
    return timeout


def load_config(path: Path | None = None) -> SdkConfig:
    cfg = SdkConfig()
    cfg_path = path or DEFAULT_CONFIG_PATH
    file_data = _load_toml(cfg_path)
    section = file_data.get("shopappstore", file_data) if isinstance(file_data, dict) else {}

    env_entrypoint = os.environ.get("SHOPAPPSTORE_ENTRYPOINT")
    env_token = os.environ.get("SHOPAPPSTORE_TOKEN")
    env_timeout = os.environ.get("SHOPAPPSTORE_TIMEOUT")

    cfg.entrypoint = env_entrypoint or section.get("entrypoint")
    cfg.token = env_token or section.get("token")

    timeout_val = env_timeout or section.get("timeout")
    if timeout_val is not None:
        cfg.timeout = _parse_timeout(timeout_val)

    cfg.bulk_path = section.get("bulk_path", cfg.bulk_path)
    return cfg


def merge_cli_overrides(
    config: SdkConfig,
    entrypoint: str | None = None,
    token: str | None = None,
    timeout: float | None = None,
) -> SdkConfig:
    updated = replace(config)
    if entrypoint:
        updated.entrypoint = entrypoint
    if token:
        updated.token = token
    if timeout is not None:
        updated.timeout = _parse_timeout(timeout)
    return updated
