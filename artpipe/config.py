"""Runtime settings with optional YAML overrides."""

from __future__ import annotations

from dataclasses import dataclass, fields
import importlib
import importlib.util
import logging
from pathlib import Path
from typing import Any

from artpipe.errors import ConfigError
from artpipe.memory.arena import DEFAULT_REGION_SIZE

COMMAND_ERROR_POLICIES = ("ignore", "raise")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    resource_path: str = "banner.txt"
    command: str = "boxes"
    greeting: str = "Hello, world!"
    on_command_error: str = "ignore"
    arena_region_size: int = DEFAULT_REGION_SIZE
    log_path: str = "artpipe.log"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.on_command_error not in COMMAND_ERROR_POLICIES:
            raise ConfigError(
                f"on_command_error must be one of {', '.join(COMMAND_ERROR_POLICIES)}, "
                f"got {self.on_command_error!r}"
            )
        size = self.arena_region_size
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ConfigError(
                f"arena_region_size must be a positive integer, got {self.arena_region_size!r}"
            )
        if str(self.log_level).upper() not in _LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.log_level!r}")
        for name in ("resource_path", "command", "greeting", "log_path"):
            if not isinstance(getattr(self, name), str):
                raise ConfigError(f"{name} must be a string")


def load_settings(config_path: str = "artpipe.yaml") -> Settings:
    path = Path(config_path)
    if not path.exists():
        return Settings()
    data = _read_yaml(path)
    known = {field.name for field in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown settings in {path}: {', '.join(unknown)}")
    logging.getLogger(__name__).debug("Loaded settings from %s", path)
    return Settings(**data)


def _read_yaml(path: Path) -> dict[str, Any]:
    yaml_spec = importlib.util.find_spec("yaml")
    if yaml_spec is None:
        raise RuntimeError("PyYAML is required to load settings files.")
    yaml = importlib.import_module("yaml")
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping of settings")
    return data
