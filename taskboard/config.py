# Task board — configuration
# Values come from config.yaml, then TASKBOARD_* environment variables.

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

CONFIG_PATH = Path(__file__).parent.parent / "config.yaml"

ENV_PREFIX = "TASKBOARD_"


class ConfigError(Exception):
    """Raised when configuration is invalid or incomplete."""
    pass


def _truthy(value: str) -> bool:
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


def _coerce(name: str, kind: type, value, source: str):
    """Convert a raw file or environment value to the field's type."""
    if kind is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return _truthy(value)
        raise ConfigError(f"{source} {name} must be a boolean, got {value!r}")
    if kind is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, str):
            try:
                return int(value)
            except ValueError:
                pass
        raise ConfigError(f"{source} {name} must be an integer, got {value!r}")
    if isinstance(value, str):
        return value
    raise ConfigError(f"{source} {name} must be a string, got {value!r}")


@dataclass
class BoardConfig:
    """Runtime configuration for the board server."""

    # Network
    host: str = "127.0.0.1"
    port: int = 3000

    # Start with the demo tasks
    seed: bool = True

    log_level: str = "INFO"
    board_title: str = "Kanban Board"

    # Empty = JSON API writes are open
    api_secret: str = ""

    def apply_env(self, environ=None) -> None:
        """Override fields from TASKBOARD_<FIELD> environment variables."""
        environ = os.environ if environ is None else environ
        for f in fields(self):
            key = ENV_PREFIX + f.name.upper()
            raw = environ.get(key)
            if raw is None:
                continue
            setattr(self, f.name, _coerce(key, f.type, raw, "environment variable"))

    def validate(self) -> None:
        if not isinstance(self.port, int) or isinstance(self.port, bool) or not (0 < self.port < 65536):
            raise ConfigError(f"port must be 1-65535, got {self.port!r}")
        if not isinstance(self.log_level, str) or self.log_level.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ConfigError(f"Unknown log_level: {self.log_level!r}")
        self.log_level = self.log_level.upper()

    @classmethod
    def load(cls, path: Optional[str] = None, environ=None) -> "BoardConfig":
        """Load config from YAML file, falling back to defaults."""
        cfg_path = Path(path) if path else CONFIG_PATH
        if cfg_path.exists():
            try:
                with open(cfg_path, "r") as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Cannot parse {cfg_path}: {e}") from e
            if not isinstance(data, dict):
                raise ConfigError(f"{cfg_path} must contain a mapping, got {type(data).__name__}")
            known = {f.name: f.type for f in fields(cls)}
            cfg = cls(**{
                k: _coerce(k, known[k], v, str(cfg_path)) for k, v in data.items() if k in known
            })
        elif path:
            raise ConfigError(f"Config file not found: {cfg_path}")
        else:
            cfg = cls()
        cfg.apply_env(environ)
        cfg.validate()
        return cfg
