"""User configuration: TOML file in the platform config dir, defaults when absent."""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import click

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore

from .errors import ConfigError

APP_NAME = "cmdhelper"
CONFIG_ENV = "CMDHELPER_CONFIG"


@dataclass
class GeneralConfig:
    verbose: bool = False
    log_to_file: bool = False


@dataclass
class ColorConfig:
    enabled: bool = True
    theme: str = "default"


@dataclass
class PathConfig:
    default_output: str = "."
    download_path: str = "."


@dataclass
class Config:
    """Settings that seed CLI defaults. Every section and key is optional in the file."""

    general: GeneralConfig = field(default_factory=GeneralConfig)
    colors: ColorConfig = field(default_factory=ColorConfig)
    paths: PathConfig = field(default_factory=PathConfig)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        def section(name: str, kind):
            raw = data.get(name) or {}
            if not isinstance(raw, dict):
                raise ConfigError(f"[{name}] must be a table")
            known = {k: v for k, v in raw.items() if k in kind.__dataclass_fields__}
            return kind(**known)

        return cls(
            general=section("general", GeneralConfig),
            colors=section("colors", ColorConfig),
            paths=section("paths", PathConfig),
        )


def config_path() -> Path:
    """$CMDHELPER_CONFIG if set, else <user config dir>/cmdhelper/config.toml."""
    override = os.environ.get(CONFIG_ENV)
    if override:
        return Path(override)
    return Path(click.get_app_dir(APP_NAME)) / "config.toml"


def load_config_file(path: str | Path) -> Config:
    """Parse a TOML config file. ConfigError if unreadable or invalid."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e
    return Config.from_dict(data)


def load_config() -> Config:
    """Config from the default location, or defaults when the file does not exist."""
    path = config_path()
    if not path.exists():
        return Config()
    return load_config_file(path)
