"""Locating the configuration file on disk."""

from __future__ import annotations

import os
from pathlib import Path

from evtr.errors import ConfigError

APP_NAME = "evtr"
CONFIG_FILE_NAME = "config.toml"


def resolved_read_path(explicit_path: str | os.PathLike[str] | None = None) -> Path | None:
    """The config file to read, or None when no file exists.

    An explicit path must exist. Otherwise the XDG location is tried first,
    then ``~/.config``.
    """
    if explicit_path is not None:
        path = Path(explicit_path)
        if not path.exists():
            raise ConfigError(f"config file does not exist: {path}")
        return path

    xdg_path = _xdg_config_path()
    if xdg_path is not None and xdg_path.is_file():
        return xdg_path

    fallback = _dot_config_path()
    if fallback.is_file():
        return fallback
    return None


def resolved_write_path(explicit_path: str | os.PathLike[str] | None = None) -> Path:
    """Where a generated config file should be written."""
    if explicit_path is not None:
        return Path(explicit_path)

    root = _xdg_config_root()
    if root is not None:
        return root / APP_NAME / CONFIG_FILE_NAME
    return _dot_config_path()


def _xdg_config_path() -> Path | None:
    root = _xdg_config_root()
    return None if root is None else root / APP_NAME / CONFIG_FILE_NAME


def _xdg_config_root() -> Path | None:
    value = os.environ.get("XDG_CONFIG_HOME")
    if value is None:
        return None
    root = Path(value)
    return root if root.is_absolute() else None


def _dot_config_path() -> Path:
    home = os.environ.get("HOME")
    if home is None:
        raise ConfigError("unable to resolve default config path: HOME is not set")
    return Path(home) / ".config" / APP_NAME / CONFIG_FILE_NAME