"""Loading, writing and sharing the active configuration."""

from __future__ import annotations

import os
import threading
from pathlib import Path

from evtr import paths
from evtr.config_file import parse_config_text, render_default
from evtr.errors import ConfigError, ErrorArea
from evtr.settings import (
    Config,
    KeymapConfig,
    LayoutConfig,
    MonitorConfig,
    SelectorConfig,
    ThemeConfig,
    default_config,
)

_lock = threading.Lock()
_runtime: Config = default_config()


def load(explicit_path: str | os.PathLike[str] | None = None) -> Config:
    """Read the config file, falling back to defaults when there is none."""
    path = paths.resolved_read_path(explicit_path)
    if path is None:
        return default_config()
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise ErrorArea.CONFIG.io(f"read {path}", err) from err
    return parse_config_text(content, str(path))


def resolved_write_path(explicit_path: str | os.PathLike[str] | None = None) -> Path:
    """Where a generated config file would be written."""
    return paths.resolved_write_path(explicit_path)


def render_default_config() -> str:
    """The default configuration as TOML text."""
    return render_default()


def write_default_config(path: str | os.PathLike[str]) -> None:
    """Write the default configuration to a new file."""
    path = Path(path)
    if path.exists():
        raise ConfigError(f"config file already exists: {path}")
    parent = path.parent
    if parent == path:
        raise ConfigError(f"config path has no parent directory: {path}")

    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        raise ErrorArea.CONFIG.io(f"create {parent}", err) from err
    try:
        path.write_text(render_default(), encoding="utf-8")
    except OSError as err:
        raise ErrorArea.CONFIG.io(f"write {path}", err) from err


def install_runtime(config: Config) -> None:
    """Make ``config`` the configuration seen by the rest of the program."""
    global _runtime
    with _lock:
        _runtime = config


def app() -> Config:
    """The active configuration."""
    with _lock:
        return _runtime


def selector() -> SelectorConfig:
    return app().selector


def monitor() -> MonitorConfig:
    return app().monitor


def theme() -> ThemeConfig:
    return app().theme


def layout() -> LayoutConfig:
    return app().layout


def keys() -> KeymapConfig:
    return app().keys