from pathlib import Path

import pytest

from evtr.errors import ConfigError
from evtr.paths import resolved_read_path, resolved_write_path


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    return tmp_path


def test_write_path_uses_absolute_xdg_root_even_when_missing(home, monkeypatch):
    xdg = home / "missing-xdg-root"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))

    assert resolved_write_path(None) == xdg / "evtr" / "config.toml"


def test_write_path_falls_back_to_home_config_when_xdg_root_is_relative(home, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", "relative-xdg")

    assert resolved_write_path(None) == home / ".config" / "evtr" / "config.toml"


def test_write_path_prefers_explicit_path(home):
    target = home / "custom" / "evtr.toml"
    assert resolved_write_path(target) == target


def test_write_path_requires_home_without_xdg(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

    with pytest.raises(ConfigError, match="HOME is not set"):
        resolved_write_path(None)


def test_read_path_uses_explicit_path(tmp_path):
    config = tmp_path / "custom.toml"
    config.write_text("")

    assert resolved_read_path(config) == config


def test_read_path_rejects_missing_explicit_path(tmp_path):
    with pytest.raises(ConfigError, match="config file does not exist"):
        resolved_read_path(tmp_path / "absent.toml")


def test_read_path_returns_none_when_nothing_exists(home):
    assert resolved_read_path(None) is None


def test_read_path_finds_home_config(home):
    target = home / ".config" / "evtr" / "config.toml"
    target.parent.mkdir(parents=True)
    target.write_text("")

    assert resolved_read_path(None) == target


def test_read_path_prefers_xdg_file(home, monkeypatch):
    xdg = home / "xdg"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
    for root in (xdg, home / ".config"):
        target = root / "evtr" / "config.toml"
        target.parent.mkdir(parents=True)
        target.write_text("")

    assert resolved_read_path(None) == xdg / "evtr" / "config.toml"


def test_read_path_accepts_string_path(tmp_path):
    config = tmp_path / "as-string.toml"
    config.write_text("")

    assert resolved_read_path(str(config)) == Path(config)