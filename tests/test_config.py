import tomllib
from dataclasses import replace

import pytest

from evtr import config
from evtr.errors import ConfigError, ErrorArea, ExternalError
from evtr.settings import SortOrder, default_config


@pytest.fixture(autouse=True)
def restore_runtime():
    yield
    config.install_runtime(default_config())


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    return tmp_path


def test_load_without_files_returns_defaults(home):
    assert config.load(None) == default_config()


def test_load_reads_explicit_file(tmp_path):
    target = tmp_path / "custom.toml"
    target.write_text('[selector]\nsort = "name"\n')

    loaded = config.load(target)

    assert loaded.selector.sort is SortOrder.NAME
    assert loaded.monitor == default_config().monitor


def test_load_reports_invalid_file_with_its_path(tmp_path):
    target = tmp_path / "broken.toml"
    target.write_text("[selector]\nunknown = 1\n")

    with pytest.raises(ConfigError) as info:
        config.load(target)
    assert str(target) in str(info.value)


def test_load_wraps_read_failures(tmp_path):
    with pytest.raises(ExternalError) as info:
        config.load(tmp_path)
    assert info.value.area is ErrorArea.CONFIG
    assert info.value.context == f"read {tmp_path}"


def test_write_default_config_round_trips(tmp_path):
    target = tmp_path / "nested" / "dir" / "config.toml"

    config.write_default_config(target)

    assert target.read_text() == config.render_default_config()
    assert config.load(target) == default_config()


def test_write_default_config_refuses_to_overwrite(tmp_path):
    target = tmp_path / "config.toml"
    target.write_text("")

    with pytest.raises(ConfigError, match="config file already exists"):
        config.write_default_config(target)
    assert target.read_text() == ""


def test_render_default_config_is_valid_toml():
    document = tomllib.loads(config.render_default_config())

    assert document["selector"]["sort"] == "path"
    assert document["monitor"]["startup_focus"] == "auto"


def test_resolved_write_path_uses_explicit_path(tmp_path):
    target = tmp_path / "out.toml"
    assert config.resolved_write_path(target) == target


def test_runtime_starts_with_defaults():
    assert config.app() == default_config()


def test_install_runtime_is_seen_by_accessors():
    base = default_config()
    custom = replace(
        base,
        selector=replace(base.selector, page_scroll_size=4),
        monitor=replace(base.monitor, joystick_invert_y=False),
    )

    config.install_runtime(custom)

    assert config.app() == custom
    assert config.selector().page_scroll_size == 4
    assert config.monitor().joystick_invert_y is False
    assert config.theme() == base.theme
    assert config.layout() == base.layout
    assert config.keys() == base.keys