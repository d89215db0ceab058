import json

import pytest

from src import config, paths
from src.edge import EdgeStyle


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(config, "get_config_path", lambda: path)
    monkeypatch.delenv(config.ORIENTED_ENV_VAR, raising=False)
    return path


def test_missing_file_gives_defaults(config_path):
    assert config.load_config() == {}
    assert config.get_edge_style() == EdgeStyle()
    assert config.is_oriented_default() is False


def test_broken_file_gives_empty_config(config_path):
    config_path.write_text("{not json")
    assert config.load_config() == {}


def test_edge_style_section_overrides_defaults(config_path):
    config_path.write_text(json.dumps({"edge_style": {"line_width": 3, "tree_color": "#00ff00"}}))
    style = config.get_edge_style()
    assert style.line_width == 3
    assert style.tree_color == "#00ff00"
    assert style.arrow_size == 15


def test_invalid_edge_style_section_is_ignored(config_path):
    assert config.get_edge_style({"edge_style": "thick"}) == EdgeStyle()


def test_set_edge_style_persists(config_path):
    config.set_edge_style(EdgeStyle(font_size=18))
    saved = json.loads(config_path.read_text())
    assert saved["edge_style"]["font_size"] == 18
    assert config.get_edge_style().font_size == 18


def test_oriented_from_config(config_path):
    config.set_oriented_default(True)
    assert config.is_oriented_default() is True


def test_env_var_wins_over_config(config_path, monkeypatch):
    config.set_oriented_default(True)
    monkeypatch.setenv(config.ORIENTED_ENV_VAR, "false")
    assert config.is_oriented_default() is False
    monkeypatch.setenv(config.ORIENTED_ENV_VAR, "yes")
    assert config.is_oriented_default() is True


def test_non_object_file_gives_empty_config(config_path, caplog):
    config_path.write_text("[1, 2]")
    assert config.load_config() == {}
    assert "expected an object" in caplog.text


def test_save_creates_missing_directory(tmp_path, monkeypatch):
    path = tmp_path / "nested" / "config.json"
    monkeypatch.setattr(config, "get_config_path", lambda: path)
    config.set_oriented_default(True)
    assert json.loads(path.read_text()) == {"oriented": True}


def test_config_path_env_override(tmp_path, monkeypatch):
    target = tmp_path / "editor.json"
    monkeypatch.setenv(paths.CONFIG_PATH_ENV_VAR, str(target))
    assert paths.get_config_path() == target
    monkeypatch.delenv(paths.CONFIG_PATH_ENV_VAR)
    assert paths.get_config_path() == paths.get_app_dir() / "config.json"
