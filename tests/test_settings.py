"""Tests for YAML-backed settings."""

import logging

import yaml

from config.settings import GraphConfig, Settings


def test_defaults():
    settings = Settings()
    assert settings.graph == GraphConfig(width=1200, height=400, padding=45, tick_count=10)


def test_missing_file_falls_back_to_defaults(tmp_path):
    settings = Settings.load(tmp_path / "missing.yaml")
    assert settings == Settings()


def test_load_overrides_known_keys(tmp_path):
    path = tmp_path / "graph.yaml"
    path.write_text(yaml.dump({
        "graph": {"width": 800, "tick_count": 5},
        "display": {"title": "Sensor"},
    }))

    settings = Settings.load(path)
    assert settings.graph.width == 800
    assert settings.graph.tick_count == 5
    assert settings.graph.height == 400
    assert settings.display.title == "Sensor"


def test_unknown_keys_are_ignored_with_warning(tmp_path, caplog):
    path = tmp_path / "graph.yaml"
    path.write_text(yaml.dump({
        "graph": {"colour": "red"},
        "plugins": {"enabled": True},
    }))

    with caplog.at_level(logging.WARNING, logger="config.settings"):
        settings = Settings.load(path)

    assert settings == Settings()
    assert "graph.colour" in caplog.text
    assert "plugins" in caplog.text


def test_save_then_load(tmp_path):
    settings = Settings()
    settings.graph.padding = 20
    path = tmp_path / "nested" / "graph.yaml"

    settings.save(path)

    assert Settings.load(path).graph.padding == 20
