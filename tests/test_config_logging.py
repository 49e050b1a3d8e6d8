"""Tests for configuration and console logging output."""

import pytest

from textquest import Config
from textquest.environment import TerrainMap, TerrainType
from textquest.logging_utils import Color, colored, log_error, log_info


def test_config_validate_rejects_non_positive_viewport(monkeypatch):
    monkeypatch.setattr(Config, "VIEWPORT_WIDTH", 0)
    with pytest.raises(ValueError, match="VIEWPORT"):
        Config.validate()


def test_config_display_lists_settings(monkeypatch):
    monkeypatch.setattr(Config, "VIEWPORT_WIDTH", 7)
    monkeypatch.setattr(Config, "VIEWPORT_HEIGHT", 5)
    summary = Config.display()
    assert "Viewport: 7x5" in summary
    assert "Maps:" in summary


def test_colored_respects_no_color(monkeypatch):
    monkeypatch.setenv("TEXTQUEST_NO_COLOR", "1")
    assert colored("plain", Color.CYAN) == "plain"

    monkeypatch.delenv("TEXTQUEST_NO_COLOR")
    assert colored("tinted", Color.CYAN).startswith(Color.CYAN.value)


def test_growth_is_logged(monkeypatch, capsys):
    monkeypatch.setenv("TEXTQUEST_NO_COLOR", "1")
    monkeypatch.setattr(Config, "LOG_LEVEL", "INFO")
    terrain_map = TerrainMap("small", [[TerrainType.Grass]], {})

    terrain_map.modify_at(0, 0, TerrainType.Road)
    assert capsys.readouterr().out == ""

    terrain_map.modify_at(2, 1, TerrainType.Road)
    out = capsys.readouterr().out
    assert "[#] Expanded map 'small' from 1x1 to 3x2" in out


def test_log_level_silences_info(monkeypatch, capsys):
    monkeypatch.setenv("TEXTQUEST_NO_COLOR", "1")
    monkeypatch.setattr(Config, "LOG_LEVEL", "warning")
    log_info("hidden")
    log_error("shown")
    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "[!] shown" in out
