from __future__ import annotations

from pathlib import Path

import pytest

from restaurant_viewer.config.loader import ConfigError, load_config, resolve_config
from restaurant_viewer.models.config_models import DEFAULT_REGION, ViewerConfig

SAMPLE_CONFIG = """center_zoom: 12
edge_padding: 40
default_region:
  latitude: 45.76
  longitude: 4.83
show_progress: false
issue_log: false
"""


@pytest.fixture()
def write_config(temp_workdir: Path) -> Path:
    cfg = temp_workdir / "config" / "viewer.yml"
    cfg.write_text(SAMPLE_CONFIG, encoding="utf-8")
    return cfg


def test_load_config_success(write_config: Path):
    cfg = load_config(write_config)
    assert cfg.map.center_zoom == 12
    assert cfg.map.edge_padding == 40
    assert cfg.map.default_region.latitude == 45.76
    # unspecified deltas fall back to defaults
    assert cfg.map.default_region.latitude_delta == DEFAULT_REGION.latitude_delta
    assert cfg.show_progress is False
    assert cfg.issue_log is False


def test_load_config_missing_file(temp_workdir: Path):
    with pytest.raises(ConfigError):
        load_config(temp_workdir / "config" / "not_exists.yml")


def test_load_config_empty_file_uses_defaults(temp_workdir: Path):
    cfg_path = temp_workdir / "config" / "viewer.yml"
    cfg_path.write_text("", encoding="utf-8")
    assert load_config(cfg_path) == ViewerConfig()


def test_load_config_invalid_yaml(temp_workdir: Path):
    cfg_path = temp_workdir / "config" / "viewer.yml"
    cfg_path.write_text("center_zoom: [unclosed", encoding="utf-8")
    with pytest.raises(ConfigError, match="invalid yaml"):
        load_config(cfg_path)


def test_load_config_extra_field(write_config: Path):
    write_config.write_text(SAMPLE_CONFIG + "extra_field: not_allowed\n", encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_config(write_config)
    assert "config validation failed" in str(e.value)


def test_load_config_wrong_type(write_config: Path):
    write_config.write_text(SAMPLE_CONFIG.replace("edge_padding: 40", "edge_padding: wide"), encoding="utf-8")
    with pytest.raises(ConfigError, match="config validation failed"):
        load_config(write_config)


def test_load_config_region_requires_coordinates(write_config: Path):
    text = SAMPLE_CONFIG.replace("  latitude: 45.76\n", "")
    write_config.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError, match="required property"):
        load_config(write_config)


def test_resolve_config_defaults_when_absent(temp_workdir: Path):
    assert resolve_config() == ViewerConfig()


def test_resolve_config_prefers_default_path(write_config: Path):
    assert resolve_config().map.center_zoom == 12


def test_resolve_config_env_override(temp_workdir: Path, monkeypatch):
    other = temp_workdir / "other.yml"
    other.write_text("center_zoom: 9\n", encoding="utf-8")
    monkeypatch.setenv("VIEWER_CONFIG", str(other))
    assert resolve_config().map.center_zoom == 9


def test_resolve_config_explicit_missing(temp_workdir: Path):
    with pytest.raises(ConfigError, match="not found"):
        resolve_config(temp_workdir / "missing.yml")
