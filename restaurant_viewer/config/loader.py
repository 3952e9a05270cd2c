from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.camera import Region
from ..models.config_models import DEFAULT_REGION, MapSettings, ViewerConfig

"""Config loader.

Responsibilities:
- Load YAML config (default `config/viewer.yml`, or `VIEWER_CONFIG`)
- Validate against viewer_schema.json (shipped next to this module)
- Apply defaults for every missing key
"""

SCHEMA_PATH = Path(__file__).with_name("viewer_schema.json")
DEFAULT_CONFIG_PATH = Path("config/viewer.yml")
CONFIG_ENV_VAR = "VIEWER_CONFIG"


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: schema file missing or unreadable, or the data violates
            it (unknown keys, wrong types, out-of-range numbers).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def _region(raw: dict[str, Any] | None) -> Region:
    if not raw:
        return DEFAULT_REGION
    return Region(
        latitude=float(raw["latitude"]),
        longitude=float(raw["longitude"]),
        latitude_delta=float(raw.get("latitude_delta", DEFAULT_REGION.latitude_delta)),
        longitude_delta=float(raw.get("longitude_delta", DEFAULT_REGION.longitude_delta)),
    )


def config_from_mapping(data: dict[str, Any]) -> ViewerConfig:
    """Validate an already-parsed mapping and build a ViewerConfig."""
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")
    _validate_config_schema(data)
    defaults = MapSettings()
    settings = MapSettings(
        center_zoom=float(data.get("center_zoom", defaults.center_zoom)),
        edge_padding=float(data.get("edge_padding", defaults.edge_padding)),
        default_region=_region(data.get("default_region")),
    )
    return ViewerConfig(
        map=settings,
        show_progress=bool(data.get("show_progress", True)),
        issue_log=bool(data.get("issue_log", True)),
    )


def load_config(path: Path) -> ViewerConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    return config_from_mapping(data)


def resolve_config(explicit: Path | None = None) -> ViewerConfig:
    """Load the effective configuration.

    Priority: explicit path (must exist) > VIEWER_CONFIG > config/viewer.yml.
    When neither of the last two exists, built-in defaults are used.
    """
    if explicit is not None:
        return load_config(explicit)
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        return load_config(Path(env_path))
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return ViewerConfig()
