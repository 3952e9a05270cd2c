from __future__ import annotations

from dataclasses import dataclass, field

from .camera import Region

"""Config dataclasses for the restaurant viewer.

These are the typed form of config/viewer.yml after schema validation in
restaurant_viewer.config.loader.
"""

DEFAULT_CENTER_ZOOM = 14.0
DEFAULT_EDGE_PADDING = 60.0

# San Francisco, the region the map shows before anything is mappable
DEFAULT_REGION = Region(
    latitude=37.7749,
    longitude=-122.4194,
    latitude_delta=0.5,
    longitude_delta=0.5,
)


@dataclass(frozen=True)
class MapSettings:
    """Camera framing parameters for the map presentation."""
    center_zoom: float = DEFAULT_CENTER_ZOOM  # zoom used for a single marker
    edge_padding: float = DEFAULT_EDGE_PADDING  # symmetric fit margin
    default_region: Region = DEFAULT_REGION


@dataclass(frozen=True)
class ViewerConfig:
    """Root configuration object."""
    map: MapSettings = field(default_factory=MapSettings)
    show_progress: bool = True  # tqdm row progress when on a TTY
    issue_log: bool = True  # write logs/issues-*.log when issues occur
