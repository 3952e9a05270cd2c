from __future__ import annotations

from ..models.camera import CameraKind

"""SUMMARY line rendering for one viewer run."""


def _format_seconds(elapsed: float) -> str:
    if elapsed == 0:
        return "0"
    if elapsed == int(elapsed):
        return str(int(elapsed))
    if elapsed < 0.01:
        # avoid scientific notation for very small numbers
        return f"{elapsed:.6f}".rstrip("0").rstrip(".")
    return f"{elapsed:.3f}".rstrip("0").rstrip(".")


def render_summary_line(
    *,
    rows: int,
    geocoded: int,
    listed: int,
    mapped: int,
    camera: CameraKind,
    elapsed_seconds: float,
) -> str:
    """Render the SUMMARY line.

    Format:
    SUMMARY rows={rows} geocoded={geocoded} listed={listed} mapped={mapped}
    camera={none|center_zoom|bounding_fit} elapsed_sec={elapsed}

    Examples:
        >>> render_summary_line(rows=2, geocoded=1, listed=2, mapped=1,
        ...                     camera=CameraKind.CENTER_ZOOM, elapsed_seconds=0.5)
        'SUMMARY rows=2 geocoded=1 listed=2 mapped=1 camera=center_zoom elapsed_sec=0.5'
    """
    return (
        f"SUMMARY rows={rows} "
        f"geocoded={geocoded} "
        f"listed={listed} "
        f"mapped={mapped} "
        f"camera={camera.value} "
        f"elapsed_sec={_format_seconds(elapsed_seconds)}"
    )
