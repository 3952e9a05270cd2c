from __future__ import annotations

import re

from restaurant_viewer.models.camera import CameraKind
from restaurant_viewer.services.summary import render_summary_line

"""SUMMARY line format contract."""

SUMMARY_PATTERN = re.compile(
    r"^SUMMARY\s+rows=([0-9]+)\s+geocoded=([0-9]+)\s+listed=([0-9]+)\s+mapped=([0-9]+)\s+"
    r"camera=(none|center_zoom|bounding_fit)\s+elapsed_sec=([0-9]+\.?[0-9]*)$"
)


def test_summary_pattern_example_line():
    line = "SUMMARY rows=4 geocoded=3 listed=2 mapped=1 camera=center_zoom elapsed_sec=0.84"
    assert SUMMARY_PATTERN.match(line), "SUMMARY line should match contract regex"


def test_rendered_lines_match_contract():
    for kind in CameraKind:
        for elapsed in (0, 0.0004, 0.5, 3.0, 12.3456):
            line = render_summary_line(rows=10, geocoded=7, listed=5, mapped=4, camera=kind, elapsed_seconds=elapsed)
            assert SUMMARY_PATTERN.match(line), line
