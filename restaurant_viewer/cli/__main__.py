from __future__ import annotations

import argparse
import asyncio
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

from restaurant_viewer.config.loader import ConfigError, resolve_config
from restaurant_viewer.excel.decoder import ImportDecodeError, decode_spreadsheet, read_payload
from restaurant_viewer.logging.init import log_summary, setup_logging
from restaurant_viewer.logging.issue_log import IssueLogBuffer
from restaurant_viewer.models.camera import CameraInstruction, CameraKind
from restaurant_viewer.services.presenters import EMPTY_LIST_NOTICE, list_rows
from restaurant_viewer.services.summary import render_summary_line
from restaurant_viewer.services.view_state import MapView, ViewerSession

"""CLI entrypoint.

A text render layer over the pipeline:
- load config (.env / VIEWER_CONFIG / config/viewer.yml)
- import one workbook
- apply the search query
- print the list view and/or the map view with its camera instruction
- print one SUMMARY line
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_IMPORT_FAILED = 2

VIEWS = ("list", "map", "both")


def _load_env_file(path: Path) -> None:
    """Load .env (without overriding variables already set)."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=False)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="restaurant-viewer", description="Search and map a restaurant spreadsheet")
    p.add_argument("file", type=Path, help="Workbook to import (.xlsx or .xls)")
    p.add_argument("--query", "-q", default="", help="Search name, city, cuisine, state, country")
    p.add_argument("--view", choices=VIEWS, default="both", help="Which presentation to print")
    p.add_argument("--config", type=Path, default=None, help="Config YAML (default: config/viewer.yml)")
    p.add_argument("--format-hint", default=None, help="MIME type or extension (xlsx / xls)")
    p.add_argument("--inspect-data", action="store_true", help="Print headers & first rows then exit")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _inspect_data(path: Path, format_hint: str | None) -> int:
    try:
        payload, hint = read_payload(path)
        rows = decode_spreadsheet(payload, format_hint or hint)
    except ImportDecodeError as e:
        print(f"inspect: read_error: {e}")
        return EXIT_IMPORT_FAILED
    print(f"FILE: {path.name}")
    columns = list(rows[0].keys()) if rows else []
    print(f"  cols={columns} rows={len(rows)}")
    print("  sample_rows=", rows[:3])
    return EXIT_SUCCESS


def _describe_camera(camera: CameraInstruction) -> str:
    if camera.kind is CameraKind.CENTER_ZOOM and camera.center is not None:
        return f"center_zoom lat={camera.center.latitude} lng={camera.center.longitude} zoom={camera.zoom:g}"
    if camera.kind is CameraKind.BOUNDING_FIT and camera.bounds is not None and camera.padding is not None:
        b = camera.bounds
        return (
            f"bounding_fit points={len(camera.coordinates)} "
            f"south={b.south} west={b.west} north={b.north} east={b.east} padding={camera.padding.top:g}"
        )
    return "none"


def _print_list(session: ViewerSession) -> None:
    rows = list_rows(session.list_view())
    print(f"LIST ({len(rows)})")
    if not session.state.records:
        print(f"  {EMPTY_LIST_NOTICE}")
        return
    for row in rows:
        print(f"  {row.title}")
        if row.subtitle:
            print(f"    {row.subtitle}")
        for line in (row.cuisine_line, row.notes_line):
            if line:
                print(f"    {line}")
        for link in row.links:
            print(f"    {link.label}: {link.url}")


def _print_map(view: MapView) -> None:
    print(f"MAP ({len(view.markers)})")
    for marker in view.markers:
        desc = f" - {marker.description}" if marker.description else ""
        print(f"  [{marker.latitude}, {marker.longitude}] {marker.title}{desc}")
    print(f"  camera: {_describe_camera(view.camera)}")
    if view.notice:
        r = view.region
        print(f"  region: lat={r.latitude} lng={r.longitude} span={r.latitude_delta}x{r.longitude_delta}")
        print(f"  {view.notice}")


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # only read sys.argv when no list is given (an empty list is a valid argv)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    if args.debug:
        setup_logging(debug=True)
        logger.debug("debug mode enabled")

    _load_env_file(Path(".env"))
    try:
        cfg = resolve_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if args.inspect_data:
        return _inspect_data(args.file, args.format_hint)

    issue_log = IssueLogBuffer() if cfg.issue_log else None
    session = ViewerSession(cfg.map, issue_log=issue_log, show_progress=cfg.show_progress)

    start = time.perf_counter()
    outcome = asyncio.run(session.import_path(args.file, args.format_hint))

    if issue_log is not None:
        written = issue_log.flush()
        if written is not None:
            logger.info(f"issues written to {written}")

    if not outcome.succeeded:
        logger.error(outcome.message)
        return EXIT_IMPORT_FAILED

    session.set_query(args.query)
    listed = session.list_view()
    map_view = session.map_view()
    if args.view in ("list", "both"):
        _print_list(session)
    if args.view in ("map", "both"):
        _print_map(map_view)

    records = session.state.records
    log_summary(
        render_summary_line(
            rows=len(records),
            geocoded=sum(1 for r in records if r.is_geocoded),
            listed=len(listed),
            mapped=len(map_view.records),
            camera=map_view.camera.kind,
            elapsed_seconds=round(time.perf_counter() - start, 3),
        )[len("SUMMARY "):]
    )
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
