from __future__ import annotations

import base64
import binascii
import io
import logging
from pathlib import Path
from typing import Any

import pandas as pd

"""Spreadsheet decoder.

Turns a raw workbook payload into an ordered list of untyped rows:

- first sheet only, first row is the header row
- every header present in every row; missing cells resolve to ""
- fully blank rows are skipped

Modern XML-zip workbooks are read through openpyxl, legacy binary workbooks
through xlrd (both via pandas). The container is sniffed from the payload
itself; the format hint only has to name a supported type.
"""

__all__ = [
    "ImportDecodeError",
    "IMPORT_FAILED_MESSAGE",
    "XLSX_MIME",
    "XLS_MIME",
    "RawRow",
    "decode_spreadsheet",
    "read_payload",
]

logger = logging.getLogger(__name__)

RawRow = dict[str, Any]

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
XLS_MIME = "application/vnd.ms-excel"

IMPORT_FAILED_MESSAGE = "Failed to read that file. Make sure it's an .xlsx or .xls with a header row."

_ZIP_MAGIC = b"PK\x03\x04"
_OLE2_MAGIC = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"

# format hint -> pandas engine
_HINT_ENGINES = {
    XLSX_MIME: "openpyxl",
    "xlsx": "openpyxl",
    XLS_MIME: "xlrd",
    "xls": "xlrd",
}

_EMPTY_HEADER = "__EMPTY"


class ImportDecodeError(Exception):
    """Raised when a payload cannot be decoded as a supported spreadsheet."""


def _engine_for_hint(format_hint: str) -> str:
    key = format_hint.strip().lower().lstrip(".")
    engine = _HINT_ENGINES.get(key)
    if engine is None:
        raise ImportDecodeError(f"unsupported format: {format_hint!r}")
    return engine


def _sniff_engine(data: bytes) -> str:
    if data.startswith(_ZIP_MAGIC):
        return "openpyxl"
    if data.startswith(_OLE2_MAGIC):
        return "xlrd"
    raise ImportDecodeError("payload is not a recognized spreadsheet container")


def _to_bytes(payload: bytes | bytearray | str) -> bytes:
    """Accept raw bytes or base64 text (as read by a file picker)."""
    if isinstance(payload, (bytes, bytearray)):
        return bytes(payload)
    try:
        return base64.b64decode(payload, validate=False)
    except (binascii.Error, ValueError) as e:
        raise ImportDecodeError(f"invalid base64 payload: {e}") from e


def _cell_text(value: Any) -> str:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _header_names(cells: list[Any]) -> list[str]:
    """Stringify header cells; blank and duplicate headers get suffixes.

    blank -> __EMPTY, __EMPTY_1, ... ; repeated "Name" -> Name, Name_1, ...
    """
    seen: dict[str, int] = {}
    names: list[str] = []
    for cell in cells:
        base = _cell_text(cell) or _EMPTY_HEADER
        count = seen.get(base, 0)
        seen[base] = count + 1
        names.append(base if count == 0 else f"{base}_{count}")
    return names


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return bool(pd.isna(value))


def _read_first_sheet(data: bytes, engine: str) -> pd.DataFrame:
    try:
        xls = pd.ExcelFile(io.BytesIO(data), engine=engine)
    except Exception as e:
        raise ImportDecodeError(f"unable to open workbook: {e}") from e
    try:
        if not xls.sheet_names:
            raise ImportDecodeError("workbook has no sheets")
        first = xls.sheet_names[0]
        # raw read without header; first row is applied as header below
        return xls.parse(first, header=None, dtype=object, keep_default_na=False, na_values=[])
    except ImportDecodeError:
        raise
    except Exception as e:
        raise ImportDecodeError(f"unable to read first sheet: {e}") from e
    finally:
        xls.close()


def decode_spreadsheet(payload: bytes | bytearray | str, format_hint: str | None = None) -> list[RawRow]:
    """Decode a workbook payload into rows keyed by header.

    Parameters
    ----------
    payload: raw workbook bytes, or base64 text
    format_hint: MIME type or extension (xlsx / xls); optional

    Raises
    ------
    ImportDecodeError: payload is not a readable spreadsheet, or has no sheets
    """
    data = _to_bytes(payload)
    engine = _sniff_engine(data)
    if format_hint:
        hinted = _engine_for_hint(format_hint)
        if hinted != engine:
            logger.debug(f"format hint {format_hint!r} disagrees with payload content; reading with {engine}")

    df = _read_first_sheet(data, engine)
    if df.shape[0] == 0:
        return []

    columns = _header_names(df.iloc[0].tolist())
    rows: list[RawRow] = []
    for raw in df.iloc[1:].itertuples(index=False, name=None):
        values = list(raw)
        if all(_is_blank(v) for v in values):
            continue
        row: RawRow = {}
        for col, val in zip(columns, values, strict=False):
            row[col] = "" if _is_blank(val) and not isinstance(val, str) else val
        rows.append(row)

    logger.debug(f"decoded {len(rows)} rows, columns={columns}")
    return rows


def read_payload(path: Path) -> tuple[bytes, str]:
    """Read a workbook from disk, returning (bytes, format_hint)."""
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ImportDecodeError(f"unable to read {path}: {e}") from e
    return data, path.suffix.lstrip(".").lower()
