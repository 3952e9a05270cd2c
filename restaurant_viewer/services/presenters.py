from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from ..models.record import Record

"""Presentation helpers for the list and map views.

These build the text and link targets a render layer needs for each Record.
Links are only built here; opening them is up to the caller.
"""

__all__ = [
    "EMPTY_LIST_NOTICE",
    "NO_MAPPABLE_ROWS_NOTICE",
    "ContactLink",
    "ListRow",
    "Marker",
    "address_line",
    "website_url",
    "contact_links",
    "list_rows",
    "markers",
]

EMPTY_LIST_NOTICE = "Import an Excel file to get started."
NO_MAPPABLE_ROWS_NOTICE = "No mappable rows. Make sure your sheet has Latitude and Longitude columns."

MAPS_SEARCH_URL = "https://www.google.com/maps/search/?api=1&query={lat},{lng}"


@dataclass(frozen=True)
class ContactLink:
    label: str  # Call / Website / Open in Maps
    url: str


@dataclass(frozen=True)
class ListRow:
    key: str
    title: str
    subtitle: str
    cuisine_line: str | None = None
    notes_line: str | None = None
    links: tuple[ContactLink, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Marker:
    key: str
    latitude: float
    longitude: float
    title: str
    description: str


def _join(*parts: str) -> str:
    return ", ".join(p for p in parts if p)


def address_line(record: Record) -> str:
    return _join(record.address, record.city, record.state, record.country)


def website_url(website: str) -> str:
    return website if website.startswith("http") else f"https://{website}"


def contact_links(record: Record) -> tuple[ContactLink, ...]:
    links: list[ContactLink] = []
    if record.phone:
        links.append(ContactLink("Call", f"tel:{record.phone}"))
    if record.website:
        links.append(ContactLink("Website", website_url(record.website)))
    if record.is_geocoded:
        links.append(ContactLink("Open in Maps", MAPS_SEARCH_URL.format(lat=record.lat, lng=record.lng)))
    return tuple(links)


def list_rows(records: Sequence[Record]) -> tuple[ListRow, ...]:
    return tuple(
        ListRow(
            key=r.id,
            title=r.name,
            subtitle=address_line(r),
            cuisine_line=f"Cuisine: {r.cuisine}" if r.cuisine else None,
            notes_line=f"Notes: {r.notes}" if r.notes else None,
            links=contact_links(r),
        )
        for r in records
    )


def markers(records: Sequence[Record]) -> tuple[Marker, ...]:
    """One marker per geocoded record; others are skipped."""
    return tuple(
        Marker(
            key=r.id,
            latitude=float(r.lat),
            longitude=float(r.lng),
            title=r.name,
            description=_join(r.address, r.city),
        )
        for r in records
        if r.is_geocoded
    )
