# src/gedcom_importer/events/event.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, time
from typing import Iterable, Optional

from gedcom_importer.dates.parser import parse_date, parse_time
from gedcom_importer.loader.tags import find_tag, find_tag_value, find_time_value
from gedcom_importer.loader.tree_builder import GEDCOMNode


# ---------------------------------------------------------------------------
# Event Tag Definitions
# ---------------------------------------------------------------------------

BIRTH_TAGS = ("BIRT",)
BAPTISM_TAGS = ("BAPM", "CHR")
DEATH_TAGS = ("DEAT",)
MARRIAGE_TAGS = ("MARR",)

NEGATIVE_HEMISPHERES = ("S", "W")
POSITIVE_HEMISPHERES = ("N", "E")


@dataclass
class EventData:
    """
    Date / time / place / coordinates of one life event (BIRT, DEAT, MARR, ...).

    Every field is optional: a field that could not be read stays None and is
    simply not written to the entity.
    """
    tag: str
    date: Optional[date] = None
    date_original: Optional[str] = None
    time: Optional[time] = None
    place: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


# ---------------------------------------------------------------------------
# Coordinates
# ---------------------------------------------------------------------------

def parse_coordinate(raw: Optional[str]) -> Optional[float]:
    """
    Parse a GEDCOM LATI / LONG value into signed decimal degrees.

        "N48.8566", "48.8566 N", "E2.3522" -> positive
        "S 33.8", "33.8S", "W0.12", "-0.12" -> negative

    Non-numeric or empty input yields None, never 0.
    """
    if not raw:
        return None
    s = raw.strip().upper()
    if not s:
        return None

    sign = 1.0
    if s[0] in NEGATIVE_HEMISPHERES or s[-1] in NEGATIVE_HEMISPHERES:
        sign = -1.0
    elif s.startswith("-"):
        sign = -1.0

    # Keep simple decimal degrees only.
    s = re.sub(r"[^\d\.]+", "", s)
    if not s:
        return None

    try:
        val = float(s)
    except ValueError:
        return None
    return sign * val


# ---------------------------------------------------------------------------
# Event extraction
# ---------------------------------------------------------------------------

def extract_event_from_node(node: GEDCOMNode) -> EventData:
    """Read DATE, TIME, PLAC and MAP/LATI+LONG from an event node's children."""
    children = node.children
    event = EventData(tag=node.tag)

    date_text = find_tag_value(children, "DATE")
    if date_text:
        event.date_original = date_text.strip() or None
        event.date = parse_date(date_text)

    time_text = find_time_value(children)
    if time_text:
        event.time = parse_time(time_text)

    place = find_tag_value(children, "PLAC")
    if place:
        event.place = place.strip() or None

    map_node = find_tag(children, "MAP")
    if map_node is not None:
        event.latitude = parse_coordinate(find_tag_value(map_node.children, "LATI"))
        event.longitude = parse_coordinate(find_tag_value(map_node.children, "LONG"))

    return event


def extract_event(children: Iterable[GEDCOMNode], tags: Iterable[str]) -> Optional[EventData]:
    """
    Return the first event found among ``tags`` (in priority order), or None.

    ``extract_event(indi.children, BAPTISM_TAGS)`` prefers BAPM and falls back to CHR.
    """
    children = list(children)
    for tag in tags:
        node = find_tag(children, tag)
        if node is not None:
            return extract_event_from_node(node)
    return None
