# src/gedcom_importer/loader/tokenizer.py

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

from gedcom_importer.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class GedcomLine:
    """
    A single GEDCOM line record.

    Attributes:
        level: Parsed GEDCOM level (0, 1, 2, ...).
        pointer: Cross-reference identifier on entity lines, e.g. "@I1@", else None.
        tag: GEDCOM tag, e.g. "INDI", "FAM", "HEAD", "NOTE", "CONC", "CONT".
        value: The line payload, or None when the line carries no value.
        lineno: 1-based line number in the original text.
    """
    level: int
    pointer: Optional[str]
    tag: str
    value: Optional[str] = None
    lineno: int = 0


# <level> <@xref@> <tag>
_ENTITY_LINE = re.compile(r"^(\d+)\s+(@[^@]+@)\s+(.+)$")
# <level> <tag> [<value>]
_ATTRIBUTE_LINE = re.compile(r"^(\d+)\s+([A-Za-z0-9_]+)(?:\s+(.+))?$")
_LINE_BREAK = re.compile(r"\r?\n")


def tokenize_line(line: str, lineno: int = 0) -> Optional[GedcomLine]:
    """
    Parse a single GEDCOM line into a GedcomLine.

    Two shapes are recognised:
        "0 @I1@ INDI"        -> entity line (pointer set; any text after the tag is the value)
        "1 NAME John /Doe/"  -> attribute line (value is the remainder)

    Returns None for blank or malformed lines. Real-world exports are
    inconsistent, so a bad line is dropped rather than failing the import.
    """
    raw = line.strip()
    if lineno == 1 and raw.startswith("\ufeff"):
        raw = raw.lstrip("\ufeff")

    if not raw:
        return None

    match = _ENTITY_LINE.match(raw)
    if match:
        # "0 @N1@ NOTE inline text" keeps NOTE as the tag.
        parts = match.group(3).split(None, 1)
        return GedcomLine(
            level=int(match.group(1)),
            pointer=match.group(2),
            tag=parts[0],
            value=parts[1] if len(parts) > 1 else None,
            lineno=lineno,
        )

    match = _ATTRIBUTE_LINE.match(raw)
    if match:
        return GedcomLine(
            level=int(match.group(1)),
            pointer=None,
            tag=match.group(2),
            value=match.group(3),
            lineno=lineno,
        )

    return None


def tokenize_text(text: str) -> List[GedcomLine]:
    """
    Split raw GEDCOM content into GedcomLine records, in file order.

    Blank lines are skipped; lines matching neither shape are dropped and
    only reported at DEBUG level.
    """
    lines: List[GedcomLine] = []
    dropped = 0

    for lineno, raw_line in enumerate(_LINE_BREAK.split(text), start=1):
        if not raw_line.strip():
            continue

        token = tokenize_line(raw_line, lineno=lineno)
        if token is None:
            dropped += 1
            log.debug("Dropping malformed line %d: %r", lineno, raw_line)
            continue

        lines.append(token)

    if dropped:
        log.debug("Tokenizer dropped %d malformed line(s)", dropped)

    return lines
