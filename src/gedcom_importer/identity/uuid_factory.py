# src/gedcom_importer/identity/uuid_factory.py
from __future__ import annotations

import re
import uuid
from typing import Optional

_NON_DIGITS = re.compile(r"\D+")


# -----------------------------
# Entity identity
# -----------------------------

def new_uuid() -> str:
    """
    Fresh identifier for a newly created entity: a random 128-bit value
    formatted as hyphenated hex (8-4-4-4-12).
    """
    return str(uuid.uuid4())


# -----------------------------
# Pointer normalization
# -----------------------------

def normalize_gedcom_id(pointer: Optional[str]) -> Optional[str]:
    """
    Reduce a GEDCOM cross-reference id to its digits:

        "@I7@"  -> "7"
        "@S12@" -> "12"
        "@XYZ@" -> None   (no digits: cannot be matched on re-import)
    """
    if pointer is None:
        return None
    digits = _NON_DIGITS.sub("", pointer)
    return digits or None


def is_pointer(value: Optional[str]) -> bool:
    """True for values shaped like a cross-reference id, e.g. "@N3@"."""
    if not value:
        return False
    v = value.strip()
    return v.startswith("@") and v.endswith("@") and len(v) >= 3


__all__ = [
    "new_uuid",
    "normalize_gedcom_id",
    "is_pointer",
]
