# src/gedcom_importer/loader/tags.py

"""
Tag lookup helpers shared by every record importer.

All helpers look at DIRECT children only; nested structures are reached by
calling them again on the matched node's children.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .tree_builder import GEDCOMNode


def find_tag(children: Iterable[GEDCOMNode], tag: str) -> Optional[GEDCOMNode]:
    """Return the first direct child with this tag, or None."""
    for child in children:
        if child.tag == tag:
            return child
    return None


def find_all_tags(children: Iterable[GEDCOMNode], tag: str) -> List[GEDCOMNode]:
    """Return all direct children with this tag, in file order."""
    return [child for child in children if child.tag == tag]


def find_all_tag_values(children: Iterable[GEDCOMNode], tag: str) -> List[Optional[str]]:
    """Return the raw values of all direct children sharing a tag (e.g. repeated CHIL)."""
    return [child.value for child in children if child.tag == tag]


def find_tag_value(children: Iterable[GEDCOMNode], tag: str) -> Optional[str]:
    """
    Return the value of the first child with this tag, with its continuation
    lines folded in:

        CONC -> appended as-is
        CONT -> appended after a newline

    Returns None when the tag is absent.
    """
    node = find_tag(children, tag)
    if node is None:
        return None

    value = node.value
    for sub in node.children:
        if sub.tag == "CONC":
            value = (value or "") + (sub.value or "")
        elif sub.tag == "CONT":
            value = (value or "") + "\n" + (sub.value or "")
    return value


def find_time_value(children: Iterable[GEDCOMNode]) -> Optional[str]:
    """
    TIME of an event or CHAN block: a sibling of DATE, or nested under DATE
    as GEDCOM 5.5.1 writes it.
    """
    children = list(children)
    value = find_tag_value(children, "TIME")
    if value:
        return value
    date_node = find_tag(children, "DATE")
    if date_node is None:
        return None
    return find_tag_value(date_node.children, "TIME")
