# src/gedcom_importer/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

Intended usage from other parts of the project and tests:

    from gedcom_importer.loader import (
        GedcomLine,
        GEDCOMNode,
        ParsedDocument,
        TreeBuilder,
        tokenize_line,
        tokenize_text,
        build_document,
        parse_gedcom,
        load_file,
        find_tag,
        find_all_tags,
        find_all_tag_values,
        find_tag_value,
        find_time_value,
    )
"""

from __future__ import annotations

from .file_loader import load_file
from .tags import (
    find_all_tag_values,
    find_all_tags,
    find_tag,
    find_tag_value,
    find_time_value,
)
from .tokenizer import GedcomLine, tokenize_line, tokenize_text
from .tree_builder import (
    RECORD_KINDS,
    GEDCOMNode,
    ParsedDocument,
    TreeBuilder,
    build_document,
    parse_gedcom,
)

__all__ = [
    "GedcomLine",
    "GEDCOMNode",
    "ParsedDocument",
    "RECORD_KINDS",
    "TreeBuilder",
    "tokenize_line",
    "tokenize_text",
    "build_document",
    "parse_gedcom",
    "load_file",
    "find_tag",
    "find_all_tags",
    "find_all_tag_values",
    "find_tag_value",
    "find_time_value",
]
