# src/gedcom_importer/loader/tree_builder.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from gedcom_importer.logging import get_logger

from .tokenizer import GedcomLine, tokenize_text

log = get_logger(__name__)

# Record kinds every parsed document exposes, even when the file has none.
RECORD_KINDS = ("INDI", "FAM", "OBJE", "SOUR", "NOTE", "REPO", "SUBM")


@dataclass
class GEDCOMNode:
    """
    A hierarchical GEDCOM node produced from the flat line stream.

    Attributes:
        level: GEDCOM level number (0 for records, >0 for substructures).
        tag: The GEDCOM tag (HEAD, INDI, BIRT, DATE, NOTE, etc.).
        value: The raw tag value, or None.
        pointer: GEDCOM @XREF@ identifier on level-0 records.
        children: Nested GEDCOMNode list ordered as they appeared.
        lineno: Line number in original file (for debugging).
    """

    level: int
    tag: str
    value: Optional[str] = None
    pointer: Optional[str] = None
    lineno: int = 0
    children: List["GEDCOMNode"] = field(default_factory=list)

    def add_child(self, child: "GEDCOMNode") -> None:
        self.children.append(child)

    def __repr__(self) -> str:
        ptr = f" {self.pointer}" if self.pointer else ""
        return f"<GEDCOMNode {self.level}{ptr} {self.tag}: {self.value!r}>"


@dataclass
class ParsedDocument:
    """
    Level-0 records of one GEDCOM file, grouped by record kind.

    ``records["INDI"]["@I1@"]`` is the individual record @I1@. HEAD and TRLR
    have no cross-reference id and live in their own slots.
    """

    records: Dict[str, Dict[str, GEDCOMNode]] = field(
        default_factory=lambda: {kind: {} for kind in RECORD_KINDS}
    )
    head: Optional[GEDCOMNode] = None
    trailer: Optional[GEDCOMNode] = None

    def bucket(self, kind: str) -> Dict[str, GEDCOMNode]:
        """Return the ``pointer -> node`` mapping for a record kind (empty if none)."""
        return self.records.get(kind.upper(), {})

    @property
    def individuals(self) -> Dict[str, GEDCOMNode]:
        return self.bucket("INDI")

    @property
    def families(self) -> Dict[str, GEDCOMNode]:
        return self.bucket("FAM")

    @property
    def sources(self) -> Dict[str, GEDCOMNode]:
        return self.bucket("SOUR")

    @property
    def media_objects(self) -> Dict[str, GEDCOMNode]:
        return self.bucket("OBJE")

    @property
    def notes(self) -> Dict[str, GEDCOMNode]:
        return self.bucket("NOTE")

    def counts(self) -> Dict[str, int]:
        return {kind: len(nodes) for kind, nodes in self.records.items()}

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        summary = ", ".join(f"{k}={v}" for k, v in self.counts().items() if v)
        return f"<ParsedDocument {summary}>"


class TreeBuilder:
    """
    Single-pass builder turning GedcomLine records into a ParsedDocument.

    The ``level -> current node`` table belongs to one build() call, so a
    builder instance is never shared between concurrent imports.
    """

    def __init__(self) -> None:
        self.document = ParsedDocument()
        self._current: Dict[int, GEDCOMNode] = {}
        self.dropped = 0

    def build(self, lines: Iterable[GedcomLine]) -> ParsedDocument:
        self.document = ParsedDocument()
        self._current = {}
        self.dropped = 0

        for line in lines:
            self._consume(line)

        if self.dropped:
            log.debug("Tree builder dropped %d orphaned line(s)", self.dropped)
        return self.document

    def _consume(self, line: GedcomLine) -> None:
        node = GEDCOMNode(
            level=line.level,
            tag=line.tag,
            value=line.value,
            pointer=line.pointer,
            lineno=line.lineno,
        )

        if line.level == 0:
            self._current = {0: node}
            self._file_record(node)
            return

        parent = self._current.get(line.level - 1)
        if parent is None:
            # Malformed nesting: no ancestor recorded one level up.
            self.dropped += 1
            return

        parent.add_child(node)
        self._current[line.level] = node

    def _file_record(self, node: GEDCOMNode) -> None:
        if node.pointer:
            self.document.records.setdefault(node.tag, {})[node.pointer] = node
        elif node.tag == "HEAD":
            self.document.head = node
        elif node.tag == "TRLR":
            self.document.trailer = node
        else:
            log.debug("Ignoring level-0 %s record without pointer", node.tag)


def build_document(lines: Iterable[GedcomLine]) -> ParsedDocument:
    """
    Build a ParsedDocument from a line stream:

        lines -> ParsedDocument(records={"INDI": {...}, "FAM": {...}, ...})
    """
    return TreeBuilder().build(lines)


def parse_gedcom(text: str) -> ParsedDocument:
    """Tokenize and assemble raw GEDCOM content in one call."""
    return build_document(tokenize_text(text))
