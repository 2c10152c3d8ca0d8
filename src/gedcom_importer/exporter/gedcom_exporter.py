"""
gedcom_exporter.py
Minimal GEDCOM 5.5.1 export of a tree.

Only the header / trailer skeleton is emitted; records are not written back.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from gedcom_importer.logging import get_logger
from gedcom_importer.storage.repository import GenealogyStore

log = get_logger(__name__)

SOURCE_SYSTEM = "GEDCOM_IMPORTER"
GEDCOM_VERSION = "5.5.1"


def export_gedcom(store: GenealogyStore, tree_id: str) -> str:
    tree = store.get_tree(tree_id)
    if tree is None:
        log.warning("Exporting unknown tree %s", tree_id)

    lines: List[str] = [
        "0 HEAD",
        f"1 SOUR {SOURCE_SYSTEM}",
        "1 GEDC",
        f"2 VERS {GEDCOM_VERSION}",
        "2 FORM LINEAGE-LINKED",
        "1 CHAR UTF-8",
        "0 TRLR",
    ]
    return "\n".join(lines) + "\n"


def write_gedcom(store: GenealogyStore, tree_id: str, output_path: Union[str, Path]) -> Path:
    """Write the export to ``output_path`` (UTF-8) and return the path."""
    output_path = Path(output_path)
    output_path.write_text(export_gedcom(store, tree_id), encoding="utf-8")
    log.info("Exported tree %s to %s", tree_id, output_path)
    return output_path
