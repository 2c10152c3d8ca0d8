# src/gedcom_importer/importers/orchestrator.py

"""
Runs one GEDCOM import end to end:

    file -> tokens -> ParsedDocument
         -> sources -> media -> persons -> families
         -> root person on the tree -> commit

Later stages resolve cross-references through the id maps returned by the
earlier ones, so the order is fixed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from gedcom_importer.config import GPConfig, get_config
from gedcom_importer.core.context import ImportContext
from gedcom_importer.core.exceptions import ImportFileError, PipelineError
from gedcom_importer.identity.uuid_factory import normalize_gedcom_id
from gedcom_importer.loader.file_loader import load_file
from gedcom_importer.loader.tree_builder import ParsedDocument, parse_gedcom
from gedcom_importer.logging import get_logger
from gedcom_importer.storage.models import Person, utcnow
from gedcom_importer.storage.repository import GenealogyStore

from .family_importer import import_families
from .media_importer import import_media
from .person_importer import import_persons
from .source_importer import import_sources

log = get_logger(__name__)

STATUS_DONE = "done"
STATUS_ERROR = "error"


@dataclass
class ImportResult:
    status: str
    counts: Dict[str, int] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)
    root_person_id: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_DONE

    def to_dict(self) -> Dict[str, Any]:
        """``{"status": "done", "sources": 1, ...}`` or ``{"status": "error", "errors": [...]}``."""
        if not self.ok:
            return {"status": self.status, "errors": list(self.errors)}
        return {"status": self.status, **self.counts}


def pick_root_person(persons: Mapping[str, Person], root_gedcom_id: str = "1") -> Optional[Person]:
    """The person whose GEDCOM id normalizes to ``root_gedcom_id``, else the first imported."""
    for pointer, person in persons.items():
        if normalize_gedcom_id(pointer) == root_gedcom_id:
            return person
    return next(iter(persons.values()), None)


class GedcomImportService:
    def __init__(self, store: GenealogyStore, config: Optional[GPConfig] = None):
        self.store = store
        self.config = config or get_config()

    def import_file(self, path: Union[str, Path], tree_id: str) -> ImportResult:
        try:
            text = load_file(path)
        except ImportFileError as exc:
            log.error("%s", exc)
            return ImportResult(status=STATUS_ERROR, errors=[str(exc)])

        return self.import_text(text, tree_id)

    def import_text(self, text: str, tree_id: str) -> ImportResult:
        return self.import_document(parse_gedcom(text), tree_id)

    def import_document(self, document: ParsedDocument, tree_id: str) -> ImportResult:
        ctx = ImportContext(
            store=self.store,
            tree_id=tree_id,
            logger=log,
            batch_size=self.config.batch_size,
        )
        log.info("Import into tree %s starting: %s", tree_id, document.counts())

        try:
            sources = import_sources(ctx, document.sources)
            media = import_media(ctx, document.media_objects)
            persons = import_persons(ctx, document.individuals, sources, media, document.notes)
            families = import_families(ctx, document.families, persons)

            root = pick_root_person(persons, self.config.root_gedcom_id)
            if root is not None:
                self._assign_root(tree_id, root)

            self.store.commit()
        except Exception as exc:
            self.store.rollback()
            log.exception("Import into tree %s failed", tree_id)
            raise PipelineError(str(exc)) from exc

        result = ImportResult(
            status=STATUS_DONE,
            counts={
                "sources": len(sources),
                "media": len(media),
                "persons": len(persons),
                "families": len(families),
            },
            root_person_id=root.id if root is not None else None,
        )
        log.info(
            "Import into tree %s completed: %s, %d new person link(s)",
            tree_id,
            result.counts,
            ctx.stats.get("person_links", 0),
        )
        return result

    def _assign_root(self, tree_id: str, root: Person) -> None:
        tree = self.store.get_tree(tree_id)
        if tree is None:
            log.warning("Tree %s not found; root person not assigned", tree_id)
            return
        tree.root_person_id = root.id
        tree.updated_at = utcnow()
        self.store.add(tree)
