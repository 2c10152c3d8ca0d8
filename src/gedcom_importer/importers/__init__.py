from gedcom_importer.importers.family_importer import import_families
from gedcom_importer.importers.media_importer import import_media
from gedcom_importer.importers.orchestrator import (
    GedcomImportService,
    ImportResult,
    pick_root_person,
)
from gedcom_importer.importers.person_importer import import_persons
from gedcom_importer.importers.source_importer import import_sources

__all__ = [
    "GedcomImportService",
    "ImportResult",
    "import_families",
    "import_media",
    "import_persons",
    "import_sources",
    "pick_root_person",
]
