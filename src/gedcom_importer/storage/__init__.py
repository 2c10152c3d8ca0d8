from gedcom_importer.storage.database import get_engine, init_db, open_store
from gedcom_importer.storage.models import (
    MEDIA_TYPE_DOCUMENT,
    MEDIA_TYPE_PHOTO,
    Family,
    MediaObject,
    Person,
    PersonMedia,
    PersonSource,
    Source,
    Tree,
)
from gedcom_importer.storage.repository import GenealogyStore

__all__ = [
    "MEDIA_TYPE_DOCUMENT",
    "MEDIA_TYPE_PHOTO",
    "Family",
    "GenealogyStore",
    "MediaObject",
    "Person",
    "PersonMedia",
    "PersonSource",
    "Source",
    "Tree",
    "get_engine",
    "init_db",
    "open_store",
]
