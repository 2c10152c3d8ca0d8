# src/gedcom_importer/importers/media_importer.py

from __future__ import annotations

from pathlib import PureWindowsPath
from typing import Dict, Mapping, Optional

from gedcom_importer.core.context import ImportContext
from gedcom_importer.identity.uuid_factory import normalize_gedcom_id
from gedcom_importer.loader.tags import find_tag, find_tag_value
from gedcom_importer.loader.tree_builder import GEDCOMNode
from gedcom_importer.storage.models import MEDIA_TYPE_DOCUMENT, MEDIA_TYPE_PHOTO, MediaObject

from .batching import flush_batch

FORM_TO_MEDIA_TYPE = {
    "jpg": MEDIA_TYPE_PHOTO,
    "jpeg": MEDIA_TYPE_PHOTO,
    "png": MEDIA_TYPE_PHOTO,
    "pdf": MEDIA_TYPE_DOCUMENT,
}


def media_type_for_form(form: Optional[str]) -> str:
    """Map a FORM value (jpg, PDF, ...) to a media type; anything else is a photo."""
    if not form:
        return MEDIA_TYPE_PHOTO
    return FORM_TO_MEDIA_TYPE.get(form.strip().lower(), MEDIA_TYPE_PHOTO)


def file_basename(path: str) -> str:
    """Last path segment, for both ``/`` and ``\\`` separated paths."""
    return PureWindowsPath(path.strip()).name


def apply_media_fields(media: MediaObject, node: GEDCOMNode, file_value: str) -> MediaObject:
    file_node = find_tag(node.children, "FILE")
    file_children = file_node.children if file_node is not None else []

    media.file_name = file_basename(file_value)
    media.file_path = file_value

    # 5.5 puts FORM/TITL on the record, 5.5.1 nests them under FILE.
    form = find_tag_value(node.children, "FORM") or find_tag_value(file_children, "FORM")
    media.media_type = media_type_for_form(form)

    title = find_tag_value(node.children, "TITL") or find_tag_value(file_children, "TITL")
    if title:
        media.title = title

    return media


def import_media(ctx: ImportContext, records: Mapping[str, GEDCOMNode]) -> Dict[str, MediaObject]:
    """
    Upsert every OBJE record that names a FILE.

    Records without FILE have nothing to point at and are skipped.
    """
    imported: Dict[str, MediaObject] = {}
    processed = 0

    with ctx.store.no_autoflush():
        for pointer, node in records.items():
            file_value = find_tag_value(node.children, "FILE")
            if not file_value or not file_value.strip():
                ctx.logger.debug("Skipping media %s without FILE", pointer)
                continue

            gedcom_id = normalize_gedcom_id(pointer)
            media = ctx.store.find_media_by_gedcom_id(gedcom_id, ctx.tree_id)
            if media is None:
                media = MediaObject(tree_id=ctx.tree_id, gedcom_id=gedcom_id, file_name="")

            apply_media_fields(media, node, file_value)
            ctx.store.add(media)
            imported[pointer] = media

            processed += 1
            flush_batch(ctx, processed)

    ctx.store.flush()
    ctx.logger.info("Imported %d media object(s)", len(imported))
    return imported
