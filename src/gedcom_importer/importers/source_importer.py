# src/gedcom_importer/importers/source_importer.py

from __future__ import annotations

from typing import Dict, Mapping

from gedcom_importer.core.context import ImportContext
from gedcom_importer.identity.uuid_factory import normalize_gedcom_id
from gedcom_importer.loader.tags import find_tag_value
from gedcom_importer.loader.tree_builder import GEDCOMNode
from gedcom_importer.storage.models import Source

from .batching import flush_batch

DEFAULT_TITLE = "Untitled Source"


def apply_source_fields(source: Source, node: GEDCOMNode) -> Source:
    """Copy TITL / AUTH / PUBL from a SOUR record onto the entity."""
    source.title = find_tag_value(node.children, "TITL") or DEFAULT_TITLE

    author = find_tag_value(node.children, "AUTH")
    if author:
        source.author = author

    publication = find_tag_value(node.children, "PUBL")
    if publication:
        source.publication = publication

    return source


def import_sources(ctx: ImportContext, records: Mapping[str, GEDCOMNode]) -> Dict[str, Source]:
    """
    Upsert every SOUR record of the document into ``ctx.tree_id``.

    Returns ``{"@S1@": Source, ...}`` in file order.
    """
    imported: Dict[str, Source] = {}

    with ctx.store.no_autoflush():
        for processed, (pointer, node) in enumerate(records.items(), start=1):
            gedcom_id = normalize_gedcom_id(pointer)
            source = ctx.store.find_source_by_gedcom_id(gedcom_id, ctx.tree_id)
            if source is None:
                source = Source(tree_id=ctx.tree_id, gedcom_id=gedcom_id)

            apply_source_fields(source, node)
            ctx.store.add(source)
            imported[pointer] = source

            flush_batch(ctx, processed)

    ctx.store.flush()
    ctx.logger.info("Imported %d source(s)", len(imported))
    return imported
