# src/gedcom_importer/importers/family_importer.py

from __future__ import annotations

from typing import Dict, Mapping

from gedcom_importer.core.context import ImportContext
from gedcom_importer.events.event import MARRIAGE_TAGS, extract_event
from gedcom_importer.loader.tags import find_all_tag_values, find_tag_value
from gedcom_importer.loader.tree_builder import GEDCOMNode
from gedcom_importer.storage.models import Family, Person

from .batching import flush_batch


def build_family(ctx: ImportContext, node: GEDCOMNode, person_map: Mapping[str, Person]) -> Family:
    """
    Build a new Family from a FAM record and back-fill the parents of its children.

    Children resolved through ``person_map`` get ``father_id`` / ``mother_id``
    set from the spouses that could be resolved.
    """
    children = node.children
    family = Family(tree_id=ctx.tree_id)

    husband = person_map.get((find_tag_value(children, "HUSB") or "").strip())
    if husband is not None:
        family.husband_id = husband.id

    wife = person_map.get((find_tag_value(children, "WIFE") or "").strip())
    if wife is not None:
        family.wife_id = wife.id

    for child_ref in find_all_tag_values(children, "CHIL"):
        child = person_map.get((child_ref or "").strip())
        if child is None:
            continue
        if family.husband_id:
            child.father_id = family.husband_id
        if family.wife_id:
            child.mother_id = family.wife_id
        ctx.store.add(child)

    marriage = extract_event(children, MARRIAGE_TAGS)
    if marriage is not None:
        family.marriage_date = marriage.date
        family.marriage_date_original = marriage.date_original
        family.marriage_time = marriage.time
        family.marriage_place = marriage.place
        family.marriage_latitude = marriage.latitude
        family.marriage_longitude = marriage.longitude

    return family


def import_families(
    ctx: ImportContext,
    records: Mapping[str, GEDCOMNode],
    person_map: Mapping[str, Person],
) -> Dict[str, Family]:
    """
    Insert one Family per FAM record.

    Families carry no GEDCOM id, so importing the same file again adds a
    second copy of each family.
    """
    imported: Dict[str, Family] = {}

    for processed, (pointer, node) in enumerate(records.items(), start=1):
        family = build_family(ctx, node, person_map)
        ctx.store.add(family)
        imported[pointer] = family
        flush_batch(ctx, processed)

    ctx.store.flush()
    ctx.logger.info("Imported %d family(ies)", len(imported))
    return imported
