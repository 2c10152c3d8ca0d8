# src/gedcom_importer/importers/person_importer.py

from __future__ import annotations

import re
from typing import Dict, Mapping, Optional, Tuple

from gedcom_importer.core.context import ImportContext
from gedcom_importer.dates.parser import parse_timestamp
from gedcom_importer.events.event import (
    BAPTISM_TAGS,
    BIRTH_TAGS,
    DEATH_TAGS,
    extract_event,
)
from gedcom_importer.identity.uuid_factory import is_pointer, normalize_gedcom_id
from gedcom_importer.loader.tags import find_all_tags, find_tag, find_tag_value, find_time_value
from gedcom_importer.loader.tree_builder import GEDCOMNode
from gedcom_importer.storage.models import (
    MediaObject,
    Person,
    PersonMedia,
    PersonSource,
    Source,
)

from .batching import flush_batch

# "Jean Pierre /Dupont/" -> ("Jean Pierre", "Dupont")
_NAME_PATTERN = re.compile(r"^(.*?)\s*/(.*?)/")


# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------

def split_name(raw: Optional[str]) -> Tuple[str, str]:
    """Split a NAME value into (given names, surname); no slashes means no surname."""
    raw = raw or ""
    m = _NAME_PATTERN.match(raw)
    if m:
        return m.group(1).strip(), m.group(2).strip()
    return raw.strip(), ""


def _name_parts(name_node: GEDCOMNode) -> Tuple[str, str]:
    given, surname = split_name(name_node.value)

    givn = find_tag_value(name_node.children, "GIVN")
    if givn:
        given = givn.strip()
    surn = find_tag_value(name_node.children, "SURN")
    if surn:
        surname = surn.strip()

    return given, surname


def _is_maiden(name_node: GEDCOMNode) -> bool:
    name_type = find_tag_value(name_node.children, "TYPE")
    return bool(name_type) and name_type.strip().lower() == "maiden"


def apply_names(person: Person, children) -> None:
    names = find_all_tags(children, "NAME")
    if not names:
        return

    given, surname = _name_parts(names[0])
    tokens = given.split()
    if tokens:
        person.first_name = tokens[0]
        person.middle_name = " ".join(tokens[1:]) or None
    if surname:
        person.last_name = surname

    for extra in names[1:]:
        if _is_maiden(extra):
            _, maiden = _name_parts(extra)
            if maiden:
                person.maiden_name = maiden
            break


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

def _keep(current, new):
    return new if new is not None else current


def apply_events(person: Person, children) -> None:
    birth = extract_event(children, BIRTH_TAGS)
    if birth is not None:
        person.birth_date = _keep(person.birth_date, birth.date)
        person.birth_date_original = _keep(person.birth_date_original, birth.date_original)
        person.birth_time = _keep(person.birth_time, birth.time)
        person.birth_place = _keep(person.birth_place, birth.place)
        person.birth_latitude = _keep(person.birth_latitude, birth.latitude)
        person.birth_longitude = _keep(person.birth_longitude, birth.longitude)

    baptism = extract_event(children, BAPTISM_TAGS)
    if baptism is not None:
        person.baptism_date = _keep(person.baptism_date, baptism.date)
        person.baptism_date_original = _keep(person.baptism_date_original, baptism.date_original)
        person.baptism_time = _keep(person.baptism_time, baptism.time)
        person.baptism_place = _keep(person.baptism_place, baptism.place)
        person.baptism_latitude = _keep(person.baptism_latitude, baptism.latitude)
        person.baptism_longitude = _keep(person.baptism_longitude, baptism.longitude)

    death = extract_event(children, DEATH_TAGS)
    if death is not None:
        person.death_date = _keep(person.death_date, death.date)
        person.death_date_original = _keep(person.death_date_original, death.date_original)
        person.death_time = _keep(person.death_time, death.time)
        person.death_place = _keep(person.death_place, death.place)
        person.death_latitude = _keep(person.death_latitude, death.latitude)
        person.death_longitude = _keep(person.death_longitude, death.longitude)


# ---------------------------------------------------------------------------
# Notes / timestamps
# ---------------------------------------------------------------------------

def resolve_note(children, notes: Mapping[str, GEDCOMNode]) -> Optional[str]:
    """
    Text of the first NOTE child. ``1 NOTE @N3@`` is replaced by the text of
    the level-0 NOTE record it points to, when that record exists.
    """
    text = find_tag_value(children, "NOTE")
    if text and is_pointer(text):
        record = notes.get(text.strip())
        if record is not None:
            return find_tag_value([record], "NOTE")
    return text


def _change_timestamp(children, tag: str):
    block = find_tag(children, tag)
    if block is None:
        return None
    return parse_timestamp(
        find_tag_value(block.children, "DATE"),
        find_time_value(block.children),
    )


def apply_misc(person: Person, children, notes: Mapping[str, GEDCOMNode]) -> None:
    sex = find_tag_value(children, "SEX")
    if sex:
        person.gender = sex.strip()

    occupation = find_tag_value(children, "OCCU")
    if occupation:
        person.occupation = occupation

    note = resolve_note(children, notes)
    if note:
        person.notes = note

    created = _change_timestamp(children, "_CREA")
    if created is not None:
        person.created_time = created

    changed = _change_timestamp(children, "CHAN")
    if changed is not None:
        person.changed_time = changed


# ---------------------------------------------------------------------------
# Media / source links
# ---------------------------------------------------------------------------

def link_media(ctx: ImportContext, person: Person, children, media_map: Mapping[str, MediaObject]) -> int:
    linked = 0
    seen = set()
    for child in find_all_tags(children, "OBJE"):
        media = media_map.get(child.value or "")
        if media is None or media.id in seen:
            continue
        seen.add(media.id)
        if ctx.store.has_person_media_link(person.id, media.id):
            continue
        ctx.store.add(PersonMedia(person_id=person.id, media_id=media.id))
        linked += 1
    return linked


def link_sources(ctx: ImportContext, person: Person, children, source_map: Mapping[str, Source]) -> int:
    linked = 0
    seen = set()
    for child in find_all_tags(children, "SOUR"):
        source = source_map.get(child.value or "")
        if source is None or source.id in seen:
            continue
        seen.add(source.id)
        if ctx.store.has_person_source_link(person.id, source.id):
            continue
        ctx.store.add(PersonSource(person_id=person.id, source_id=source.id))
        linked += 1
    return linked


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def import_persons(
    ctx: ImportContext,
    records: Mapping[str, GEDCOMNode],
    source_map: Mapping[str, Source],
    media_map: Mapping[str, MediaObject],
    notes: Optional[Mapping[str, GEDCOMNode]] = None,
) -> Dict[str, Person]:
    """
    Upsert every INDI record by ``(gedcom_id, tree_id)``.

    Fields missing from the record keep their stored value on re-import.
    Links to already-imported media and sources are added once per pair.
    """
    notes = notes or {}
    imported: Dict[str, Person] = {}
    links = 0

    with ctx.store.no_autoflush():
        for processed, (pointer, node) in enumerate(records.items(), start=1):
            gedcom_id = normalize_gedcom_id(pointer)
            person = ctx.store.find_person_by_gedcom_id(gedcom_id, ctx.tree_id)
            if person is None:
                person = Person(tree_id=ctx.tree_id, gedcom_id=gedcom_id)

            children = node.children
            apply_names(person, children)
            apply_events(person, children)
            apply_misc(person, children, notes)

            ctx.store.add(person)
            imported[pointer] = person

            links += link_media(ctx, person, children, media_map)
            links += link_sources(ctx, person, children, source_map)

            flush_batch(ctx, processed)

    ctx.store.flush()
    ctx.stats["person_links"] = links
    ctx.logger.info("Imported %d person(s), %d new link(s)", len(imported), links)
    return imported
