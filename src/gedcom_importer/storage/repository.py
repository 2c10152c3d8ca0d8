"""
GenealogyStore: the persistence operations the importers and the Sosa
calculator rely on.

One store wraps one SQLModel ``Session``; all writes of a run go through it
and become visible to other connections on ``commit()``.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy import bindparam, func, update
from sqlmodel import Session, SQLModel, col, select

from gedcom_importer.storage.models import (
    Family,
    MediaObject,
    Person,
    PersonMedia,
    PersonSource,
    Source,
    Tree,
)

ParentPair = Tuple[Optional[str], Optional[str]]

_persons = Person.__table__  # type: ignore[attr-defined]


class GenealogyStore:
    def __init__(self, session: Session):
        self.session = session

    # ------------------------------------------------------------------ #
    # Unit of work
    # ------------------------------------------------------------------ #

    def add(self, entity: SQLModel) -> None:
        self.session.add(entity)

    def flush(self) -> None:
        self.session.flush()

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

    def no_autoflush(self):
        """Hold pending rows until an explicit ``flush()`` (batched imports)."""
        return self.session.no_autoflush

    # ------------------------------------------------------------------ #
    # Trees
    # ------------------------------------------------------------------ #

    def get_tree(self, tree_id: str) -> Optional[Tree]:
        return self.session.get(Tree, tree_id)

    def find_tree_by_name(self, name: str) -> Optional[Tree]:
        return self.session.exec(select(Tree).where(Tree.name == name)).first()

    def create_tree(self, name: str, description: Optional[str] = None) -> Tree:
        tree = Tree(name=name, description=description)
        self.session.add(tree)
        self.session.commit()
        self.session.refresh(tree)
        return tree

    # ------------------------------------------------------------------ #
    # Lookup by normalized GEDCOM id (scoped to a tree)
    # ------------------------------------------------------------------ #

    def find_person_by_gedcom_id(self, gedcom_id: Optional[str], tree_id: str) -> Optional[Person]:
        if not gedcom_id:
            return None
        stmt = select(Person).where(Person.gedcom_id == gedcom_id, Person.tree_id == tree_id)
        return self.session.exec(stmt).first()

    def find_source_by_gedcom_id(self, gedcom_id: Optional[str], tree_id: str) -> Optional[Source]:
        if not gedcom_id:
            return None
        stmt = select(Source).where(Source.gedcom_id == gedcom_id, Source.tree_id == tree_id)
        return self.session.exec(stmt).first()

    def find_media_by_gedcom_id(self, gedcom_id: Optional[str], tree_id: str) -> Optional[MediaObject]:
        if not gedcom_id:
            return None
        stmt = select(MediaObject).where(
            MediaObject.gedcom_id == gedcom_id, MediaObject.tree_id == tree_id
        )
        return self.session.exec(stmt).first()

    # ------------------------------------------------------------------ #
    # Link tables
    # ------------------------------------------------------------------ #

    def has_person_media_link(self, person_id: str, media_id: str) -> bool:
        stmt = select(PersonMedia).where(
            PersonMedia.person_id == person_id, PersonMedia.media_id == media_id
        )
        return self.session.exec(stmt).first() is not None

    def has_person_source_link(self, person_id: str, source_id: str) -> bool:
        stmt = select(PersonSource).where(
            PersonSource.person_id == person_id, PersonSource.source_id == source_id
        )
        return self.session.exec(stmt).first() is not None

    def media_for_person(self, person_id: str) -> List[PersonMedia]:
        return list(self.session.exec(select(PersonMedia).where(PersonMedia.person_id == person_id)))

    def sources_for_person(self, person_id: str) -> List[PersonSource]:
        return list(self.session.exec(select(PersonSource).where(PersonSource.person_id == person_id)))

    # ------------------------------------------------------------------ #
    # Tree listings / counts
    # ------------------------------------------------------------------ #

    def persons_in_tree(self, tree_id: str) -> List[Person]:
        return list(self.session.exec(select(Person).where(Person.tree_id == tree_id)))

    def families_in_tree(self, tree_id: str) -> List[Family]:
        return list(self.session.exec(select(Family).where(Family.tree_id == tree_id)))

    def count_persons(self, tree_id: str) -> int:
        stmt = select(func.count()).select_from(Person).where(Person.tree_id == tree_id)
        return self.session.exec(stmt).one()

    def count_families(self, tree_id: str) -> int:
        stmt = select(func.count()).select_from(Family).where(Family.tree_id == tree_id)
        return self.session.exec(stmt).one()

    def count_sources(self, tree_id: str) -> int:
        stmt = select(func.count()).select_from(Source).where(Source.tree_id == tree_id)
        return self.session.exec(stmt).one()

    def count_media(self, tree_id: str) -> int:
        stmt = select(func.count()).select_from(MediaObject).where(MediaObject.tree_id == tree_id)
        return self.session.exec(stmt).one()

    # ------------------------------------------------------------------ #
    # Sosa numbering
    # ------------------------------------------------------------------ #

    def person_parent_projection(self, tree_id: str) -> Dict[str, ParentPair]:
        """``person id -> (father id, mother id)`` for every person of the tree."""
        stmt = select(Person.id, Person.father_id, Person.mother_id).where(
            Person.tree_id == tree_id
        )
        return {pid: (father, mother) for pid, father, mother in self.session.exec(stmt)}

    def clear_sosa(self, tree_id: str) -> None:
        self.session.flush()
        stmt = update(_persons).where(_persons.c.tree_id == tree_id).values(sosa=None)
        self.session.connection().execute(stmt)

    def update_sosa_many(self, rows: Iterable[Tuple[str, str]]) -> None:
        """Write ``(person id, sosa)`` pairs as one executemany UPDATE."""
        params = [{"b_id": pid, "b_sosa": value} for pid, value in rows]
        if not params:
            return
        stmt = (
            update(_persons)
            .where(_persons.c.id == bindparam("b_id"))
            .values(sosa=bindparam("b_sosa"))
        )
        self.session.connection().execute(stmt, params)

    def sosa_numbers(self, tree_id: str) -> Dict[str, int]:
        """``person id -> Sosa number`` for the numbered persons of a tree."""
        stmt = select(Person.id, Person.sosa).where(
            Person.tree_id == tree_id, col(Person.sosa).is_not(None)
        )
        return {pid: int(sosa) for pid, sosa in self.session.exec(stmt)}
