# src/gedcom_importer/sosa/calculator.py

"""
Sosa-Stradonitz numbering of a tree's ancestors.

    root          -> 1
    father of n   -> 2n
    mother of n   -> 2n + 1

Numbers are Python ints (unbounded) and stored as decimal strings, so deep
pedigrees past 2**63 keep exact values.
"""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from gedcom_importer.config import get_config
from gedcom_importer.core.exceptions import SosaPersistenceError
from gedcom_importer.logging import get_logger
from gedcom_importer.storage.repository import GenealogyStore, ParentPair

log = get_logger(__name__)


class SosaState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    TRAVERSING = "traversing"
    PERSISTING = "persisting"


def compute_sosa_numbers(root_id: str, parents: Mapping[str, ParentPair]) -> Dict[str, int]:
    """
    Breadth-first walk up the parent graph from ``root_id``.

    Only parents present in ``parents`` are followed. A person reachable
    through several paths (pedigree collapse) keeps the number of the path
    visited last. Returns an empty mapping when the root is unknown.
    """
    if root_id not in parents:
        return {}

    numbers: Dict[str, int] = {}
    # A path longer than the number of persons can only come from a parent cycle.
    max_generation = len(parents)
    queue = deque([(root_id, 1, 0)])

    while queue:
        person_id, sosa, generation = queue.popleft()
        numbers[person_id] = sosa

        if generation >= max_generation:
            log.warning("Parent cycle detected at %s; stopping this branch", person_id)
            continue

        father_id, mother_id = parents[person_id]
        if father_id and father_id in parents:
            queue.append((father_id, sosa * 2, generation + 1))
        if mother_id and mother_id in parents:
            queue.append((mother_id, sosa * 2 + 1, generation + 1))

    return numbers


def _chunks(pairs: List[Tuple[str, str]], size: int) -> Iterator[List[Tuple[str, str]]]:
    for start in range(0, len(pairs), size):
        yield pairs[start:start + size]


class SosaCalculator:
    """
    Recomputes ``Person.sosa`` for a whole tree.

    Previous numbers are cleared first; the new ones are written in a single
    transaction, so a failed write leaves the tree without numbers rather
    than partially numbered.
    """

    def __init__(self, store: GenealogyStore, batch_size: Optional[int] = None):
        self.store = store
        self.batch_size = batch_size or get_config().sosa_batch_size
        self.state = SosaState.IDLE

    def calculate(self, tree_id: str) -> None:
        try:
            self._calculate(tree_id)
        finally:
            self.state = SosaState.IDLE

    def _calculate(self, tree_id: str) -> None:
        self.state = SosaState.LOADING
        tree = self.store.get_tree(tree_id)
        if tree is None or not tree.root_person_id:
            log.info("Tree %s has no root person; nothing to number", tree_id)
            return
        root_id = tree.root_person_id

        parents = self.store.person_parent_projection(tree_id)
        self.store.clear_sosa(tree_id)
        self.store.commit()

        if root_id not in parents:
            log.warning("Root person %s is not part of tree %s", root_id, tree_id)
            return

        self.state = SosaState.TRAVERSING
        numbers = compute_sosa_numbers(root_id, parents)

        self.state = SosaState.PERSISTING
        pairs = [(pid, str(sosa)) for pid, sosa in numbers.items()]
        try:
            for chunk in _chunks(pairs, self.batch_size):
                self.store.update_sosa_many(chunk)
            self.store.commit()
        except Exception as exc:
            self.store.rollback()
            log.exception("Sosa update for tree %s failed; rolled back", tree_id)
            raise SosaPersistenceError(str(exc)) from exc

        log.info("Numbered %d ancestor(s) in tree %s", len(pairs), tree_id)
