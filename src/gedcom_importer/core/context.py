from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from gedcom_importer.storage.repository import GenealogyStore


@dataclass
class ImportContext:
    """
    Shared state for one import run.
    Passed from the orchestrator to each record importer.
    """

    store: "GenealogyStore"
    tree_id: str
    logger: Any

    batch_size: int = 20
    stats: Dict[str, Any] = field(default_factory=dict)
