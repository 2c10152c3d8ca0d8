"""
Engine and session helpers for the genealogy store.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from gedcom_importer.config import get_config
from gedcom_importer.logging import get_logger
from gedcom_importer.storage import models  # noqa: F401  (registers tables on SQLModel.metadata)
from gedcom_importer.storage.repository import GenealogyStore

log = get_logger(__name__)


def _is_memory_url(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


def get_engine(url: Optional[str] = None, echo: Optional[bool] = None) -> Engine:
    """
    Create an engine for ``url`` (default: ``database.url`` from config).

    In-memory SQLite shares one connection so every session sees the same data.
    """
    cfg = get_config()
    url = url or cfg.database_url
    if echo is None:
        echo = bool(cfg.database.get("echo", False))

    if _is_memory_url(url):
        return create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(url, echo=echo)


def init_db(engine: Engine) -> None:
    """Create all tables that do not exist yet."""
    SQLModel.metadata.create_all(engine)
    log.debug("Database schema ready on %s", engine.url)


@contextmanager
def open_store(engine: Engine) -> Iterator[GenealogyStore]:
    """Yield a GenealogyStore bound to a fresh session, closed on exit."""
    with Session(engine) as session:
        yield GenealogyStore(session)
