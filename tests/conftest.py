import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from sqlmodel import Session  # noqa: E402

from gedcom_importer.storage import GenealogyStore, get_engine, init_db  # noqa: E402


@pytest.fixture
def engine():
    # In-memory SQLite shared through a StaticPool.
    eng = get_engine("sqlite://", echo=False)
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as s:
        yield s


@pytest.fixture
def store(session):
    return GenealogyStore(session)


@pytest.fixture
def tree(store):
    return store.create_tree("Test tree")
