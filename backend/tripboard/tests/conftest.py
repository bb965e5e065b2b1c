"""
Shared test fixtures.

Settings are read at import time, so the database and upload directory are
pointed at a temporary location before anything from tripboard is imported.
"""
import os
import shutil
import tempfile

import pytest

_TMP_DIR = tempfile.mkdtemp(prefix="tripboard-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["UPLOAD_DIR"] = os.path.join(_TMP_DIR, "uploads")

from fastapi.testclient import TestClient  # noqa: E402
from tripboard.core.config import settings  # noqa: E402
from tripboard.db.base import Base  # noqa: E402
from tripboard.db.session import SessionLocal, engine, init_db  # noqa: E402


@pytest.fixture(autouse=True)
def clean_store():
    """Start every test with empty tables and an empty upload directory."""
    Base.metadata.drop_all(bind=engine)
    init_db()
    shutil.rmtree(settings.UPLOAD_DIR, ignore_errors=True)
    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    yield


@pytest.fixture
def db_session():
    """Provide a session against the empty test database."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    """TestClient with startup hooks run (tables created, members seeded)."""
    from tripboard.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def stored_files():
    """Callable listing files currently in the upload directory."""
    def _list():
        return sorted(os.listdir(settings.UPLOAD_DIR))
    return _list


def pytest_sessionfinish(session, exitstatus):
    engine.dispose()
    shutil.rmtree(_TMP_DIR, ignore_errors=True)
