import os, sys
import pytest
from fastapi.testclient import TestClient
import tempfile

# Ensure app import path
backend_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if backend_root not in sys.path:
    sys.path.insert(0, backend_root)

# Isolated SQLite file for the whole run; must be set before the engine is built
_db_dir = tempfile.mkdtemp(prefix="event-calendar-tests-")
os.environ["DATABASE_URL"] = f"sqlite+pysqlite:///{os.path.join(_db_dir, 'test.db')}"
os.environ["EVENT_STORAGE"] = "sql"

from app.main import app  # noqa: E402
from app.db.session import engine, Base  # noqa: E402
from app.client.event_store import query_cache  # noqa: E402

@pytest.fixture(scope="function")  # fresh DB per test
def client():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    query_cache.clear()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def event_payload():
    return {
        "title": "Team Sync",
        "description": "Weekly planning",
        "date": "2025-03-10",
        "time": "09:30",
        "category": "work",
    }
