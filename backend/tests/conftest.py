from pathlib import Path
import os
import pytest

# Point the app at a throwaway SQLite file before `jobdetails` is imported.
TEST_DB = Path(__file__).resolve().parent / "test_app.db"
os.environ.setdefault("DATABASE_URL", f"sqlite:///{TEST_DB}")
if TEST_DB.exists():
    TEST_DB.unlink()


@pytest.fixture(autouse=True)
def reset_db():
    """Give every test empty entity tables."""
    from jobdetails.database import create_db_and_tables, drop_db_and_tables
    drop_db_and_tables()
    create_db_and_tables()
    yield


@pytest.fixture
def session():
    from sqlmodel import Session
    from jobdetails.database import engine
    with Session(engine) as s:
        yield s
