"""Simple migration runner for SQLite using provided SQL files in migrations/"""
from pathlib import Path
import sqlite3
import sys

BASE = Path(__file__).parent
if str(BASE) not in sys.path:
    sys.path.insert(0, str(BASE))
from jobdetails.config import settings

MIGRATIONS = sorted((BASE / "migrations").glob("*.sql"))


def sqlite_path(database_url: str) -> Path:
    """Return the file path of a `sqlite:///` URL."""
    prefix = "sqlite:///"
    if not database_url.startswith(prefix):
        raise SystemExit(f"run_migrations only supports SQLite URLs, got {database_url}")
    return Path(database_url[len(prefix):])


def run():
    """Execute SQL migration files against the configured SQLite database.

    The function applies every `migrations/*.sql` file in lexical
    order. Each file is idempotent so re-running is safe.
    """
    db_path = sqlite_path(settings.DATABASE_URL)
    print("Using database:", db_path)
    conn = sqlite3.connect(db_path)
    cur = conn.cursor()
    for m in MIGRATIONS:
        print("Applying:", m.name)
        sql = m.read_text(encoding="utf-8")
        cur.executescript(sql)
    conn.commit()
    conn.close()
    print("Migrations applied.")

if __name__ == '__main__':
    run()
