"""SQLite settings database: WAL connection and schema upgrades."""

import sqlite3
from pathlib import Path

# Schema steps, applied in order. The database's user_version records how
# many have run.
SCHEMA_STEPS: list[tuple[str, ...]] = [
    (
        "CREATE TABLE IF NOT EXISTS settings ("
        "  key TEXT PRIMARY KEY,"
        "  value TEXT NOT NULL,"
        "  updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP"
        ")",
    ),
]


def connect(db_path: str | Path) -> sqlite3.Connection:
    """Open the settings database in WAL mode with an up-to-date schema."""
    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    upgrade_schema(conn)
    return conn


def schema_version(conn: sqlite3.Connection) -> int:
    return conn.execute("PRAGMA user_version").fetchone()[0]


def upgrade_schema(conn: sqlite3.Connection) -> int:
    """Apply pending schema steps. Returns how many were applied."""
    current = schema_version(conn)
    pending = SCHEMA_STEPS[current:]
    for version, statements in enumerate(pending, start=current + 1):
        for stmt in statements:
            conn.execute(stmt)
        conn.execute(f"PRAGMA user_version = {version}")
        conn.commit()
    return len(pending)
