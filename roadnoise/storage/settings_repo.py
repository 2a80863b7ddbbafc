"""Repository for persisted local settings.

The write credential is the only durable client-side state; entry history
is always re-fetched.
"""

import sqlite3

API_KEY = "key"


def get_setting(conn: sqlite3.Connection, key: str) -> str | None:
    """Get a setting value."""
    row = conn.execute(
        "SELECT value FROM settings WHERE key = ?", (key,)
    ).fetchone()
    if row is None:
        return None
    return row[0]


def set_setting(conn: sqlite3.Connection, key: str, value: str) -> None:
    """Set a setting value."""
    conn.execute(
        "INSERT INTO settings (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP) "
        "ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = CURRENT_TIMESTAMP",
        (key, value),
    )
    conn.commit()


def delete_setting(conn: sqlite3.Connection, key: str) -> bool:
    cursor = conn.execute("DELETE FROM settings WHERE key = ?", (key,))
    conn.commit()
    return cursor.rowcount > 0


def get_key(conn: sqlite3.Connection) -> str:
    return get_setting(conn, API_KEY) or ""


def set_key(conn: sqlite3.Connection, value: str) -> None:
    set_setting(conn, API_KEY, value.strip())


def clear_key(conn: sqlite3.Connection) -> bool:
    return delete_setting(conn, API_KEY)
