"""SQLite storage setup."""

from __future__ import annotations

import sqlite3

# Every table gets an autoincrementing integer ``id``; these are the rest.
_TABLES: dict[str, tuple[tuple[str, str], ...]] = {
    "fields": (
        ("name", "TEXT"),
        ("area_ha", "REAL"),
        ("region", "TEXT"),
    ),
    "sowings": (
        ("field_id", "INTEGER"),
        ("crop", "TEXT"),
        ("sowed_at", "TEXT"),
    ),
    "harvests": (
        ("field_id", "INTEGER"),
        ("crop", "TEXT"),
        ("yield_t_per_ha", "REAL"),
    ),
}


def _create_statement(table: str, columns: tuple[tuple[str, str], ...]) -> str:
    definitions = ["id INTEGER PRIMARY KEY AUTOINCREMENT"]
    definitions.extend(f"{name} {sql_type}" for name, sql_type in columns)
    return f"CREATE TABLE IF NOT EXISTS {table} ({', '.join(definitions)})"


def init_db(path: str) -> sqlite3.Connection:
    """Open the database at ``path`` and make sure its tables exist."""
    conn = sqlite3.connect(path, check_same_thread=False)
    create_tables(conn)
    return conn


def create_tables(conn: sqlite3.Connection) -> None:
    """Create the fields, sowings and harvests tables if they are missing."""
    with conn:
        for table, columns in _TABLES.items():
            conn.execute(_create_statement(table, columns))