"""Storing and listing fields."""

from __future__ import annotations

import sqlite3
from dataclasses import replace

from .models import Field, ValidationError


def create_field(conn: sqlite3.Connection, field: Field) -> Field:
    """Validate and store ``field``; return it with its new id."""
    if not field.name:
        raise ValidationError("name is required")
    if field.area_ha <= 0:
        raise ValidationError("area_ha must be positive")
    if not field.region:
        raise ValidationError("region is required")

    with conn:
        cursor = conn.execute(
            "INSERT INTO fields(name, area_ha, region) VALUES(?, ?, ?)",
            (field.name, field.area_ha, field.region),
        )
    return replace(field, id=cursor.lastrowid)


def list_fields(conn: sqlite3.Connection) -> list[Field]:
    """Return every stored field in table order."""
    rows = conn.execute("SELECT id, name, area_ha, region FROM fields")
    return [Field(id=id_, name=name, area_ha=area, region=region) for id_, name, area, region in rows]


def field_exists(conn: sqlite3.Connection, field_id: int) -> bool:
    """Tell whether a field with ``field_id`` is stored."""
    (exists,) = conn.execute(
        "SELECT EXISTS(SELECT 1 FROM fields WHERE id = ?)", (field_id,)
    ).fetchone()
    return bool(exists)