"""Storing and listing sowings."""

from __future__ import annotations

import sqlite3
from dataclasses import replace

from .fields import field_exists
from .models import Sowing, ValidationError


def create_sowing(conn: sqlite3.Connection, sowing: Sowing) -> Sowing:
    """Validate and store ``sowing``; return it with its new id."""
    if sowing.field_id <= 0:
        raise ValidationError("field_id is required and must be positive")
    if not sowing.crop:
        raise ValidationError("crop is required")
    if not sowing.sowed_at:
        raise ValidationError("sowed_at is required")
    if not field_exists(conn, sowing.field_id):
        raise ValidationError("field does not exist")

    with conn:
        cursor = conn.execute(
            "INSERT INTO sowings(field_id, crop, sowed_at) VALUES(?, ?, ?)",
            (sowing.field_id, sowing.crop, sowing.sowed_at),
        )
    return replace(sowing, id=cursor.lastrowid)


def list_sowings(conn: sqlite3.Connection) -> list[Sowing]:
    """Return every stored sowing in table order."""
    rows = conn.execute("SELECT id, field_id, crop, sowed_at FROM sowings")
    return [
        Sowing(id=id_, field_id=field_id, crop=crop, sowed_at=sowed_at)
        for id_, field_id, crop, sowed_at in rows
    ]