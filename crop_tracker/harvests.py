"""Storing and listing harvests."""

from __future__ import annotations

import sqlite3
from dataclasses import replace

from .fields import field_exists
from .models import Harvest, ValidationError


def add_harvest(conn: sqlite3.Connection, harvest: Harvest) -> Harvest:
    """Validate and store ``harvest``; return it with its new id."""
    if harvest.field_id <= 0:
        raise ValidationError("field_id is required and must be positive")
    if not harvest.crop:
        raise ValidationError("crop is required")
    if harvest.yield_t_per_ha < 0:
        raise ValidationError("yield_t_per_ha must be non-negative")
    if not field_exists(conn, harvest.field_id):
        raise ValidationError("field does not exist")

    with conn:
        cursor = conn.execute(
            "INSERT INTO harvests(field_id, crop, yield_t_per_ha) VALUES(?, ?, ?)",
            (harvest.field_id, harvest.crop, harvest.yield_t_per_ha),
        )
    return replace(harvest, id=cursor.lastrowid)


def list_harvests(conn: sqlite3.Connection) -> list[Harvest]:
    """Return every stored harvest in table order."""
    rows = conn.execute("SELECT id, field_id, crop, yield_t_per_ha FROM harvests")
    return [
        Harvest(id=id_, field_id=field_id, crop=crop, yield_t_per_ha=yield_)
        for id_, field_id, crop, yield_ in rows
    ]