"""HTTP application and command-line entry point."""

from __future__ import annotations

import argparse
import json
import logging
import sqlite3
import threading
from collections.abc import Iterable
from typing import Any

from flask import Flask, jsonify, request

from .db import init_db
from .fields import create_field, list_fields
from .harvests import add_harvest, list_harvests
from .models import Field, Harvest, Sowing, ValidationError
from .sowings import create_sowing, list_sowings

log = logging.getLogger(__name__)


def _request_json() -> Any:
    try:
        return json.loads(request.get_data())
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc


def _listing(records: Iterable[Any]):
    # An empty collection is sent as JSON null.
    return jsonify([record.to_json() for record in records] or None)


def create_app(conn: sqlite3.Connection) -> Flask:
    """Build the application serving fields, sowings and harvests from ``conn``."""
    app = Flask(__name__)
    lock = threading.Lock()

    @app.errorhandler(ValidationError)
    def _bad_request(exc: ValidationError):
        return jsonify(error=str(exc)), 400

    @app.errorhandler(sqlite3.Error)
    def _storage_error(exc: sqlite3.Error):
        return jsonify(error=str(exc)), 500

    @app.post("/fields")
    def post_field():
        field = Field.from_json(_request_json())
        with lock:
            created = create_field(conn, field)
        return jsonify(created.to_json())

    @app.get("/fields")
    def get_fields():
        with lock:
            return _listing(list_fields(conn))

    @app.post("/sowings")
    def post_sowing():
        sowing = Sowing.from_json(_request_json())
        with lock:
            created = create_sowing(conn, sowing)
        return jsonify(created.to_json())

    @app.get("/sowings")
    def get_sowings():
        with lock:
            return _listing(list_sowings(conn))

    @app.post("/harvest")
    def post_harvest():
        harvest = Harvest.from_json(_request_json())
        with lock:
            created = add_harvest(conn, harvest)
        return jsonify(created.to_json())

    @app.get("/harvest")
    def get_harvests():
        with lock:
            return _listing(list_harvests(conn))

    return app


def main(argv: list[str] | None = None) -> None:
    """Open the database and serve the application."""
    parser = argparse.ArgumentParser(prog="crop-tracker", description="Serve the crop tracker.")
    parser.add_argument("--db", default="data.db", help="SQLite database file")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=8080, help="port to listen on")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    conn = init_db(args.db)
    app = create_app(conn)
    log.info("Starting server on %s:%d", args.host, args.port)
    app.run(host=args.host, port=args.port)