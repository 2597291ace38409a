"""HTTP routes for books and categories, and the command that serves them."""

from __future__ import annotations

import argparse
import os
import sqlite3
import threading
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from dotenv import dotenv_values
from flask import Flask, jsonify, request

from bioskop import books, categories
from bioskop.database import database_path, init_db

DEFAULT_PORT = 8080


def create_app(db_path: str | os.PathLike[str]) -> Flask:
    """Build the web application on the database at ``db_path``."""
    db = init_db(db_path)
    lock = threading.Lock()
    app = Flask(__name__)

    def respond(handler: Callable[..., tuple[dict[str, Any], int]], *args: Any):
        with lock:
            body, status = handler(db, *args)
        return jsonify(body), status

    def payload() -> Any:
        return request.get_json(force=True, silent=True)

    @app.post("/book")
    def create_book():
        return respond(books.create_book, payload())

    @app.put("/book/<book_id>")
    def update_book(book_id: str):
        return respond(books.update_book, book_id, payload())

    @app.delete("/book/<book_id>")
    def delete_book(book_id: str):
        return respond(books.delete_book, book_id)

    @app.get("/book")
    def list_books():
        return respond(books.list_books, request.args.get("page"), request.args.get("size"))

    @app.get("/book/<book_id>")
    def get_book(book_id: str):
        return respond(books.get_book, book_id)

    @app.post("/category")
    def create_category():
        return respond(categories.create_category, payload())

    @app.put("/category/<category_id>")
    def update_category(category_id: str):
        return respond(categories.update_category, category_id, payload())

    @app.delete("/category/<category_id>")
    def delete_category(category_id: str):
        return respond(categories.delete_category, category_id)

    @app.get("/category")
    def list_categories():
        return respond(
            categories.list_categories, request.args.get("page"), request.args.get("size")
        )

    @app.get("/category/<category_id>")
    def get_category(category_id: str):
        return respond(categories.get_category, category_id)

    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Load settings from the env file, prepare the database and serve."""
    parser = argparse.ArgumentParser(prog="bioskop", description="Serve the book catalogue API.")
    parser.add_argument("--env-file", default=".env", help="settings file (default: .env)")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)

    env_file = Path(args.env_file)
    if not env_file.is_file():
        raise SystemExit("Error loading .env file")
    from_file = {key: value for key, value in dotenv_values(env_file).items() if value is not None}
    env = {**from_file, **os.environ}

    try:
        app = create_app(database_path(env))
    except (ValueError, sqlite3.Error) as exc:
        raise SystemExit(f"Gagal koneksi ke database: {exc}") from exc

    print(f"Server running at http://localhost:{args.port}")
    app.run(host=args.host, port=args.port)
    return 0