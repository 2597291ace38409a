"""Opening the SQLite database and creating its schema."""

from __future__ import annotations

import logging
import os
import sqlite3
from collections.abc import Mapping

logger = logging.getLogger(__name__)

PATH_VARIABLE = "DATABASE_PATH"

SCHEMA = """
CREATE TABLE IF NOT EXISTS category (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    nama VARCHAR(100) NOT NULL,
    description TEXT
);

CREATE TABLE IF NOT EXISTS book (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    nama VARCHAR(100) NOT NULL,
    kategori_id INT NOT NULL,
    description TEXT,
    rating FLOAT,
    FOREIGN KEY (kategori_id) REFERENCES category(id)
);
"""


def database_path(env: Mapping[str, str]) -> str:
    """Return the database file named by ``DATABASE_PATH`` in ``env``."""
    path = env.get(PATH_VARIABLE, "")
    if not path:
        raise ValueError(f"{PATH_VARIABLE} is not set")
    return path


def connect(path: str | os.PathLike[str]) -> sqlite3.Connection:
    """Open the database with named-column rows and foreign keys enforced."""
    connection = sqlite3.connect(os.fspath(path), check_same_thread=False)
    connection.row_factory = sqlite3.Row
    connection.execute("PRAGMA foreign_keys = ON")
    return connection


def init_db(path: str | os.PathLike[str]) -> sqlite3.Connection:
    """Open the database and create the category and book tables if missing."""
    connection = connect(path)
    with connection:
        connection.executescript(SCHEMA)
    logger.info("Database siap digunakan")
    return connection