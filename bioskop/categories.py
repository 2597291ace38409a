"""Request handlers for categories: create, update, delete, list and fetch.

Each handler takes an open database connection and returns a
``(body, http_status)`` pair, where ``body`` is a JSON-ready dictionary
carrying its own ``status`` and ``message`` fields.
"""

from __future__ import annotations

import re
import sqlite3
from typing import Any

from bioskop.models import Category, ValidationError, parse_category, parse_paging

Response = tuple[dict[str, Any], int]

_ROW_ID = re.compile(r"\s*[+-]?[0-9]+\s*")
_INT4_MIN = -(2**31)
_INT4_MAX = 2**31 - 1

_NOT_FOUND = "Category tidak ditemukan"


class _BadRowId(ValueError):
    """A path id that the database cannot compare with an integer column."""


def _reply(http_status: int, message: str, **extra: Any) -> Response:
    body: dict[str, Any] = {"status": http_status, "message": message}
    body.update(extra)
    return body, http_status


def _row_id(value: Any) -> int:
    text = str(value)
    if not _ROW_ID.fullmatch(text):
        raise _BadRowId(text)
    number = int(text.strip())
    if not _INT4_MIN <= number <= _INT4_MAX:
        raise _BadRowId(text)
    return number


def _require(value: Any) -> Any:
    if value is None:
        raise TypeError("unexpected NULL column")
    return value


def _rejection(error: ValidationError) -> Response:
    """Explain why a category payload was refused."""
    category = error.partial if isinstance(error.partial, Category) else Category()
    if not category.nama:
        return _reply(400, "Nama tidak boleh kosong")
    return _reply(400, error.message)


def create_category(db: sqlite3.Connection, payload: Any) -> Response:
    """Insert a new category from a JSON payload."""
    try:
        category = parse_category(payload)
    except ValidationError as error:
        return _rejection(error)

    try:
        with db:
            cursor = db.execute(
                "INSERT INTO category (nama, description) VALUES (?, ?)",
                (category.nama, category.description),
            )
    except sqlite3.Error:
        return _reply(500, "Gagal menambahkan category")
    category.id = cursor.lastrowid
    return _reply(200, "Data berhasil dibuat!", data=category.to_dict())


def update_category(db: sqlite3.Connection, category_id: Any, payload: Any) -> Response:
    """Replace the fields of the category with ``category_id``."""
    try:
        category = parse_category(payload)
    except ValidationError as error:
        return _rejection(error)

    try:
        row_id = _row_id(category_id)
        with db:
            cursor = db.execute(
                "UPDATE category SET nama = ?1, description = ?4 WHERE id = ?3",
                (category.nama, category.description, row_id),
            )
    except (sqlite3.Error, _BadRowId):
        return _reply(500, "Gagal memperbarui category")
    if cursor.rowcount == 0:
        return _reply(404, _NOT_FOUND)
    return _reply(200, "Data berhasil diperbarui!", data=category.to_dict())


def delete_category(db: sqlite3.Connection, category_id: Any) -> Response:
    """Remove the category with ``category_id``."""
    try:
        row_id = _row_id(category_id)
        with db:
            cursor = db.execute("DELETE FROM category WHERE id = ?", (row_id,))
    except (sqlite3.Error, _BadRowId):
        return _reply(500, "Gagal menghapus category")
    if cursor.rowcount == 0:
        return _reply(404, _NOT_FOUND)
    return _reply(200, "Category berhasil dihapus")


def list_categories(db: sqlite3.Connection, page: Any, size: Any) -> Response:
    """Return one page of categories ordered by id."""
    page_number, page_size = parse_paging(page, size)
    offset = (page_number - 1) * page_size

    try:
        total_data = db.execute("SELECT COUNT(*) FROM category").fetchone()[0]
    except sqlite3.Error:
        return _reply(500, "Gagal mengambil total data")

    try:
        rows = db.execute(
            "SELECT id, nama, description FROM category ORDER BY id LIMIT ? OFFSET ?",
            (page_size, offset),
        ).fetchall()
    except sqlite3.Error:
        return _reply(500, "Gagal mengambil data category")

    try:
        categories = [
            Category(
                id=_require(row["id"]),
                nama=_require(row["nama"]),
                description=_require(row["description"]),
            ).to_dict()
            for row in rows
        ]
    except TypeError:
        return _reply(500, "Gagal membaca data category")

    return _reply(
        200,
        "Berhasil mengambil list category",
        data=categories or None,
        page=page_number,
        size=page_size,
        totalData=total_data,
    )


def get_category(db: sqlite3.Connection, category_id: Any) -> Response:
    """Return the category with ``category_id``."""
    try:
        row_id = _row_id(category_id)
        row = db.execute(
            "SELECT id, nama, description FROM category WHERE id = ?", (row_id,)
        ).fetchone()
        if row is None:
            return _reply(404, _NOT_FOUND)
        category = Category(
            id=_require(row["id"]),
            nama=_require(row["nama"]),
            description=_require(row["description"]),
        )
    except (sqlite3.Error, _BadRowId, TypeError):
        return _reply(500, "Gagal mengambil detail category")
    return _reply(200, "Berhasil mengambil detail category", data=category.to_dict())