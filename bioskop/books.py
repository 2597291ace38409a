"""Request handlers for books: create, update, delete, list and fetch.

Each handler takes an open database connection and returns a
``(body, http_status)`` pair, where ``body`` is a JSON-ready dictionary
carrying its own ``status`` and ``message`` fields.
"""

from __future__ import annotations

import re
import sqlite3
from typing import Any

from bioskop.models import Book, ValidationError, parse_book, parse_paging

Response = tuple[dict[str, Any], int]

_ROW_ID = re.compile(r"\s*[+-]?[0-9]+\s*")
_INT4_MIN = -(2**31)
_INT4_MAX = 2**31 - 1

_NOT_FOUND = "Book tidak ditemukan"


class _BadRowId(ValueError):
    """A path id that the database cannot compare with an integer column."""


def _reply(http_status: int, message: str, status: int | None = None, **extra: Any) -> Response:
    body: dict[str, Any] = {
        "status": http_status if status is None else status,
        "message": message,
    }
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


def _rejection(db: sqlite3.Connection, error: ValidationError) -> Response:
    """Explain why a book payload was refused, checking fields in a fixed order."""
    book = error.partial if isinstance(error.partial, Book) else Book()
    if not book.nama:
        return _reply(400, "Nama tidak boleh kosong")
    if book.kategori_id == 0:
        return _reply(400, "Kategori tidak boleh kosong")
    try:
        row = db.execute(
            "SELECT EXISTS(SELECT 1 FROM category WHERE id = ?)", (book.kategori_id,)
        ).fetchone()
    except sqlite3.Error:
        return _reply(500, "Gagal cek kategori")
    if not row[0]:
        return _reply(400, "Kategori tidak ditemukan", status=404)
    if book.rating > 100:
        return _reply(400, "Rating tidak boleh lebih dari 100")
    return _reply(400, error.message)


def create_book(db: sqlite3.Connection, payload: Any) -> Response:
    """Insert a new book from a JSON payload."""
    try:
        book = parse_book(payload)
    except ValidationError as error:
        return _rejection(db, error)

    try:
        with db:
            cursor = db.execute(
                "INSERT INTO book (nama, kategori_id, rating, description) "
                "VALUES (?, ?, ?, ?)",
                (book.nama, book.kategori_id, book.rating, book.description),
            )
    except sqlite3.Error:
        return _reply(500, "Gagal menambahkan book")
    book.id = cursor.lastrowid
    return _reply(200, "Data berhasil dibuat!", data=book.to_dict())


def update_book(db: sqlite3.Connection, book_id: Any, payload: Any) -> Response:
    """Replace the fields of the book with ``book_id``."""
    try:
        book = parse_book(payload)
    except ValidationError as error:
        return _rejection(db, error)

    try:
        row_id = _row_id(book_id)
        with db:
            cursor = db.execute(
                "UPDATE book SET nama = ?, kategori_id = ?, rating = ?, description = ? "
                "WHERE id = ?",
                (book.nama, book.kategori_id, book.rating, book.description, row_id),
            )
    except (sqlite3.Error, _BadRowId):
        return _reply(500, "Gagal memperbarui book")
    if cursor.rowcount == 0:
        return _reply(404, _NOT_FOUND)
    return _reply(200, "Data berhasil diperbarui!", data=book.to_dict())


def delete_book(db: sqlite3.Connection, book_id: Any) -> Response:
    """Remove the book with ``book_id``."""
    try:
        row_id = _row_id(book_id)
        with db:
            cursor = db.execute("DELETE FROM book WHERE id = ?", (row_id,))
    except (sqlite3.Error, _BadRowId):
        return _reply(500, "Gagal menghapus book")
    if cursor.rowcount == 0:
        return _reply(404, _NOT_FOUND)
    return _reply(200, "Book berhasil dihapus")


def list_books(db: sqlite3.Connection, page: Any, size: Any) -> Response:
    """Return one page of books, each with the name of its category."""
    page_number, page_size = parse_paging(page, size)
    offset = (page_number - 1) * page_size

    try:
        total_data = db.execute("SELECT COUNT(*) FROM book").fetchone()[0]
    except sqlite3.Error:
        return _reply(500, "Gagal mengambil total data")

    try:
        rows = db.execute(
            """
            SELECT book.id, book.nama, book.kategori_id,
                   category.nama AS kategori_nama, book.rating, book.description
            FROM book
            INNER JOIN category ON book.kategori_id = category.id
            ORDER BY book.id
            LIMIT ? OFFSET ?
            """,
            (page_size, offset),
        ).fetchall()
    except sqlite3.Error:
        return _reply(500, "Gagal mengambil data book")

    try:
        books = [
            Book(
                id=_require(row["id"]),
                nama=_require(row["nama"]),
                kategori_id=_require(row["kategori_id"]),
                kategori_nama=_require(row["kategori_nama"]),
                rating=float(_require(row["rating"])),
                description=_require(row["description"]),
            ).to_dict()
            for row in rows
        ]
    except TypeError:
        return _reply(500, "Gagal membaca data book")

    return _reply(
        200,
        "Berhasil mengambil data book",
        page=page_number,
        size=page_size,
        total_data=total_data,
        data=books or None,
    )


def get_book(db: sqlite3.Connection, book_id: Any) -> Response:
    """Return the book with ``book_id``."""
    try:
        row_id = _row_id(book_id)
        row = db.execute(
            "SELECT id, nama, kategori_id, rating, description FROM book WHERE id = ?",
            (row_id,),
        ).fetchone()
        if row is None:
            return _reply(404, _NOT_FOUND)
        book = Book(
            id=_require(row["id"]),
            nama=_require(row["nama"]),
            kategori_id=_require(row["kategori_id"]),
            rating=float(_require(row["rating"])),
            description=_require(row["description"]),
        )
    except (sqlite3.Error, _BadRowId, TypeError):
        return _reply(500, "Gagal mengambil detail book")
    return _reply(200, "Berhasil mengambil detail book", data=book.to_dict())