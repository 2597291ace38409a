"""Book and category records and validation of the JSON payloads that create them."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from typing import Any, TypeVar

DEFAULT_PAGE = 1
DEFAULT_SIZE = 10
MAX_RATING = 100

_INTEGER = re.compile(r"[+-]?[0-9]+")

_T = TypeVar("_T", "Book", "Category")


class ValidationError(ValueError):
    """A payload could not be bound to a record.

    ``partial`` holds the record as far as the payload could be bound, so
    callers can inspect which fields were filled in.
    """

    def __init__(self, message: str, partial: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.partial = partial


@dataclass
class Book:
    """A book belonging to one category."""

    id: int = 0
    nama: str = ""
    kategori_id: int = 0
    description: str = ""
    rating: float = 0.0
    kategori_nama: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the record as a JSON-ready dictionary."""
        return asdict(self)


@dataclass
class Category:
    """A category that books are filed under."""

    id: int = 0
    nama: str = ""
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the record as a JSON-ready dictionary."""
        return asdict(self)


_GO_FIELD_NAMES = {
    "id": "ID",
    "nama": "Nama",
    "kategori_id": "KategoriID",
    "description": "Description",
    "rating": "Rating",
    "kategori_nama": "KategoriNama",
}


def _json_type_name(value: Any) -> str:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def _coerce(value: Any, kind: type) -> Any:
    """Convert a JSON value to ``kind`` or raise TypeError."""
    if kind is str and isinstance(value, str):
        return value
    if kind is int and isinstance(value, int) and not isinstance(value, bool):
        return value
    if kind is float and isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    raise TypeError(_json_type_name(value))


def _bind(cls: type[_T], payload: Any) -> tuple[_T, str | None]:
    """Fill a record from a payload, returning it with the first binding error."""
    record = cls()
    if payload is None:
        return record, "request body is empty"
    if not isinstance(payload, Mapping):
        return record, (
            f"cannot bind {_json_type_name(payload)} to {cls.__name__}: "
            "expected a JSON object"
        )
    first_error: str | None = None
    for field in fields(cls):
        value = payload.get(field.name)
        if value is None:
            continue
        kind = type(field.default)
        try:
            setattr(record, field.name, _coerce(value, kind))
        except TypeError as exc:
            if first_error is None:
                first_error = (
                    f"cannot bind {exc} into field {cls.__name__}.{field.name} "
                    f"of type {kind.__name__}"
                )
    return record, first_error


def _rule_message(struct: str, field: str, tag: str) -> str:
    go_name = _GO_FIELD_NAMES[field]
    return (
        f"Key: '{struct}.{go_name}' Error:Field validation for "
        f"'{go_name}' failed on the '{tag}' tag"
    )


def parse_book(payload: Any) -> Book:
    """Bind and validate a book payload.

    ``nama`` and ``kategori_id`` are required and ``rating`` may not exceed 100.
    """
    book, error = _bind(Book, payload)
    if error is not None:
        raise ValidationError(error, partial=book)
    problems = []
    if not book.nama:
        problems.append(_rule_message("Book", "nama", "required"))
    if book.kategori_id == 0:
        problems.append(_rule_message("Book", "kategori_id", "required"))
    if book.rating > MAX_RATING:
        problems.append(_rule_message("Book", "rating", "lte"))
    if problems:
        raise ValidationError("\n".join(problems), partial=book)
    return book


def parse_category(payload: Any) -> Category:
    """Bind and validate a category payload; ``nama`` is required."""
    category, error = _bind(Category, payload)
    if error is not None:
        raise ValidationError(error, partial=category)
    if not category.nama:
        raise ValidationError(
            _rule_message("Category", "nama", "required"), partial=category
        )
    return category


def _positive_or_default(text: Any, default: int) -> int:
    if text is None:
        return default
    text = str(text)
    if not _INTEGER.fullmatch(text):
        return default
    value = int(text)
    return value if value >= 1 else default


def parse_paging(page: Any, size: Any) -> tuple[int, int]:
    """Read page and size query values, falling back to 1 and 10."""
    return (
        _positive_or_default(page, DEFAULT_PAGE),
        _positive_or_default(size, DEFAULT_SIZE),
    )