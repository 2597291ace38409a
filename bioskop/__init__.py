"""A small JSON web service for managing books and their categories in SQLite."""

__version__ = "0.1.0"