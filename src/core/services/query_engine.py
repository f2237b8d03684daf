"""Consultas en memoria sobre el catálogo cargado."""

from __future__ import annotations

from typing import Iterable

from core.domain.models import Book


def find_by_isbn(books: Iterable[Book], isbn: str) -> Book | None:
    """Primer libro cuyo ISBN coincide exactamente; `None` si no hay."""

    needle = isbn.strip()
    return next((b for b in books if b.isbn == needle), None)


def find_by_title_keyword(books: Iterable[Book], keyword: str) -> list[Book]:
    """Libros cuyo título contiene `keyword` (sin distinguir mayúsculas), en orden de catálogo."""

    needle = keyword.casefold()
    return [b for b in books if needle in b.title.casefold()]
