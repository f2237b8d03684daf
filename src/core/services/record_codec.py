"""Codec de registros `title:author:isbn:copies`.

Por qué un único codec:
- Las líneas del archivo y el argumento de alta por CLI se validan con las
  mismas reglas; no puede haber un libro "válido en disco" e "inválido en CLI".
- `parse_line` devuelve un valor (`Book` o `MalformedRecord`) en vez de lanzar:
  el store cuenta y descarta sin depender de excepciones.
"""

from __future__ import annotations

import re

from pydantic import ValidationError

from core.config import RECORD_DELIMITER
from core.domain.errors import MalformedBookEntryError
from core.domain.models import Book, MalformedRecord

FIELD_COUNT = 4
ADD_RECORD_USAGE = "New book record must be: title:author:isbn:copies"

_COPIES_RE = re.compile(r"[0-9]+")


def _describe(exc: ValidationError) -> str:
    first = exc.errors()[0]
    loc = ".".join(str(part) for part in first.get("loc", ())) or "record"
    return f"{loc}: {first.get('msg', 'invalid value')}"


def parse_line(line: str, *, line_number: int | None = None) -> Book | MalformedRecord | None:
    """Parsea una línea del catálogo.

    Devuelve `None` para líneas vacías o solo espacios: no son registros y el
    store las ignora sin contarlas.
    """

    text = line.rstrip("\r\n")
    if not text.strip():
        return None

    parts = text.split(RECORD_DELIMITER)
    if len(parts) != FIELD_COUNT:
        return MalformedRecord(
            raw=text,
            reason=f"expected {FIELD_COUNT} fields, got {len(parts)}",
            line_number=line_number,
        )

    title, author, isbn, copies = (p.strip() for p in parts)
    if not _COPIES_RE.fullmatch(copies):
        return MalformedRecord(
            raw=text,
            reason=f"copies must be a non-negative integer, got {copies!r}",
            line_number=line_number,
        )

    try:
        return Book(title=title, author=author, isbn=isbn, copies=int(copies))
    except ValidationError as exc:
        return MalformedRecord(raw=text, reason=_describe(exc), line_number=line_number)


def parse_add_argument(arg: str) -> Book:
    """Parsea el argumento de alta; lanza `MalformedBookEntryError` si no es válido."""

    parsed = parse_line(arg)
    if isinstance(parsed, Book):
        return parsed
    detail = parsed.reason if parsed is not None else "empty argument"
    raise MalformedBookEntryError(f"{ADD_RECORD_USAGE} ({detail})")


def format_book(book: Book) -> str:
    """Inverso de `parse_line`: `parse_line(format_book(b)) == b`."""

    return RECORD_DELIMITER.join((book.title, book.author, book.isbn, str(book.copies)))
