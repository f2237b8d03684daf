"""Persistencia del catálogo en un archivo de texto plano.

Por qué un adaptador:
- Es el único módulo que toca el archivo; el Core trabaja con `Book` en memoria.
- La reescritura es atómica: archivo temporal en el mismo directorio + `os.replace`.
  Un fallo a mitad deja el contenido anterior intacto.

Sin locking: se asume un único proceso escribiendo el catálogo.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path
from typing import Sequence

from loguru import logger

from core.config import AppSettings
from core.domain.models import Book, LoadResult, MalformedRecord
from core.services.record_codec import format_book, parse_line


def title_sort_key(case_sensitive: bool):
    if case_sensitive:
        return lambda book: book.title
    return lambda book: book.title.casefold()


class CatalogStore:
    """Carga y reescritura del archivo de catálogo."""

    def __init__(self, path: Path, settings: AppSettings | None = None) -> None:
        self.path = Path(path)
        self._settings = settings or AppSettings()

    def create_if_missing(self) -> None:
        """Crea un archivo vacío si no existe; nunca trunca uno existente."""

        if self.path.exists():
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # "x" falla si otro proceso lo creó entre medias: no truncamos nada.
        try:
            with self.path.open("x", encoding=self._settings.encoding):
                pass
        except FileExistsError:
            return
        logger.info("catalog_created path={}", self.path)

    def load_all(self) -> LoadResult:
        """Lee todas las líneas; las inválidas se cuentan y se excluyen."""

        books: list[Book] = []
        malformed: list[MalformedRecord] = []
        text = self.path.read_text(encoding=self._settings.encoding)
        for number, line in enumerate(text.splitlines(), start=1):
            parsed = parse_line(line, line_number=number)
            if parsed is None:
                continue
            if isinstance(parsed, MalformedRecord):
                logger.debug("invalid_line path={} line={} reason={}", self.path, number, parsed.reason)
                malformed.append(parsed)
                continue
            books.append(parsed)

        logger.debug("catalog_loaded path={} valid={} invalid={}", self.path, len(books), len(malformed))
        return LoadResult(
            books=books,
            valid_records=len(books),
            invalid_records=len(malformed),
            malformed=malformed,
        )

    def append_then_sort_and_rewrite(self, existing: Sequence[Book], new_book: Book) -> list[Book]:
        """Añade `new_book`, ordena por título (estable) y reescribe el archivo.

        Devuelve la lista ordenada tal como quedó en disco.
        """

        combined = [*existing, new_book]
        combined.sort(key=title_sort_key(self._settings.sort_case_sensitive))
        payload = "".join(format_book(b) + "\n" for b in combined)
        self._atomic_write(payload)
        logger.info("catalog_rewritten path={} records={}", self.path, len(combined))
        return combined

    def _atomic_write(self, payload: str) -> None:
        directory = self.path.parent
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=directory)
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding=self._settings.encoding, newline="\n") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            if self.path.exists():
                shutil.copymode(self.path, tmp_path)
            os.replace(tmp_path, self.path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
