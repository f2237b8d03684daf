"""Contratos de salida de la sesión.

Por qué Protocol:
- La sesión no imprime ni escribe logs: delega en un presenter y en un
  sumidero de errores.
- La CLI usa Rich + loguru; los tests usan fakes que solo registran llamadas.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence, runtime_checkable

from core.domain.models import Book, MalformedRecord, RunStatistics


@runtime_checkable
class CatalogPresenter(Protocol):
    """Salida visible para el usuario (stdout)."""

    def show_books(self, books: Sequence[Book]) -> None:
        """Tabla con cabecera fija y una fila por libro."""

        ...

    def show_no_matches(self) -> None: ...

    def show_error(self, message: str) -> None: ...

    def show_unexpected(self, message: str) -> None: ...

    def show_statistics(self, stats: RunStatistics) -> None:
        """Bloque final; se llama exactamente una vez por ejecución."""

        ...


@runtime_checkable
class ErrorSink(Protocol):
    """Log lateral de errores (fire-and-forget, nunca lanza)."""

    def log_user_input_error(self, catalog_path: Path | None, argument: str, exc: BaseException) -> None: ...

    def log_invalid_line(self, catalog_path: Path | None, record: MalformedRecord) -> None: ...
