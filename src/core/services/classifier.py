"""Clasificación del argumento de operación.

Orden de decisión (importa):
1. Forma de ISBN (sin ':') -> búsqueda por ISBN.
2. Cuatro campos separados por ':' válidos -> alta de registro.
3. Cualquier otra cosa con ':' -> mal formado (se reporta, no se ejecuta).
4. Resto -> búsqueda por título.

Un ISBN o título que contenga ':' no es alcanzable como búsqueda.
"""

from __future__ import annotations

import re

from core.config import RECORD_DELIMITER, AppSettings
from core.domain.models import Book, OperationKind
from core.services.record_codec import parse_line


class OperationClassifier:
    """Decide qué hace el argumento de operación."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        settings = settings or AppSettings()
        self._isbn_re = re.compile(settings.isbn_pattern)

    def is_isbn(self, arg: str) -> bool:
        if RECORD_DELIMITER in arg:
            return False
        return self._isbn_re.fullmatch(arg.strip()) is not None

    def classify(self, arg: str) -> OperationKind:
        if self.is_isbn(arg):
            return OperationKind.ISBN_LOOKUP
        if isinstance(parse_line(arg), Book):
            return OperationKind.ADD_RECORD
        if RECORD_DELIMITER in arg:
            return OperationKind.MALFORMED
        return OperationKind.TITLE_SEARCH
