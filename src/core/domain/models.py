"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Un `Book` leído del archivo y uno recibido por CLI pasan por las mismas reglas.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se persiste.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.config import RECORD_DELIMITER


class Book(BaseModel):
    """Una entrada del catálogo.

    Inmutable una vez construida: el store la reescribe tal cual, no la edita.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    title: str = Field(
        ...,
        min_length=1,
        description="Título del libro.",
    )
    author: str = Field(
        ...,
        min_length=1,
        description="Autor del libro.",
    )
    isbn: str = Field(
        ...,
        min_length=1,
        description="Clave única dentro del catálogo (formato libre).",
    )
    copies: int = Field(
        ...,
        ge=0,
        description="Ejemplares disponibles.",
    )

    @field_validator("title", "author", "isbn")
    @classmethod
    def _no_delimiter(cls, value: str) -> str:
        # Un separador o salto de línea rompería el formato title:author:isbn:copies.
        # splitlines cubre \n, \r y separadores Unicode (\u2028, \x85, \x0b...).
        if RECORD_DELIMITER in value or value.splitlines() != [value]:
            raise ValueError(f"must not contain '{RECORD_DELIMITER}' or line breaks")
        return value


class MalformedRecord(BaseModel):
    """Línea del catálogo que no supera la validación del codec.

    Es un valor, no una excepción: el store la cuenta y la descarta.
    """

    model_config = ConfigDict(frozen=True)

    raw: str = Field(..., description="Texto original de la línea.")
    reason: str = Field(..., min_length=1, description="Motivo del rechazo.")
    line_number: int | None = Field(
        default=None,
        ge=1,
        description="Número de línea (1-based) si proviene del archivo.",
    )


class OperationKind(str, Enum):
    """Clasificación del argumento de operación."""

    ISBN_LOOKUP = "isbn_lookup"
    ADD_RECORD = "add_record"
    TITLE_SEARCH = "title_search"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class LoadResult:
    """Resultado de leer el catálogo completo (una vez por ejecución)."""

    books: list[Book] = field(default_factory=list)
    valid_records: int = 0
    invalid_records: int = 0
    malformed: list[MalformedRecord] = field(default_factory=list)


@dataclass
class RunStatistics:
    """Contadores de una ejecución; se imprimen una sola vez al final."""

    valid_records: int = 0
    search_results: int = 0
    books_added: int = 0
    errors: int = 0
