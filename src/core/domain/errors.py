"""Errores del catálogo.

Todos heredan de `BookCatalogError`: la sesión los trata como errores de
usuario recuperables ("Error: ..."). Cualquier otra excepción es inesperada.
"""

from __future__ import annotations


class BookCatalogError(Exception):
    """Base de los errores de entrada del usuario."""

    pass


class InsufficientArgumentsError(BookCatalogError):
    """Faltan el archivo de catálogo o el argumento de operación."""

    pass


class InvalidFileNameError(BookCatalogError):
    """El archivo de catálogo no tiene el sufijo requerido."""

    pass


class MalformedBookEntryError(BookCatalogError):
    """El argumento contiene ':' pero no es title:author:isbn:copies válido."""

    pass


class DuplicateIsbnError(BookCatalogError):
    """Ya existe un libro con ese ISBN en el catálogo."""

    pass
