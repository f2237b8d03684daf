"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar la orquestación con detalles visuales.
- La tabla de libros tiene un formato fijo (anchos 30/20/15/5) que otros
  scripts pueden parsear, así que se imprime como texto plano y no como
  `rich.table.Table`.
"""

from __future__ import annotations

from typing import Sequence

from rich.console import Console

from core.domain.models import Book, RunStatistics

TITLE_WIDTH = 30
AUTHOR_WIDTH = 20
ISBN_WIDTH = 15
COPIES_WIDTH = 5

NO_MATCHES = "No matching books found."
FAREWELL = "Thank you for using the Library Book Tracker."


def build_console() -> Console:
    """Consola sin markup/emoji/highlight: los datos del usuario se imprimen tal cual."""

    return Console(markup=False, emoji=False, highlight=False, soft_wrap=True)


def format_header() -> str:
    return (
        f"{'Title':<{TITLE_WIDTH}} {'Author':<{AUTHOR_WIDTH}} "
        f"{'ISBN':<{ISBN_WIDTH}} {'Copies':>{COPIES_WIDTH}}"
    )


def format_divider() -> str:
    return "-" * len(format_header())


def format_row(book: Book) -> str:
    return (
        f"{book.title[:TITLE_WIDTH]:<{TITLE_WIDTH}} "
        f"{book.author[:AUTHOR_WIDTH]:<{AUTHOR_WIDTH}} "
        f"{book.isbn[:ISBN_WIDTH]:<{ISBN_WIDTH}} "
        f"{book.copies:>{COPIES_WIDTH}}"
    )


def format_statistics(stats: RunStatistics) -> list[str]:
    return [
        "",
        "----- Statistics -----",
        f"Valid records processed: {stats.valid_records}",
        f"Search results found: {stats.search_results}",
        f"Books added: {stats.books_added}",
        f"Errors encountered: {stats.errors}",
        "----------------------",
        FAREWELL,
    ]


class RichPresenter:
    """`CatalogPresenter` sobre una `rich.console.Console`."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or build_console()

    def show_books(self, books: Sequence[Book]) -> None:
        self._console.print(format_header())
        self._console.print(format_divider())
        for book in books:
            self._console.print(format_row(book))

    def show_no_matches(self) -> None:
        self._console.print(NO_MATCHES)

    def show_error(self, message: str) -> None:
        self._console.print(f"Error: {message}", style="red")

    def show_unexpected(self, message: str) -> None:
        self._console.print(f"Unexpected error: {message}", style="bold red")

    def show_statistics(self, stats: RunStatistics) -> None:
        for line in format_statistics(stats):
            self._console.print(line)
