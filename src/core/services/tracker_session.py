"""Orquestación de una ejecución del tracker.

Este módulo concentra el flujo completo: validar argumentos, cargar el
catálogo, clasificar la operación y ejecutarla. La CLI solo construye las
dependencias y delega aquí; la impresión y el log de errores quedan detrás de
`CatalogPresenter` / `ErrorSink`, así que el flujo es reutilizable y testeable
sin consola.

Garantías:
- Las estadísticas se presentan exactamente una vez, en cualquier salida.
- Cada error incrementa el contador exactamente una vez.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from loguru import logger

from adapters.catalog_store import CatalogStore
from core.config import AppSettings
from core.domain.errors import (
    BookCatalogError,
    DuplicateIsbnError,
    InsufficientArgumentsError,
    InvalidFileNameError,
    MalformedBookEntryError,
)
from core.domain.models import Book, LoadResult, OperationKind, RunStatistics
from core.interfaces.ports import CatalogPresenter, ErrorSink
from core.services.classifier import OperationClassifier
from core.services.query_engine import find_by_isbn, find_by_title_keyword
from core.services.record_codec import ADD_RECORD_USAGE, parse_add_argument

USAGE = "Usage: libtrack <catalogFile.txt> <operationArgument>"


@dataclass
class _RunContext:
    catalog_path: Path | None = None
    argument: str | None = None


class TrackerSession:
    """Una ejecución: Start -> ArgsValidated -> CatalogLoaded -> Dispatched -> Reported."""

    def __init__(
        self,
        presenter: CatalogPresenter,
        error_sink: ErrorSink,
        settings: AppSettings | None = None,
        store_factory: Callable[[Path, AppSettings], CatalogStore] = CatalogStore,
    ) -> None:
        self._presenter = presenter
        self._errors = error_sink
        self._settings = settings or AppSettings()
        self._store_factory = store_factory
        self._classifier = OperationClassifier(self._settings)

    def run(self, args: Sequence[str]) -> RunStatistics:
        stats = RunStatistics()
        ctx = _RunContext()
        try:
            self._execute(list(args), stats, ctx)
        except BookCatalogError as exc:
            stats.errors += 1
            self._presenter.show_error(str(exc))
            self._errors.log_user_input_error(ctx.catalog_path, ctx.argument or "N/A", exc)
        except Exception as exc:
            logger.exception("unexpected_failure")
            stats.errors += 1
            self._presenter.show_unexpected(str(exc))
            self._errors.log_user_input_error(ctx.catalog_path, ctx.argument or "N/A", exc)
        finally:
            self._presenter.show_statistics(stats)
        return stats

    def _execute(self, args: list[str], stats: RunStatistics, ctx: _RunContext) -> None:
        catalog_path, argument = self._validate_args(args, ctx)

        store = self._store_factory(catalog_path, self._settings)
        store.create_if_missing()
        loaded = store.load_all()
        stats.valid_records = loaded.valid_records
        stats.errors += loaded.invalid_records
        for record in loaded.malformed:
            self._errors.log_invalid_line(catalog_path, record)

        kind = self._classifier.classify(argument)
        logger.debug("operation_classified kind={} argument={!r}", kind.value, argument)

        if kind is OperationKind.ISBN_LOOKUP:
            found = find_by_isbn(loaded.books, argument)
            self._show_results([found] if found is not None else [], stats)
        elif kind is OperationKind.ADD_RECORD:
            self._add_record(store, loaded, argument, stats)
        elif kind is OperationKind.MALFORMED:
            raise MalformedBookEntryError(ADD_RECORD_USAGE)
        else:
            self._show_results(find_by_title_keyword(loaded.books, argument), stats)

    def _validate_args(self, args: list[str], ctx: _RunContext) -> tuple[Path, str]:
        if len(args) < 2:
            ctx.argument = "NO ARGUMENTS"
            raise InsufficientArgumentsError(USAGE)

        file_name, argument = args[0], args[1]
        ctx.catalog_path = Path(file_name)
        ctx.argument = argument
        suffix = self._settings.catalog_suffix
        if not file_name.endswith(suffix):
            # En el log se registra el nombre recibido, no la operación.
            ctx.argument = file_name
            raise InvalidFileNameError(f"First argument must end with {suffix}")
        return ctx.catalog_path, argument

    def _add_record(
        self,
        store: CatalogStore,
        loaded: LoadResult,
        argument: str,
        stats: RunStatistics,
    ) -> None:
        new_book = parse_add_argument(argument)
        if find_by_isbn(loaded.books, new_book.isbn) is not None:
            raise DuplicateIsbnError(f"A book with ISBN {new_book.isbn} already exists")
        store.append_then_sort_and_rewrite(loaded.books, new_book)
        self._presenter.show_books([new_book])
        stats.books_added = 1

    def _show_results(self, books: list[Book], stats: RunStatistics) -> None:
        stats.search_results = len(books)
        if books:
            self._presenter.show_books(books)
        else:
            self._presenter.show_no_matches()
