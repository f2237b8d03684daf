"""Entry point de la CLI `libtrack`.

Uso:
    libtrack <catalogFile.txt> <operationArgument>

El argumento de operación decide qué se hace:
- `9780441`                  -> búsqueda por ISBN
- `Dune:Herbert:9780441:3`   -> alta de libro
- `dune`                     -> búsqueda por título

Los argumentos son opcionales a nivel Typer: si faltan, la sesión informa el
error y aun así imprime las estadísticas.
"""

from __future__ import annotations

import sys
from typing import List, Optional

import typer
from loguru import logger

from adapters.error_log import FileErrorLog, is_error_log_record
from cli.ui_components import RichPresenter
from core.config import AppSettings, load_settings
from core.services.tracker_session import TrackerSession

app = typer.Typer(
    name="libtrack",
    help="Library Book Tracker: look up, search and add books in a text catalog.",
    add_completion=False,
)


def configure_logging(settings: AppSettings) -> None:
    """Sink de diagnóstico en stderr; stdout queda para la salida del tracker."""

    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level.upper(),
        filter=lambda record: not is_error_log_record(record),
    )


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def track(
    ctx: typer.Context,
    catalog_file: Optional[str] = typer.Argument(
        None, metavar="CATALOG_FILE", help="Catalog path; must end with .txt (created if missing)."
    ),
    operation: Optional[str] = typer.Argument(
        None, metavar="OPERATION", help="ISBN, title keyword, or title:author:isbn:copies."
    ),
) -> None:
    """Run one catalog operation and print the run statistics."""

    settings = load_settings()
    configure_logging(settings)

    args: List[str] = [a for a in (catalog_file, operation) if a is not None]
    if ctx.args:
        logger.debug("ignoring_extra_args args={}", ctx.args)

    session = TrackerSession(
        presenter=RichPresenter(),
        error_sink=FileErrorLog(settings),
        settings=settings,
    )
    session.run(args)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
