"""Log lateral de errores (`errors.log` junto al catálogo).

Por qué loguru:
- Un sink de archivo por evento con formato estable, sin configurar handlers.
- `catch=True` + `delay=True`: si el archivo no se puede abrir o escribir, el
  error se informa por stderr y nunca interrumpe la ejecución.

Los registros llevan `extra["channel"] == "error_log"`; el sink de stderr de la
CLI los filtra para no duplicarlos.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from core.config import AppSettings
from core.domain.models import MalformedRecord

CHANNEL = "error_log"

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {extra[kind]} | catalog={extra[catalog]} | {message}"


def is_error_log_record(record: dict) -> bool:
    return record["extra"].get("channel") == CHANNEL


class FileErrorLog:
    """Implementación de `ErrorSink` sobre un archivo por directorio de catálogo."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    def path_for(self, catalog_path: Path | None) -> Path:
        base = Path(catalog_path).parent if catalog_path is not None else Path(".")
        return base / self._settings.error_log_name

    def log_user_input_error(self, catalog_path: Path | None, argument: str, exc: BaseException) -> None:
        self._emit(
            catalog_path,
            "INVALID INPUT",
            f'argument="{argument}" | {type(exc).__name__}: {exc}',
        )

    def log_invalid_line(self, catalog_path: Path | None, record: MalformedRecord) -> None:
        self._emit(
            catalog_path,
            "INVALID LINE",
            f'line={record.line_number} | raw="{record.raw}" | {record.reason}',
        )

    def _emit(self, catalog_path: Path | None, kind: str, message: str) -> None:
        path = self.path_for(catalog_path)
        try:
            # delay=True: el open ocurre en la primera escritura, dentro de catch.
            sink_id = logger.add(
                path,
                format=_FORMAT,
                filter=is_error_log_record,
                level="ERROR",
                encoding=self._settings.encoding,
                catch=True,
                delay=True,
            )
        except OSError as exc:
            logger.warning("error_log_unavailable path={} error={}", path, exc)
            return
        try:
            logger.bind(
                channel=CHANNEL,
                kind=kind,
                catalog=str(catalog_path) if catalog_path is not None else "-",
            ).error("{}", message)
        finally:
            logger.remove(sink_id)
