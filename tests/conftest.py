"""Fixtures compartidas."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from core.config import AppSettings
from core.domain.models import Book, MalformedRecord, RunStatistics


class RecordingPresenter:
    """Fake de `CatalogPresenter` que guarda cada llamada."""

    def __init__(self) -> None:
        self.shown: list[list[Book]] = []
        self.no_matches = 0
        self.errors: list[str] = []
        self.unexpected: list[str] = []
        self.statistics: list[RunStatistics] = []

    def show_books(self, books):
        self.shown.append(list(books))

    def show_no_matches(self):
        self.no_matches += 1

    def show_error(self, message):
        self.errors.append(message)

    def show_unexpected(self, message):
        self.unexpected.append(message)

    def show_statistics(self, stats):
        self.statistics.append(stats)


class RecordingSink:
    """Fake de `ErrorSink`."""

    def __init__(self) -> None:
        self.user_errors: list[tuple[Path | None, str, BaseException]] = []
        self.invalid_lines: list[tuple[Path | None, MalformedRecord]] = []

    def log_user_input_error(self, catalog_path, argument, exc):
        self.user_errors.append((catalog_path, argument, exc))

    def log_invalid_line(self, catalog_path, record):
        self.invalid_lines.append((catalog_path, record))


@pytest.fixture(autouse=True)
def _isolate(tmp_path, monkeypatch):
    """Cada test corre en su tmp_path, sin env vars LIBTRACK_ ni .env de usuario heredados."""

    for key in list(os.environ):
        if key.upper().startswith("LIBTRACK_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
    monkeypatch.chdir(tmp_path)
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def catalog_path(tmp_path) -> Path:
    return tmp_path / "catalog.txt"


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def dune() -> Book:
    return Book(title="Dune", author="Herbert", isbn="9780441", copies=3)
