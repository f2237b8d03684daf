"""Tests del log lateral de errores (loguru, archivo junto al catálogo)."""

import pytest

from adapters.error_log import FileErrorLog
from core.config import AppSettings
from core.domain.errors import MalformedBookEntryError
from core.domain.models import MalformedRecord


@pytest.fixture
def error_log(settings) -> FileErrorLog:
    return FileErrorLog(settings)


def test_user_input_error_is_written_next_to_catalog(error_log, tmp_path):
    catalog = tmp_path / "data" / "catalog.txt"
    catalog.parent.mkdir()

    error_log.log_user_input_error(catalog, "BadRecord:OnlyTwo", MalformedBookEntryError("bad shape"))

    content = (tmp_path / "data" / "errors.log").read_text()
    assert "INVALID INPUT" in content
    assert 'argument="BadRecord:OnlyTwo"' in content
    assert "MalformedBookEntryError: bad shape" in content
    assert f"catalog={catalog}" in content


def test_without_catalog_uses_working_directory(error_log, tmp_path):
    error_log.log_user_input_error(None, "NO ARGUMENTS", ValueError("usage"))

    content = (tmp_path / "errors.log").read_text()
    assert "catalog=-" in content
    assert "ValueError: usage" in content


def test_invalid_line_entry(error_log, catalog_path, tmp_path):
    record = MalformedRecord(raw="BadRecord:OnlyTwo", reason="expected 4 fields, got 2", line_number=3)

    error_log.log_invalid_line(catalog_path, record)

    content = (tmp_path / "errors.log").read_text()
    assert "INVALID LINE" in content
    assert "line=3" in content
    assert "expected 4 fields, got 2" in content


def test_entries_are_appended(error_log, catalog_path, tmp_path):
    error_log.log_user_input_error(catalog_path, "a:b", MalformedBookEntryError("one"))
    error_log.log_user_input_error(catalog_path, "c:d", MalformedBookEntryError("two"))

    lines = (tmp_path / "errors.log").read_text().splitlines()
    assert len(lines) == 2


def test_braces_in_argument_are_kept_verbatim(error_log, catalog_path, tmp_path):
    error_log.log_user_input_error(catalog_path, "{title}:x", MalformedBookEntryError("bad"))

    assert 'argument="{title}:x"' in (tmp_path / "errors.log").read_text()


def test_log_name_is_configurable(catalog_path, tmp_path):
    FileErrorLog(AppSettings(_env_file=None, error_log_name="tracker-errors.log")).log_user_input_error(
        catalog_path, "x", ValueError("y")
    )
    assert (tmp_path / "tracker-errors.log").exists()


def test_unopenable_log_does_not_raise(error_log, catalog_path, tmp_path):
    (tmp_path / "errors.log").mkdir()

    error_log.log_user_input_error(catalog_path, "a:b", MalformedBookEntryError("bad"))
    error_log.log_invalid_line(catalog_path, MalformedRecord(raw="a:b", reason="bad", line_number=1))

    assert (tmp_path / "errors.log").is_dir()
