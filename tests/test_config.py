"""Tests de AppSettings (pydantic-settings)."""

import pytest
from pydantic import ValidationError

from adapters.error_log import FileErrorLog
from cli.ui_components import RichPresenter
from core.config import AppSettings
from core.interfaces.ports import CatalogPresenter, ErrorSink


def test_defaults(settings):
    assert settings.catalog_suffix == ".txt"
    assert settings.error_log_name == "errors.log"
    assert settings.sort_case_sensitive is True
    assert settings.log_level == "WARNING"


def test_env_override(monkeypatch):
    monkeypatch.setenv("LIBTRACK_SORT_CASE_SENSITIVE", "false")
    monkeypatch.setenv("LIBTRACK_LOG_LEVEL", "debug")

    settings = AppSettings(_env_file=None)

    assert settings.sort_case_sensitive is False
    assert settings.log_level == "debug"


def test_invalid_log_level_rejected(monkeypatch):
    monkeypatch.setenv("LIBTRACK_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


def test_dotenv_in_working_directory(tmp_path):
    (tmp_path / ".env").write_text("LIBTRACK_ERROR_LOG_NAME=tracker.log\n")
    assert AppSettings().error_log_name == "tracker.log"


def test_adapters_satisfy_ports(settings):
    assert isinstance(RichPresenter(), CatalogPresenter)
    assert isinstance(FileErrorLog(settings), ErrorSink)


def test_invalid_isbn_pattern_rejected():
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, isbn_pattern="[0-9")
