"""Tests for settings, logging setup and exceptions."""

import logging

from sqlalchemy.orm import Session

from src.core.exceptions import (BaseFixtureError, ReferenceNotFoundError,
                                 UnknownLoaderError)
from src.core.logging import setup_logging
from src.core.logging.formatters import CustomJsonFormatter, PrettyFormatter
from src.core.settings import FixtureSettings, settings


class TestSettings:
    def test_session_params_keep_objects_loaded(self):
        params = settings.session_params

        assert params["expire_on_commit"] is False
        assert params["class_"] is Session

    def test_sqlite_engine_params(self, monkeypatch):
        monkeypatch.setattr(settings.database, "DATABASE_URL", "sqlite:///x.db")

        assert settings.engine_params["connect_args"] == {"check_same_thread": False}

    def test_env_overrides_fixture_settings(self, monkeypatch):
        monkeypatch.setenv("FIXTURES__LOAD_ON_STARTUP", "true")

        assert FixtureSettings().LOAD_ON_STARTUP is True


class TestLogging:
    def test_setup_logging_pretty(self, monkeypatch):
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        monkeypatch.setattr(settings.logging, "LOG_FORMAT", "pretty")
        try:
            setup_logging()

            assert len(root.handlers) == 1
            assert isinstance(root.handlers[0].formatter, PrettyFormatter)
            assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)

    def test_setup_logging_json_with_file(self, monkeypatch, tmp_path):
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        monkeypatch.setattr(settings.logging, "LOG_FORMAT", "json")
        monkeypatch.setattr(settings.logging, "LOG_FILE", str(tmp_path / "logs" / "app.log"))
        try:
            setup_logging()

            assert len(root.handlers) == 2
            assert all(isinstance(h.formatter, CustomJsonFormatter) for h in root.handlers)
            assert (tmp_path / "logs" / "app.log").exists()
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers = saved_handlers
            root.setLevel(saved_level)


class TestExceptions:
    def test_unknown_loader_error_payload(self):
        error = UnknownLoaderError("yaml")

        assert isinstance(error, BaseFixtureError)
        assert error.to_dict() == {
            "detail": "Unknown loader type: yaml",
            "error_type": "unknown_loader",
            "extra": {"key": "yaml"},
        }

    def test_reference_error_message(self):
        error = ReferenceNotFoundError("user_admin")

        assert isinstance(error, KeyError)
        assert "user_admin" in str(error)
