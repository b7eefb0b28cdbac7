"""
Tests for Settings loading from the environment.
"""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

import main
from app.config import Environment, Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("DB_CONNECTION", raising=False)
    s = Settings(_env_file=None)

    assert s.db_connection is None
    assert s.port == 3000
    assert s.foods_collection == "foods"
    assert s.mongo_db_name == "test"
    assert s.environment == Environment.DEVELOPMENT
    assert s.reload is False


def test_connection_string_from_environment(monkeypatch):
    monkeypatch.setenv("DB_CONNECTION", "mongodb+srv://user:pw@cluster0.example.net/pantry")
    s = Settings(_env_file=None)
    assert s.db_connection == "mongodb+srv://user:pw@cluster0.example.net/pantry"


def test_environment_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "PRODUCTION")
    s = Settings(_env_file=None)
    assert s.is_production()
    assert not s.is_development()


def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert Settings(_env_file=None).log_level == "DEBUG"


def test_invalid_log_level_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_port_out_of_range_rejected(monkeypatch):
    monkeypatch.setenv("PORT", "70000")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_run_does_not_reload_by_default():
    with patch.object(main.uvicorn, "run") as uvicorn_run:
        main.run()

    uvicorn_run.assert_called_once()
    args, kwargs = uvicorn_run.call_args
    assert args == ("main:app",)
    assert kwargs["reload"] is False
    assert kwargs["port"] == main.settings.port


def test_reload_is_opt_in(monkeypatch):
    monkeypatch.setenv("RELOAD", "true")
    assert Settings(_env_file=None).reload is True


def test_unknown_environment_rejected(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "testing")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
