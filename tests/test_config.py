"""Settings — defaults and environment overrides."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from users_api.config import Settings


def test_defaults(monkeypatch):
    for var in ("USERS_FILE", "PORT", "LOG_FORMAT", "USERS_SERIALIZE_WRITES"):
        monkeypatch.delenv(var, raising=False)
    settings = Settings(_env_file=None)
    assert settings.users_file == Path("users.json")
    assert settings.port == 3000
    assert settings.users_file_autocreate is True
    assert settings.users_serialize_writes is False
    assert settings.log_format == "json"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("USERS_FILE", "/srv/data/people.json")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("USERS_SERIALIZE_WRITES", "true")
    monkeypatch.setenv("LOG_FORMAT", "TEXT")
    settings = Settings(_env_file=None)
    assert settings.users_file == Path("/srv/data/people.json")
    assert settings.port == 8080
    assert settings.users_serialize_writes is True
    assert settings.log_format == "text"


def test_rejects_unknown_log_format(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
