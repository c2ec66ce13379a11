import pytest
from pydantic import ValidationError
from underbar.core.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("UNDERBAR_LOG_LEVEL", raising=False)
    monkeypatch.delenv("UNDERBAR_RANDOM_SEED", raising=False)

    settings = Settings.load()
    assert settings.LOG_LEVEL == "INFO"
    assert settings.RANDOM_SEED is None


def test_load_from_environment(monkeypatch):
    monkeypatch.setenv("UNDERBAR_LOG_LEVEL", "debug")
    monkeypatch.setenv("UNDERBAR_RANDOM_SEED", "7")

    settings = Settings.load()
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.RANDOM_SEED == 7


def test_empty_variable_uses_default(monkeypatch):
    monkeypatch.setenv("UNDERBAR_RANDOM_SEED", "")
    assert Settings.load().RANDOM_SEED is None


def test_invalid_values_rejected(monkeypatch):
    monkeypatch.setenv("UNDERBAR_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        Settings.load()

    with pytest.raises(ValidationError):
        Settings(RANDOM_SEED=-1)
