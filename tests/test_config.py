import logging

import pytest
from pydantic import ValidationError

from src.chatline.config import Settings, setup_logging


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    root.setLevel(level)
    root.handlers = handlers


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)

    config = Settings(_env_file=None)

    assert config.LOG_LEVEL == "INFO"
    assert config.DEBUG is False


def test_log_level_from_env_is_normalized(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    assert Settings(_env_file=None).LOG_LEVEL == "WARNING"


def test_unknown_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_setup_logging_applies_level(restore_root_level):
    setup_logging(Settings(_env_file=None, LOG_LEVEL="ERROR", DEBUG=False))
    assert logging.getLogger().level == logging.ERROR


def test_setup_logging_debug_overrides_level(restore_root_level):
    setup_logging(Settings(_env_file=None, LOG_LEVEL="ERROR", DEBUG=True))
    assert logging.getLogger().level == logging.DEBUG
