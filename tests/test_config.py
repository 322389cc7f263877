import io
import logging

import pytest
from pydantic import ValidationError

from smsledger import logging_setup
from smsledger.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.api_port == 8000
    assert settings.max_batch_size == 1000
    assert (settings.sender_column, settings.body_column, settings.timestamp_column) == ("address", "body", "date")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SMSLEDGER_MAX_BATCH_SIZE", "25")
    monkeypatch.setenv("SMSLEDGER_BODY_COLUMN", "text")
    settings = Settings(_env_file=None)
    assert settings.max_batch_size == 25
    assert settings.body_column == "text"


def test_batch_size_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, max_batch_size=0)


@pytest.fixture
def fresh_logging(monkeypatch):
    logger = logging.getLogger("smsledger")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    monkeypatch.setattr(logging_setup, "_CONFIGURED", False)
    for handler in saved[0]:
        logger.removeHandler(handler)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handlers, level, logger.propagate = saved
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)


def _writing_to(logger, stream):
    return [h for h in logger.handlers if isinstance(h, logging.StreamHandler) and h.stream is stream]


def test_configure_logging_is_idempotent(fresh_logging):
    stream, ignored = io.StringIO(), io.StringIO()
    logging_setup.configure_logging("DEBUG", stream=stream)
    logging_setup.configure_logging("ERROR", stream=ignored)

    assert len(_writing_to(fresh_logging, stream)) == 1
    assert _writing_to(fresh_logging, ignored) == []
    assert fresh_logging.level == logging.DEBUG

    logging_setup.get_logger("smsledger.bank.test").debug("gate rejected")
    assert "gate rejected" in stream.getvalue()
    assert ignored.getvalue() == ""


def test_level_from_environment(fresh_logging, monkeypatch):
    monkeypatch.setenv("SMSLEDGER_LOG_LEVEL", "warning")
    logging_setup.configure_logging(stream=io.StringIO())
    assert fresh_logging.level == logging.WARNING


def test_drop_reasons_are_logged_at_debug(fresh_logging, registry):
    stream = io.StringIO()
    logging_setup.configure_logging("DEBUG", stream=stream)
    registry.resolve("IDBIBK").parse("Your OTP is 123456", "IDBIBK", 0)
    assert "IDBI Bank: not a transaction message" in stream.getvalue()
