import logging

import pytest
from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from cmdparse.utils import setup_logging, verbosity_to_level


@pytest.fixture(autouse=True)
def package_logger():
    """Restore the cmdparse logger after each test."""
    logger = logging.getLogger("cmdparse")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.mark.parametrize(
    "verbosity,level",
    [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
)
def test_verbosity_to_level(verbosity, level):
    assert verbosity_to_level(verbosity) == level


def test_cli_mode_uses_rich_handler(package_logger):
    setup_logging(mode="cli", verbosity=1)
    (handler,) = package_logger.handlers
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.INFO
    assert package_logger.level == logging.INFO
    assert not package_logger.propagate


def test_json_mode_uses_json_formatter(package_logger):
    setup_logging(mode="json")
    (handler,) = package_logger.handlers
    assert isinstance(handler.formatter, JsonFormatter)
    assert package_logger.level == logging.WARNING


def test_mode_from_environment(package_logger, monkeypatch):
    monkeypatch.setenv("CMDPARSE_LOG_MODE", "json")
    setup_logging()
    (handler,) = package_logger.handlers
    assert isinstance(handler.formatter, JsonFormatter)


def test_defaults_to_cli_mode(package_logger, monkeypatch):
    monkeypatch.delenv("CMDPARSE_LOG_MODE", raising=False)
    setup_logging()
    (handler,) = package_logger.handlers
    assert isinstance(handler, RichHandler)


def test_second_call_replaces_handlers(package_logger):
    setup_logging(mode="cli")
    setup_logging(mode="json", verbosity=2)
    (handler,) = package_logger.handlers
    assert isinstance(handler.formatter, JsonFormatter)
    assert handler.level == logging.DEBUG


def test_root_logger_is_untouched(package_logger):
    root = logging.getLogger()
    before = list(root.handlers)
    setup_logging(mode="cli")
    assert root.handlers == before


def test_invalid_mode_leaves_handlers_alone(package_logger):
    before = list(package_logger.handlers)
    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging(mode="xml")
    assert package_logger.handlers == before


def test_file_handler_records_debug(package_logger, tmp_path):
    log_file = tmp_path / "cmdparse.log"
    setup_logging(mode="cli", log_filename=str(log_file), json_log_to_file=True)
    console_handler, file_handler = package_logger.handlers
    assert console_handler.level == logging.WARNING
    assert isinstance(file_handler.formatter, JsonFormatter)
    package_logger.debug("written")
    file_handler.flush()
    assert "written" in log_file.read_text()
