import logging

import pytest

import config
from logger import get_loggers, reset_logging, setup_logging


@pytest.fixture
def logs_folder(monkeypatch, tmp_path):
    folder = tmp_path / "logs"
    monkeypatch.setattr(config, "LOGS_FOLDER", str(folder))
    yield folder
    reset_logging()


def test_setup_creates_log_files(logs_folder):
    loggers = setup_logging()

    assert set(loggers) == {"app", "error", "debug"}
    for name in ("app.log", "error.log", "debug.log"):
        assert (logs_folder / name).exists()


def test_setup_is_idempotent(logs_folder):
    setup_logging()
    setup_logging()

    for logger in get_loggers().values():
        assert len(logger.handlers) == 1


def test_error_logger_only_records_errors(logs_folder):
    loggers = setup_logging()

    loggers["error"].warning("ignored")
    loggers["error"].error("kept")
    for handler in loggers["error"].handlers:
        handler.flush()

    content = (logs_folder / "error.log").read_text()
    assert "kept" in content
    assert "ignored" not in content


def test_reset_leaves_foreign_handlers(logs_folder):
    foreign = logging.NullHandler()
    root = logging.getLogger()
    root.addHandler(foreign)
    try:
        setup_logging()
        reset_logging()
        assert foreign in root.handlers
    finally:
        root.removeHandler(foreign)
