"""
tests/test_logging_config.py
==============================
Tests for core.logging_config — handlers, level handling and old-log cleanup.
"""
import logging
import os
import time

import pytest

from core.config import Config
from core.logging_config import (
    LOG_FORMAT,
    ColoredFormatter,
    LoggingConfig,
    parse_level,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in saved_handlers:
            root.removeHandler(handler)
            if isinstance(handler, logging.FileHandler):
                handler.close()
    for handler in saved_handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(saved_level)


def _flush():
    for handler in logging.getLogger().handlers:
        handler.flush()


class TestSetupLogging:

    def test_writes_to_daily_file(self, tmp_path, restore_root_logger):
        log_file = LoggingConfig.setup_logging(log_level="INFO", log_dir=str(tmp_path), enable_console=False)
        logging.getLogger("passfield.test").info("hello from test")
        _flush()

        assert log_file.parent == tmp_path
        assert log_file.name.startswith("log_")
        content = log_file.read_text(encoding="utf-8")
        assert "hello from test" in content

    def test_file_lines_carry_logger_name(self, tmp_path, restore_root_logger):
        log_file = LoggingConfig.setup_logging(log_level="DEBUG", log_dir=str(tmp_path), enable_console=False)
        logging.getLogger("core.form_model").debug("state moved")
        _flush()

        assert "[DEBUG] core.form_model: state moved" in log_file.read_text(encoding="utf-8")

    def test_console_uses_the_file_format(self, tmp_path, restore_root_logger):
        LoggingConfig.setup_logging(log_level="INFO", log_dir=str(tmp_path))
        formats = {
            handler.formatter._fmt
            for handler in logging.getLogger().handlers
        }
        assert formats == {LOG_FORMAT}

    def test_level_from_argument(self, tmp_path, restore_root_logger):
        LoggingConfig.setup_logging(log_level="warning", log_dir=str(tmp_path), enable_console=False)
        assert logging.getLogger().level == logging.WARNING

    def test_level_from_environment(self, tmp_path, restore_root_logger, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        LoggingConfig.setup_logging(log_dir=str(tmp_path), enable_console=False)
        assert logging.getLogger().level == logging.DEBUG

    def test_bad_level_falls_back_to_info(self, tmp_path, restore_root_logger):
        LoggingConfig.setup_logging(log_level="chatty", log_dir=str(tmp_path), enable_console=False)
        assert logging.getLogger().level == logging.INFO


class TestStartupOrder:

    def test_config_messages_reach_the_log_file(self, tmp_path, restore_root_logger):
        env_file = tmp_path / ".env"
        env_file.write_text("", encoding="utf-8")
        log_file = LoggingConfig.setup_logging(log_level="INFO", log_dir=str(tmp_path / "logs"), enable_console=False)

        Config(env_file=env_file, config_file=tmp_path / "missing.json")
        _flush()

        assert "Environment variables loaded" in log_file.read_text(encoding="utf-8")

    def test_set_level_after_config(self, tmp_path, restore_root_logger):
        LoggingConfig.setup_logging(log_level="INFO", log_dir=str(tmp_path), enable_console=False)
        assert LoggingConfig.set_level("error") == logging.ERROR
        assert logging.getLogger().level == logging.ERROR


@pytest.mark.parametrize("name,expected", [
    ("debug", logging.DEBUG),
    ("WARNING", logging.WARNING),
    (" error ", logging.ERROR),
    ("chatty", logging.INFO),
    (None, logging.INFO),
])
def test_parse_level(name, expected):
    assert parse_level(name) == expected


class TestCleanup:

    def test_removes_only_old_files(self, tmp_path):
        old = tmp_path / "log_20200101.log"
        new = tmp_path / "log_today.log"
        old.write_text("old")
        new.write_text("new")
        long_ago = time.time() - 60 * 60 * 24 * 90
        os.utime(old, (long_ago, long_ago))

        assert LoggingConfig.cleanup_old_logs(log_dir=str(tmp_path), days_to_keep=30) == 1
        assert not old.exists()
        assert new.exists()

    def test_other_files_are_left_alone(self, tmp_path):
        notes = tmp_path / "notes.txt"
        notes.write_text("keep")
        long_ago = time.time() - 60 * 60 * 24 * 90
        os.utime(notes, (long_ago, long_ago))

        assert LoggingConfig.cleanup_old_logs(log_dir=str(tmp_path), days_to_keep=30) == 0
        assert notes.exists()

    def test_missing_dir(self, tmp_path):
        assert LoggingConfig.cleanup_old_logs(log_dir=str(tmp_path / "nope")) == 0


def test_colored_formatter_wraps_line_and_leaves_record_untouched():
    record = logging.LogRecord("core.config", logging.ERROR, __file__, 1, "boom", None, None)
    out = ColoredFormatter("%(levelname)s %(name)s: %(message)s").format(record)
    assert out == "\033[31mERROR core.config: boom\033[0m"
    assert record.levelname == "ERROR"
