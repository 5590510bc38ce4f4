"""
Тесты для Structured Logging

Проверяет:
1. JSONFormatter: обязательные поля и extra поля векторов
2. setup_logging: подключение handler и уровень логгера пакета
"""

import json
import logging
import sys

import pytest

from src.core.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="src.core.domain.fixed_vector",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg="Constructed %s",
        args=("FixedVector[int, 3]",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Тесты JSONFormatter"""

    def test_required_fields(self):
        log = json.loads(JSONFormatter().format(_record()))
        assert log["level"] == "DEBUG"
        assert log["logger"] == "src.core.domain.fixed_vector"
        assert log["message"] == "Constructed FixedVector[int, 3]"
        assert "timestamp" in log
        assert "vector_type" not in log

    def test_extra_fields(self):
        record = _record(vector_type="FixedVector[int, 3]", operation="add_to_each_item", length=3)
        log = json.loads(JSONFormatter().format(record))
        assert log["vector_type"] == "FixedVector[int, 3]"
        assert log["operation"] == "add_to_each_item"
        assert log["length"] == 3

    def test_exception(self):
        try:
            raise IndexError("boom")
        except IndexError:
            record = _record()
            record.exc_info = sys.exc_info()
        log = json.loads(JSONFormatter().format(record))
        assert "IndexError: boom" in log["exception"]


    def test_custom_fields(self):
        record = _record(vector_type="FixedVector[int, 3]", operation="add_to_each_item")
        log = json.loads(JSONFormatter(fields=("operation",)).format(record))
        assert log["operation"] == "add_to_each_item"
        assert "vector_type" not in log


class TestSetupLogging:
    """Тесты setup_logging"""

    @pytest.fixture
    def package_logger(self):
        logger = logging.getLogger("src")
        level = logger.level
        handlers = list(logger.handlers)
        yield logger
        logger.handlers = handlers
        logger.setLevel(level)

    def test_json_handler(self, package_logger):
        handler = setup_logging(level="debug")
        assert handler in package_logger.handlers
        assert isinstance(handler.formatter, JSONFormatter)
        assert package_logger.level == logging.DEBUG

    def test_text_handler(self, package_logger):
        handler = setup_logging(level="WARNING", fmt="text")
        assert not isinstance(handler.formatter, JSONFormatter)
        assert package_logger.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, package_logger):
        setup_logging(level="chatty")
        assert package_logger.level == logging.INFO

    def test_repeated_setup_replaces_handler(self, package_logger):
        first = setup_logging()
        second = setup_logging(fmt="text")
        assert first not in package_logger.handlers
        assert second in package_logger.handlers
