"""
Tests for configuration and logging setup.
"""

import io
import logging

import pytest

from education_platform.config.logging_config import (
    NO_CORRELATION_ID,
    correlation_id_var,
    correlation_scope,
    setup_logging,
)
from education_platform.config.settings import (
    Config,
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    get_config,
)


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    package_level = logging.getLogger("education_platform").level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    logging.getLogger("education_platform").setLevel(package_level)


class TestConfig:
    def test_defaults(self):
        assert isinstance(Config.FRAUD_MIN_COMPLETION_RATIO, float)
        assert "%(correlation_id)s" in Config.LOG_FORMAT

    def test_get_config(self):
        assert get_config("testing") is TestingConfig
        assert get_config("production") is ProductionConfig
        assert get_config("unknown") is DevelopmentConfig


class TestLogging:
    def test_package_logs_carry_correlation_id(self, restore_root_logger):
        stream = io.StringIO()
        setup_logging(level="DEBUG", stream=stream)
        with correlation_scope("req-42"):
            logging.getLogger("education_platform.tests").debug("chapter added")
        assert correlation_id_var.get() == NO_CORRELATION_ID
        output = stream.getvalue()
        assert "[req-42]" in output
        assert "chapter added" in output

    def test_default_correlation_id(self, restore_root_logger):
        stream = io.StringIO()
        setup_logging(level="INFO", stream=stream)
        logging.getLogger("education_platform.tests").info("no request")
        assert f"[{NO_CORRELATION_ID}]" in stream.getvalue()

    def test_other_loggers_stay_at_warning(self, restore_root_logger):
        stream = io.StringIO()
        setup_logging(level="DEBUG", stream=stream)
        logging.getLogger("thirdparty").info("noise")
        assert "noise" not in stream.getvalue()

    def test_file_handler(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "logs" / "app.log"
        setup_logging(level="INFO", log_file=str(log_file), stream=io.StringIO())
        logging.getLogger("education_platform.tests").info("to file")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "to file" in log_file.read_text(encoding="utf-8")

    def test_repeated_setup_replaces_handlers(self, restore_root_logger):
        first, second = io.StringIO(), io.StringIO()
        setup_logging(level="INFO", stream=first)
        setup_logging(level="INFO", stream=second)
        logging.getLogger("education_platform.tests").info("once")
        assert "once" not in first.getvalue()
        assert second.getvalue().count("once") == 1

    def test_level_and_file_fall_back_to_config(self, restore_root_logger, tmp_path):
        class FileConfig(TestingConfig):
            LOG_LEVEL = "WARNING"
            LOG_FILE = str(tmp_path / "platform.log")

        stream = io.StringIO()
        setup_logging(stream=stream, config=FileConfig)
        logging.getLogger("education_platform.tests").info("hidden")
        logging.getLogger("education_platform.tests").warning("shown")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hidden" not in stream.getvalue()
        assert "shown" in (tmp_path / "platform.log").read_text(encoding="utf-8")
