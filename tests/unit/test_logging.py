"""Tests for logging module."""
import logging
import os
import tempfile

import pytest

import urlzip
from urlzip.core.backend import BackendLoader
from urlzip.core.config import CodecConfig
from urlzip.core.logging import LogLevel, get_logger, configure_logging


@pytest.fixture(autouse=True)
def reset_logger():
    """Reset package logger state around each test."""
    logger = logging.getLogger('urlzip')
    saved_level = logger.level
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(saved_level)


class TestGetLogger:
    """Test suite for get_logger function."""

    def test_get_logger_with_name(self):
        """Test getting logger with name."""
        assert get_logger('test_module').name == 'urlzip.test_module'

    def test_get_logger_without_name(self):
        """Test getting logger without name."""
        assert get_logger().name == 'urlzip'

    def test_get_logger_keeps_qualified_name(self):
        assert get_logger('urlzip.backend').name == 'urlzip.backend'

    def test_get_logger_propagates(self):
        logger = get_logger('test')

        assert isinstance(logger, logging.Logger)
        assert logger.propagate


class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_with_defaults(self):
        """Test configure with default parameters."""
        logger = configure_logging()

        assert len(logger.handlers) == 1  # Console handler
        assert logger.level == logging.INFO

    def test_configure_with_level(self):
        logger = configure_logging(level=LogLevel.ERROR)

        assert logger.level == logging.ERROR

    def test_configure_without_console(self):
        logger = configure_logging(enable_console=False)

        assert len(logger.handlers) == 0

    def test_configure_replaces_handlers(self):
        """Test repeated calls do not stack handlers."""
        configure_logging()
        logger = configure_logging()

        assert len(logger.handlers) == 1

    def test_configure_with_file(self):
        """Test configure with file logging."""
        with tempfile.NamedTemporaryFile(delete=False, suffix='.log') as f:
            filepath = f.name

        try:
            logger = configure_logging(level=LogLevel.DEBUG, log_file=filepath, enable_console=False)
            logger.debug("written to file")
            for handler in logger.handlers:
                handler.flush()

            assert len(logger.handlers) == 1
            with open(filepath, encoding='utf-8') as log:
                assert "written to file" in log.read()
        finally:
            for handler in list(logging.getLogger('urlzip').handlers):
                logging.getLogger('urlzip').removeHandler(handler)
                handler.close()
            os.unlink(filepath)


class TestSetupLogging:
    """Test suite for the package-level helper."""

    def test_sets_package_loggers(self):
        urlzip.setup_logging(logging.DEBUG)

        assert logging.getLogger('urlzip').level == logging.DEBUG
        assert logging.getLogger('urlzip.backend').level == logging.DEBUG


class TestLibraryLeavesLevels:
    """Constructing package objects must not change logger levels."""

    @pytest.fixture
    def backend_logger(self):
        logger = logging.getLogger('urlzip.backend')
        saved_level = logger.level
        yield logger
        logger.setLevel(saved_level)

    @pytest.mark.parametrize("level", [logging.DEBUG, logging.ERROR])
    def test_loader_keeps_configured_level(self, backend_logger, level):
        backend_logger.setLevel(level)

        BackendLoader()
        urlzip.StrCompressor()

        assert backend_logger.level == level

    def test_loader_keeps_level_without_root_handlers(self, backend_logger, monkeypatch):
        """Test the level survives even before the application configures logging."""
        monkeypatch.setattr(logging.getLogger(), 'handlers', [])
        backend_logger.setLevel(logging.INFO)

        BackendLoader(config=CodecConfig.inline())

        assert backend_logger.level == logging.INFO


class TestLogLevel:
    """Test suite for LogLevel enum."""

    @pytest.mark.parametrize("level, value", [
        (LogLevel.DEBUG, logging.DEBUG),
        (LogLevel.INFO, logging.INFO),
        (LogLevel.WARNING, logging.WARNING),
        (LogLevel.ERROR, logging.ERROR),
        (LogLevel.CRITICAL, logging.CRITICAL),
    ])
    def test_values(self, level, value):
        assert level.value == value
