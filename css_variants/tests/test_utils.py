"""Tests for CSS Variants utilities."""

import logging

import pytest

from ..utils.error import (
    ConfigurationError,
    CSSVariantsError,
    FileOperationError,
    SelectorError,
    ValidationError,
)
from ..utils.file import ensure_directory, read_json_file, safe_read_file, safe_write_file
from ..utils.logging import get_logger, setup_logging

class TestErrors:
    """Tests for the exception hierarchy."""

    def test_hierarchy(self):
        """Test every error derives from the base exception."""
        assert issubclass(SelectorError, ValidationError)
        for error in (ValidationError, FileOperationError, ConfigurationError):
            assert issubclass(error, CSSVariantsError)

class TestFile:
    """Tests for file helpers."""

    def test_write_and_read(self, tmp_path):
        """Test a round trip through nested directories."""
        path = tmp_path / 'a' / 'b' / 'out.css'
        assert safe_write_file(str(path), '.a{}')
        assert safe_read_file(str(path)) == '.a{}'

    def test_read_missing(self, tmp_path):
        """Test reading a missing file."""
        with pytest.raises(FileOperationError):
            safe_read_file(str(tmp_path / 'missing.css'))

    def test_write_into_file_path(self, tmp_path):
        """Test writing below a regular file fails."""
        blocker = tmp_path / 'blocker'
        blocker.write_text('x')
        with pytest.raises(FileOperationError):
            safe_write_file(str(blocker / 'out.css'), '.a{}')

    def test_ensure_directory(self, tmp_path):
        """Test directory creation."""
        target = tmp_path / 'x' / 'y'
        assert ensure_directory(str(target))
        assert target.is_dir()
        assert ensure_directory('')

    def test_read_json_keeps_order(self, tmp_path):
        """Test JSON objects keep key order."""
        path = tmp_path / 'config.json'
        path.write_text('{"b": 1, "a": 2}')
        assert list(read_json_file(str(path))) == ['b', 'a']

class TestLogging:
    """Tests for logging setup."""

    def test_get_logger(self):
        """Test named loggers."""
        assert get_logger('css_variants.test').name == 'css_variants.test'

    def test_setup_creates_log_directory(self, tmp_path):
        """Test the log directory is created."""
        log_file = tmp_path / 'logs' / 'css_variants.log'
        setup_logging('debug', str(log_file))
        assert log_file.parent.is_dir()
        assert log_file.exists()
        logging.getLogger('css_variants').info('logging configured')
