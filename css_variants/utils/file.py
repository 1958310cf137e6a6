"""File utility for CSS Variants."""

import os
import logging
from typing import Any, Dict

import orjson

from .error import FileOperationError, ConfigurationError

logger = logging.getLogger(__name__)

def ensure_directory(path: str) -> bool:
    """Ensure directory exists.

    Args:
        path: Directory path

    Returns:
        True if directory exists or was created

    Raises:
        FileOperationError: If directory creation fails
    """
    try:
        if path and not os.path.exists(path):
            os.makedirs(path)
        return True
    except OSError as e:
        raise FileOperationError(f"Failed to create directory {path}: {e}")

def safe_write_file(file_path: str, content: str, encoding: str = 'utf-8') -> bool:
    """Safely write content to a file.

    Args:
        file_path: Path to the file
        content: Content to write
        encoding: File encoding

    Returns:
        True if successful

    Raises:
        FileOperationError: If file write fails
    """
    try:
        ensure_directory(os.path.dirname(os.fspath(file_path)))
        with open(file_path, 'w', encoding=encoding) as f:
            f.write(content)
        return True
    except OSError as e:
        raise FileOperationError(f"Failed to write file {file_path}: {e}")

def safe_read_file(file_path: str, encoding: str = 'utf-8') -> str:
    """Safely read content from a file.

    Args:
        file_path: Path to the file
        encoding: File encoding

    Returns:
        File content

    Raises:
        FileOperationError: If file read fails
    """
    try:
        with open(file_path, 'r', encoding=encoding) as f:
            return f.read()
    except OSError as e:
        raise FileOperationError(f"Failed to read file {file_path}: {e}")

def read_json_file(file_path: str) -> Dict[str, Any]:
    """Read a JSON object from a file, keeping key order.

    Raises:
        FileOperationError: If the file cannot be read
        ConfigurationError: If the content is not a JSON object
    """
    content = safe_read_file(file_path)
    try:
        data = orjson.loads(content)
    except orjson.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {file_path}: {e}")
        raise ConfigurationError(f"Invalid JSON in {file_path}: {e}")
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a JSON object in {file_path}")
    return data

# Exported functions
__all__ = ['ensure_directory', 'safe_write_file', 'safe_read_file', 'read_json_file']
