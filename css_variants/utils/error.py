"""Error utility for CSS Variants."""

class CSSVariantsError(Exception):
    """Base exception for CSS Variants."""
    pass

class ValidationError(CSSVariantsError):
    """Raised when validation fails."""
    pass

class SelectorError(ValidationError):
    """Raised when a selector cannot be rewritten.

    The last segment of every rewritten selector must be a class selector.
    """
    pass

class FileOperationError(CSSVariantsError):
    """Raised when file operations fail."""
    pass

class ConfigurationError(CSSVariantsError):
    """Raised when configuration is invalid."""
    pass

# Exported exceptions
__all__ = [
    'CSSVariantsError',
    'ValidationError',
    'SelectorError',
    'FileOperationError',
    'ConfigurationError',
]
