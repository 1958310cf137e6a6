"""CSS Variants: generate utility classes with variant prefixes and option families."""

from .core import (
    append_option,
    append_variant,
    escape_prefix,
    split_selectors,
    Variant,
    VariantKind,
    VariantRegistry,
    default_registry,
    Context,
    Rule,
    Stylesheet,
    NO_KEY,
    variants,
    options,
    responsive,
    light,
    dark,
    colorschemes,
    print_,
    validate_selector,
    validate_stylesheet,
)
from .utils.config import VERSION
from .utils.error import (
    CSSVariantsError,
    ValidationError,
    SelectorError,
    FileOperationError,
    ConfigurationError,
)
from .utils.logging import setup_logging, get_logger

__version__ = VERSION

__all__ = [
    'append_option',
    'append_variant',
    'escape_prefix',
    'split_selectors',
    'Variant',
    'VariantKind',
    'VariantRegistry',
    'default_registry',
    'Context',
    'Rule',
    'Stylesheet',
    'NO_KEY',
    'variants',
    'options',
    'responsive',
    'light',
    'dark',
    'colorschemes',
    'print_',
    'validate_selector',
    'validate_stylesheet',
    'CSSVariantsError',
    'ValidationError',
    'SelectorError',
    'FileOperationError',
    'ConfigurationError',
    'setup_logging',
    'get_logger',
]
