"""Core functionality for selector rewriting and variant expansion."""

from .selector import append_option, append_variant, escape_prefix, split_selectors
from .registry import Variant, VariantKind, VariantRegistry, default_registry
from .stylesheet import Context, Rule, Stylesheet
from .expander import (
    NO_KEY,
    variants,
    options,
    responsive,
    light,
    dark,
    colorschemes,
    print_,
)
from .validator import validate_selector, validate_stylesheet

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
    'validate_stylesheet'
]
