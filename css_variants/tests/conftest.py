"""Pytest configuration for CSS Variants tests."""

import pytest
import logging

from ..core import Stylesheet, VariantRegistry

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

@pytest.fixture
def registry():
    """Return a registry built from the default tables."""
    return VariantRegistry()

@pytest.fixture
def sheet(registry):
    """Return an empty stylesheet."""
    return Stylesheet(registry)

@pytest.fixture
def color():
    """Return a content callback emitting ``color`` from the option value."""
    def content(ctx):
        return {'color': ctx.value if ctx.value is not None else 'red'}
    return content

@pytest.fixture(scope='session')
def sample_colors():
    """Return a small colour scale."""
    return {
        'red': '#F00',
        'green': '#0F0',
    }

@pytest.fixture(scope='session')
def sample_config():
    """Return a configuration overriding breakpoints and media features."""
    return {
        'breakpoints': {
            'phone': 0,
            'tablet': '48em',
            'desktop': 1200,
        },
        'media_features': {
            'dark': '(prefers-color-scheme: dark)',
            'print': 'print',
            'reduced': '(prefers-reduced-motion: reduce)',
        },
    }
