"""Tests for CSS validation."""

import pytest

from ..core.validator import (
    is_balanced,
    is_class_segment,
    validate_selector,
    validate_stylesheet,
)

class TestSelectorValidation:
    """Tests for selector validation."""

    @pytest.mark.parametrize('selector', [
        '.text-red',
        r'.hover\:text-red:hover',
        r'.parent .group:hover .group-hover\:child',
        '.a > .b, .c:not(.d)',
        '[data-theme="dark"] .x',
    ])
    def test_valid(self, selector):
        """Test valid selectors."""
        assert validate_selector(selector)

    @pytest.mark.parametrize('selector', ['', '   ', '.a {', '.a:not(.b', '.a]', None])
    def test_invalid(self, selector):
        """Test invalid selectors."""
        assert not validate_selector(selector)

    def test_class_segment(self):
        """Test class segment detection."""
        assert is_class_segment('.a')
        assert is_class_segment(r'.dark\:a:hover')
        assert not is_class_segment('a')
        assert not is_class_segment('.')
        assert not is_class_segment('#a')

    def test_balanced_ignores_escapes(self):
        """Test escaped brackets are not counted."""
        assert is_balanced(r'.w-\[10px\]', '[', ']')
        assert is_balanced('.a:not(.b)', '(', ')')
        assert not is_balanced(').a(', '(', ')')

class TestStylesheetValidation:
    """Tests for stylesheet validation."""

    def test_valid(self):
        """Test a generated stylesheet parses."""
        css = '.text-red, .hover\\:text-red:hover {\n  color: #F00;\n}\n'
        assert validate_stylesheet(css)

    @pytest.mark.parametrize('css', ['', '   \n'])
    def test_empty(self, css):
        """Test empty content is rejected."""
        assert not validate_stylesheet(css)
