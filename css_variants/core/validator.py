"""Core CSS validation functionality."""

import re
import logging

import cssutils

# Silence cssutils' own logger, parse errors are raised and logged here
cssutils.log.setLevel(logging.CRITICAL)

SELECTOR_PATTERN = re.compile(r'^(?:[a-zA-Z0-9_\-.*#:\[\]()=\'"\s>+~,&]|\\.)+$')

def is_class_segment(segment: str) -> bool:
    """Check whether a compound selector segment is a class selector."""
    return len(segment) > 1 and segment.startswith('.')

def validate_selector(selector: str) -> bool:
    """Validate a CSS selector."""
    try:
        # Check for empty selector
        if not selector or not selector.strip():
            return False

        # Check for valid selector syntax, escaped characters allowed
        if not SELECTOR_PATTERN.match(selector):
            return False

        # Check for balanced brackets
        if not is_balanced(selector, '[', ']'):
            return False

        # Check for balanced parentheses
        if not is_balanced(selector, '(', ')'):
            return False

        return True

    except TypeError as e:
        logging.error(f"Error validating selector: {e}")
        return False

def validate_stylesheet(content: str) -> bool:
    """Validate generated CSS by parsing it with cssutils.

    Args:
        content: Stylesheet text

    Returns:
        True if the stylesheet parses without errors
    """
    if not content or not content.strip():
        return False

    parser = cssutils.CSSParser(raiseExceptions=True, validate=False)
    try:
        parser.parseString(content)
        return True
    except Exception as e:
        logging.error(f"Error validating stylesheet: {e}")
        return False

def is_balanced(text: str, open_char: str, close_char: str) -> bool:
    """Check if brackets/parentheses are balanced in text."""
    count = 0
    escaped = False
    for char in text:
        if escaped:
            escaped = False
            continue
        if char == '\\':
            escaped = True
        elif char == open_char:
            count += 1
        elif char == close_char:
            count -= 1
            if count < 0:
                return False
    return count == 0

# Exported functions
__all__ = [
    'is_class_segment',
    'validate_selector',
    'validate_stylesheet',
    'is_balanced',
]
