"""Selector rewriting for option suffixes and variant prefixes."""

import logging
from typing import Iterable, List, Optional, Tuple, Union

from ..utils.config import GROUP_PREFIX, GROUP_CLASS
from ..utils.error import SelectorError
from .validator import is_class_segment

logger = logging.getLogger(__name__)

SelectorList = Tuple[str, ...]

def split_selectors(text: str) -> SelectorList:
    """Split a comma-separated selector list.

    Commas nested inside parentheses or brackets (``:not(.a, .b)``) do not
    split the list.

    Args:
        text: Selector list text

    Returns:
        Tuple of stripped selectors
    """
    selectors = []
    depth = 0
    current = ''
    for char in text:
        if char in '([':
            depth += 1
        elif char in ')]':
            depth -= 1
        if char == ',' and depth == 0:
            selectors.append(current.strip())
            current = ''
        else:
            current += char
    if current.strip():
        selectors.append(current.strip())
    return tuple(s for s in selectors if s)

def as_selector_list(selectors: Union[str, Iterable[str]]) -> SelectorList:
    """Normalize a selector string or iterable into a selector tuple."""
    if isinstance(selectors, str):
        return split_selectors(selectors)
    return tuple(selectors)

COMBINATORS = ' \t\n>+~'

def split_last_compound(selector: str) -> Tuple[str, str]:
    """Split a selector before its last compound selector.

    Whitespace and the ``>``, ``+`` and ``~`` combinators separate compounds
    unless they are escaped or nested in parentheses or brackets.

    Returns:
        ``(head, last)`` where ``head`` keeps the trailing combinator text
    """
    selector = selector.strip()
    depth = 0
    escaped = False
    start = 0
    for index, char in enumerate(selector):
        if escaped:
            escaped = False
        elif char == '\\':
            escaped = True
        elif char in '([':
            depth += 1
        elif char in ')]':
            depth -= 1
        elif depth == 0 and char in COMBINATORS:
            start = index + 1
    return selector[:start], selector[start:]

def split_segments(selector: str) -> List[str]:
    """Split a selector into its compound segments, combinators dropped."""
    segments = []
    head = selector.strip()
    while head:
        head, last = split_last_compound(head)
        if last:
            segments.insert(0, last)
        head = head.rstrip(COMBINATORS)
    return segments

def class_token_end(compound: str) -> int:
    """Index just past the leading class name of a compound selector."""
    escaped = False
    for index in range(1, len(compound)):
        char = compound[index]
        if escaped:
            escaped = False
        elif char == '\\':
            escaped = True
        elif char in ':.[#':
            return index
    return len(compound)

def escape_prefix(name: str) -> str:
    """Return the class-name prefix for a variant, colon escaped."""
    return f"{name}\\:"

def _last_segment(selector: str, action: str) -> Tuple[str, str]:
    head, last = split_last_compound(selector)
    if not is_class_segment(last):
        message = f"Cannot {action} '{selector}': last segment is not a class selector"
        logger.error(message)
        raise SelectorError(message)
    return head, last

def append_option(selectors: Union[str, Iterable[str]],
                  option_name: Optional[str]) -> SelectorList:
    """Append ``-option_name`` to the class token of every selector.

    The suffix goes right after the class name, ahead of any pseudo-class or
    further simple selector in the same compound.

    Args:
        selectors: Selector list
        option_name: Option suffix; empty or None leaves selectors untouched

    Returns:
        Rewritten selector tuple

    Raises:
        SelectorError: If a last segment is not a class selector
    """
    selectors = as_selector_list(selectors)
    if option_name is None or option_name == '':
        return selectors

    result = []
    for selector in selectors:
        head, last = _last_segment(selector, f"append option '{option_name}' to")
        end = class_token_end(last)
        result.append(f"{head}{last[:end]}-{option_name}{last[end:]}")
    return tuple(result)

def append_variant(selectors: Union[str, Iterable[str]], variant_name: str,
                   media: bool = False) -> SelectorList:
    """Prefix the class token of every selector with ``variant_name\\:``.

    ``group-<state>`` variants replace the last segment with
    ``.group:<state>`` and re-append the prefixed class as a descendant.
    Other variants outside a media context also gain ``:variant_name`` as a
    pseudo-class.

    Args:
        selectors: Selector list
        variant_name: Variant to apply
        media: True when the variant is media-conditioned

    Returns:
        Rewritten selector tuple

    Raises:
        SelectorError: If a last segment is not a class selector
    """
    selectors = as_selector_list(selectors)
    prefix = escape_prefix(variant_name)

    result = []
    for selector in selectors:
        head, last = _last_segment(selector, f"apply variant '{variant_name}' to")
        prefixed = f".{prefix}{last[1:]}"
        if variant_name.startswith(GROUP_PREFIX):
            state = variant_name[len(GROUP_PREFIX):]
            result.append(f"{head}{GROUP_CLASS}:{state} {prefixed}")
        elif media:
            result.append(f"{head}{prefixed}")
        else:
            result.append(f"{head}{prefixed}:{variant_name}")
    return tuple(result)

def nest_selectors(parents: SelectorList, children: SelectorList) -> SelectorList:
    """Combine child selectors with their parents.

    ``&`` in a child is replaced by the parent selector, otherwise the child
    becomes a descendant of the parent.
    """
    if not parents:
        for child in children:
            if '&' in child:
                message = f"Parent reference '&' used outside a selector context: '{child}'"
                logger.error(message)
                raise SelectorError(message)
        return children

    nested = []
    for parent in parents:
        for child in children:
            if '&' in child:
                nested.append(child.replace('&', parent))
            else:
                nested.append(f"{parent} {child}")
    return tuple(nested)

# Exported functions
__all__ = [
    'SelectorList',
    'split_selectors',
    'as_selector_list',
    'split_last_compound',
    'split_segments',
    'class_token_end',
    'escape_prefix',
    'append_option',
    'append_variant',
    'nest_selectors',
]
