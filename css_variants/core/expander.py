"""Variant and option expansion over a Stylesheet's selector context."""

import logging
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from ..utils.config import (
    DARK_VARIANT,
    LIGHT_VARIANT,
    PRINT_VARIANT,
    RESPONSIVE_VARIANT,
)
from ..utils.error import SelectorError
from .registry import VariantKind
from .selector import SelectorList, append_option, append_variant
from .stylesheet import Content, Stylesheet

logger = logging.getLogger(__name__)

# Option key meaning "no suffix, use the enclosing class as-is"
NO_KEY = None

OptionSet = Union[Mapping[Any, Any], Sequence[Any]]

def iter_options(option_set: Optional[OptionSet]) -> Iterator[Tuple[Any, Any]]:
    """Yield ``(key, value)`` pairs; plain sequences use each value as its key."""
    if not option_set:
        return
    if isinstance(option_set, Mapping):
        yield from option_set.items()
    else:
        for value in option_set:
            yield value, value

def option_suffix(key: Any) -> str:
    """Class suffix for an option key, empty for NO_KEY."""
    if key is NO_KEY:
        return ''
    return str(key)

def partition_variants(sheet: Stylesheet,
                       names: Optional[Iterable[str]]) -> Tuple[List[str], List[str], bool]:
    """Split requested variants into structural and conditional names.

    Returns:
        ``(structural, conditional, print_requested)``; ``print`` is never in
        either list
    """
    structural, conditional = [], []
    wants_print = False
    for name in names or ():
        if name == PRINT_VARIANT:
            wants_print = True
        elif sheet.registry.kind(name) is VariantKind.PSEUDO:
            structural.append(name)
        else:
            conditional.append(name)
    return structural, conditional, wants_print

def structural_selectors(base: SelectorList, structural: Sequence[str]) -> SelectorList:
    """The base selectors followed by one pseudo-class rewrite per variant."""
    selectors = list(base)
    for name in structural:
        selectors.extend(append_variant(base, name))
    return tuple(selectors)

def expand(sheet: Stylesheet, base: SelectorList, names: Optional[Iterable[str]],
           content: Content, key: Any = None, value: Any = None) -> None:
    """Run variant expansion for an explicit base selector list."""
    structural, conditional, wants_print = partition_variants(sheet, names)
    combined = structural_selectors(base, structural)
    logger.debug(f"Expanding {', '.join(base)} with structural={structural} "
                 f"conditional={conditional} print={wants_print}")

    with sheet.at_root(combined):
        sheet.include(content, key, value)

    for name in conditional:
        variant = sheet.registry.get(name)
        for prefix, query in variant.conditions():
            with sheet.media(query), sheet.at_root(append_variant(combined, prefix, media=True)):
                sheet.include(content, key, value)

    if wants_print:
        query = sheet.registry.query(PRINT_VARIANT) or PRINT_VARIANT
        with sheet.media(query), sheet.at_root(append_variant(base, PRINT_VARIANT, media=True)):
            sheet.include(content, key, value)

def variants(sheet: Stylesheet, names: Optional[Iterable[str]], content: Content) -> None:
    """Emit the current selector plus one copy per requested variant.

    Pseudo-class variants share one combined rule; each conditional variant
    (or family member) gets its own media block, and ``print`` its own print
    block.

    Raises:
        SelectorError: Without a selector context, or if the context does not
            end in a class selector
    """
    base = sheet.selectors
    if not base:
        message = "variants() requires an enclosing class selector context"
        logger.error(message)
        raise SelectorError(message)
    expand(sheet, base, names, content)

def options(sheet: Stylesheet, option_set: Optional[OptionSet],
            names: Optional[Iterable[str]], content: Content) -> None:
    """Emit one class per option, each expanded with the requested variants.

    Inside a selector context the option key is appended as ``-key`` to the
    context's class; at top level the key itself becomes the class and keyless
    entries are skipped. The content callback receives the option key and
    value through its context.
    """
    base = sheet.selectors
    for key, value in iter_options(option_set):
        suffix = option_suffix(key)
        if base:
            target = append_option(base, suffix)
        elif suffix:
            target = (f".{suffix}",)
        else:
            logger.warning(f"Skipping option {value!r} without a key at top level")
            continue
        expand(sheet, target, names, content, key, value)

def responsive(sheet: Stylesheet, content: Content) -> None:
    variants(sheet, [RESPONSIVE_VARIANT], content)

def light(sheet: Stylesheet, content: Content) -> None:
    variants(sheet, [LIGHT_VARIANT], content)

def dark(sheet: Stylesheet, content: Content) -> None:
    variants(sheet, [DARK_VARIANT], content)

def colorschemes(sheet: Stylesheet, content: Content) -> None:
    variants(sheet, [LIGHT_VARIANT, DARK_VARIANT], content)

def print_(sheet: Stylesheet, content: Content) -> None:
    """Shorthand for the ``print`` variant."""
    variants(sheet, [PRINT_VARIANT], content)

# Exported names
__all__ = [
    'NO_KEY',
    'OptionSet',
    'iter_options',
    'option_suffix',
    'partition_variants',
    'structural_selectors',
    'expand',
    'variants',
    'options',
    'responsive',
    'light',
    'dark',
    'colorschemes',
    'print_',
]
