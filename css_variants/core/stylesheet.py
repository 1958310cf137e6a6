"""Stylesheet builder: selector/media context stack, rule collection and rendering."""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

import csscompressor
from typing_extensions import TypeAlias

from ..utils.config import INDENT
from ..utils.error import SelectorError
from ..utils.file import safe_write_file
from .registry import VariantRegistry, default_registry
from .selector import SelectorList, as_selector_list, nest_selectors
from .validator import validate_selector, validate_stylesheet

logger = logging.getLogger(__name__)

Declarations: TypeAlias = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]

@dataclass(frozen=True)
class Context:
    """What a content callback sees when it is invoked."""
    selectors: SelectorList
    media: Tuple[str, ...] = ()
    key: Any = None
    value: Any = None

    @property
    def selector(self) -> str:
        return ', '.join(self.selectors)

    @property
    def media_query(self) -> Optional[str]:
        return ' and '.join(self.media) if self.media else None

Content: TypeAlias = Callable[[Context], Optional[Declarations]]

@dataclass(frozen=True)
class Rule:
    """A single emitted rule, optionally wrapped in a media block."""
    selectors: SelectorList
    declarations: Tuple[Tuple[str, str], ...]
    media: Tuple[str, ...] = ()

    @property
    def selector(self) -> str:
        return ', '.join(self.selectors)

    @property
    def media_query(self) -> Optional[str]:
        return ' and '.join(self.media) if self.media else None

    def to_css(self, indent: str = INDENT) -> str:
        """Render the rule in expanded form."""
        depth = indent if self.media else ''
        lines = [f"{depth}{self.selector} {{"]
        for prop, value in self.declarations:
            lines.append(f"{depth}{indent}{prop}: {value};")
        lines.append(f"{depth}}}")
        if self.media:
            lines = [f"@media {self.media_query} {{"] + lines + ['}']
        return '\n'.join(lines)

def normalize_declarations(declarations: Optional[Declarations]) -> Tuple[Tuple[str, str], ...]:
    """Turn a mapping or pair iterable into ordered ``(property, value)`` strings."""
    if not declarations:
        return ()
    items = declarations.items() if isinstance(declarations, Mapping) else declarations
    return tuple((str(prop), str(value)) for prop, value in items if value is not None)

class Stylesheet:
    """Collects rules while selector and media contexts are pushed and popped.

    Example::

        sheet = Stylesheet()
        with sheet.rule('.text'):
            options(sheet, {'red': '#F00'}, ['hover'],
                    lambda ctx: {'color': ctx.value})
        print(sheet.render())
    """

    def __init__(self, registry: Optional[VariantRegistry] = None):
        # Per-sheet copy, the shared default stays untouched
        self.registry = default_registry().copy() if registry is None else registry
        self._rules: List[Rule] = []
        self._selectors: SelectorList = ()
        self._media: Tuple[str, ...] = ()

    @property
    def selectors(self) -> SelectorList:
        """Current selector context, empty at top level."""
        return self._selectors

    @property
    def media_stack(self) -> Tuple[str, ...]:
        """Enclosing media queries, outermost first."""
        return self._media

    @property
    def rules(self) -> List[Rule]:
        return list(self._rules)

    def context(self, key: Any = None, value: Any = None) -> Context:
        return Context(self._selectors, self._media, key, value)

    @contextmanager
    def rule(self, selector: Union[str, Iterable[str]]) -> Iterator[Context]:
        """Nest a selector under the current context.

        Raises:
            SelectorError: If a selector is malformed
        """
        children = as_selector_list(selector)
        for child in children:
            if not validate_selector(child):
                message = f"Malformed selector: '{child}'"
                logger.error(message)
                raise SelectorError(message)
        selectors = nest_selectors(self._selectors, children)
        with self.at_root(selectors) as ctx:
            yield ctx

    @contextmanager
    def at_root(self, selectors: Union[str, Iterable[str]]) -> Iterator[Context]:
        """Replace the selector context, keeping the media context."""
        previous = self._selectors
        self._selectors = as_selector_list(selectors)
        try:
            yield self.context()
        finally:
            self._selectors = previous

    @contextmanager
    def media(self, query: str) -> Iterator[Context]:
        """Open a media block, AND-combined with enclosing ones."""
        previous = self._media
        self._media = previous + (query,)
        try:
            yield self.context()
        finally:
            self._media = previous

    def declare(self, declarations: Declarations) -> Optional[Rule]:
        """Emit a rule for the current context."""
        normalized = normalize_declarations(declarations)
        if not normalized:
            return None
        rule = Rule(self._selectors, normalized, self._media)
        self._rules.append(rule)
        return rule

    def include(self, content: Content, key: Any = None, value: Any = None) -> Optional[Rule]:
        """Invoke a content callback for the current context.

        Declarations returned by the callback are emitted ahead of any rules
        the callback emitted through nested expansions.
        """
        position = len(self._rules)
        declarations = normalize_declarations(content(self.context(key, value)))
        if not declarations:
            return None
        rule = Rule(self._selectors, declarations, self._media)
        self._rules.insert(position, rule)
        return rule

    def clear(self) -> None:
        self._rules.clear()

    def render(self, minify: bool = False) -> str:
        """Render all collected rules.

        Args:
            minify: Compress the output with csscompressor

        Returns:
            Stylesheet text
        """
        css = '\n'.join(rule.to_css() for rule in self._rules)
        if css:
            css += '\n'
        if minify and css:
            css = csscompressor.compress(css)
        logger.debug(f"Rendered {len(self._rules)} rules ({len(css)} characters)")
        return css

    def validate(self) -> bool:
        return validate_stylesheet(self.render())

    def save(self, path: str, minify: bool = False) -> str:
        """Render and write the stylesheet to ``path``."""
        css = self.render(minify=minify)
        safe_write_file(path, css)
        logger.info(f"Wrote {len(self._rules)} rules to {path}")
        return css

    def __len__(self) -> int:
        return len(self._rules)

    def __str__(self) -> str:
        return self.render()

# Exported names
__all__ = [
    'Declarations',
    'Content',
    'Context',
    'Rule',
    'Stylesheet',
    'normalize_declarations',
]
