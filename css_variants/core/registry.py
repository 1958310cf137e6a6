"""Variant registry: maps variant names to pseudo-classes or media conditions."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from ..utils.config import BREAKPOINTS, MEDIA_FEATURES, RESPONSIVE_VARIANT
from ..utils.error import ConfigurationError
from ..utils.file import read_json_file

logger = logging.getLogger(__name__)

class VariantKind(Enum):
    """The closed set of variant kinds."""
    PSEUDO = 'pseudo'
    MEDIA = 'media'
    FAMILY = 'family'

@dataclass(frozen=True)
class Variant:
    """A resolved variant.

    ``query`` is set for MEDIA variants, ``members`` holds the ordered
    ``(name, query)`` pairs of a FAMILY.
    """
    name: str
    kind: VariantKind = VariantKind.PSEUDO
    query: Optional[str] = None
    members: Tuple[Tuple[str, str], ...] = ()

    @property
    def is_conditional(self) -> bool:
        return self.kind is not VariantKind.PSEUDO

    def conditions(self) -> Tuple[Tuple[str, str], ...]:
        """Return the ``(prefix, media query)`` pairs this variant expands to."""
        if self.kind is VariantKind.MEDIA:
            return ((self.name, self.query),)
        if self.kind is VariantKind.FAMILY:
            return self.members
        return ()

def min_width_query(width: Any) -> str:
    """Build a ``min-width`` media feature from a breakpoint width.

    Bare numbers are pixels; strings carrying a unit are used as given.
    """
    if isinstance(width, bool):
        raise ConfigurationError(f"Invalid breakpoint width: {width!r}")
    if isinstance(width, (int, float)):
        return f"(min-width: {width:g}px)"
    if isinstance(width, str) and width.strip():
        width = width.strip()
        try:
            return f"(min-width: {float(width):g}px)"
        except ValueError:
            return f"(min-width: {width})"
    raise ConfigurationError(f"Invalid breakpoint width: {width!r}")

def _is_zero_width(width: Any) -> bool:
    if isinstance(width, (int, float)) and not isinstance(width, bool):
        return width == 0
    if isinstance(width, str):
        stripped = width.strip().rstrip('abcdefghijklmnopqrstuvwxyz%')
        try:
            return float(stripped) == 0
        except ValueError:
            return False
    return False

def breakpoint_queries(breakpoints: Mapping[str, Any]) -> Dict[str, str]:
    """Turn a breakpoint table into ``name -> media query``, zero widths dropped."""
    return {
        name: min_width_query(width)
        for name, width in breakpoints.items()
        if not _is_zero_width(width)
    }

class VariantRegistry:
    """Lookup table of conditional variants.

    Names absent from the registry, or registered as ``None``, are plain
    pseudo-class variants.
    """

    def __init__(self, breakpoints: Optional[Mapping[str, Any]] = None,
                 media_features: Optional[Mapping[str, Any]] = None):
        """Initialize the registry.

        Args:
            breakpoints: Breakpoint table, defaults to BREAKPOINTS
            media_features: Media feature table, defaults to MEDIA_FEATURES

        Raises:
            ConfigurationError: If an entry cannot be interpreted
        """
        self._variants: Dict[str, Variant] = {}
        self.breakpoints = dict(BREAKPOINTS if breakpoints is None else breakpoints)
        self.register(RESPONSIVE_VARIANT, breakpoint_queries(self.breakpoints))
        features = MEDIA_FEATURES if media_features is None else media_features
        for name, feature in features.items():
            self.register(name, feature)
        logger.debug(f"Variant registry initialized with {len(self._variants)} variants")

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> 'VariantRegistry':
        """Build a registry from a ``breakpoints`` / ``media_features`` mapping."""
        unknown = set(config) - {'breakpoints', 'media_features'}
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        for key in ('breakpoints', 'media_features'):
            if key in config and not isinstance(config[key], Mapping):
                raise ConfigurationError(f"'{key}' must be a mapping")
        return cls(breakpoints=config.get('breakpoints'),
                   media_features=config.get('media_features'))

    @classmethod
    def from_file(cls, path: str) -> 'VariantRegistry':
        """Build a registry from a JSON configuration file."""
        logger.info(f"Loading variant configuration from {path}")
        return cls.from_config(read_json_file(path))

    def register(self, name: str, feature: Any) -> Variant:
        """Register or replace a variant.

        Args:
            name: Variant name
            feature: None (pseudo-class), a media query string, or a mapping
                of member name to media query (family)

        Returns:
            The registered variant
        """
        if not name or not isinstance(name, str):
            raise ConfigurationError(f"Invalid variant name: {name!r}")

        if feature is None:
            variant = Variant(name)
        elif isinstance(feature, str):
            if not feature.strip():
                raise ConfigurationError(f"Empty media query for variant '{name}'")
            variant = Variant(name, VariantKind.MEDIA, query=feature)
        elif isinstance(feature, Mapping):
            members = []
            for member, query in feature.items():
                if not isinstance(query, str) or not query.strip():
                    raise ConfigurationError(
                        f"Invalid media query for '{name}' member '{member}': {query!r}")
                members.append((str(member), query))
            variant = Variant(name, VariantKind.FAMILY, members=tuple(members))
        else:
            raise ConfigurationError(f"Invalid feature for variant '{name}': {feature!r}")

        self._variants[name] = variant
        return variant

    def unregister(self, name: str) -> None:
        self._variants.pop(name, None)

    def copy(self) -> 'VariantRegistry':
        """Return an independent registry holding the same variants."""
        clone = self.__class__.__new__(self.__class__)
        clone.breakpoints = dict(self.breakpoints)
        clone._variants = dict(self._variants)
        return clone

    def get(self, name: str) -> Variant:
        """Resolve a variant name, unknown names are pseudo-classes."""
        return self._variants.get(name) or Variant(name)

    def kind(self, name: str) -> VariantKind:
        return self.get(name).kind

    def query(self, name: str) -> Optional[str]:
        return self.get(name).query

    def __contains__(self, name: object) -> bool:
        return name in self._variants

    def __iter__(self) -> Iterator[str]:
        return iter(self._variants)

    def __len__(self) -> int:
        return len(self._variants)

_default_registry: Optional[VariantRegistry] = None

def default_registry() -> VariantRegistry:
    """Return the process-wide registry built from the default tables."""
    global _default_registry
    if _default_registry is None:
        _default_registry = VariantRegistry()
    return _default_registry

# Exported names
__all__ = [
    'VariantKind',
    'Variant',
    'VariantRegistry',
    'min_width_query',
    'breakpoint_queries',
    'default_registry',
]
