"""
Category alias registry.

Maps the many surface forms of an activity category (codes, enum labels,
keywords in a dozen languages) to one canonical code. The registry is built
once through :class:`CategoryRegistryBuilder` and is read-only afterwards, so
lookups need no locking.
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .keywords import CATEGORY_DEFINITIONS, CategoryDefinition
from ..utils.text_normalization import normalize
from ..logger import setup_logger

logger = setup_logger(__name__)


def _surface_forms(value: str) -> List[str]:
    """Forms under which an alias is registered: verbatim, upper, lower, normalized."""
    forms = [value, value.upper(), value.lower()]
    normalized = normalize(value)
    if normalized:
        forms.append(normalized)
    return forms


class CategoryAliasRegistry:
    """Immutable alias -> canonical code lookup."""

    def __init__(
        self,
        aliases: Mapping[str, str],
        keywords: Mapping[str, Tuple[str, ...]],
        labels: Mapping[str, str],
    ):
        self._aliases = MappingProxyType(dict(aliases))
        self._keywords = MappingProxyType(dict(keywords))
        self._labels = MappingProxyType(dict(labels))

    def __len__(self) -> int:
        return len(self._aliases)

    def __contains__(self, value) -> bool:
        return isinstance(value, str) and self.resolve_canonical_code(value) is not None

    @property
    def codes(self) -> Tuple[str, ...]:
        """Canonical codes in registration order."""
        return tuple(self._keywords)

    @property
    def aliases(self) -> Mapping[str, str]:
        return self._aliases

    def keywords_for(self, code: str) -> Tuple[str, ...]:
        """Normalized keywords registered for a canonical code."""
        return self._keywords.get(code, ())

    def label_for(self, code: str) -> Optional[str]:
        return self._labels.get(code)

    def resolve_canonical_code(self, value: Optional[str]) -> Optional[str]:
        """Resolve any surface form to its canonical code.

        Tries the trimmed value verbatim, then upper-cased, lower-cased and
        normalized. Returns None when nothing matches.

        Examples:
            resolve_canonical_code('RANDO') -> '9'
            resolve_canonical_code('Randonnée') -> '9'
            resolve_canonical_code('chess') -> None
        """
        if not value or not value.strip():
            return None

        trimmed = value.strip()
        for candidate in (trimmed, trimmed.upper(), trimmed.lower(), normalize(trimmed)):
            code = self._aliases.get(candidate)
            if code is not None:
                return code

        logger.debug(f"No canonical category for '{trimmed}'")
        return None

    def categories(self) -> List[dict]:
        """Listing of every category with its label and keywords."""
        return [
            {'code': code, 'label': self._labels.get(code), 'keywords': list(keywords)}
            for code, keywords in self._keywords.items()
        ]


class CategoryRegistryBuilder:
    """
    Collects category registrations, then freezes them into a registry.

    Mappings are first-write-wins: a form already claimed by a category is
    never reassigned by a later registration.
    """

    def __init__(self):
        self._aliases: Dict[str, str] = {}
        self._keywords: Dict[str, Tuple[str, ...]] = {}
        self._labels: Dict[str, str] = {}
        self._built = False

    def _register_alias(self, alias: Optional[str], code: str):
        if not alias or not alias.strip():
            return
        for form in _surface_forms(alias):
            self._aliases.setdefault(form, code)

    def register(
        self,
        code: str,
        keywords: Iterable[str] = (),
        aliases: Iterable[str] = (),
        label: Optional[str] = None,
    ) -> 'CategoryRegistryBuilder':
        """
        Register a canonical code with its keywords and aliases.

        Args:
            code: Canonical category code
            keywords: Natural-language terms for the category
            aliases: Enum-style labels stored on records
            label: Display label (defaults to the first alias)

        Returns:
            The builder, for chaining
        """
        if self._built:
            raise RuntimeError("Registry already built; builder cannot be reused")
        if not code or not code.strip():
            raise ValueError("Category code cannot be empty")

        aliases = list(aliases)
        self._register_alias(code, code)
        for alias in aliases:
            self._register_alias(alias, code)

        normalized_keywords = list(self._keywords.get(code, ()))
        for keyword in keywords:
            if not keyword or not keyword.strip():
                continue
            self._register_alias(keyword, code)
            normalized = normalize(keyword)
            if normalized and normalized not in normalized_keywords:
                normalized_keywords.append(normalized)

        self._keywords[code] = tuple(normalized_keywords)
        self._labels.setdefault(code, label or (aliases[0] if aliases else code))
        return self

    def register_definition(self, definition: CategoryDefinition) -> 'CategoryRegistryBuilder':
        return self.register(definition.code, definition.keywords, definition.aliases, definition.label)

    def build(self) -> CategoryAliasRegistry:
        """Freeze the registrations into an immutable registry."""
        self._built = True
        registry = CategoryAliasRegistry(self._aliases, self._keywords, self._labels)
        logger.debug(f"Built category registry: {len(registry.codes)} categories, {len(registry)} aliases")
        return registry


def build_registry(definitions: Iterable[CategoryDefinition]) -> CategoryAliasRegistry:
    """Build a registry from keyword table rows, in order."""
    builder = CategoryRegistryBuilder()
    for definition in definitions:
        builder.register_definition(definition)
    return builder.build()


# Process-wide registry, built once at import time
_category_registry = build_registry(CATEGORY_DEFINITIONS)


def get_category_registry() -> CategoryAliasRegistry:
    """
    Get the default category registry.

    Returns:
        CategoryAliasRegistry singleton
    """
    return _category_registry
