"""
Filter matching for activity records.
Matches a normalized query against the category, name and comments of a record.
"""

from typing import Optional

from ..categories.registry import CategoryAliasRegistry, get_category_registry
from ..config import PARTIAL_KEYWORD_MATCH, WILDCARD_TOKEN
from ..models.activity import Activity
from ..utils.text_normalization import normalize

# Marks a query whose canonical category has not been looked up yet
UNRESOLVED = object()


def resolve_query_code(normalized_query: str, registry: Optional[CategoryAliasRegistry] = None) -> Optional[str]:
    """Canonical category code the query names, if any. Computed once per search."""
    if is_wildcard(normalized_query):
        return None
    if registry is None:
        registry = get_category_registry()
    return registry.resolve_canonical_code(normalized_query)


def is_wildcard(normalized_query: Optional[str]) -> bool:
    """Empty queries and the wildcard token match everything."""
    return not normalized_query or normalized_query == WILDCARD_TOKEN


def contains_normalized(value: Optional[str], needle: str) -> bool:
    """Check if the normalized value contains an already-normalized needle.

    Examples:
        contains_normalized('Morning Run', 'run') -> True
        contains_normalized(None, 'run') -> False
    """
    if value is None or not needle:
        return False
    return needle in normalize(value)


def matches_category(
    category: Optional[str],
    normalized_query: str,
    registry: Optional[CategoryAliasRegistry] = None,
    partial_keywords: bool = PARTIAL_KEYWORD_MATCH,
    query_code=UNRESOLVED,
) -> bool:
    """Fuzzy match between a record's category value and the query.

    Matches when either normalized string contains the other, or when both
    resolve to the same canonical code. With ``partial_keywords`` the query may
    also be part of (or contain) any keyword of the record's category.
    ``query_code`` is the result of :func:`resolve_query_code` when the caller
    already has it.

    Examples:
        matches_category('RANDO', 'hiking') -> True   # both resolve to '9'
        matches_category('RUN', 'ru') -> True         # partial label
        matches_category('', 'run') -> False
    """
    if not category or not category.strip() or is_wildcard(normalized_query):
        return False

    normalized_category = normalize(category)
    if normalized_category:
        if normalized_query in normalized_category or normalized_category in normalized_query:
            return True

    if registry is None:
        registry = get_category_registry()
    canonical_category = registry.resolve_canonical_code(category)
    if canonical_category is None:
        return False

    if query_code is UNRESOLVED:
        query_code = registry.resolve_canonical_code(normalized_query)
    if query_code == canonical_category:
        return True

    if partial_keywords:
        return any(
            normalized_query in keyword or keyword in normalized_query
            for keyword in registry.keywords_for(canonical_category)
        )

    return False


def matches_filter(
    activity: Activity,
    normalized_query: str,
    registry: Optional[CategoryAliasRegistry] = None,
    partial_keywords: bool = PARTIAL_KEYWORD_MATCH,
    query_code=UNRESOLVED,
) -> bool:
    """Whether an activity satisfies the query on any of its searchable fields."""
    if is_wildcard(normalized_query):
        return True
    return (
        matches_category(activity.category, normalized_query, registry, partial_keywords, query_code)
        or contains_normalized(activity.name, normalized_query)
        or contains_normalized(activity.comments, normalized_query)
    )
