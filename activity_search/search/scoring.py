"""
Relevance scoring.

Each searchable field that matches the query adds a fixed weight: the category
(chosen by the user when creating the activity) weighs most, then the name,
then the free-text comments.
"""

from typing import Iterable, List, Optional

from ..categories.registry import CategoryAliasRegistry
from ..config import CATEGORY_WEIGHT, NAME_WEIGHT, COMMENTS_WEIGHT, PARTIAL_KEYWORD_MATCH
from ..models.activity import Activity, ScoredActivity
from .matching import UNRESOLVED, contains_normalized, is_wildcard, matches_category, resolve_query_code


def score_activity(
    activity: Activity,
    normalized_query: str,
    registry: Optional[CategoryAliasRegistry] = None,
    partial_keywords: bool = PARTIAL_KEYWORD_MATCH,
    query_code=UNRESOLVED,
) -> int:
    """
    Score one activity against the query.

    Returns:
        0 for an empty query, otherwise the sum of the weights of the matching
        fields (at most 700)
    """
    if is_wildcard(normalized_query):
        return 0

    score = 0
    if matches_category(activity.category, normalized_query, registry, partial_keywords, query_code):
        score += CATEGORY_WEIGHT
    if contains_normalized(activity.name, normalized_query):
        score += NAME_WEIGHT
    if contains_normalized(activity.comments, normalized_query):
        score += COMMENTS_WEIGHT
    return score


def score_activities(
    activities: Iterable[Activity],
    normalized_query: str,
    registry: Optional[CategoryAliasRegistry] = None,
    partial_keywords: bool = PARTIAL_KEYWORD_MATCH,
    query_code=UNRESOLVED,
) -> List[ScoredActivity]:
    """Pair every activity with its score, preserving input order."""
    if query_code is UNRESOLVED:
        query_code = resolve_query_code(normalized_query, registry)
    return [
        ScoredActivity(activity, score_activity(activity, normalized_query, registry, partial_keywords, query_code))
        for activity in activities
    ]
