"""
Search package - Access filtering, matching, scoring, ordering and pagination.
"""

from .access import AccessPredicate, build_access_predicate
from .matching import contains_normalized, is_wildcard, matches_category, matches_filter, resolve_query_code
from .scoring import score_activity, score_activities
from .ordering import order_scored
from .pagination import paginate, validate_page_request
from .engine import ActivitySearchEngine

__all__ = [
    'AccessPredicate',
    'build_access_predicate',
    'contains_normalized',
    'is_wildcard',
    'matches_category',
    'matches_filter',
    'resolve_query_code',
    'score_activity',
    'score_activities',
    'order_scored',
    'paginate',
    'validate_page_request',
    'ActivitySearchEngine',
]
