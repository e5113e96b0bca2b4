"""
activity-search - multilingual, access-filtered, relevance-ranked search over activities.
"""

from .exceptions import ActivitySearchError, InvalidArgument, SearchCancelled, UpstreamUnavailable
from .models import Activity, DirectId, LinkedId, Page
from .search import ActivitySearchEngine, build_access_predicate

__version__ = "0.1.0"

__all__ = [
    'ActivitySearchError',
    'InvalidArgument',
    'SearchCancelled',
    'UpstreamUnavailable',
    'Activity',
    'DirectId',
    'LinkedId',
    'Page',
    'ActivitySearchEngine',
    'build_access_predicate',
]
