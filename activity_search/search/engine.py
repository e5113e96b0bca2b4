"""
Activity search pipeline.

access filter -> filter matcher -> relevance scorer -> result orderer -> paginator

The pipeline is a pure function of (query, user, page, size) and the store's
current contents; the only shared state is the read-only category registry.
"""

import threading
import time
from typing import Iterable, List, Optional, Tuple

from ..categories.registry import CategoryAliasRegistry, get_category_registry
from ..config import DEFAULT_PAGE_SIZE, PARTIAL_KEYWORD_MATCH
from ..exceptions import SearchCancelled, UpstreamUnavailable
from ..logger import setup_logger, log_search_stats
from ..models.activity import Activity
from ..models.page import Page
from ..utils.text_normalization import normalize_filter
from .access import AccessPredicate, build_access_predicate
from .matching import matches_filter, resolve_query_code
from .ordering import order_scored
from .pagination import paginate, validate_page_request
from .scoring import score_activities

logger = setup_logger(__name__)


class ActivitySearchEngine:
    """
    Multilingual, access-filtered, relevance-ranked search over activities.

    Args:
        store: Object with ``find_activities(predicate) -> list[Activity]``
        registry: Category registry (defaults to the process-wide one)
        partial_keywords: Also match queries against category keywords
    """

    def __init__(
        self,
        store,
        registry: Optional[CategoryAliasRegistry] = None,
        partial_keywords: bool = PARTIAL_KEYWORD_MATCH,
    ):
        self.store = store
        self.registry = registry if registry is not None else get_category_registry()
        self.partial_keywords = partial_keywords

    def search(
        self,
        filter_text: Optional[str],
        requesting_user_id: Optional[str] = None,
        page_index: int = 0,
        page_size: int = DEFAULT_PAGE_SIZE,
        *,
        friend_ids: Optional[Iterable[str]] = None,
        deadline: Optional[float] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> Page:
        """
        Search activities visible to the caller and return one page.

        Args:
            filter_text: Free-text query; blank or "*" lists everything
            requesting_user_id: Caller's user id, None for anonymous
            page_index: 0-based page number
            page_size: Items per page, 1..MAX_PAGE_SIZE
            friend_ids: Friends whose "friends"-visibility activities are visible
            deadline: ``time.monotonic()`` value after which the search is abandoned
            cancel_event: Event that abandons the search when set

        Returns:
            Page with the requested slice and the total match count

        Raises:
            InvalidArgument: page_index < 0 or page_size outside 1..MAX_PAGE_SIZE
            UpstreamUnavailable: the store could not be read
            SearchCancelled: deadline passed or cancel_event set between stages
        """
        validate_page_request(page_index, page_size)

        ordered, eligible = self._ranked(filter_text, requesting_user_id, friend_ids, deadline, cancel_event)
        items, total = paginate(ordered, page_index, page_size)

        log_search_stats(logger, filter_text, eligible, total, len(items))
        return Page(items=items, total_count=total, page_index=page_index, page_size=page_size)

    def search_all(
        self,
        filter_text: Optional[str],
        requesting_user_id: Optional[str] = None,
        *,
        friend_ids: Optional[Iterable[str]] = None,
        deadline: Optional[float] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> List[Activity]:
        """Same ranking as :meth:`search`, without pagination."""
        ordered, eligible = self._ranked(filter_text, requesting_user_id, friend_ids, deadline, cancel_event)
        log_search_stats(logger, filter_text, eligible, len(ordered), len(ordered))
        return ordered

    def _ranked(
        self,
        filter_text: Optional[str],
        requesting_user_id: Optional[str],
        friend_ids: Optional[Iterable[str]],
        deadline: Optional[float],
        cancel_event: Optional[threading.Event],
    ) -> Tuple[List[Activity], int]:
        """Run every stage but pagination; returns (ordered activities, eligible count)."""
        normalized_query = normalize_filter(filter_text)
        predicate = build_access_predicate(requesting_user_id, friend_ids)

        _check_cancelled("loading", deadline, cancel_event)
        activities = self._load(predicate)
        eligible = len(activities)
        if not activities:
            return [], eligible

        query_code = resolve_query_code(normalized_query, self.registry)
        if normalized_query:
            _check_cancelled("matching", deadline, cancel_event)
            activities = [
                activity for activity in activities
                if matches_filter(activity, normalized_query, self.registry, self.partial_keywords, query_code)
            ]
            logger.debug(f"{len(activities)} of {eligible} activities match '{normalized_query}'")
            if not activities:
                return [], eligible

        _check_cancelled("scoring", deadline, cancel_event)
        scored = score_activities(activities, normalized_query, self.registry, self.partial_keywords, query_code)

        _check_cancelled("ordering", deadline, cancel_event)
        return [item.activity for item in order_scored(scored)], eligible

    def _load(self, predicate: AccessPredicate) -> List[Activity]:
        """Read eligible activities, classifying any store failure as upstream."""
        try:
            return list(self.store.find_activities(predicate))
        except UpstreamUnavailable:
            logger.error("Activity store unavailable")
            raise
        except (ConnectionError, TimeoutError, OSError) as e:
            logger.error(f"Activity store unavailable: {e}")
            raise UpstreamUnavailable(str(e)) from e


def _check_cancelled(stage: str, deadline: Optional[float], cancel_event: Optional[threading.Event]):
    if cancel_event is not None and cancel_event.is_set():
        raise SearchCancelled(stage, "cancelled")
    if deadline is not None and time.monotonic() >= deadline:
        raise SearchCancelled(stage, "timed out")
