"""
Search service - Entry point used by request handlers.
Wires the activity store, the category registry and the search engine together.
"""

import threading
import time
from typing import Iterable, List, Optional

from ..api.database import SqliteActivityStore
from ..categories.registry import CategoryAliasRegistry, get_category_registry
from ..config import DEFAULT_PAGE_SIZE, PARTIAL_KEYWORD_MATCH, SEARCH_TIMEOUT_SECONDS
from ..logger import setup_logger
from ..models.activity import Activity
from ..models.page import Page
from ..search.engine import ActivitySearchEngine

logger = setup_logger(__name__)


class ActivitySearchService:
    """
    Service layer for activity search.

    Every call reads the store afresh; nothing is cached between requests,
    since activities may be created or changed at any time.
    """

    def __init__(
        self,
        store=None,
        registry: Optional[CategoryAliasRegistry] = None,
        timeout_seconds: Optional[float] = SEARCH_TIMEOUT_SECONDS,
        partial_keywords: bool = PARTIAL_KEYWORD_MATCH,
    ):
        self.store = store if store is not None else SqliteActivityStore()
        self.registry = registry if registry is not None else get_category_registry()
        self.timeout_seconds = timeout_seconds
        self.engine = ActivitySearchEngine(self.store, self.registry, partial_keywords)

    def _deadline(self) -> Optional[float]:
        if not self.timeout_seconds or self.timeout_seconds <= 0:
            return None
        return time.monotonic() + self.timeout_seconds

    def search(
        self,
        filter_text: Optional[str],
        requesting_user_id: Optional[str] = None,
        page_index: int = 0,
        page_size: int = DEFAULT_PAGE_SIZE,
        friend_ids: Optional[Iterable[str]] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> Page:
        """
        Search activities visible to the caller.

        Args:
            filter_text: Free-text query
            requesting_user_id: Authenticated user id, None for anonymous
            page_index: 0-based page number
            page_size: Items per page
            friend_ids: Friends of the caller
            cancel_event: Set to abandon the search

        Returns:
            Requested page with total count
        """
        return self.engine.search(
            filter_text,
            requesting_user_id,
            page_index,
            page_size,
            friend_ids=friend_ids,
            deadline=self._deadline(),
            cancel_event=cancel_event,
        )

    def search_all(
        self,
        filter_text: Optional[str],
        requesting_user_id: Optional[str] = None,
        friend_ids: Optional[Iterable[str]] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> List[Activity]:
        """Every matching activity in ranking order."""
        return self.engine.search_all(
            filter_text,
            requesting_user_id,
            friend_ids=friend_ids,
            deadline=self._deadline(),
            cancel_event=cancel_event,
        )

    def list_categories(self) -> List[dict]:
        """Canonical categories with labels and keywords."""
        return self.registry.categories()


# Global instance, created on first use so importing does not open the database
_search_service: Optional[ActivitySearchService] = None
_search_service_lock = threading.Lock()


def get_search_service() -> ActivitySearchService:
    """
    Get the global ActivitySearchService instance.

    Returns:
        ActivitySearchService singleton
    """
    global _search_service
    if _search_service is None:
        with _search_service_lock:
            if _search_service is None:
                logger.info("Creating activity search service")
                _search_service = ActivitySearchService()
    return _search_service
