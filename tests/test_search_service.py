"""
Unit tests for ActivitySearchService
"""
import threading
from unittest.mock import Mock

import pytest

from activity_search.exceptions import SearchCancelled
from activity_search.services.search_service import ActivitySearchService


@pytest.mark.unit
class TestActivitySearchService:
    """Test ActivitySearchService class."""

    @pytest.fixture
    def service(self, mixed_store):
        return ActivitySearchService(store=mixed_store)

    def test_initialization(self, service, mixed_store, registry):
        assert service.store is mixed_store
        assert service.registry is registry
        assert service.engine.store is mixed_store

    def test_search(self, service):
        page = service.search("course", None, 0, 10)

        assert [a.name for a in page.items] == ["Morning Run"]
        assert page.total_count == 1

    def test_search_all(self, service):
        assert [a.id for a in service.search_all("", "u1")] == ["a2", "a1", "a3", "a5"]

    def test_friend_ids_forwarded(self, service):
        assert service.search("powder", "u1", 0, 10, friend_ids=["u3"]).total_count == 1

    def test_store_is_read_on_every_call(self, mixed_collection):
        store = Mock()
        store.find_activities.return_value = mixed_collection[:1]
        service = ActivitySearchService(store=store)

        service.search("", None, 0, 10)
        service.search("", None, 0, 10)

        assert store.find_activities.call_count == 2

    @pytest.mark.parametrize("timeout", [None, 0])
    def test_no_timeout_means_no_deadline(self, mixed_store, timeout):
        service = ActivitySearchService(store=mixed_store, timeout_seconds=timeout)
        assert service._deadline() is None

    def test_timeout_sets_deadline(self, mixed_store):
        service = ActivitySearchService(store=mixed_store, timeout_seconds=5)
        assert service._deadline() is not None

    def test_cancel_event(self, service):
        cancel = threading.Event()
        cancel.set()

        with pytest.raises(SearchCancelled):
            service.search("run", None, 0, 10, cancel_event=cancel)

    def test_list_categories(self, service):
        categories = service.list_categories()

        assert len(categories) == 17
        assert categories[8]["label"] == "RANDO"
