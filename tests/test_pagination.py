"""
Unit tests for pagination
"""
import pytest

from activity_search.config import MAX_PAGE_SIZE
from activity_search.exceptions import InvalidArgument
from activity_search.models.page import Page
from activity_search.search.pagination import paginate


@pytest.mark.unit
class TestPaginate:
    """Test paginate()."""

    @pytest.mark.parametrize("page_index,page_size,expected", [
        (0, 2, [0, 1]),
        (1, 2, [2, 3]),
        (2, 2, [4]),
        (0, 10, [0, 1, 2, 3, 4]),
    ])
    def test_slices(self, page_index, page_size, expected):
        assert paginate(list(range(5)), page_index, page_size) == (expected, 5)

    @pytest.mark.parametrize("page_index", [3, 100])
    def test_page_past_the_end_is_empty_with_total(self, page_index):
        assert paginate(list(range(5)), page_index, 2) == ([], 5)

    def test_empty_input(self):
        assert paginate([], 0, 10) == ([], 0)

    @pytest.mark.parametrize("page_size", [0, -1])
    def test_non_positive_size_rejected(self, page_size):
        with pytest.raises(InvalidArgument):
            paginate([1, 2, 3], 0, page_size)

    def test_size_above_maximum_rejected(self):
        with pytest.raises(InvalidArgument) as exc_info:
            paginate([1, 2, 3], 0, MAX_PAGE_SIZE + 1)

        assert str(MAX_PAGE_SIZE) in str(exc_info.value)

    def test_maximum_size_accepted(self):
        assert paginate([1, 2, 3], 0, MAX_PAGE_SIZE) == ([1, 2, 3], 3)

    def test_negative_index_rejected(self):
        with pytest.raises(InvalidArgument) as exc_info:
            paginate([1, 2, 3], -1, 10)

        assert "index" in str(exc_info.value)
        assert isinstance(exc_info.value, ValueError)


@pytest.mark.unit
class TestPage:

    def test_total_pages_and_has_next(self):
        page = Page(items=[], total_count=5, page_index=1, page_size=2)

        assert page.total_pages == 3
        assert page.has_next is True
        assert Page(items=[], total_count=4, page_index=1, page_size=2).has_next is False

    def test_empty(self):
        page = Page.empty(3, 20)

        assert page.items == []
        assert page.total_count == 0
        assert page.total_pages == 0
        assert page.to_dict() == {'items': [], 'total_count': 0, 'page': 3, 'size': 20, 'total_pages': 0}
