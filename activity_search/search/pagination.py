"""
Manual pagination over an ordered result list.
"""

from typing import List, Sequence, Tuple, TypeVar

from ..config import MAX_PAGE_SIZE
from ..exceptions import InvalidArgument

T = TypeVar("T")


def validate_page_request(page_index: int, page_size: int):
    """
    Reject unusable page requests.

    Raises:
        InvalidArgument: page_index is negative or page_size is outside
            1..MAX_PAGE_SIZE
    """
    if page_size is None or page_size <= 0:
        raise InvalidArgument(f"Page size must be positive, got {page_size}")
    if page_size > MAX_PAGE_SIZE:
        raise InvalidArgument(f"Page size must be at most {MAX_PAGE_SIZE}, got {page_size}")
    if page_index is None or page_index < 0:
        raise InvalidArgument(f"Page index must not be negative, got {page_index}")


def paginate(items: Sequence[T], page_index: int, page_size: int) -> Tuple[List[T], int]:
    """
    Slice one page out of an ordered sequence.

    Args:
        items: Ordered results
        page_index: 0-based page number
        page_size: Items per page, 1..MAX_PAGE_SIZE

    Returns:
        Tuple of (page items, total count). A page past the end is empty but
        still reports the full total.
    """
    validate_page_request(page_index, page_size)

    total = len(items)
    start = page_index * page_size
    if start >= total:
        return [], total
    return list(items[start:start + page_size]), total
