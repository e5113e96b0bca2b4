"""
Page of search results.
"""

from dataclasses import dataclass, field
from typing import List

from .activity import Activity


@dataclass
class Page:
    """
    One page of an ordered search result.

    Attributes:
        items: Activities on this page, in ranking order
        total_count: Number of matching activities across all pages
        page_index: 0-based page number that was requested
        page_size: Requested page size
    """
    items: List[Activity] = field(default_factory=list)
    total_count: int = 0
    page_index: int = 0
    page_size: int = 0

    @classmethod
    def empty(cls, page_index: int, page_size: int) -> 'Page':
        return cls(items=[], total_count=0, page_index=page_index, page_size=page_size)

    @property
    def total_pages(self) -> int:
        """Number of pages needed to show every match."""
        if self.page_size <= 0:
            return 0
        return -(-self.total_count // self.page_size)

    @property
    def has_next(self) -> bool:
        return (self.page_index + 1) * self.page_size < self.total_count

    def to_dict(self) -> dict:
        return {
            'items': [item.to_dict() for item in self.items],
            'total_count': self.total_count,
            'page': self.page_index,
            'size': self.page_size,
            'total_pages': self.total_pages,
        }
