"""
Store interface consumed by the search engine.
"""

from typing import List, Protocol

from ..models.activity import Activity
from ..search.access import AccessPredicate


class ActivityStore(Protocol):
    """Anything that can return the activities a predicate lets through."""

    def find_activities(self, predicate: AccessPredicate) -> List[Activity]:
        """
        Return every activity the predicate admits.

        Raises:
            UpstreamUnavailable: the underlying storage could not be read
        """
        ...
