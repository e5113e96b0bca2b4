"""
In-memory activity store.
Holds a snapshot of activities and applies the access predicate in Python.
"""

import threading
from typing import Iterable, List, Optional

from ..models.activity import Activity
from ..search.access import AccessPredicate


class InMemoryActivityStore:
    """Thread-safe list-backed store, used by tests and small deployments."""

    def __init__(self, activities: Optional[Iterable[Activity]] = None):
        self._lock = threading.Lock()
        self._activities: List[Activity] = list(activities or [])

    def __len__(self) -> int:
        with self._lock:
            return len(self._activities)

    def add(self, activity: Activity):
        with self._lock:
            self._activities.append(activity)

    def replace_all(self, activities: Iterable[Activity]) -> int:
        """Swap the whole collection and return the new size."""
        new_activities = list(activities)
        with self._lock:
            self._activities = new_activities
        return len(new_activities)

    def find_activities(self, predicate: AccessPredicate) -> List[Activity]:
        with self._lock:
            snapshot = list(self._activities)
        return predicate.filter(snapshot)
