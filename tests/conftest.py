"""
Pytest configuration and fixtures
"""
import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from activity_search.api.memory_store import InMemoryActivityStore
from activity_search.categories.registry import get_category_registry
from activity_search.models.activity import Activity, DirectId, LinkedId


MORNING = datetime(2026, 3, 14, 7, 30)
EVENING = datetime(2026, 3, 14, 19, 0)


@pytest.fixture
def morning_run():
    """Public running activity."""
    return Activity(
        id="a1",
        name="Morning Run",
        category="RUN",
        comments="Easy pace along the river",
        begin_date=MORNING,
        visibility="public",
        owner=DirectId("u2"),
    )


@pytest.fixture
def evening_walk():
    """Private walk owned by u1, later the same day."""
    return Activity(
        id="a2",
        name="Evening Walk",
        category="WALK",
        comments=None,
        begin_date=EVENING,
        visibility="private",
        owner=DirectId("u1"),
    )


@pytest.fixture
def collection(morning_run, evening_walk):
    """The two-record collection used by the end-to-end scenarios."""
    return [morning_run, evening_walk]


@pytest.fixture
def mixed_collection(collection):
    """A larger collection covering every visibility and owner encoding."""
    return collection + [
        Activity(
            id="a3",
            name="Col de la Croix",
            category="RANDO",
            comments="Randonnée avec vue sur le lac",
            begin_date=datetime(2026, 2, 1, 9, 0),
            visibility="private",
            owner=LinkedId("u1"),
        ),
        Activity(
            id="a4",
            name="Ski weekend",
            category="2",
            comments="Powder day",
            begin_date=datetime(2026, 1, 10, 8, 0),
            visibility="friends",
            owner=DirectId("u3"),
        ),
        Activity(
            id="a5",
            name="Old photos",
            category="PHOTOS",
            comments="Scans from the attic",
            begin_date=None,
            visibility="public",
            owner=DirectId("u3"),
        ),
        Activity(
            id="a6",
            name="Secret trip",
            category="TRAVEL",
            comments=None,
            begin_date=datetime(2026, 4, 1, 12, 0),
            visibility="private",
            owner=DirectId("u9"),
        ),
    ]


@pytest.fixture
def memory_store(collection):
    """In-memory store holding the two-record collection."""
    return InMemoryActivityStore(collection)


@pytest.fixture
def mixed_store(mixed_collection):
    return InMemoryActivityStore(mixed_collection)


@pytest.fixture(scope="session")
def registry():
    """Default multilingual category registry."""
    return get_category_registry()


@pytest.fixture
def temp_db(tmp_path):
    """Path of a fresh SQLite database file."""
    return tmp_path / "activities.db"
