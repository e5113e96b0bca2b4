"""
API package - Data access layer (stores) and the REST surface.
"""

from .database import (
    get_connection,
    init_db,
    insert_activities,
    delete_all_activities,
    get_activity_count,
    read_activities_frame,
    frame_to_activities,
    SqliteActivityStore,
)
from .memory_store import InMemoryActivityStore
from .store import ActivityStore

__all__ = [
    'get_connection',
    'init_db',
    'insert_activities',
    'delete_all_activities',
    'get_activity_count',
    'read_activities_frame',
    'frame_to_activities',
    'SqliteActivityStore',
    'InMemoryActivityStore',
    'ActivityStore',
]
