"""
Database module for SQLite operations.
Handles connection management, activity storage and predicate-filtered reads.
"""

import sqlite3
import warnings
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional

import pandas as pd

from ..config import DB_PATH, PUBLIC_VISIBILITY
from ..exceptions import UpstreamUnavailable
from ..logger import setup_logger
from ..models.activity import Activity, DirectId, LinkedId, has_inverted_dates
from ..search.access import AccessPredicate

logger = setup_logger(__name__)

COLUMNS = ['id', 'name', 'category', 'comments', 'begin_date', 'end_date',
           'visibility', 'owner_id', 'owner_ref_id']


@contextmanager
def get_connection(db_path: Optional[Path] = None):
    """
    Context manager for database connections.

    SQLite errors raised while the connection is open surface as
    UpstreamUnavailable.
    """
    db_path = Path(db_path or DB_PATH)
    try:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(db_path)
    except (sqlite3.Error, OSError) as e:
        logger.error(f"Cannot open database {db_path}: {e}")
        raise UpstreamUnavailable(f"Cannot open activity database: {e}") from e
    conn.row_factory = sqlite3.Row
    try:
        yield conn
    except sqlite3.Error as e:
        logger.error(f"Database error on {db_path.name}: {e}")
        raise UpstreamUnavailable(f"Activity database error: {e}") from e
    finally:
        conn.close()


def init_db(db_path: Optional[Path] = None):
    """Initialize the database with the activities table."""
    with get_connection(db_path) as conn:
        conn.execute("""
            CREATE TABLE IF NOT EXISTS activities (
                id TEXT PRIMARY KEY,
                name TEXT,
                category TEXT,
                comments TEXT,
                begin_date TEXT,
                end_date TEXT,
                visibility TEXT NOT NULL DEFAULT 'public',
                owner_id TEXT,
                owner_ref_id TEXT,
                created_at TEXT DEFAULT CURRENT_TIMESTAMP,
                updated_at TEXT DEFAULT CURRENT_TIMESTAMP
            )
        """)
        conn.execute("""
            CREATE INDEX IF NOT EXISTS idx_visibility
            ON activities(visibility)
        """)
        conn.execute("""
            CREATE INDEX IF NOT EXISTS idx_owner_id
            ON activities(owner_id)
        """)
        conn.execute("""
            CREATE INDEX IF NOT EXISTS idx_owner_ref_id
            ON activities(owner_ref_id)
        """)
        conn.commit()


def _to_record(activity: Activity) -> dict:
    """Flatten an activity into a table row, splitting the owner by encoding."""
    return {
        'id': activity.id,
        'name': activity.name,
        'category': activity.category,
        'comments': activity.comments,
        'begin_date': activity.begin_date.isoformat() if activity.begin_date else None,
        'end_date': activity.end_date.isoformat() if activity.end_date else None,
        'visibility': activity.visibility,
        'owner_id': activity.owner.id if isinstance(activity.owner, DirectId) else None,
        'owner_ref_id': activity.owner.id if isinstance(activity.owner, LinkedId) else None,
    }


def insert_activities(activities: Iterable[Activity], db_path: Optional[Path] = None) -> int:
    """
    Insert or replace activities.

    Args:
        activities: Activities to store
        db_path: Database file (defaults to DB_PATH)

    Returns:
        Number of rows written
    """
    records = [_to_record(activity) for activity in activities]
    with get_connection(db_path) as conn:
        conn.executemany("""
            INSERT OR REPLACE INTO activities
            (id, name, category, comments, begin_date, end_date, visibility, owner_id, owner_ref_id)
            VALUES (:id, :name, :category, :comments, :begin_date, :end_date, :visibility, :owner_id, :owner_ref_id)
        """, records)
        conn.commit()
    return len(records)


def delete_all_activities(db_path: Optional[Path] = None) -> int:
    """Delete all activities and return count of deleted rows."""
    with get_connection(db_path) as conn:
        cursor = conn.execute("DELETE FROM activities")
        conn.commit()
        return cursor.rowcount


def get_activity_count(db_path: Optional[Path] = None) -> int:
    """Get the total number of activities in the database."""
    with get_connection(db_path) as conn:
        cursor = conn.execute("SELECT COUNT(*) FROM activities")
        return cursor.fetchone()[0]


def read_activities_frame(predicate: AccessPredicate, db_path: Optional[Path] = None) -> pd.DataFrame:
    """
    Read the activities a predicate admits as a DataFrame.

    Args:
        predicate: Visibility predicate, rendered to SQL
        db_path: Database file (defaults to DB_PATH)

    Returns:
        DataFrame with one row per eligible activity and parsed date columns

    Raises:
        UpstreamUnavailable: the database could not be queried
    """
    clause, params = predicate.to_sql()
    with get_connection(db_path) as conn:
        try:
            df = pd.read_sql_query(
                f"SELECT {', '.join(COLUMNS)} FROM activities WHERE {clause}",
                conn,
                params=params,
            )
        except pd.errors.DatabaseError as e:
            logger.error(f"Failed to read activities: {e}")
            raise UpstreamUnavailable(f"Failed to read activities: {e}") from e

    if not df.empty:
        for column in ('begin_date', 'end_date'):
            raw = df[column]
            df[column] = _parse_dates(raw)
            unparsed = int((raw.notna() & df[column].isna()).sum())
            if unparsed:
                logger.warning(f"{unparsed} activities have an unreadable {column}; treated as missing")

    return df


def _parse_dates(raw: pd.Series) -> pd.Series:
    """
    Parse ISO-8601 strings into datetimes.

    A column mixing offsets, or mixing offsets with naive values, is parsed
    to UTC with naive values read as UTC.
    """
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", FutureWarning)
            parsed = pd.to_datetime(raw, format="ISO8601", errors="coerce")
    except ValueError:
        parsed = None

    if parsed is None or not pd.api.types.is_datetime64_any_dtype(parsed):
        logger.debug(f"Mixed timezones in {raw.name}; normalizing to UTC")
        parsed = pd.to_datetime(raw, format="ISO8601", errors="coerce", utc=True)
    return parsed


def _clean(value):
    """Turn pandas missing markers (NaN, NaT) into None."""
    return None if pd.isna(value) else value


def _to_datetime(value) -> Optional[datetime]:
    value = _clean(value)
    return value.to_pydatetime() if isinstance(value, pd.Timestamp) else value


def frame_to_activities(df: pd.DataFrame) -> List[Activity]:
    """Convert rows read by :func:`read_activities_frame` into activities."""
    activities = []
    for row in df.to_dict('records'):
        owner_ref_id = _clean(row.get('owner_ref_id'))
        owner_id = _clean(row.get('owner_id'))
        if owner_ref_id:
            owner = LinkedId(str(owner_ref_id))
        elif owner_id:
            owner = DirectId(str(owner_id))
        else:
            owner = None

        begin_date = _to_datetime(row.get('begin_date'))
        end_date = _to_datetime(row.get('end_date'))
        if has_inverted_dates(begin_date, end_date):
            logger.warning(f"Activity {row.get('id')} ends before it begins; end date treated as missing")
            end_date = None

        activities.append(Activity(
            id=_clean(row.get('id')),
            name=_clean(row.get('name')),
            category=_clean(row.get('category')),
            comments=_clean(row.get('comments')),
            begin_date=begin_date,
            end_date=end_date,
            visibility=_clean(row.get('visibility')) or PUBLIC_VISIBILITY,
            owner=owner,
        ))
    return activities


class SqliteActivityStore:
    """Activity store backed by the SQLite activities table."""

    def __init__(self, db_path: Optional[Path] = None):
        self.db_path = Path(db_path or DB_PATH)
        init_db(self.db_path)

    def add_activities(self, activities: Iterable[Activity]) -> int:
        return insert_activities(activities, self.db_path)

    def count(self) -> int:
        return get_activity_count(self.db_path)

    def find_activities(self, predicate: AccessPredicate) -> List[Activity]:
        df = read_activities_frame(predicate, self.db_path)
        logger.debug(f"Read {len(df)} eligible activities from {self.db_path.name}")
        return frame_to_activities(df)
