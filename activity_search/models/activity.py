"""
Activity data models and owner reference types.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional, Union

from ..config import PUBLIC_VISIBILITY


@dataclass(frozen=True)
class DirectId:
    """Owner stored inline as a raw user identifier."""
    id: str


@dataclass(frozen=True)
class LinkedId:
    """Owner stored as a reference to a user document (``{"$ref": ..., "$id": ...}``)."""
    id: str


OwnerRef = Union[DirectId, LinkedId]


def owner_matches(owner: Optional[OwnerRef], user_id: Optional[str]) -> bool:
    """Whether an owner reference points at the given user, whatever its encoding.

    Examples:
        owner_matches(DirectId('u1'), 'u1') -> True
        owner_matches(LinkedId('u1'), 'u1') -> True
        owner_matches(None, 'u1') -> False
    """
    if owner is None or not user_id:
        return False
    return owner.id == user_id


def owner_ref_from_raw(value: Any) -> Optional[OwnerRef]:
    """Decode an owner value as the store hands it over.

    A plain string is a direct id; a mapping carrying ``$id`` (or ``id``) is a
    linked reference. Anything else has no owner.
    """
    if isinstance(value, (DirectId, LinkedId)):
        return value
    if isinstance(value, str):
        return DirectId(value) if value.strip() else None
    if isinstance(value, dict):
        ref_id = value.get("$id", value.get("id"))
        if ref_id is not None and str(ref_id).strip():
            return LinkedId(str(ref_id))
    return None


def owner_ref_to_raw(owner: Optional[OwnerRef]) -> Any:
    """Inverse of :func:`owner_ref_from_raw`."""
    if isinstance(owner, LinkedId):
        return {"$id": owner.id}
    if isinstance(owner, DirectId):
        return owner.id
    return None


@dataclass
class Activity:
    """
    Represents a single activity record as read from the store.

    Attributes:
        id: Store identifier
        name: Free-text title
        category: Category value, either a canonical code ("3") or a label ("RUN")
        comments: Free-text notes
        begin_date: Start of the activity, used for ordering (may be missing)
        visibility: "public", "friends", "private", ...
        owner: Reference to the owning user
        end_date: End of the activity (informational)
    """
    id: Optional[str]
    name: Optional[str]
    category: Optional[str] = None
    comments: Optional[str] = None
    begin_date: Optional[datetime] = None
    visibility: str = PUBLIC_VISIBILITY
    owner: Optional[OwnerRef] = None
    end_date: Optional[datetime] = None

    def __post_init__(self):
        """Validate activity data."""
        if has_inverted_dates(self.begin_date, self.end_date):
            raise ValueError("End date must not be before begin date")
        if not self.visibility:
            raise ValueError("Visibility cannot be empty")

    @property
    def owner_id(self) -> Optional[str]:
        """Owner identifier regardless of how it is encoded."""
        return self.owner.id if self.owner else None

    @property
    def is_public(self) -> bool:
        return self.visibility == PUBLIC_VISIBILITY

    def to_dict(self) -> dict:
        """Convert activity to dictionary."""
        return {
            'id': self.id,
            'name': self.name,
            'category': self.category,
            'comments': self.comments,
            'begin_date': self.begin_date.isoformat() if self.begin_date else None,
            'end_date': self.end_date.isoformat() if self.end_date else None,
            'visibility': self.visibility,
            'owner': owner_ref_to_raw(self.owner),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Activity':
        """Create Activity from dictionary."""
        return cls(
            id=data.get('id'),
            name=data.get('name'),
            category=data.get('category'),
            comments=data.get('comments'),
            begin_date=_parse_datetime(data.get('begin_date')),
            end_date=_parse_datetime(data.get('end_date')),
            visibility=data.get('visibility') or PUBLIC_VISIBILITY,
            owner=owner_ref_from_raw(data.get('owner')),
        )


@dataclass(frozen=True)
class ScoredActivity:
    """An activity paired with its relevance score for a single search call."""
    activity: Activity
    score: int

    @property
    def begin_date(self) -> Optional[datetime]:
        return self.activity.begin_date


def as_utc(value: datetime) -> datetime:
    """Comparable form of a datetime; naive values are read as UTC.

    Examples:
        as_utc(datetime(2026, 1, 1, 10)) -> 2026-01-01 10:00+00:00
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def has_inverted_dates(begin_date: Optional[datetime], end_date: Optional[datetime]) -> bool:
    """Whether both dates are set and the end lies before the begin."""
    if begin_date is None or end_date is None:
        return False
    return as_utc(end_date) < as_utc(begin_date)


def _parse_datetime(value) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)
