"""
Read-visibility rules for activity records.

A record is eligible when it is public, or when the requesting user owns it
(the owner may be stored inline or as a linked reference). Optionally, records
shared with friends are eligible when their owner is one of the caller's friends.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional, Tuple

from ..config import PUBLIC_VISIBILITY, FRIENDS_VISIBILITY
from ..models.activity import Activity, owner_matches


@dataclass(frozen=True)
class AccessPredicate:
    """
    Visibility predicate for one search call.

    Attributes:
        user_id: Requesting user, or None for anonymous callers
        friend_ids: Friends of the requesting user whose "friends" records are visible
    """
    user_id: Optional[str] = None
    friend_ids: FrozenSet[str] = frozenset()

    @property
    def is_anonymous(self) -> bool:
        return not self.user_id

    def __call__(self, activity: Activity) -> bool:
        """Evaluate the predicate against an in-memory record."""
        if activity.visibility == PUBLIC_VISIBILITY:
            return True
        if self.is_anonymous:
            return False
        if owner_matches(activity.owner, self.user_id):
            return True
        if self.friend_ids and activity.visibility == FRIENDS_VISIBILITY:
            return activity.owner_id in self.friend_ids
        return False

    def filter(self, activities: Iterable[Activity]) -> List[Activity]:
        return [activity for activity in activities if self(activity)]

    def to_sql(self) -> Tuple[str, list]:
        """
        Render the predicate as a SQL WHERE clause for the activities table.

        Both owner encodings are tried: ``owner_id`` (inline) and
        ``owner_ref_id`` (linked reference).

        Returns:
            Tuple of (clause, parameters)
        """
        clauses = ["visibility = ?"]
        params: list = [PUBLIC_VISIBILITY]

        if not self.is_anonymous:
            clauses.append("(owner_id = ? OR owner_ref_id = ?)")
            params.extend([self.user_id, self.user_id])

            if self.friend_ids:
                friends = sorted(self.friend_ids)
                placeholders = ", ".join("?" for _ in friends)
                clauses.append(
                    f"(visibility = ? AND (owner_id IN ({placeholders}) OR owner_ref_id IN ({placeholders})))"
                )
                params.append(FRIENDS_VISIBILITY)
                params.extend(friends)
                params.extend(friends)

        return " OR ".join(clauses), params


def build_access_predicate(
    user_id: Optional[str] = None,
    friend_ids: Optional[Iterable[str]] = None,
) -> AccessPredicate:
    """
    Build the visibility predicate for a caller.

    Args:
        user_id: Requesting user id (None or blank for anonymous)
        friend_ids: Ids of the caller's friends, ignored for anonymous callers

    Returns:
        AccessPredicate to hand to the store
    """
    user_id = user_id.strip() if user_id and user_id.strip() else None
    friends = frozenset(f for f in (friend_ids or ()) if f and f != user_id) if user_id else frozenset()
    return AccessPredicate(user_id=user_id, friend_ids=friends)
