"""
Result ordering.

Total order over scored activities:
    1. begin date, newest first; activities without a date come last, and
       dates without an offset are read as UTC
    2. score, highest first
    3. name, case-insensitive ascending; activities without a name come last
    4. id ascending, so equal keys always come out in the same order

Built from successive stable sorts, least significant key first.
"""

from typing import Iterable, List, Tuple

from ..models.activity import ScoredActivity, as_utc


def _id_key(item: ScoredActivity) -> Tuple[bool, str]:
    activity_id = item.activity.id
    return (activity_id is None, str(activity_id) if activity_id is not None else "")


def _name_key(item: ScoredActivity) -> Tuple[bool, str]:
    name = item.activity.name
    return (name is None, name.casefold() if name is not None else "")


def order_scored(scored: Iterable[ScoredActivity]) -> List[ScoredActivity]:
    """Sort scored activities into ranking order."""
    ordered = sorted(scored, key=_id_key)
    ordered.sort(key=_name_key)
    ordered.sort(key=lambda item: item.score, reverse=True)

    # Missing dates are split off explicitly rather than compared
    dated = [item for item in ordered if item.begin_date is not None]
    undated = [item for item in ordered if item.begin_date is None]
    dated.sort(key=lambda item: as_utc(item.begin_date), reverse=True)
    return dated + undated
