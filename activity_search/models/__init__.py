"""
Models package - Data models and type definitions.
"""

from .activity import (
    Activity,
    DirectId,
    LinkedId,
    OwnerRef,
    ScoredActivity,
    owner_matches,
    owner_ref_from_raw,
    owner_ref_to_raw,
)
from .page import Page

__all__ = [
    'Activity',
    'DirectId',
    'LinkedId',
    'OwnerRef',
    'ScoredActivity',
    'owner_matches',
    'owner_ref_from_raw',
    'owner_ref_to_raw',
    'Page',
]
