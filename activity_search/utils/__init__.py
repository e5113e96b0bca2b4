"""Utility functions for activity-search."""

from .text_normalization import normalize, normalize_filter

__all__ = [
    'normalize',
    'normalize_filter',
]
