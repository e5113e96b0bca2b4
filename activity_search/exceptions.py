"""
Error classifications raised by the search pipeline.
"""


class ActivitySearchError(Exception):
    """Base class for all activity-search errors."""


class InvalidArgument(ActivitySearchError, ValueError):
    """A caller supplied an unusable argument (negative page, non-positive size)."""


class UpstreamUnavailable(ActivitySearchError):
    """The activity store could not be read (connectivity, timeout, broken database)."""


class SearchCancelled(ActivitySearchError):
    """The search was abandoned between stages because of a deadline or cancel signal."""

    def __init__(self, stage: str, reason: str = "cancelled"):
        self.stage = stage
        self.reason = reason
        super().__init__(f"Search {reason} before {stage}")
