"""Exception taxonomy. Only AuthError and SegmentationError escalate out of a batch."""

from typing import Optional


class BrollError(Exception):
    """Base class for everything this package raises on purpose."""


class ConfigError(BrollError):
    pass


class SearchError(BrollError):
    """A single footage query failed."""

    def __init__(self, message: str, term: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.term = term
        self.status_code = status_code


class AuthError(SearchError):
    """Credential rejected. Fatal for the whole batch."""


class RateLimited(SearchError):
    pass


class TransientError(SearchError):
    pass


class NotFound(SearchError):
    pass


class SegmentationError(BrollError):
    pass


class InvalidCredential(SegmentationError):
    pass


class SegmentationEmpty(SegmentationError):
    """Segmentation produced nothing usable."""
