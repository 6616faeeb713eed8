"""Exception hierarchy for twitterservice."""

from __future__ import annotations


class TwitterServiceError(Exception):
    """Base exception for every error raised by this package."""


class InvalidArgumentError(TwitterServiceError, ValueError):
    """Raised for malformed caller input (bad screen name, geocode, text...)."""


class OutOfRangeError(InvalidArgumentError):
    """Raised when a value is outside its permitted range, e.g. an over-long status."""


class DomainError(TwitterServiceError):
    """Raised for unexpected API responses or an unauthorised session."""


class UnknownMethodError(DomainError, AttributeError):
    """Raised when an endpoint group or method name cannot be resolved."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Invalid method "{name}"')
        self.name = name


class InvalidMediaError(TwitterServiceError, ValueError):
    """Raised when a media file is unreadable or its MIME type is malformed."""


class MediaUploadError(TwitterServiceError, RuntimeError):
    """Raised when the INIT or APPEND step of a media upload fails."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        reason: str | None = None,
        segment_index: int | None = None,
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.segment_index = segment_index
        super().__init__(message)
