"""twitterservice: a thin, validating client for the Twitter REST API v1.1."""

from __future__ import annotations

from twitterservice.auth import AccessToken, OAuthOptions
from twitterservice.client import PATHS_JSON_PAYLOAD, TwitterClient
from twitterservice.exceptions import (
    DomainError,
    InvalidArgumentError,
    InvalidMediaError,
    MediaUploadError,
    OutOfRangeError,
    TwitterServiceError,
    UnknownMethodError,
)
from twitterservice.media import Image, Media, UploadState, Video
from twitterservice.models import RateLimit
from twitterservice.response import Response

__version__ = "0.1.0"

__all__ = [
    "PATHS_JSON_PAYLOAD",
    "AccessToken",
    "DomainError",
    "Image",
    "InvalidArgumentError",
    "InvalidMediaError",
    "Media",
    "MediaUploadError",
    "OAuthOptions",
    "OutOfRangeError",
    "RateLimit",
    "Response",
    "TwitterClient",
    "TwitterServiceError",
    "UnknownMethodError",
    "UploadState",
    "Video",
]
