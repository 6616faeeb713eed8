"""Pydantic DTOs for typed, parse-on-demand access to API payloads.

Only the fields the client relies on are declared; every model keeps the
remaining payload keys as extras so nothing the API returns is lost.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _Payload(BaseModel):
    model_config = ConfigDict(extra="allow")


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class ApiError(_Payload):
    """One entry of the ``errors`` array returned with non-2xx responses."""

    code: int = Field(..., description="Twitter error code")
    message: str = Field(..., description="Human-readable error message")


# ---------------------------------------------------------------------------
# Users and statuses
# ---------------------------------------------------------------------------


class User(_Payload):
    """A user object as returned by ``users/show`` and ``users/lookup``."""

    id: int
    id_str: str
    screen_name: str
    name: str | None = None


class Status(_Payload):
    """A tweet; ``full_text`` replaces ``text`` when ``tweet_mode=extended``."""

    id: int
    id_str: str
    text: str | None = None
    full_text: str | None = None
    user: User | None = None

    @property
    def body(self) -> str | None:
        return self.full_text if self.full_text is not None else self.text


# ---------------------------------------------------------------------------
# media/upload
# ---------------------------------------------------------------------------


class MediaUploadInfo(_Payload):
    """Body of the INIT and FINALIZE ``media/upload`` commands."""

    media_id: int = Field(..., description="Identifier to pass to APPEND/FINALIZE")
    media_id_string: str | None = None
    size: int | None = None
    expires_after_secs: int | None = None
    processing_info: dict[str, Any] | None = Field(
        None, description="Present for async-processed video and GIF uploads"
    )
