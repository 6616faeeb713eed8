"""Chunked media upload (INIT, APPEND..., FINALIZE) against ``media/upload``."""

from __future__ import annotations

import base64
import enum
import logging
import os
import re
from typing import Any

import httpx
from pydantic import ValidationError

from twitterservice.config import Settings, settings as default_settings
from twitterservice.exceptions import InvalidMediaError, MediaUploadError
from twitterservice.request_context import request_scope
from twitterservice.response import Response
from twitterservice.schemas import MediaUploadInfo

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

_MEDIA_TYPE_RE = re.compile(r"^\w+/[-.\w]+(?:\+[-.\w]+)?")


class UploadState(enum.Enum):
    CREATED = "created"
    INITIALIZED = "initialized"
    APPENDING = "appending"
    FINALIZED = "finalized"
    FAILED = "failed"


def derive_media_category(media_type: str, for_direct_message: bool) -> str:
    """Map a MIME type to ``{tweet,dm}_{gif,video,image}``."""
    media_type = media_type.lower()
    if media_type == "image/gif":
        category = "gif"
    elif media_type.startswith("video/"):
        category = "video"
    else:
        category = "image"
    prefix = "dm_" if for_direct_message else "tweet_"
    return prefix + category


class Media:
    """Uploads one local file in chunks and returns the FINALIZE response.

    Usage::

        media = Media("clip.mp4", "video/mp4")
        response = client.upload(media)
        client.statuses.update("Look!", extra={"media_ids": [media.media_id]})

    ``upload()`` raises ``InvalidMediaError`` before any request when the file
    is unreadable or the media type is malformed, and ``MediaUploadError`` when
    INIT or an APPEND call fails. The FINALIZE response is returned whatever
    its status; inspect ``is_success`` on it.
    """

    def __init__(
        self,
        filename: str | os.PathLike[str],
        media_type: str,
        for_direct_message: bool = False,
        shared: bool = False,
        *,
        chunk_size: int | None = None,
        upload_uri: str | None = None,
    ) -> None:
        self.filename = os.fspath(filename)
        self.media_type = media_type
        self.for_direct_message = for_direct_message
        self.shared = shared
        self.chunk_size = chunk_size
        self.upload_uri = upload_uri
        self._segment_size = 0
        self._endpoint = ""
        self.media_id: int | None = None
        self.segment_index = 0
        self.state = UploadState.CREATED

    @property
    def media_category(self) -> str:
        return derive_media_category(self.media_type, self.for_direct_message)

    # -- workflow ------------------------------------------------------------

    def upload(
        self, http_client: httpx.Client, settings: Settings | None = None
    ) -> Response:
        """Run the whole INIT / APPEND / FINALIZE sequence on *http_client*.

        ``chunk_size`` and ``upload_uri`` left unset fall back to
        *settings* (the package settings by default).
        """
        settings = settings or default_settings
        self._segment_size = self.chunk_size or settings.media_chunk_size
        self._endpoint = self.upload_uri or settings.upload_base_uri
        self.media_id = None
        self.segment_index = 0
        self.state = UploadState.CREATED

        if not self._is_readable_file():
            self.state = UploadState.FAILED
            raise InvalidMediaError(f"Failed to open {self.filename}")

        if not _MEDIA_TYPE_RE.match(self.media_type):
            self.state = UploadState.FAILED
            raise InvalidMediaError("Invalid Media Type given.")

        with request_scope():
            try:
                total_bytes = os.path.getsize(self.filename)
                self.media_id = self._init_upload(http_client, total_bytes)
                self._append_upload(http_client)
                response = self._finalize_upload(http_client)
            except BaseException:
                self.state = UploadState.FAILED
                raise

        self.state = UploadState.FINALIZED
        return response

    def _init_upload(self, http_client: httpx.Client, total_bytes: int) -> int:
        payload: dict[str, Any] = {
            "command": "INIT",
            "media_category": self.media_category,
            "media_type": self.media_type,
            "total_bytes": total_bytes,
        }
        if self.for_direct_message and self.shared:
            payload["shared"] = True

        http_response = self._send(http_client, payload)
        if not http_response.is_success:
            logger.warning(
                "Media INIT failed for %s: %s", self.filename, http_response.status_code
            )
            raise MediaUploadError(
                f"Failed to initialize Twitter media upload: {http_response.text}",
                status_code=http_response.status_code,
                reason=http_response.reason_phrase,
            )

        try:
            info = Response(http_response).parse(MediaUploadInfo)
        except ValidationError as exc:
            raise MediaUploadError(
                f"Media upload INIT response did not include a media_id: {exc}",
                status_code=http_response.status_code,
                reason=http_response.reason_phrase,
            ) from exc

        logger.debug("Media INIT ok for %s: media_id=%s", self.filename, info.media_id)
        self.state = UploadState.INITIALIZED
        return info.media_id

    def _append_upload(self, http_client: httpx.Client) -> None:
        try:
            handle = open(self.filename, "rb")
        except OSError as exc:
            raise MediaUploadError(
                f"Failed to open the file in the APPEND method: {exc}"
            ) from exc

        self.state = UploadState.APPENDING
        with handle:
            while chunk := handle.read(self._segment_size):
                segment_index = self.segment_index
                self.segment_index += 1
                payload = {
                    "command": "APPEND",
                    "media_id": self.media_id,
                    "media_data": base64.b64encode(chunk).decode("ascii"),
                    "segment_index": segment_index,
                }
                http_response = self._send(http_client, payload)
                if not http_response.is_success:
                    logger.warning(
                        "Media APPEND failed for segment %d of %s",
                        segment_index,
                        self.filename,
                    )
                    raise MediaUploadError(
                        f"Failed uploading segment {segment_index} of {self.filename}. "
                        f"Error Code: {http_response.status_code}. "
                        f"Reason: {http_response.reason_phrase}",
                        status_code=http_response.status_code,
                        reason=http_response.reason_phrase,
                        segment_index=segment_index,
                    )
                logger.debug("Media APPEND ok: segment %d", segment_index)

    def _finalize_upload(self, http_client: httpx.Client) -> Response:
        payload = {"command": "FINALIZE", "media_id": self.media_id}
        return Response(self._send(http_client, payload))

    def _send(self, http_client: httpx.Client, payload: dict[str, Any]) -> httpx.Response:
        request = http_client.build_request(
            "POST",
            self._endpoint,
            data=payload,
            headers={"Content-Type": FORM_CONTENT_TYPE},
        )
        logger.debug("POST %s command=%s", self._endpoint, payload["command"])
        return http_client.send(request)

    def _is_readable_file(self) -> bool:
        return os.path.isfile(self.filename) and os.access(self.filename, os.R_OK)


class Image(Media):
    """Image upload; the media type defaults to ``image/jpeg``."""

    def __init__(
        self,
        filename: str | os.PathLike[str],
        media_type: str = "image/jpeg",
        for_direct_message: bool = False,
        shared: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(filename, media_type, for_direct_message, shared, **kwargs)


class Video(Media):
    """Video upload; the media type defaults to ``video/mp4``."""

    def __init__(
        self,
        filename: str | os.PathLike[str],
        media_type: str = "video/mp4",
        for_direct_message: bool = False,
        shared: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(filename, media_type, for_direct_message, shared, **kwargs)
