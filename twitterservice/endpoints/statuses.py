"""``statuses/*`` endpoints."""

from __future__ import annotations

from typing import Any, Mapping

from twitterservice.endpoints.base import EndpointGroup
from twitterservice.exceptions import InvalidArgumentError, OutOfRangeError
from twitterservice.params import (
    PAGING_RULES,
    TIMELINE_RULES,
    extended_tweet_mode,
    normalize_options,
    require_integer,
    text_length,
    to_bool,
    valid_integer,
    validate_screen_name,
)
from twitterservice.response import Response

HOME_TIMELINE_RULES = {**TIMELINE_RULES, "exclude_replies": to_bool}

SHOW_RULES = {
    "tweet_mode": extended_tweet_mode,
    "include_entities": to_bool,
    "trim_user": to_bool,
    "include_my_retweet": to_bool,
}

USER_TIMELINE_RULES = {
    **PAGING_RULES,
    "user_id": valid_integer,
    "screen_name": validate_screen_name,
    "tweet_mode": extended_tweet_mode,
    "trim_user": to_bool,
    "contributor_details": to_bool,
    "exclude_replies": to_bool,
    "include_rts": to_bool,
}


class StatusesEndpoints(EndpointGroup):
    name = "statuses"

    def destroy(self, id: Any) -> Response:
        return self._post(f"statuses/destroy/{require_integer(id)}")

    def home_timeline(self, options: Mapping[str, Any] | None = None) -> Response:
        """Recent statuses from the authenticating user and the users they follow.

        Recognised options: ``count``, ``since_id``, ``max_id``, ``tweet_mode``,
        ``trim_user``, ``contributor_details``, ``include_entities`` and
        ``exclude_replies``.
        """
        return self._get(
            "statuses/home_timeline", normalize_options(options, HOME_TIMELINE_RULES)
        )

    def mentions_timeline(self, options: Mapping[str, Any] | None = None) -> Response:
        return self._get(
            "statuses/mentions_timeline", normalize_options(options, TIMELINE_RULES)
        )

    def sample(self) -> Response:
        return self._get("statuses/sample")

    def show(self, id: Any, options: Mapping[str, Any] | None = None) -> Response:
        return self._get(
            f"statuses/show/{require_integer(id)}",
            normalize_options(options, SHOW_RULES),
        )

    def update(
        self,
        status: str,
        in_reply_to_status_id: Any = None,
        extra: Mapping[str, Any] | None = None,
    ) -> Response:
        """Post a new status.

        *status* must hold between 1 and ``status_max_characters`` (from the
        client's settings) characters. ``extra["media_ids"]``, a list of uploaded media ids, is
        sent comma-joined. An invalid *in_reply_to_status_id* is ignored.
        """
        length = text_length(status)
        limit = self._client.settings.status_max_characters
        if length > limit:
            raise OutOfRangeError(
                f"Status must be no more than {limit} characters in length; "
                f"received {length}"
            )
        if length == 0:
            raise InvalidArgumentError("Status must contain at least one character")

        params: dict[str, Any] = {"status": status}

        media_ids = (extra or {}).get("media_ids")
        if isinstance(media_ids, (list, tuple)) and media_ids:
            params["media_ids"] = ",".join(str(media_id) for media_id in media_ids)

        reply_to = valid_integer(in_reply_to_status_id)
        if reply_to is not None:
            params["in_reply_to_status_id"] = reply_to

        return self._post("statuses/update", params)

    def user_timeline(self, options: Mapping[str, Any] | None = None) -> Response:
        """Recent statuses posted by the user named in ``user_id``/``screen_name``."""
        return self._get(
            "statuses/user_timeline", normalize_options(options, USER_TIMELINE_RULES)
        )
