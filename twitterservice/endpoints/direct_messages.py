"""``direct_messages/*`` endpoints."""

from __future__ import annotations

from typing import Any, Mapping

from twitterservice.endpoints.base import EndpointGroup
from twitterservice.exceptions import InvalidArgumentError, OutOfRangeError
from twitterservice.params import (
    PAGING_RULES,
    normalize_options,
    require_integer,
    text_length,
    to_bool,
    to_int,
    valid_integer,
)
from twitterservice.response import Response

MESSAGES_RULES = {
    **PAGING_RULES,
    "include_entities": to_bool,
    "skip_status": to_bool,
}

SENT_RULES = {
    **PAGING_RULES,
    "page": to_int,
    "include_entities": to_bool,
}


class DirectMessagesEndpoints(EndpointGroup):
    name = "direct_messages"

    def destroy(self, id: Any) -> Response:
        return self._post("direct_messages/destroy", {"id": require_integer(id)})

    def messages(self, options: Mapping[str, Any] | None = None) -> Response:
        """Direct messages received by the authenticating user.

        Recognised options: ``count``, ``since_id``, ``max_id``,
        ``include_entities`` and ``skip_status``.
        """
        return self._get("direct_messages", normalize_options(options, MESSAGES_RULES))

    def new(
        self,
        user: Any,
        text: str,
        extra: Mapping[str, Any] | None = None,
    ) -> Response:
        """Alias of ``events_new``; ``direct_messages/new`` is deprecated."""
        return self.events_new(user, text, extra)

    def events_new(
        self,
        user: Any,
        text: str,
        extra: Mapping[str, Any] | None = None,
    ) -> Response:
        """Send *text* to *user* as a ``message_create`` event.

        A screen name is first resolved to a user id via ``users/show``. When
        *extra* carries a ``media_id`` the media is attached to the message.
        """
        length = text_length(text)
        if length == 0:
            raise InvalidArgumentError(
                "Direct message must contain at least one character"
            )
        limit = self._client.settings.direct_message_max_characters
        if length > limit:
            raise OutOfRangeError(
                f"Direct message must be no more than {limit} characters"
            )

        recipient_id = valid_integer(user)
        if recipient_id is None:
            response = self._client.users.show(user)
            if not response.is_success:
                raise InvalidArgumentError(
                    "Invalid user provided; must be a Twitter user ID or screen name"
                )
            recipient_id = response.id_str

        message_data: dict[str, Any] = {"text": text}
        extra = extra or {}
        if extra.get("media_id") is not None:
            message_data["attachment"] = {
                "type": "media",
                "media": {"id": extra["media_id"]},
            }

        event = {
            "type": "message_create",
            "message_create": {
                "target": {"recipient_id": recipient_id},
                "message_data": message_data,
            },
        }
        return self._post("direct_messages/events/new", {"event": event})

    def sent(self, options: Mapping[str, Any] | None = None) -> Response:
        """Direct messages sent by the authenticating user."""
        return self._get("direct_messages/sent", normalize_options(options, SENT_RULES))
