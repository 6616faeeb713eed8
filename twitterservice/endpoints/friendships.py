"""``friendships/*`` endpoints."""

from __future__ import annotations

from typing import Any, Mapping

from twitterservice.endpoints.base import EndpointGroup
from twitterservice.params import create_user_list_parameter, create_user_parameter
from twitterservice.response import Response

CREATE_KEYS = ("user_id", "screen_name", "follow")


class FriendshipsEndpoints(EndpointGroup):
    name = "friendships"

    def create(self, id: Any, params: Mapping[str, Any] | None = None) -> Response:
        """Follow *id*. Only ``follow`` is honoured from *params*."""
        params = create_user_parameter(id, params)
        return self._post(
            "friendships/create",
            {key: value for key, value in params.items() if key in CREATE_KEYS},
        )

    def lookup(self, ids: Any, params: Mapping[str, Any] | None = None) -> Response:
        """Relationship of the authenticating user to up to 100 users."""
        return self._get(
            "friendships/lookup",
            create_user_list_parameter(ids, params, "friendships.lookup"),
        )

    def destroy(self, id: Any) -> Response:
        return self._post("friendships/destroy", create_user_parameter(id))
