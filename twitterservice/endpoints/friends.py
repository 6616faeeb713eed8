"""``friends/*`` endpoints."""

from __future__ import annotations

from typing import Any, Mapping

from twitterservice.endpoints.base import EndpointGroup
from twitterservice.params import create_user_parameter
from twitterservice.response import Response


class FriendsEndpoints(EndpointGroup):
    name = "friends"

    def ids(self, id: Any, params: Mapping[str, Any] | None = None) -> Response:
        """Ids of the users *id* follows."""
        return self._get("friends/ids", create_user_parameter(id, params))
