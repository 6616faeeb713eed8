"""``followers/*`` endpoints."""

from __future__ import annotations

from typing import Any, Mapping

from twitterservice.endpoints.base import EndpointGroup
from twitterservice.params import create_user_parameter
from twitterservice.response import Response


class FollowersEndpoints(EndpointGroup):
    name = "followers"

    def ids(self, id: Any, params: Mapping[str, Any] | None = None) -> Response:
        """Ids of the users following *id*; cursored via ``params["cursor"]``."""
        return self._get("followers/ids", create_user_parameter(id, params))
