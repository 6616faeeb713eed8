"""``blocks/*`` endpoints."""

from __future__ import annotations

from typing import Any

from twitterservice.endpoints.base import EndpointGroup
from twitterservice.params import create_user_parameter
from twitterservice.response import Response


class BlocksEndpoints(EndpointGroup):
    name = "blocks"

    def create(self, id: Any) -> Response:
        """Block the user given by identifier or screen name."""
        return self._post("blocks/create", create_user_parameter(id))

    def destroy(self, id: Any) -> Response:
        return self._post("blocks/destroy", create_user_parameter(id))

    def ids(self, cursor: int = -1) -> Response:
        """Ids of blocked users; pass the returned ``next_cursor`` to page."""
        return self._get("blocks/ids", {"cursor": cursor})

    def list(self, cursor: int = -1) -> Response:
        return self._get("blocks/list", {"cursor": cursor})
