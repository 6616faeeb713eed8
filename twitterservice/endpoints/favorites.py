"""``favorites/*`` endpoints."""

from __future__ import annotations

from typing import Any, Mapping

from twitterservice.endpoints.base import EndpointGroup
from twitterservice.params import (
    PAGING_RULES,
    normalize_options,
    require_integer,
    to_bool,
    valid_integer,
    validate_screen_name,
)
from twitterservice.response import Response

LIST_RULES = {
    **PAGING_RULES,
    "user_id": valid_integer,
    "screen_name": validate_screen_name,
    "include_entities": to_bool,
}


class FavoritesEndpoints(EndpointGroup):
    name = "favorites"

    def create(self, id: Any) -> Response:
        """Like the status *id*."""
        return self._post("favorites/create", {"id": require_integer(id)})

    def destroy(self, id: Any) -> Response:
        return self._post("favorites/destroy", {"id": require_integer(id)})

    def list(self, options: Mapping[str, Any] | None = None) -> Response:
        """Statuses liked by the authenticating (or given) user.

        Recognised options: ``user_id``, ``screen_name``, ``count``,
        ``since_id``, ``max_id`` and ``include_entities``.
        """
        return self._get("favorites/list", normalize_options(options, LIST_RULES))
