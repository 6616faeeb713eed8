"""``users/*`` endpoints."""

from __future__ import annotations

from typing import Any, Mapping

from twitterservice.endpoints.base import EndpointGroup
from twitterservice.exceptions import InvalidArgumentError
from twitterservice.params import (
    bounded_int,
    create_user_list_parameter,
    create_user_parameter,
    normalize_options,
    text_length,
    to_bool,
    to_int,
)
from twitterservice.response import Response

SEARCH_RULES = {
    "count": bounded_int(1, 20),
    "page": to_int,
    "include_entities": to_bool,
}


class UsersEndpoints(EndpointGroup):
    name = "users"

    def lookup(self, ids: Any, params: Mapping[str, Any] | None = None) -> Response:
        """Fully hydrated users for up to 100 ids or screen names."""
        return self._post(
            "users/lookup", create_user_list_parameter(ids, params, "users.lookup")
        )

    def search(self, query: str, options: Mapping[str, Any] | None = None) -> Response:
        if text_length(query) == 0:
            raise InvalidArgumentError("Query must contain at least one character")
        params: dict[str, Any] = {"q": query}
        params.update(normalize_options(options, SEARCH_RULES))
        return self._get("users/search", params)

    def show(self, id: Any) -> Response:
        return self._get("users/show", create_user_parameter(id))
