"""``lists/*`` endpoints."""

from __future__ import annotations

from typing import Any, Mapping

from twitterservice.endpoints.base import EndpointGroup
from twitterservice.exceptions import InvalidArgumentError
from twitterservice.params import (
    create_user_parameter,
    valid_integer,
    validate_screen_name,
)
from twitterservice.response import Response


class ListsEndpoints(EndpointGroup):
    name = "lists"

    def members(
        self,
        list_id_or_slug: Any,
        params: Mapping[str, Any] | None = None,
    ) -> Response:
        """Members of a list given by numeric id or by slug.

        A slug is only unique per owner, so *params* must then carry either a
        valid ``owner_id`` or a valid ``owner_screen_name``.
        """
        path = "lists/members"
        params = dict(params or {})

        list_id = valid_integer(list_id_or_slug)
        if list_id is not None:
            params["list_id"] = list_id
            return self._get(path, params)

        params["slug"] = list_id_or_slug
        if "owner_id" not in params and "owner_screen_name" not in params:
            raise InvalidArgumentError(
                "lists.members was provided a list slug, but is missing owner info; "
                'please provide one of either the "owner_id" or '
                '"owner_screen_name" parameters when calling the method'
            )

        if "owner_id" in params:
            if valid_integer(params["owner_id"]) is None:
                raise InvalidArgumentError(
                    "lists.members was provided a list slug, but an invalid "
                    "owner_id parameter; must be an integer"
                )
            return self._get(path, params)

        try:
            validate_screen_name(params["owner_screen_name"])
        except InvalidArgumentError as exc:
            raise InvalidArgumentError(
                "lists.members was provided a list slug, but an invalid "
                "owner_screen_name parameter; must be a valid screen name"
            ) from exc
        return self._get(path, params)

    def memberships(self, id: Any, params: Mapping[str, Any] | None = None) -> Response:
        """Lists the user *id* has been added to."""
        return self._get("lists/memberships", create_user_parameter(id, params))

    def subscribers(self, id: Any, params: Mapping[str, Any] | None = None) -> Response:
        return self._get("lists/subscribers", create_user_parameter(id, params))
