"""``account/*`` endpoints."""

from __future__ import annotations

from twitterservice.endpoints.base import EndpointGroup
from twitterservice.response import Response


class AccountEndpoints(EndpointGroup):
    name = "account"

    def verify_credentials(self) -> Response:
        """Return the authenticating user, or a 401 for bad credentials."""
        return self._get("account/verify_credentials")
