"""``application/*`` endpoints."""

from __future__ import annotations

from twitterservice.endpoints.base import EndpointGroup
from twitterservice.response import Response


class ApplicationEndpoints(EndpointGroup):
    name = "application"

    def rate_limit_status(self) -> Response:
        return self._get("application/rate_limit_status")
