"""Uniform wrapper around every HTTP response returned by the API."""

from __future__ import annotations

import json
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

from twitterservice.exceptions import DomainError
from twitterservice.models import RateLimit

ModelT = TypeVar("ModelT", bound=BaseModel)


class Response:
    """Representation of a response from Twitter.

    Provides:

    - ``is_success`` / ``is_error`` based on the HTTP status
    - ``errors()`` for the standard ``errors`` array of a failed call
    - the raw body, the decoded JSON body and the ``RateLimit`` of the call
    - access to fields of the decoded body by name, through ``get()`` or
      attribute access; unknown names yield ``None``

    A response with an empty body is not populated: the decoded body, the raw
    body and the rate limit all stay ``None``.
    """

    def __init__(self, http_response: httpx.Response | None = None) -> None:
        self._http_response = http_response
        self._json_body: Any = None
        self._raw_body: str | None = None
        self._rate_limit: RateLimit | None = None

        if http_response is not None and http_response.content:
            self._populate(http_response)

    def _populate(self, http_response: httpx.Response) -> None:
        self._raw_body = http_response.text
        self._rate_limit = RateLimit.from_headers(http_response.headers)
        try:
            self._json_body = json.loads(self._raw_body)
        except json.JSONDecodeError as exc:
            raise DomainError(
                f"Unable to decode response from twitter: {exc}"
            ) from exc

    # -- field access --------------------------------------------------------

    def get(self, name: str, default: Any = None) -> Any:
        """Return a top-level field of a JSON object body, or *default*."""
        if not isinstance(self._json_body, dict):
            return default
        value = self._json_body.get(name)
        return default if value is None else value

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.get(name)

    # -- status --------------------------------------------------------------

    @property
    def http_response(self) -> httpx.Response | None:
        return self._http_response

    @property
    def status_code(self) -> int | None:
        if self._http_response is None:
            return None
        return self._http_response.status_code

    @property
    def reason_phrase(self) -> str | None:
        if self._http_response is None:
            return None
        return self._http_response.reason_phrase

    @property
    def is_success(self) -> bool:
        return self._http_response is not None and self._http_response.is_success

    @property
    def is_error(self) -> bool:
        return not self.is_success

    def errors(self) -> list:
        """Return the ``errors`` array of a failed call.

        Successful responses yield an empty list. A failed response whose body
        carries no ``errors`` member raises ``DomainError``.
        """
        if not self.is_error:
            return []
        if not isinstance(self._json_body, dict) or "errors" not in self._json_body:
            raise DomainError(
                "Either no JSON response received, or JSON error response is "
                "malformed; cannot return errors"
            )
        return self._json_body["errors"]

    # -- bodies --------------------------------------------------------------

    @property
    def raw_body(self) -> str | None:
        return self._raw_body

    @property
    def rate_limit(self) -> RateLimit | None:
        return self._rate_limit

    def to_value(self) -> Any:
        """Return the decoded JSON body (dict or list), or ``None``."""
        return self._json_body

    def parse(self, model: type[ModelT]) -> ModelT | list[ModelT]:
        """Validate the decoded body into *model*; list bodies yield a list."""
        if isinstance(self._json_body, list):
            return [model.model_validate(item) for item in self._json_body]
        return model.model_validate(self._json_body)

    def __repr__(self) -> str:
        return f"<Response [{self.status_code}]>"
