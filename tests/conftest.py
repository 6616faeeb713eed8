from __future__ import annotations

from typing import Any
from urllib.parse import parse_qsl

import httpx
import pytest

from twitterservice import TwitterClient

ACCESS_TOKEN = {"token": "12345-access-token", "secret": "access-token-secret"}

RATE_HEADERS = {
    "x-rate-limit-limit": "15",
    "x-rate-limit-remaining": "14",
    "x-rate-limit-reset": "1500000000",
}


def json_response(
    body: Any,
    status_code: int = 200,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    hdrs = dict(RATE_HEADERS)
    if headers:
        hdrs.update(headers)
    return httpx.Response(status_code, json=body, headers=hdrs)


def form_body(request: httpx.Request) -> dict[str, str]:
    """Decode a form-encoded request body into a flat dict."""
    return dict(parse_qsl(request.content.decode("utf-8"), keep_blank_values=True))


class Recorder:
    """MockTransport handler that records requests and replays queued responses."""

    def __init__(self, *responses: httpx.Response) -> None:
        self.requests: list[httpx.Request] = []
        self.responses = list(responses)

    def queue(self, *responses: httpx.Response) -> None:
        self.responses.extend(responses)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if self.responses:
            return self.responses.pop(0)
        return json_response({"id": 1, "id_str": "1"})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def twitter(recorder):
    client = TwitterClient(
        ACCESS_TOKEN,
        consumer_key="consumer-key",
        consumer_secret="consumer-secret",
        _transport=httpx.MockTransport(recorder),
    )
    yield client
    client.close()
