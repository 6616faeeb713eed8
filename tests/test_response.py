"""Tests for the Response wrapper and RateLimit parsing."""

from __future__ import annotations

import json

import httpx
import pytest

from twitterservice.exceptions import DomainError
from twitterservice.models import RateLimit
from twitterservice.response import Response
from twitterservice.schemas import ApiError, Status, User

from conftest import RATE_HEADERS, json_response

# ---------------------------------------------------------------------------
# RateLimit
# ---------------------------------------------------------------------------


class TestRateLimit:
    def test_from_headers_present(self):
        rate_limit = RateLimit.from_headers(RATE_HEADERS)
        assert rate_limit.limit == 15
        assert rate_limit.remaining == 14
        assert rate_limit.reset == 1500000000
        assert not rate_limit.is_exhausted

    def test_from_headers_absent(self):
        rate_limit = RateLimit.from_headers({})
        assert rate_limit == RateLimit(None, None, None)
        assert not rate_limit.is_exhausted

    def test_from_headers_partial(self):
        rate_limit = RateLimit.from_headers({"x-rate-limit-remaining": "0"})
        assert rate_limit.limit is None
        assert rate_limit.remaining == 0
        assert rate_limit.is_exhausted

    def test_non_numeric_header(self):
        assert RateLimit.from_headers({"x-rate-limit-limit": "lots"}).limit is None

    def test_from_httpx_headers_is_case_insensitive(self):
        headers = httpx.Headers({"X-Rate-Limit-Limit": "900"})
        assert RateLimit.from_headers(headers).limit == 900

    def test_str(self):
        assert str(RateLimit(15, 3, 99)) == "3/15 (resets at 99)"
        assert str(RateLimit()) == "?/? (resets at ?)"

    def test_frozen(self):
        rate_limit = RateLimit(limit=15, remaining=14, reset=42)
        with pytest.raises(AttributeError):
            rate_limit.limit = 0  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Response
# ---------------------------------------------------------------------------


class TestResponsePopulation:
    def test_fields_round_trip(self):
        body = {"id_str": "123", "text": "hi", "user": {"screen_name": "zf"}}
        response = Response(json_response(body))
        assert response.id_str == "123"
        assert response.get("text") == "hi"
        assert response.user == {"screen_name": "zf"}
        assert response.to_value() == body

    def test_unknown_field_is_none(self):
        response = Response(json_response({"id": 1}))
        assert response.not_a_field is None
        assert response.get("missing", "fallback") == "fallback"

    def test_private_names_raise(self):
        response = Response(json_response({"_secret": 1}))
        with pytest.raises(AttributeError):
            response._secret

    def test_raw_body_and_rate_limit(self):
        response = Response(json_response({"id": 1}))
        assert json.loads(response.raw_body) == {"id": 1}
        assert response.rate_limit == RateLimit(15, 14, 1500000000)

    def test_list_body(self):
        response = Response(json_response([{"id": 1}, {"id": 2}]))
        assert response.to_value() == [{"id": 1}, {"id": 2}]
        assert response.id is None

    def test_empty_body_is_not_populated(self):
        response = Response(httpx.Response(204, headers=RATE_HEADERS))
        assert response.raw_body is None
        assert response.rate_limit is None
        assert response.to_value() is None
        assert response.is_success

    def test_none_response(self):
        response = Response()
        assert response.http_response is None
        assert response.status_code is None
        assert response.is_error
        assert response.to_value() is None

    def test_invalid_json_raises_domain_error(self):
        with pytest.raises(DomainError, match="Unable to decode response") as exc_info:
            Response(httpx.Response(200, text="<html>oops</html>"))
        assert exc_info.value.__cause__ is not None


class TestResponseStatus:
    def test_success(self):
        response = Response(json_response({"id": 1}))
        assert response.is_success
        assert not response.is_error
        assert response.errors() == []
        assert response.status_code == 200
        assert response.reason_phrase == "OK"

    def test_errors_on_failure(self):
        body = {"errors": [{"code": 88, "message": "Rate limit exceeded"}]}
        response = Response(json_response(body, status_code=429))
        assert response.is_error
        assert response.errors() == body["errors"]

    def test_malformed_error_body(self):
        response = Response(json_response({"detail": "nope"}, status_code=500))
        with pytest.raises(DomainError, match="malformed"):
            response.errors()

    def test_repr(self):
        assert repr(Response(json_response({}, status_code=404))) == "<Response [404]>"


class TestResponseParse:
    def test_parse_status(self):
        body = {
            "id": 10,
            "id_str": "10",
            "full_text": "extended",
            "user": {"id": 1, "id_str": "1", "screen_name": "zf"},
            "retweet_count": 3,
        }
        status = Response(json_response(body)).parse(Status)
        assert status.body == "extended"
        assert status.user.screen_name == "zf"
        assert status.model_extra["retweet_count"] == 3

    def test_parse_list(self):
        body = [{"id": 1, "id_str": "1", "screen_name": "a"}, {"id": 2, "id_str": "2", "screen_name": "b"}]
        users = Response(json_response(body)).parse(User)
        assert [u.screen_name for u in users] == ["a", "b"]

    def test_parse_errors(self):
        body = {"errors": [{"code": 34, "message": "Sorry, that page does not exist"}]}
        response = Response(json_response(body, status_code=404))
        errors = [ApiError.model_validate(e) for e in response.errors()]
        assert errors[0].code == 34
