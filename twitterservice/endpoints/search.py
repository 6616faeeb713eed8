"""``search/*`` endpoints."""

from __future__ import annotations

from typing import Any, Mapping

from twitterservice.endpoints.base import EndpointGroup
from twitterservice.exceptions import InvalidArgumentError
from twitterservice.params import (
    PAGING_RULES,
    bounded_int,
    extended_tweet_mode,
    iso_date,
    language_code,
    normalize_options,
    one_of,
    parse_geocode,
    text_length,
    to_bool,
)
from twitterservice.response import Response

TWEETS_RULES = {
    **PAGING_RULES,
    "geocode": parse_geocode,
    "lang": language_code("language"),
    "locale": language_code("locale"),
    "result_type": one_of("result_type", ("mixed", "recent", "popular")),
    "count": bounded_int(1, 100),
    "until": iso_date,
    "include_entities": to_bool,
    "tweet_mode": extended_tweet_mode,
}


class SearchEndpoints(EndpointGroup):
    name = "search"

    def tweets(self, query: str, options: Mapping[str, Any] | None = None) -> Response:
        """Search recent tweets matching *query*.

        Recognised options: ``geocode`` (``"lat,long,radius"`` with a ``mi``
        or ``km`` radius), ``lang``, ``locale``, ``result_type`` (mixed,
        recent or popular), ``count`` (1-100), ``until`` (YYYY-MM-DD),
        ``since_id``, ``max_id``, ``include_entities`` and ``tweet_mode``.
        """
        if text_length(query) == 0:
            raise InvalidArgumentError("Query must contain at least one character")
        params: dict[str, Any] = {"q": query}
        params.update(normalize_options(options, TWEETS_RULES))
        return self._get("search/tweets", params)
