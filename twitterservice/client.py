"""``TwitterClient``: the facade over the Twitter REST API v1.1."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import httpx

from twitterservice.auth import (
    AccessToken,
    OAuthConsumer,
    OAuthOptions,
    build_http_client,
)
from twitterservice.config import Settings, settings as default_settings
from twitterservice.endpoints import (
    AccountEndpoints,
    ApplicationEndpoints,
    BlocksEndpoints,
    DirectMessagesEndpoints,
    EndpointGroup,
    FavoritesEndpoints,
    FollowersEndpoints,
    FriendsEndpoints,
    FriendshipsEndpoints,
    ListsEndpoints,
    SearchEndpoints,
    StatusesEndpoints,
    UsersEndpoints,
    normalize_name,
)
from twitterservice.exceptions import DomainError, UnknownMethodError
from twitterservice.media import Media
from twitterservice.request_context import request_scope
from twitterservice.response import Response

logger = logging.getLogger(__name__)

# POST paths whose mapping payloads are sent as JSON rather than form data.
PATHS_JSON_PAYLOAD = frozenset(
    {
        "direct_messages/events/new",
        "direct_messages/welcome_messages/new",
        "direct_messages/welcome_messages/rules/new",
    }
)

JSON_CONTENT_TYPE = "application/json"


def _first(options: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if options.get(key) is not None:
            return options[key]
    return None


def _encode_json(data: Any) -> bytes:
    return json.dumps(data, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


class TwitterClient:
    """Synchronous client for the Twitter REST API v1.1.

    Endpoints are grouped by resource::

        with TwitterClient(
            access_token={"token": "...", "secret": "..."},
            consumer_key="...",
            consumer_secret="...",
        ) as twitter:
            response = twitter.statuses.update("Hello world")
            if response.is_success:
                print(response.id_str)

    Groups and their operations may also be looked up by a loose name, so
    ``twitter.directmessages.eventsnew`` and ``twitter.statusesUpdate`` both
    work. An unknown name raises ``UnknownMethodError``.

    Each instance owns one ``httpx.Client``; call ``close()`` (or use the
    instance as a context manager) when done.
    """

    def __init__(
        self,
        access_token: AccessToken | Mapping[str, Any] | None = None,
        *,
        consumer_key: str | None = None,
        consumer_secret: str | None = None,
        callback_url: str | None = None,
        username: str | None = None,
        http_client_options: Mapping[str, Any] | None = None,
        settings: Settings | None = None,
        _transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings or default_settings
        self._oauth = OAuthOptions(
            consumer_key=consumer_key or "",
            consumer_secret=consumer_secret or "",
            callback_url=callback_url or None,
            site_url=self.settings.oauth_base_uri,
        )
        self._http_client_options = {
            "timeout": self.settings.http_timeout,
            **(http_client_options or {}),
        }
        self._transport = _transport
        self._username = username or None
        self._access_token = (
            AccessToken.from_value(access_token) if access_token is not None else None
        )
        self._http_client = self._build_http_client()
        self._consumer = OAuthConsumer(self._oauth, transport=_transport)
        self.api_base_uri = self.settings.api_base_uri

        self.account = AccountEndpoints(self)
        self.application = ApplicationEndpoints(self)
        self.blocks = BlocksEndpoints(self)
        self.direct_messages = DirectMessagesEndpoints(self)
        self.favorites = FavoritesEndpoints(self)
        self.followers = FollowersEndpoints(self)
        self.friends = FriendsEndpoints(self)
        self.friendships = FriendshipsEndpoints(self)
        self.lists = ListsEndpoints(self)
        self.search = SearchEndpoints(self)
        self.statuses = StatusesEndpoints(self)
        self.users = UsersEndpoints(self)

        self._groups: dict[str, EndpointGroup] = {
            normalize_name(group.name): group
            for group in (
                self.account,
                self.application,
                self.blocks,
                self.direct_messages,
                self.favorites,
                self.followers,
                self.friends,
                self.friendships,
                self.lists,
                self.search,
                self.statuses,
                self.users,
            )
        }

    # -- construction --------------------------------------------------------

    @classmethod
    def from_options(
        cls,
        options: Mapping[str, Any] | None,
        *,
        _transport: httpx.BaseTransport | None = None,
    ) -> TwitterClient:
        """Build a client from a flat option mapping.

        Recognised keys, in snake_case or camelCase: ``access_token``,
        ``oauth_options`` (``consumer_key``, ``consumer_secret``,
        ``callback_url``), ``http_client_options`` and ``username``.
        """
        options = options or {}
        oauth = OAuthOptions.from_mapping(_first(options, "oauth_options", "oauthOptions"))
        return cls(
            _first(options, "access_token", "accessToken"),
            consumer_key=oauth.consumer_key,
            consumer_secret=oauth.consumer_secret,
            callback_url=oauth.callback_url,
            username=options.get("username"),
            http_client_options=_first(
                options, "http_client_options", "httpClientOptions"
            ),
            _transport=_transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        _transport: httpx.BaseTransport | None = None,
    ) -> TwitterClient:
        """Build a client from ``TWITTER_*`` environment settings.

        Base URIs, character limits, the media chunk size and the timeout all
        come from *settings*.
        """
        settings = settings or default_settings
        access_token = None
        if settings.access_token and settings.access_token_secret:
            access_token = AccessToken(
                token=settings.access_token, secret=settings.access_token_secret
            )
        return cls(
            access_token,
            consumer_key=settings.consumer_key,
            consumer_secret=settings.consumer_secret,
            callback_url=settings.callback_url,
            username=settings.username,
            settings=settings,
            _transport=_transport,
        )

    def _build_http_client(self) -> httpx.Client:
        return build_http_client(
            self._oauth,
            self._access_token,
            self._http_client_options,
            transport=self._transport,
        )

    # -- context manager -----------------------------------------------------

    def __enter__(self) -> TwitterClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._http_client.close()

    # -- state ---------------------------------------------------------------

    @property
    def http_client(self) -> httpx.Client:
        return self._http_client

    @property
    def username(self) -> str | None:
        return self._username

    @username.setter
    def username(self, value: str | None) -> None:
        self._username = value or None

    def is_authorised(self) -> bool:
        """True once requests are signed with an OAuth access token."""
        return self._access_token is not None

    # -- OAuth ---------------------------------------------------------------

    def fetch_request_token(self) -> dict[str, str]:
        """First leg: obtain a request token (``oauth_token`` and secret)."""
        return self._consumer.fetch_request_token()

    def authorization_url(self, request_token: Mapping[str, str] | str | None = None) -> str:
        """Second leg: the URL the user visits to approve the application."""
        return self._consumer.authorization_url(request_token)

    def fetch_access_token(
        self,
        verifier: str,
        request_token: Mapping[str, str] | None = None,
    ) -> AccessToken:
        """Final leg: exchange the verifier and start signing requests."""
        access_token = self._consumer.fetch_access_token(verifier, request_token)
        self._http_client.close()
        self._access_token = access_token
        self._http_client = self._build_http_client()
        logger.info("Twitter session authorised")
        return access_token

    # -- generic requests ----------------------------------------------------

    def _prepare(self) -> None:
        if not self.is_authorised() and self._username is not None:
            raise DomainError(
                "Twitter session is unauthorised. You need to initialize "
                "TwitterClient with an OAuth access token or use its OAuth "
                "methods to obtain an access token before attempting any API "
                "actions that require authorisation"
            )

    def _url(self, path: str) -> str:
        return f"{self.api_base_uri}{path}.json"

    def _send(self, request: httpx.Request) -> Response:
        with request_scope():
            logger.debug("%s %s", request.method, request.url)
            http_response = self._http_client.send(request)
            logger.debug(
                "%s %s -> %d",
                request.method,
                request.url.path,
                http_response.status_code,
            )
            return Response(http_response)

    def get(self, path: str, query: Mapping[str, Any] | None = None) -> Response:
        """GET ``{api_base_uri}{path}.json`` for endpoints without a helper.

        ``twitter.get("friends/list", {"screen_name": "zfdevteam"})``
        """
        self._prepare()
        request = self._http_client.build_request(
            "GET", self._url(path), params=dict(query) if query else None
        )
        return self._send(request)

    def post(self, path: str, data: Any = None) -> Response:
        """POST to ``{api_base_uri}{path}.json``.

        *data* may be ``None`` (no body), a ``str`` sent verbatim, or a
        mapping. Mappings are form-encoded, except for ``PATHS_JSON_PAYLOAD``
        where they are sent as JSON; lists are always sent as JSON.
        """
        self._prepare()
        url = self._url(path)
        if data is None:
            request = self._http_client.build_request("POST", url)
        elif isinstance(data, (str, bytes)):
            request = self._http_client.build_request("POST", url, content=data)
        elif isinstance(data, list) or (
            path in PATHS_JSON_PAYLOAD and isinstance(data, Mapping)
        ):
            request = self._http_client.build_request(
                "POST",
                url,
                content=_encode_json(data),
                headers={"Content-Type": JSON_CONTENT_TYPE},
            )
        else:
            request = self._http_client.build_request("POST", url, data=dict(data))
        return self._send(request)

    def upload(self, media: Media) -> Response:
        """Upload *media* in chunks and return the FINALIZE response."""
        self._prepare()
        return media.upload(self._http_client, self.settings)

    # -- dynamic lookup ------------------------------------------------------

    def group(self, name: str) -> EndpointGroup:
        """Return the endpoint group matching *name* loosely."""
        group = self._groups.get(normalize_name(name))
        if group is None:
            raise UnknownMethodError(name)
        return group

    def resolve(self, name: str) -> Any:
        """Resolve a group name or a flat ``{group}{operation}`` name."""
        key = normalize_name(name)
        if key in self._groups:
            return self._groups[key]
        for prefix, group in self._groups.items():
            if key.startswith(prefix):
                attr = group.operations().get(key[len(prefix):])
                if attr is not None:
                    return getattr(group, attr)
        raise UnknownMethodError(name)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.resolve(name)
