"""OAuth 1.0a credentials and the signed HTTP client built from them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

import httpx
from authlib.integrations.base_client import OAuthError
from authlib.integrations.httpx_client import OAuth1Auth, OAuth1Client

from twitterservice.config import settings
from twitterservice.exceptions import DomainError, InvalidArgumentError

logger = logging.getLogger(__name__)

# Sent with every API call.
DEFAULT_HEADERS = {"Accept-Charset": "ISO-8859-1,utf-8"}


@dataclass(frozen=True)
class AccessToken:
    """An OAuth 1.0a access token and its secret."""

    token: str
    secret: str

    @classmethod
    def from_value(cls, value: AccessToken | Mapping[str, Any]) -> AccessToken:
        """Accept an ``AccessToken`` or a mapping using either key convention.

        Mappings may use ``token``/``secret`` or the ``oauth_token``/
        ``oauth_token_secret`` keys returned by the token endpoints.
        """
        if isinstance(value, AccessToken):
            return value
        if isinstance(value, Mapping):
            token = value.get("token", value.get("oauth_token"))
            secret = value.get("secret", value.get("oauth_token_secret"))
            if token and secret:
                return cls(token=str(token), secret=str(secret))
        raise InvalidArgumentError(
            "Access token must provide both a token and a secret"
        )


@dataclass(frozen=True)
class OAuthOptions:
    """Consumer credentials and endpoints for the OAuth 1.0a flow."""

    consumer_key: str = ""
    consumer_secret: str = ""
    callback_url: str | None = None
    site_url: str = settings.oauth_base_uri

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> OAuthOptions:
        options = options or {}
        return cls(
            consumer_key=options.get("consumer_key", options.get("consumerKey", "")),
            consumer_secret=options.get(
                "consumer_secret", options.get("consumerSecret", "")
            ),
            callback_url=options.get("callback_url", options.get("callbackUrl")),
        )

    @property
    def request_token_url(self) -> str:
        return f"{self.site_url}/request_token"

    @property
    def authorize_url(self) -> str:
        return f"{self.site_url}/authorize"

    @property
    def access_token_url(self) -> str:
        return f"{self.site_url}/access_token"


def build_http_client(
    oauth: OAuthOptions,
    access_token: AccessToken | None = None,
    http_client_options: Mapping[str, Any] | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create the ``httpx.Client`` a single facade will own.

    With an access token every request is signed with HMAC-SHA1 in the
    ``Authorization`` header; JSON bodies are hashed into the signature too.
    """
    options = dict(http_client_options or {})
    headers = {**DEFAULT_HEADERS, **options.pop("headers", {})}
    kwargs: dict[str, Any] = {
        "headers": headers,
        "timeout": options.pop("timeout", settings.http_timeout),
        **options,
    }
    if access_token is not None:
        kwargs["auth"] = OAuth1Auth(
            client_id=oauth.consumer_key,
            client_secret=oauth.consumer_secret,
            token=access_token.token,
            token_secret=access_token.secret,
            force_include_body=True,
        )
    if transport is not None:
        kwargs["transport"] = transport
    return httpx.Client(**kwargs)


class OAuthConsumer:
    """Three-legged OAuth 1.0a flow against ``{site_url}/...``.

    Wraps authlib's ``OAuth1Client``; the request token obtained in the first
    leg is remembered for the authorization URL and the access-token exchange.
    """

    def __init__(
        self,
        options: OAuthOptions,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.options = options
        self._transport = transport
        self.request_token: dict[str, str] | None = None

    def _session(self, **token: str) -> OAuth1Client:
        kwargs: dict[str, Any] = {"headers": dict(DEFAULT_HEADERS)}
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return OAuth1Client(
            client_id=self.options.consumer_key,
            client_secret=self.options.consumer_secret,
            redirect_uri=self.options.callback_url,
            **token,
            **kwargs,
        )

    def fetch_request_token(self) -> dict[str, str]:
        try:
            with self._session() as session:
                token = session.fetch_request_token(self.options.request_token_url)
        except OAuthError as exc:
            raise DomainError(f"Unable to obtain a request token: {exc}") from exc
        logger.debug("Obtained OAuth request token")
        self.request_token = dict(token)
        return self.request_token

    def authorization_url(self, request_token: Mapping[str, str] | str | None = None) -> str:
        token = request_token or self.request_token
        if token is None:
            raise InvalidArgumentError(
                "A request token is required; call fetch_request_token() first"
            )
        if isinstance(token, Mapping):
            token = token["oauth_token"]
        with self._session() as session:
            return session.create_authorization_url(
                self.options.authorize_url, request_token=token
            )

    def fetch_access_token(
        self,
        verifier: str,
        request_token: Mapping[str, str] | None = None,
    ) -> AccessToken:
        token = request_token or self.request_token
        if token is None:
            raise InvalidArgumentError(
                "A request token is required; call fetch_request_token() first"
            )
        try:
            with self._session(
                token=token["oauth_token"],
                token_secret=token.get("oauth_token_secret"),
            ) as session:
                result = session.fetch_access_token(
                    self.options.access_token_url, verifier=verifier
                )
        except OAuthError as exc:
            raise DomainError(f"Unable to obtain an access token: {exc}") from exc
        logger.debug("Exchanged OAuth verifier for an access token")
        self.request_token = None
        return AccessToken.from_value(result)
