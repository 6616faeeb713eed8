"""Shared plumbing for the typed endpoint groups."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from twitterservice.exceptions import UnknownMethodError

if TYPE_CHECKING:
    from twitterservice.client import TwitterClient
    from twitterservice.response import Response


def normalize_name(name: str) -> str:
    """``directMessages``, ``direct_messages`` and ``DirectMessages`` all match."""
    return name.replace("_", "").lower()


class EndpointGroup:
    """A sub-client bundling the endpoints under one ``{resource}/`` prefix.

    Public methods are also resolvable by a loose name: case-insensitive with
    underscores ignored, so ``group.hometimeline`` finds ``home_timeline``.
    """

    name: str = ""

    def __init__(self, client: TwitterClient) -> None:
        self._client = client

    def _get(self, path: str, query: dict[str, Any] | None = None) -> Response:
        return self._client.get(path, query)

    def _post(self, path: str, data: Any = None) -> Response:
        return self._client.post(path, data)

    @classmethod
    def operations(cls) -> dict[str, str]:
        """Map each normalized operation name to its method name."""
        names: dict[str, str] = {}
        for attr in dir(cls):
            if attr.startswith("_") or attr in ("method", "operations", "name"):
                continue
            if callable(getattr(cls, attr)):
                names[normalize_name(attr)] = attr
        return names

    def method(self, name: str) -> Callable[..., Response]:
        """Return the bound operation matching *name*."""
        attr = self.operations().get(normalize_name(name))
        if attr is None:
            raise UnknownMethodError(f"{self.name}.{name}")
        return getattr(self, attr)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.method(name)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
