"""Value objects shared by the response wrapper and the client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

LIMIT_HEADER = "x-rate-limit-limit"
REMAINING_HEADER = "x-rate-limit-remaining"
RESET_HEADER = "x-rate-limit-reset"


def _header_int(headers: Mapping[str, str], name: str) -> int | None:
    raw = headers.get(name)
    if raw is None:
        return None
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


@dataclass(frozen=True)
class RateLimit:
    """Rate-limit window parsed from ``x-rate-limit-*`` response headers.

    A header that is absent (or not an integer) leaves its field ``None``;
    ``0`` always means the API actually reported zero.
    """

    limit: int | None = None
    remaining: int | None = None
    reset: int | None = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, str] | None) -> RateLimit:
        if headers is None:
            return cls()
        return cls(
            limit=_header_int(headers, LIMIT_HEADER),
            remaining=_header_int(headers, REMAINING_HEADER),
            reset=_header_int(headers, RESET_HEADER),
        )

    @property
    def is_exhausted(self) -> bool:
        """True only when the API reported no remaining calls in the window."""
        return self.remaining == 0

    def __str__(self) -> str:
        def show(value: int | None) -> str:
            return "?" if value is None else str(value)

        return f"{show(self.remaining)}/{show(self.limit)} (resets at {show(self.reset)})"
