"""Correlation ID for the API call currently in flight, via contextvars."""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def generate_request_id() -> str:
    """Return a new 32-character hex request ID."""
    return uuid.uuid4().hex


def get_request_id() -> str:
    """Read the current request ID from the contextvar."""
    return request_id_var.get()


@contextmanager
def request_scope() -> Iterator[str]:
    """Bind a request ID for the duration of the block.

    Nested scopes reuse the outer ID, so the INIT/APPEND/FINALIZE calls of a
    single media upload share one ID.
    """
    current = request_id_var.get()
    if current:
        yield current
        return
    token = request_id_var.set(generate_request_id())
    try:
        yield request_id_var.get()
    finally:
        request_id_var.reset(token)
