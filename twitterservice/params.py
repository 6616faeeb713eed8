"""Coercion and validation of caller-supplied endpoint parameters.

Identifiers in the Twitter API may exceed the range of a 64-bit float, so
most ``id`` parameters accept either an ``int`` or an all-digit ``str`` and
pass them through verbatim.
"""

from __future__ import annotations

import math
import re
import unicodedata
from typing import Any, Callable, Mapping, Sequence

from twitterservice.exceptions import InvalidArgumentError

TRUTHY_VALUES: tuple = (True, "true", "t", 1, "1")

MAX_LOOKUP_IDENTIFIERS = 100

_DIGITS_RE = re.compile(r"\d+", re.ASCII)
_SCREEN_NAME_RE = re.compile(r"[a-zA-Z0-9_]{1,15}")
_RADIUS_RE = re.compile(r"\d+(mi|km)", re.ASCII)
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)

Rule = Callable[[Any], Any]


# ---------------------------------------------------------------------------
# Scalar coercion
# ---------------------------------------------------------------------------


def valid_integer(value: Any) -> int | str | None:
    """Return *value* if it is a non-negative integer or an all-digit string.

    Anything else, including ``bool``, yields ``None``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > -1 else None
    if isinstance(value, str) and _DIGITS_RE.fullmatch(value):
        return value
    return None


def require_integer(value: Any, name: str = "id") -> int | str:
    """Like ``valid_integer`` but raise when *value* is not an identifier."""
    result = valid_integer(value)
    if result is None:
        raise InvalidArgumentError(
            f'"{name}" must be a non-negative integer or a string of digits; '
            f"received {value!r}"
        )
    return result


def to_bool(value: Any) -> bool:
    """Interpret *value* against the truthy set ``{True, "true", "t", 1, "1"}``."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value == 1
    if isinstance(value, str):
        return value in TRUTHY_VALUES
    return False


def to_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise InvalidArgumentError(f"Expected an integer; received {value!r}") from None


def extended_tweet_mode(value: Any) -> str:
    """``tweet_mode`` only supports one value."""
    return "extended"


def text_length(text: str) -> int:
    """Count characters the way the API does: NFC-normalized code points."""
    return len(unicodedata.normalize("NFC", text))


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


def validate_screen_name(name: Any) -> str:
    if not isinstance(name, str) or not _SCREEN_NAME_RE.fullmatch(name):
        raise InvalidArgumentError(
            f'Screen name, "{name}" should only contain alphanumeric characters and'
            " underscores, and not exceed 15 characters."
        )
    return name


def create_user_parameter(user: Any, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Add ``user_id`` or ``screen_name`` to *params* depending on *user*.

    Identifiers (see ``valid_integer``) become ``user_id``; other strings must
    be valid screen names.
    """
    result = dict(params or {})
    if isinstance(user, bool) or not isinstance(user, (int, str)):
        raise InvalidArgumentError(
            f"User identifier must be an integer or a string, received {type(user).__name__}"
        )

    user_id = valid_integer(user)
    if user_id is not None:
        result["user_id"] = user_id
        return result

    if not isinstance(user, str):
        raise InvalidArgumentError(
            f"User identifier must be an integer or a string, received {type(user).__name__}"
        )
    result["screen_name"] = validate_screen_name(user)
    return result


def create_user_list_parameter(
    users: Any,
    params: Mapping[str, Any] | None = None,
    context: str = "lookup",
) -> dict[str, Any]:
    """Build the comma-joined ``user_id`` or ``screen_name`` list for lookups.

    Accepts a single identifier, a single screen name, or a sequence of at
    most 100 items that are all identifiers or all screen names.
    """
    if isinstance(users, (str, bytes)) or not isinstance(users, Sequence):
        return create_user_parameter(users, params)

    if len(users) > MAX_LOOKUP_IDENTIFIERS:
        raise InvalidArgumentError(
            f"Lists of identifier(s) or screen name(s) provided for {context}; "
            f"must contain no more than {MAX_LOOKUP_IDENTIFIERS} items. "
            f"Received {len(users)}"
        )

    kinds = {"user_id" if valid_integer(u) is not None else "screen_name" for u in users}
    if len(kinds) > 1:
        raise InvalidArgumentError(
            f"Invalid identifier(s) or screen name(s) provided for {context}; "
            "all values must either be identifiers OR screen names. "
            "You cannot provide items of both types."
        )

    result = dict(params or {})
    if kinds == {"user_id"}:
        result["user_id"] = ",".join(str(u) for u in users)
        return result

    result["screen_name"] = ",".join(validate_screen_name(u) for u in users)
    return result


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------


def _format_coordinate(raw: str) -> str:
    try:
        value = float(raw)
    except ValueError:
        raise InvalidArgumentError(
            f'"geocode" coordinates must be numeric; received {raw!r}'
        ) from None
    if not math.isfinite(value):
        raise InvalidArgumentError(
            f'"geocode" coordinates must be finite numbers; received {raw!r}'
        )
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


def parse_geocode(value: Any) -> str:
    """Validate and normalize a ``latitude,longitude,radius`` string."""
    if not isinstance(value, str) or value.count(",") != 2:
        raise InvalidArgumentError(
            '"geocode" must be of the format "latitude,longitude,radius"'
        )
    latitude, longitude, radius = value.split(",", 2)
    radius = radius.strip()
    if not _RADIUS_RE.fullmatch(radius):
        raise InvalidArgumentError(
            'Radius segment of "geocode" must be of the format "[unit](mi|km)"'
        )
    return f"{_format_coordinate(latitude)},{_format_coordinate(longitude)},{radius}"


def language_code(label: str) -> Rule:
    def rule(value: Any) -> str:
        value = str(value)
        if len(value) > 2:
            raise InvalidArgumentError(f"Query {label} must be a 2 character string")
        return value.lower()

    return rule


def bounded_int(low: int, high: int) -> Rule:
    def rule(value: Any) -> int:
        number = to_int(value)
        if number < low or number > high:
            raise InvalidArgumentError(f"count must be between {low} and {high}")
        return number

    return rule


def one_of(name: str, choices: Sequence[str]) -> Rule:
    def rule(value: Any) -> str:
        value = str(value).lower()
        if value not in choices:
            quoted = ", ".join(f'"{c}"' for c in choices[:-1])
            raise InvalidArgumentError(
                f'{name} must be one of {quoted}, or "{choices[-1]}"'
            )
        return value

    return rule


def iso_date(value: Any) -> str:
    if not isinstance(value, str) or not _DATE_RE.fullmatch(value):
        raise InvalidArgumentError('"until" must be a date in the format YYYY-MM-DD')
    return value


# ---------------------------------------------------------------------------
# Option whitelisting
# ---------------------------------------------------------------------------


def normalize_options(
    options: Mapping[str, Any] | None,
    rules: Mapping[str, Rule],
) -> dict[str, Any]:
    """Keep only the options named in *rules*, coercing each through its rule.

    Keys are matched case-insensitively. Unknown keys are dropped silently,
    as are values a rule maps to ``None`` (e.g. a malformed ``since_id``).
    """
    params: dict[str, Any] = {}
    for key, value in (options or {}).items():
        name = str(key).lower()
        rule = rules.get(name)
        if rule is None:
            continue
        coerced = rule(value)
        if coerced is not None:
            params[name] = coerced
    return params


# Rule sets shared by several endpoints.

PAGING_RULES: dict[str, Rule] = {
    "count": to_int,
    "since_id": valid_integer,
    "max_id": valid_integer,
}

TIMELINE_RULES: dict[str, Rule] = {
    **PAGING_RULES,
    "tweet_mode": extended_tweet_mode,
    "trim_user": to_bool,
    "contributor_details": to_bool,
    "include_entities": to_bool,
}
