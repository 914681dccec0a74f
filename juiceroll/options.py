"""Lenient parsing of user-facing oracle settings.

Settings such as likelihood or chaos level are things a player picks, not
programming contracts. An unrecognised value falls back to a default and is
logged; it never raises.
"""

from __future__ import annotations

import enum
import logging
import re
from typing import TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=enum.Enum)

_CAMEL_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def normalize(value: str) -> str:
    """Reduce "Even Odds", "EvenOdds" and "even-odds" to "even_odds"."""
    value = _CAMEL_RE.sub("_", value.strip())
    return re.sub(r"[\s\-]+", "_", value).lower()


def parse_option(enum_cls: type[E], value: E | str | None, default: E) -> E:
    """Return the member of ``enum_cls`` named by ``value``, or ``default``.

    Args:
        enum_cls: The option enum.
        value: A member, a member value in any common spelling, or None.
        default: Returned (with a warning) when ``value`` is not recognised.
    """
    if value is None:
        return default
    if isinstance(value, enum_cls):
        return value
    key = normalize(str(value))
    for member in enum_cls:
        if member.name == key or str(member.value) == key:
            return member
    logger.warning(
        "Unknown %s %r, falling back to %s", enum_cls.__name__, value, default.value
    )
    return default
