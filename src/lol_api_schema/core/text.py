from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum
from typing import Any

_whitespace_re = re.compile(r"\s+")


def standardize_summoner_name(value: str) -> str:
    """Normalize a summoner name the way by-name lookups key their results.

    The API keys `/summoner/by-name` responses by the name lowercased with all
    whitespace removed.
    """

    return _whitespace_re.sub("", value).lower()


def join_list(values: Iterable[Any]) -> str:
    return ",".join(format_value(v) for v in values)


def format_value(value: Any) -> str:
    """Render one argument value the way the API expects it in a URL."""

    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (set, frozenset)):
        return join_list(sorted(value))
    if isinstance(value, (list, tuple)):
        return join_list(value)
    return str(value)
