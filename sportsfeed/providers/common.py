"""Parsing helpers shared by provider normalizers."""

import math
import re
from typing import Any

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_score(value: Any) -> int | None:
    """Parse an upstream score into an int.

    Follows parseInt semantics: the leading integer of a string counts
    ("3 (4)" -> 3), anything else yields None.

    Examples:
        >>> parse_score("2")
        2
        >>> parse_score(None) is None
        True
        >>> parse_score("TBD") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT_RE.match(value)
        return int(match.group(1)) if match else None
    return None


def first_dict(value: Any) -> dict:
    """First element of a list if it is a dict, else an empty dict."""
    if isinstance(value, list) and value and isinstance(value[0], dict):
        return value[0]
    return {}


def as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def as_id(value: Any) -> str | None:
    """Provider ids arrive as numbers or strings; normalize to str."""
    if value is None:
        return None
    return str(value)


def as_text(value: Any) -> str:
    """Upstream display strings occasionally arrive as numbers; None becomes ''."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
