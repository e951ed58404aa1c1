"""Domain normalization for suffix matching."""

from __future__ import annotations

import re

from ..core.constants import DOT_LIKE_SEPARATORS

_SEPARATOR_PATTERN = re.compile("[" + "".join(sorted(DOT_LIKE_SEPARATORS)) + "]")


def normalize(domain: str) -> str:
    """
    Canonicalize a domain string.

    Dot-like separators become ".", the string is lower-cased and one
    trailing "." is dropped.

    Args:
        domain: Raw domain (e.g., "WWW｡Mozilla｡org.")

    Returns:
        Normalized domain (e.g., "www.mozilla.org")
    """
    normalized = _SEPARATOR_PATTERN.sub(".", domain).lower()
    if normalized.endswith("."):
        normalized = normalized[:-1]
    return normalized


def normalize_and_split(domain: str) -> list[str]:
    """
    Normalize a domain and split it into labels.

    www.mozilla.org -> [www, mozilla, org]

    An empty domain yields [""].
    """
    return normalize(domain).split(".")
