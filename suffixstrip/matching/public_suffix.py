"""Public suffix queries.

A "public suffix" is one under which Internet users can (or historically
could) directly register names, such as com, co.uk and pvt.k12.ma.us.
See https://publicsuffix.org/.

Matching happens in label space (matcher) and the result is translated
back into an offset of the normalized domain string (translator). Every
function takes the rule sets explicitly; nothing here holds state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.models import SuffixRules
from .matcher import NO_MATCH, find_public_suffix_index
from .normalizer import normalize_and_split
from .translator import join_index

logger = logging.getLogger(__name__)


class PublicSuffixError(Exception):
    """Base class for public suffix query errors."""
    pass


class InvalidArgumentError(PublicSuffixError, ValueError):
    """Raised when an argument is outside its allowed range."""
    pass


class MissingArgumentError(PublicSuffixError, TypeError):
    """Raised when a required argument is None."""
    pass


def _require(value: object, name: str) -> None:
    if value is None:
        raise MissingArgumentError(f"Expected non-null {name} argument")


def strip_public_suffix(domain: str, rules: SuffixRules) -> str:
    """
    Strip the public suffix from the domain.

    www.mozilla.org -> www.mozilla
    independent.co.uk -> independent

    The result is taken from the normalized domain, so case and dot-like
    separators are canonicalized. The original domain is returned when no
    public suffix is found or when the whole domain is a public suffix.

    Raises:
        MissingArgumentError: if domain or rules is None
    """
    _require(domain, "domain")
    _require(rules, "rules")

    if len(domain) == 0:
        return domain

    labels = normalize_and_split(domain)
    index = find_public_suffix_index(labels, rules)
    if index == NO_MATCH or index == 0:
        return domain

    return ".".join(labels)[:join_index(labels, index)]


def get_public_suffix(domain: str, additional_part_count: int, rules: SuffixRules) -> str:
    """
    Return the public suffix with the specified number of additional parts.

    For example, the public suffix of "www.m.bbc.co.uk" (with 0 additional
    parts) is "co.uk". With 1 additional part: "bbc.co.uk".

    Args:
        domain: Domain to look up
        additional_part_count: Labels to keep left of the public suffix
        rules: Rule sets to match against

    Returns:
        The public suffix with the requested additional parts, or the empty
        string if a public suffix does not exist.

    Raises:
        MissingArgumentError: if domain or rules is None
        InvalidArgumentError: if additional_part_count is less than zero
    """
    _require(domain, "domain")
    _require(rules, "rules")

    if additional_part_count < 0:
        raise InvalidArgumentError(
            f"Expected additional_part_count >= 0. Got: {additional_part_count}"
        )

    if len(domain) == 0:
        return ""

    labels = normalize_and_split(domain)
    index = find_public_suffix_index(labels, rules)
    if index == NO_MATCH:
        return ""

    normalized = ".".join(labels)
    if index == 0:
        public_suffix = normalized
    else:
        public_suffix = normalized[join_index(labels, index) + 1:]  # +1 to skip the "."

    first_part = public_suffix.split(".", 1)[0]

    domain_parts = normalize_and_split(domain)
    suffix_parts_index = domain_parts.index(first_part, index)
    start = max(0, suffix_parts_index - additional_part_count)
    return ".".join(domain_parts[start:])


def is_public_suffix(domain: str, rules: SuffixRules) -> bool:
    """
    Check whether the whole domain is itself a public suffix.

    com, co.uk and anything.ar (under *.ar) are; example.com and the
    exception www.ck are not.
    """
    _require(domain, "domain")
    _require(rules, "rules")

    if len(domain) == 0:
        return False

    return find_public_suffix_index(normalize_and_split(domain), rules) == 0


def get_registrable_domain(domain: str, rules: SuffixRules) -> str | None:
    """
    Return the registrable domain: the public suffix plus one label.

    www.m.bbc.co.uk -> bbc.co.uk

    Returns None when the domain has no public suffix or is a public
    suffix itself, since nothing under it can be registered.
    """
    _require(domain, "domain")
    _require(rules, "rules")

    if len(domain) == 0:
        return None

    index = find_public_suffix_index(normalize_and_split(domain), rules)
    if index == NO_MATCH or index == 0:
        return None

    return get_public_suffix(domain, 1, rules)


@dataclass(frozen=True)
class PublicSuffix:
    """
    Public suffix queries bound to one set of rules.

    Usage:
        psl = PublicSuffix(load_public_suffixes())
        psl.strip("www.mozilla.org")          # www.mozilla
        psl.suffix("www.m.bbc.co.uk", 1)      # bbc.co.uk
    """

    rules: SuffixRules

    def __post_init__(self) -> None:
        _require(self.rules, "rules")

    def strip(self, domain: str) -> str:
        """Strip the public suffix from the domain."""
        return strip_public_suffix(domain, self.rules)

    def suffix(self, domain: str, additional_part_count: int = 0) -> str:
        """Return the public suffix with additional parts."""
        return get_public_suffix(domain, additional_part_count, self.rules)

    def is_public_suffix(self, domain: str) -> bool:
        """Check whether the domain is itself a public suffix."""
        return is_public_suffix(domain, self.rules)

    def registrable_domain(self, domain: str) -> str | None:
        """Return the public suffix plus one label, if any."""
        return get_registrable_domain(domain, self.rules)
