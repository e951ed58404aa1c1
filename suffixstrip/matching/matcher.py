"""Longest public suffix search over a label sequence."""

from __future__ import annotations

import logging
from typing import Sequence

from ..core.models import SuffixRules

logger = logging.getLogger(__name__)

NO_MATCH = -1


def matches_wildcard(name: str, rules: SuffixRules) -> bool:
    """Does the name match one of the wildcard rules (e.g., "*.ar")?"""
    pieces = name.split(".", 1)
    return len(pieces) == 2 and pieces[1] in rules.wildcard_suffixes()


def find_public_suffix_index(labels: Sequence[str], rules: SuffixRules) -> int:
    """
    Find the leftmost label of the public suffix.

    Ancestors are tried from the full name down to the last label. At each
    position exact rules win over exception rules, which win over wildcard
    rules, and the first position where any rule applies ends the search.

    Args:
        labels: Normalized labels (e.g., ["www", "bbc", "co", "uk"])
        rules: Rule sets to match against

    Returns:
        Index into labels where the public suffix starts, or NO_MATCH (-1)
    """
    exact = rules.exact_suffixes()
    excluded = rules.excluded_suffixes()
    size = len(labels)

    for i in range(size):
        ancestor = ".".join(labels[i:])

        if ancestor in exact:
            logger.debug("Exact rule '%s' matched at label %d", ancestor, i)
            return i

        # Excluded names (e.g. !nhs.uk) use the next label towards the
        # root (e.g. uk) as the effective public suffix
        if ancestor in excluded:
            if i + 1 >= size:
                logger.debug("Exception rule '%s' leaves no suffix", ancestor)
                return NO_MATCH
            logger.debug("Exception rule '%s' matched at label %d", ancestor, i)
            return i + 1

        if matches_wildcard(ancestor, rules):
            logger.debug("Wildcard rule '*.%s' matched at label %d", ancestor.split(".", 1)[1], i)
            return i

    return NO_MATCH
