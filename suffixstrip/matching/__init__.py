"""Public suffix matching package."""

from suffixstrip.matching.normalizer import normalize, normalize_and_split
from suffixstrip.matching.matcher import NO_MATCH, find_public_suffix_index, matches_wildcard
from suffixstrip.matching.translator import join_index
from suffixstrip.matching.public_suffix import (
    PublicSuffix,
    PublicSuffixError,
    InvalidArgumentError,
    MissingArgumentError,
    strip_public_suffix,
    get_public_suffix,
    is_public_suffix,
    get_registrable_domain,
)

__all__ = [
    # Normalizer
    "normalize",
    "normalize_and_split",
    # Matcher
    "NO_MATCH",
    "find_public_suffix_index",
    "matches_wildcard",
    # Translator
    "join_index",
    # Queries
    "PublicSuffix",
    "strip_public_suffix",
    "get_public_suffix",
    "is_public_suffix",
    "get_registrable_domain",
    # Errors
    "PublicSuffixError",
    "InvalidArgumentError",
    "MissingArgumentError",
]
