"""suffixstrip: find the public suffix boundary of domain names."""

from suffixstrip.core.constants import APP_VERSION
from suffixstrip.core.models import SuffixRules
from suffixstrip.core.psl_loader import load_public_suffixes
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

__version__ = APP_VERSION

__all__ = [
    "SuffixRules",
    "load_public_suffixes",
    "PublicSuffix",
    "PublicSuffixError",
    "InvalidArgumentError",
    "MissingArgumentError",
    "strip_public_suffix",
    "get_public_suffix",
    "is_public_suffix",
    "get_registrable_domain",
]
