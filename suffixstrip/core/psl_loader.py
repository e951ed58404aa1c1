"""Public Suffix List loader for suffixstrip.

Reads rule data in the Public Suffix List text format and publishes it
once as an immutable SuffixRules value for the matching code.

This implementation handles:
- Standard suffix rules (e.g., com, co.uk)
- Wildcard rules (e.g., *.ck means any single label under ck is a public suffix)
- Exception rules (e.g., !www.ck means www.ck is NOT a public suffix)
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Tuple

from .constants import (
    BUNDLED_PSL_FILE,
    COMMENT_PREFIX,
    EXCEPTION_PREFIX,
    WILDCARD_PREFIX,
)
from .models import SuffixRules

if TYPE_CHECKING:
    from .config import ConfigManager

logger = logging.getLogger(__name__)

# Lenient label pattern: PSL rules may carry non-ASCII labels
_RULE_LABEL_PATTERN = re.compile(r"^[^\s.*!/]+$")

# Exceptions that are always honoured, whatever list is loaded
DEFAULT_EXCLUDED_SUFFIXES = frozenset({
    "www.ck",
    "city.kawasaki.jp",
    "city.kitakyushu.jp",
    "city.kobe.jp",
    "city.nagoya.jp",
    "city.sapporo.jp",
    "city.sendai.jp",
    "city.yokohama.jp",
})

# Fallback wildcard bases if the data file is not found
_FALLBACK_WILDCARDS = frozenset({
    "bd", "ck", "er", "fk", "jm", "kh", "mm", "np", "pg",
    "kawasaki.jp", "kitakyushu.jp", "kobe.jp", "nagoya.jp",
    "sapporo.jp", "sendai.jp", "yokohama.jp",
})

# Fallback minimal PSL if file not found
_FALLBACK_SUFFIXES = frozenset({
    # Generic TLDs
    "com", "net", "org", "edu", "gov", "mil", "int", "info", "biz",
    # Country code TLDs
    "uk", "de", "fr", "jp", "cn", "au", "ca", "ru", "br", "in", "us",
    "es", "it", "nl", "be", "ch", "at", "pl", "se", "no", "dk", "fi",
    "pt", "ie", "nz", "za", "mx", "ar", "cl", "kr", "tw", "hk", "sg",
    # Common second-level TLDs
    "co.uk", "org.uk", "ac.uk", "gov.uk", "me.uk", "ltd.uk", "plc.uk",
    "com.au", "net.au", "org.au", "edu.au", "gov.au", "asn.au",
    "co.jp", "ne.jp", "or.jp", "ac.jp", "go.jp", "ed.jp",
    "com.br", "net.br", "org.br", "gov.br", "edu.br",
    "co.in", "net.in", "org.in", "gov.in", "ac.in",
    "co.nz", "net.nz", "org.nz", "govt.nz", "ac.nz",
    "co.za", "net.za", "org.za", "gov.za", "ac.za",
    "com.mx", "net.mx", "org.mx", "gob.mx", "edu.mx",
    "com.ar", "net.ar", "org.ar", "gob.ar", "edu.ar",
    "co.kr", "ne.kr", "or.kr", "go.kr", "ac.kr",
    "com.tw", "net.tw", "org.tw", "gov.tw", "edu.tw",
    "com.hk", "net.hk", "org.hk", "gov.hk", "edu.hk",
    "com.sg", "net.sg", "org.sg", "gov.sg", "edu.sg",
    # Generic new TLDs
    "io", "co", "app", "dev", "ai", "me", "tv", "cc", "ws", "ly", "to",
    # Special TLDs
    "eu", "asia", "mobi", "tel", "travel", "jobs", "museum", "coop",
    # Wildcard bases are suffixes in their own right
    *_FALLBACK_WILDCARDS,
    # Common private-section suffixes
    "github.io", "gitlab.io", "herokuapp.com", "netlify.app", "vercel.app",
    "blogspot.com", "appspot.com", "cloudfront.net",
})


def fallback_rules() -> SuffixRules:
    """Return the built-in minimal rule set."""
    return SuffixRules(
        exact=_FALLBACK_SUFFIXES,
        wildcards=_FALLBACK_WILDCARDS,
        excluded=DEFAULT_EXCLUDED_SUFFIXES,
    )


def _get_psl_path() -> Path:
    """Get the path to the bundled PSL data file."""
    return BUNDLED_PSL_FILE


def validate_rule(rule: str) -> Tuple[bool, str]:
    """
    Validate a single rule line.

    Args:
        rule: Rule in PSL syntax (e.g., "co.uk", "*.ck", "!www.ck")

    Returns:
        Tuple of (is_valid, error_message). If valid, error_message is empty.
    """
    if not rule or not isinstance(rule, str):
        return False, "Rule must be a non-empty string"

    value = rule.strip().lower()
    if value.startswith(EXCEPTION_PREFIX):
        value = value[len(EXCEPTION_PREFIX):]
        if len(value.split(".")) < 2:
            return False, f"Exception rule '{rule}' must have at least two labels"
    elif value.startswith(WILDCARD_PREFIX):
        value = value[len(WILDCARD_PREFIX):]

    if not value:
        return False, f"Rule '{rule}' has no suffix"

    for label in value.split("."):
        if not label:
            return False, f"Invalid rule: empty label in '{rule}'"
        if not _RULE_LABEL_PATTERN.match(label):
            return False, f"Invalid rule label: '{label}'"

    return True, ""


def parse_rules(lines: Iterable[str]) -> SuffixRules:
    """
    Parse rule lines in the Public Suffix List format.

    Only the first whitespace-delimited token of a line is significant.
    Blank lines and // comments are skipped.

    Args:
        lines: Iterable of raw lines (e.g., an open file)

    Returns:
        SuffixRules holding the parsed exact, wildcard and exception rules
    """
    suffixes = set()
    wildcards = set()
    exceptions = set()

    for line in lines:
        line = line.strip()

        # Skip comments and blank lines
        if not line or line.startswith(COMMENT_PREFIX):
            continue

        rule = line.split()[0].lower()

        # Exception rules (e.g., !www.ck) carve a name out of a wildcard
        if rule.startswith(EXCEPTION_PREFIX):
            exceptions.add(rule[len(EXCEPTION_PREFIX):])
            continue

        # Wildcard rules (e.g., *.ck): any single label + base is a public suffix
        if rule.startswith(WILDCARD_PREFIX):
            base = rule[len(WILDCARD_PREFIX):]
            wildcards.add(base)
            # Also add the base itself as a suffix
            suffixes.add(base)
            continue

        suffixes.add(rule)

    return SuffixRules(
        exact=frozenset(suffixes),
        wildcards=frozenset(wildcards),
        excluded=frozenset(exceptions),
    )


@lru_cache(maxsize=8)
def load_public_suffixes(path: Path | None = None) -> SuffixRules:
    """
    Load public suffix rules from a data file.

    Uses LRU cache so each file is read once and the same immutable
    SuffixRules instance is handed to every caller.

    Args:
        path: PSL file to read; defaults to the bundled list

    Returns:
        SuffixRules with the static exclusions merged in
    """
    psl_path = Path(path) if path is not None else _get_psl_path()

    if not psl_path.exists():
        logger.debug("PSL data file not found at %s, using fallback list", psl_path)
        return fallback_rules()

    try:
        with open(psl_path, "r", encoding="utf-8") as f:
            parsed = parse_rules(f)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to load PSL file: %s, using fallback", e)
        return fallback_rules()

    rules = parsed.merged(SuffixRules(excluded=DEFAULT_EXCLUDED_SUFFIXES))
    logger.info(
        "Loaded PSL: %d suffixes, %d wildcards, %d exceptions from %s",
        len(rules.exact),
        len(rules.wildcards),
        len(rules.excluded),
        psl_path,
    )
    return rules


def load_rules(config: ConfigManager) -> SuffixRules:
    """
    Load the configured rule list with the user's custom rules merged in.

    Args:
        config: Loaded configuration

    Returns:
        SuffixRules ready to pass to the matching functions
    """
    psl_path = config.settings.get("psl_path")
    rules = load_public_suffixes(Path(psl_path) if psl_path else None)

    custom_rules = config.custom_rules
    if custom_rules:
        rules = rules.merged(parse_rules(custom_rules))
        logger.debug("Merged %d custom rule(s)", len(custom_rules))

    return rules


def clear_cache() -> None:
    """Clear the LRU cache for testing purposes."""
    load_public_suffixes.cache_clear()
