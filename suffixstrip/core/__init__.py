"""Core module for suffixstrip."""

from .config import ConfigManager, ConfigError
from .logging_config import setup_logging, get_query_logger, log_query
from .models import SuffixRules
from .psl_loader import (
    DEFAULT_EXCLUDED_SUFFIXES,
    clear_cache,
    fallback_rules,
    load_public_suffixes,
    load_rules,
    parse_rules,
    validate_rule,
)

__all__ = [
    # Config
    "ConfigManager",
    "ConfigError",
    # Logging
    "setup_logging",
    "get_query_logger",
    "log_query",
    # Models
    "SuffixRules",
    # Rule data
    "DEFAULT_EXCLUDED_SUFFIXES",
    "clear_cache",
    "fallback_rules",
    "load_public_suffixes",
    "load_rules",
    "parse_rules",
    "validate_rule",
]
