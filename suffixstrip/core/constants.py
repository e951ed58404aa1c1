"""Application constants and paths for suffixstrip."""

import os
from pathlib import Path

# Application metadata
APP_NAME = "suffixstrip"
APP_VERSION = "1.0.0"
CONFIG_VERSION = 1

# Base paths
APP_HOME = Path(os.environ.get("SUFFIXSTRIP_HOME", Path.home() / f".{APP_NAME}"))
CONFIG_DIR = APP_HOME
LOGS_DIR = APP_HOME / "logs"

# File paths
CONFIG_FILE = CONFIG_DIR / "config.json"
DEBUG_LOG_FILE = LOGS_DIR / "debug.log"
QUERY_LOG_FILE = LOGS_DIR / "queries.log"

# Bundled Public Suffix List
BUNDLED_PSL_FILE = Path(__file__).parent.parent / "data" / "public_suffix_list.dat"

# Logging settings
DEBUG_LOG_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
DEBUG_LOG_BACKUP_COUNT = 3

# Characters treated as label separators: ASCII full stop, ideographic
# full stop, fullwidth full stop, halfwidth ideographic full stop
DOT_LIKE_SEPARATORS = frozenset({".", "。", "．", "｡"})

# Rule line markers in the Public Suffix List format
COMMENT_PREFIX = "//"
WILDCARD_PREFIX = "*."
EXCEPTION_PREFIX = "!"

# Default settings
DEFAULT_SETTINGS = {
    "psl_path": None,
    "default_additional_parts": 1,
    "debug_logging": False,
}

# Default private rules added on top of the loaded list
DEFAULT_CUSTOM_RULES = []
