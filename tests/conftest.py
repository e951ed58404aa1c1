"""Shared pytest fixtures for suffixstrip tests."""

import json
import shutil
import tempfile
from pathlib import Path

import pytest

from suffixstrip.core.models import SuffixRules


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def temp_config_file(temp_dir):
    """Create a temporary config file path."""
    return temp_dir / "config.json"


@pytest.fixture
def valid_config_data():
    """Return valid configuration data."""
    return {
        "version": 1,
        "settings": {
            "psl_path": None,
            "default_additional_parts": 1,
            "debug_logging": False,
        },
        "custom_rules": [
            "corp.example",
            "*.dev.example",
            "!keep.dev.example",
        ],
    }


@pytest.fixture
def temp_config_with_data(temp_config_file, valid_config_data):
    """Create a temporary config file with valid data."""
    temp_config_file.parent.mkdir(parents=True, exist_ok=True)
    with open(temp_config_file, "w", encoding="utf-8") as f:
        json.dump(valid_config_data, f)
    return temp_config_file


@pytest.fixture
def sample_rules():
    """Return a small synthetic rule set."""
    return SuffixRules(
        exact=frozenset({"com", "org", "uk", "co.uk", "jp", "kobe.jp"}),
        wildcards=frozenset({"ar", "uk", "kobe.jp"}),
        excluded=frozenset({"nhs.uk", "city.kobe.jp"}),
    )


@pytest.fixture
def sample_psl_file(temp_dir):
    """Write a small PSL-format file and return its path."""
    path = temp_dir / "public_suffix_list.dat"
    path.write_text(
        "// ===BEGIN ICANN DOMAINS===\n"
        "\n"
        "com\n"
        "uk\n"
        "co.uk\n"
        "// ck\n"
        "*.ck\n"
        "!www.ck\n"
        "example  // trailing text is ignored\n"
        "// ===END ICANN DOMAINS===\n",
        encoding="utf-8",
    )
    return path
