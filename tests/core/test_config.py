"""Tests for configuration management."""

import json

import pytest

from suffixstrip.core.config import ConfigManager, ConfigError
from suffixstrip.core.constants import DEFAULT_CUSTOM_RULES, DEFAULT_SETTINGS


class TestConfigManager:
    """Tests for ConfigManager class."""

    def test_creates_default_config_on_first_run(self, temp_config_file):
        """ConfigManager creates default config when file doesn't exist."""
        cm = ConfigManager(config_path=temp_config_file)

        assert temp_config_file.exists()
        assert cm.config["version"] == 1
        assert cm.custom_rules == DEFAULT_CUSTOM_RULES
        assert cm.settings == DEFAULT_SETTINGS

    def test_creates_missing_parent_directory(self, temp_dir):
        """Parent directories of the config file are created."""
        path = temp_dir / "nested" / "config.json"
        ConfigManager(config_path=path)

        assert path.exists()

    def test_loads_existing_config(self, temp_config_with_data, valid_config_data):
        """ConfigManager loads existing valid config file."""
        cm = ConfigManager(config_path=temp_config_with_data)

        assert cm.custom_rules == valid_config_data["custom_rules"]
        assert cm.settings == valid_config_data["settings"]

    def test_save_persists_changes(self, temp_config_file):
        """Changes are persisted after save."""
        cm = ConfigManager(config_path=temp_config_file)
        cm.update_settings(default_additional_parts=2)
        cm.save()

        # Reload and verify
        cm2 = ConfigManager(config_path=temp_config_file)
        assert cm2.settings["default_additional_parts"] == 2

    def test_rejects_negative_additional_parts(self, temp_config_file):
        """Negative default_additional_parts is rejected."""
        cm = ConfigManager(config_path=temp_config_file)

        with pytest.raises(ConfigError, match="default_additional_parts"):
            cm.update_settings(default_additional_parts=-1)

    def test_rejects_invalid_custom_rule(self, temp_config_file):
        """Malformed custom rules are rejected."""
        cm = ConfigManager(config_path=temp_config_file)

        with pytest.raises(ConfigError, match="Invalid custom rule"):
            cm.set_custom_rules(["bad..example"])

    def test_rejects_empty_custom_rule(self, temp_config_file):
        """Rules with nothing after the wildcard marker are rejected."""
        cm = ConfigManager(config_path=temp_config_file)

        with pytest.raises(ConfigError, match="Invalid custom rule"):
            cm.set_custom_rules(["*."])

    def test_accepts_valid_custom_rules(self, temp_config_file):
        """Valid custom rules are accepted."""
        cm = ConfigManager(config_path=temp_config_file)
        valid_rules = [
            "corp.example",
            "*.dev.example",
            "!keep.dev.example",
        ]

        cm.set_custom_rules(valid_rules)
        assert cm.custom_rules == valid_rules

    def test_raises_on_invalid_json(self, temp_config_file):
        """ConfigError raised when config contains invalid JSON."""
        temp_config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(temp_config_file, "w") as f:
            f.write("{ invalid json }")

        with pytest.raises(ConfigError, match="Invalid JSON"):
            ConfigManager(config_path=temp_config_file)

    def test_raises_on_missing_version(self, temp_config_file):
        """ConfigError raised when version field is missing."""
        temp_config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(temp_config_file, "w") as f:
            json.dump({"settings": {}, "custom_rules": []}, f)

        with pytest.raises(ConfigError, match="version"):
            ConfigManager(config_path=temp_config_file)

    def test_raises_on_invalid_rule_in_file(self, temp_config_file, valid_config_data):
        """ConfigError raised when the file holds an invalid custom rule."""
        valid_config_data["custom_rules"] = ["!single"]
        with open(temp_config_file, "w") as f:
            json.dump(valid_config_data, f)

        with pytest.raises(ConfigError, match="at least two labels"):
            ConfigManager(config_path=temp_config_file)

    def test_raises_on_non_object_config(self, temp_config_file):
        """ConfigError raised when the top level is not an object."""
        with open(temp_config_file, "w") as f:
            json.dump(["not", "a", "dict"], f)

        with pytest.raises(ConfigError, match="top level"):
            ConfigManager(config_path=temp_config_file)

    def test_settings_returns_copy(self, temp_config_file):
        """Mutating the returned settings does not change the config."""
        cm = ConfigManager(config_path=temp_config_file)
        settings = cm.settings
        settings["debug_logging"] = True

        assert cm.settings["debug_logging"] is False
