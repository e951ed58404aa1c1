"""Configuration management for suffixstrip."""

import json
import logging
from pathlib import Path
from typing import Any

from .constants import (
    CONFIG_FILE,
    CONFIG_VERSION,
    DEFAULT_CUSTOM_RULES,
    DEFAULT_SETTINGS,
)
from .psl_loader import validate_rule

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration is invalid."""
    pass


class ConfigManager:
    """Manages application configuration loading, validation, and persistence."""

    def __init__(self, config_path: Path | None = None):
        self.config_path = Path(config_path) if config_path else CONFIG_FILE
        self._config: dict[str, Any] = {}
        self._ensure_directories()
        self.load()

    def _ensure_directories(self) -> None:
        """Create the configuration directory if it doesn't exist."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

    def _create_default_config(self) -> dict[str, Any]:
        """Generate default configuration."""
        return {
            "version": CONFIG_VERSION,
            "settings": DEFAULT_SETTINGS.copy(),
            "custom_rules": DEFAULT_CUSTOM_RULES.copy(),
        }

    def _validate_settings(self, settings: dict[str, Any]) -> list[str]:
        """Validate known settings and return list of errors."""
        errors = []

        psl_path = settings.get("psl_path")
        if psl_path is not None and not isinstance(psl_path, str):
            errors.append("'psl_path' must be a string or null")

        parts = settings.get("default_additional_parts", 0)
        if not isinstance(parts, int) or isinstance(parts, bool) or parts < 0:
            errors.append("'default_additional_parts' must be a non-negative integer")

        if not isinstance(settings.get("debug_logging", False), bool):
            errors.append("'debug_logging' must be a boolean")

        return errors

    def _validate_config(self, config: dict[str, Any]) -> list[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if not isinstance(config.get("version"), int):
            errors.append("Missing or invalid 'version' field")

        settings = config.get("settings")
        if not isinstance(settings, dict):
            errors.append("Missing or invalid 'settings' field")
        else:
            errors.extend(self._validate_settings(settings))

        custom_rules = config.get("custom_rules", [])
        if not isinstance(custom_rules, list):
            errors.append("'custom_rules' must be a list")
        else:
            for i, rule in enumerate(custom_rules):
                if not isinstance(rule, str):
                    errors.append(f"Custom rule {i} is not a string")
                    continue
                is_valid, error = validate_rule(rule)
                if not is_valid:
                    errors.append(f"Invalid custom rule '{rule}': {error}")

        return errors

    def load(self) -> None:
        """Load configuration from file, creating defaults if needed."""
        if not self.config_path.exists():
            logger.info("Config file not found, creating defaults at %s", self.config_path)
            self._config = self._create_default_config()
            self.save()
            return

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                loaded_config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in config file: {e}") from e

        if not isinstance(loaded_config, dict):
            raise ConfigError("Configuration validation failed: top level must be an object")

        errors = self._validate_config(loaded_config)
        if errors:
            for error in errors:
                logger.error("Config validation error: %s", error)
            raise ConfigError(f"Configuration validation failed: {'; '.join(errors)}")

        self._config = loaded_config
        logger.debug("Configuration loaded from %s", self.config_path)

    def save(self) -> None:
        """Save current configuration to file."""
        with open(self.config_path, "w", encoding="utf-8") as f:
            json.dump(self._config, f, indent=2)
        logger.debug("Configuration saved to %s", self.config_path)

    @property
    def config(self) -> dict[str, Any]:
        """Return a copy of the current configuration."""
        return self._config.copy()

    @property
    def settings(self) -> dict[str, Any]:
        """Return application settings."""
        return self._config.get("settings", {}).copy()

    @property
    def custom_rules(self) -> list[str]:
        """Return the custom rule lines."""
        return self._config.get("custom_rules", []).copy()

    def update_settings(self, **kwargs: Any) -> None:
        """Update settings with provided values."""
        errors = self._validate_settings(kwargs)
        if errors:
            raise ConfigError(f"Invalid settings: {'; '.join(errors)}")
        self._config.setdefault("settings", {}).update(kwargs)

    def set_custom_rules(self, rules: list[str]) -> None:
        """Replace the custom rules with new entries after validation."""
        for rule in rules:
            is_valid, error = validate_rule(rule)
            if not is_valid:
                raise ConfigError(f"Invalid custom rule '{rule}': {error}")
        self._config["custom_rules"] = [rule.strip() for rule in rules]
