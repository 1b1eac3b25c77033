"""Configuration management for the application."""
from __future__ import annotations

import json
import logging
import os
import threading
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from patternbook.config.schemas import AppConfig
from patternbook.domain.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable -> (section, key)
ENVIRONMENT_OVERRIDES = {
    "PATTERNBOOK_LOG_LEVEL": ("logging", "level"),
    "PATTERNBOOK_LOG_DESTINATION": ("logging", "destination"),
    "PATTERNBOOK_LOG_FILE": ("logging", "file_path"),
}


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    Configuration is read lazily from an optional JSON file, then environment
    variable overrides are applied, then the result is validated against
    ``AppConfig``.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        config_data: Dict[str, Any] = {}
        if self._config_file:
            config_data = self.load_from_file(self._config_file)

        config_data = self.apply_environment_overrides(config_data)

        try:
            return AppConfig.model_validate(config_data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @staticmethod
    def load_from_file(config_file: str) -> Dict[str, Any]:
        """Load configuration data from a JSON file."""
        if not os.path.exists(config_file):
            raise ConfigurationError(f"Configuration file not found: {config_file}")
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Configuration file {config_file} is not valid JSON: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Configuration file {config_file} could not be read: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {config_file} must contain a JSON object")
        logger.debug("Loaded configuration from %s", config_file)
        return data

    @staticmethod
    def apply_environment_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Return a copy of config_data with PATTERNBOOK_* environment overrides applied."""
        result = {key: dict(value) if isinstance(value, dict) else value
                  for key, value in config_data.items()}
        for env_var, (section, key) in ENVIRONMENT_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value:
                target = result.setdefault(section, {})
                if not isinstance(target, dict):
                    raise ConfigurationError(
                        f"Cannot apply {env_var}: section '{section}' must be an object"
                    )
                target[key] = value
                logger.debug("Applied environment override %s", env_var)
        return result

    def reload(self) -> None:
        """Drop the cached configuration so the next access reloads it."""
        with self._lock:
            self._app_config = None
