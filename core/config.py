"""
Configuration Manager with Environment Variables Support

Usage:
    from core.config import Config

    config = Config.get_instance()
    theme = config.get_choice("PASSFIELD_THEME", AVAILABLE_THEMES, default="light")
"""
import os
import json
import logging
from typing import Any, Dict, Iterable, Optional
from pathlib import Path

from dotenv import load_dotenv

from exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Config:
    """
    Unified configuration manager that supports:
    - Environment variables (.env)
    - JSON configuration file (config/settings.json)
    - Default values
    - Validation
    """

    _instance: Optional["Config"] = None

    def __init__(self, env_file: Optional[Path] = None, config_file: Optional[Path] = None):
        from core.paths import config_path

        self._env_file = Path(env_file) if env_file else Path(".env")
        self._config_file_path = Path(config_file) if config_file else config_path("settings.json")
        self._config_cache: Dict[str, Any] = {}

        self._load_env()
        self._load_json_config()

    @classmethod
    def get_instance(cls) -> "Config":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def clear_instance(cls) -> None:
        """Drop the shared instance (tests only)."""
        cls._instance = None

    def _load_env(self):
        """Load environment variables from .env file"""
        if self._env_file.exists():
            load_dotenv(self._env_file)
            logger.info(f"Environment variables loaded from {self._env_file}")
        else:
            logger.debug(".env file not found, using system environment only")

    def _load_json_config(self):
        """Load configuration from JSON file"""
        if not self._config_file_path.exists():
            logger.debug(f"Config file not found: {self._config_file_path}")
            self._config_cache = {}
            return

        try:
            with open(self._config_file_path, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load config file {self._config_file_path}: {e}")
            self._config_cache = {}
            return

        if not isinstance(loaded, dict):
            logger.error(f"Config file {self._config_file_path} must contain a JSON object")
            self._config_cache = {}
            return

        self._config_cache = loaded
        logger.info(f"Configuration loaded from {self._config_file_path}")

    def get(
            self,
            key: str,
            default: Any = None,
            required: bool = False,
            from_env: bool = True
    ) -> Any:
        """
        Get configuration value.

        Priority order:
        1. Environment variable (if from_env=True)
        2. JSON config file
        3. Default value

        Raises:
            ConfigurationError: If required=True and key not found
        """
        if from_env:
            env_value = os.getenv(key)
            if env_value is not None:
                return env_value

        if key in self._config_cache:
            return self._config_cache[key]

        if default is not None:
            return default

        if required:
            raise ConfigurationError(
                f"Required configuration '{key}' not found. "
                f"Set it in .env or {self._config_file_path}",
                key=key,
                code="CONFIG_MISSING",
            )

        return None

    def get_choice(self, key: str, choices: Iterable[str], default: str) -> str:
        """String value restricted to ``choices`` (case-insensitive); falls back to default."""
        allowed = [c.lower() for c in choices]
        value = str(self.get(key, default)).strip().lower()

        if value in allowed:
            return value

        logger.warning(f"Invalid value for '{key}': {value!r} (expected one of {allowed}), using default")
        return default

    def validate(self, schema: Dict[str, Dict[str, Any]]):
        """
        Validate configuration against schema.

        Example schema:
        {
            "PASSFIELD_THEME": {"type": str, "choices": ["light", "dark"]},
            "LOG_LEVEL": {"type": str, "required": False},
        }
        """
        errors = []

        for key, rules in schema.items():
            value = self.get(key)

            if value is None:
                if rules.get("required", False):
                    errors.append(f"Required config '{key}' is missing")
                continue

            if "type" in rules and not isinstance(value, rules["type"]):
                errors.append(
                    f"Config '{key}' must be {rules['type'].__name__}, "
                    f"got {type(value).__name__}"
                )
                continue

            if "choices" in rules and str(value).lower() not in rules["choices"]:
                errors.append(
                    f"Config '{key}' must be one of {rules['choices']}, got {value!r}"
                )

        if errors:
            raise ConfigurationError(
                "Configuration validation failed:\n" + "\n".join(f"- {e}" for e in errors),
                code="CONFIG_INVALID",
            )


def get_log_level() -> str:
    return str(Config.get_instance().get("LOG_LEVEL", default="INFO")).upper()


# Configuration schema for validation
CONFIG_SCHEMA = {
    "LOG_LEVEL": {
        "type": str,
        "choices": ["debug", "info", "warning", "error", "critical"],
    },
    "PASSFIELD_THEME": {
        "type": str,
        "choices": ["light", "dark"],
    },
    "PASSFIELD_FONT_FAMILY": {
        "type": str,
    },
}


def validate_config():
    """Validate configuration on startup"""
    try:
        Config.get_instance().validate(CONFIG_SCHEMA)
        logger.info("Configuration validated successfully")
    except ConfigurationError as e:
        logger.error(f"Configuration validation failed: {e}")
        raise
