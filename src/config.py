"""Configuration management for pdf2svg."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

CONFIG_PATH_ENV = "PDF2SVG_CONFIG"
LOG_LEVEL_ENV = "PDF2SVG_LOG_LEVEL"
TEXT_AS_PATH_ENV = "PDF2SVG_TEXT_AS_PATH"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class Config:
    """Configuration manager that loads settings from YAML and environment variables."""

    def __init__(self, config_path: Path | None = None):
        """Initialize configuration.

        Args:
            config_path: Path to settings.yaml file. If None, uses $PDF2SVG_CONFIG
                or the default location.
        """
        # Load environment variables from .env file
        load_dotenv()

        # Determine project root (parent of src directory)
        self.project_root = Path(__file__).parent.parent

        if config_path is None:
            env_path = os.getenv(CONFIG_PATH_ENV)
            if env_path:
                config_path = Path(env_path)
            else:
                config_path = self.project_root / "config" / "settings.yaml"

        self._config_path = config_path
        self._settings = self._load_yaml(config_path)

        self._validate_log_level()
        # Fail early on a malformed $PDF2SVG_TEXT_AS_PATH
        _ = self.text_as_path

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        """Load settings from YAML file, filling gaps with defaults."""
        settings = self._default_settings()
        if not path.exists():
            return settings

        try:
            with open(path, "r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid settings file {path}: {e}") from e

        if not isinstance(loaded, dict):
            raise ValueError(f"Invalid settings file {path}: expected a mapping of sections")

        for section, values in loaded.items():
            if section not in settings:
                settings[section] = values
            elif isinstance(values, dict):
                settings[section].update(values)
            else:
                raise ValueError(
                    f"Invalid settings file {path}: section '{section}' must be a mapping"
                )
        return settings

    def _default_settings(self) -> dict[str, Any]:
        """Return default settings if YAML file is missing."""
        return {
            "render": {
                "text_as_path": True,
            },
            "logging": {
                "level": "WARNING",
            },
        }

    def _validate_log_level(self) -> None:
        """Validate that the configured log level is a known logging level."""
        level = self.log_level
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(
                f"Unknown log level '{level}'. "
                "Use one of DEBUG, INFO, WARNING, ERROR or CRITICAL."
            )

    @property
    def config_path(self) -> Path:
        """Get the settings file location."""
        return self._config_path

    @property
    def log_level(self) -> str:
        """Get log level name, environment first."""
        level = os.getenv(LOG_LEVEL_ENV) or self._settings["logging"]["level"]
        return str(level).upper()

    @property
    def text_as_path(self) -> bool:
        """Whether text is rendered as vector outlines (print rendering)."""
        raw = os.getenv(TEXT_AS_PATH_ENV)
        if raw is not None:
            value = raw.strip().lower()
            if value in _TRUE_VALUES:
                return True
            if value in _FALSE_VALUES:
                return False
            raise ValueError(f"Invalid boolean for {TEXT_AS_PATH_ENV}: '{raw}'")
        return bool(self._settings["render"]["text_as_path"])

    def display(self) -> str:
        """Return a formatted string of current configuration."""
        return f"""pdf2svg Configuration
=====================
Settings File:  {self._config_path}
Log Level:      {self.log_level}
Text As Path:   {self.text_as_path}
"""
