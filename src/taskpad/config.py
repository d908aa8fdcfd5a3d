"""Configuration management for taskpad."""

import json
import logging
from pathlib import Path
from typing import Any, Literal, Optional

import pydantic
from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, Field

from taskpad.models import ValidationError

logger = logging.getLogger(__name__)

APP_NAME = "taskpad"


class StorageConfig(BaseModel):
    """Storage configuration."""

    backend: Literal["memory", "file"] = Field(default="file")
    path: Optional[str] = Field(default=None)
    seed: bool = Field(default=True)
    latency: float = Field(default=0.0, ge=0)


class OutputConfig(BaseModel):
    """Output configuration."""

    format: Literal["pretty", "table", "json", "yaml"] = Field(default="pretty")
    color: bool = Field(default=True)


class UIConfig(BaseModel):
    """UI configuration."""

    timezone: Optional[str] = Field(default=None)


class Config(BaseModel):
    """Main configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    ui: UIConfig = Field(default_factory=UIConfig)


class ConfigManager:
    """Manages taskpad configuration."""

    def __init__(self, profile: str = "default"):
        self.profile = profile
        self.config_dir = Path(user_config_dir(APP_NAME))
        self.data_dir = Path(user_data_dir(APP_NAME))
        self.config_file = self.config_dir / f"{profile}.json"

        # Ensure directories exist
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    @property
    def data_file(self) -> Path:
        """Location of the JSON data file for the file backend."""
        if self.config.storage.path:
            return Path(self.config.storage.path).expanduser()
        return self.data_dir / f"{self.profile}.data.json"

    def load_config(self) -> Config:
        """Load configuration from file."""
        if self.config_file.exists():
            try:
                with open(self.config_file, "r") as f:
                    data = json.load(f)
                return Config(**data)
            except (OSError, ValueError) as e:
                # If config is corrupted, return default
                logger.warning("Ignoring unreadable config %s: %s", self.config_file, e)
                return Config()
        return Config()

    def save_config(self, config: Optional[Config] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        with open(self.config_file, "w") as f:
            json.dump(config.model_dump(), f, indent=2)

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self.get_from_config(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key."""
        keys = key.split(".")
        config_dict = self.config.model_dump()

        # Navigate to the nested dictionary
        current = config_dict
        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                raise ValidationError(f"Unknown config key: {key}")
            current = current[k]
        if keys[-1] not in current:
            raise ValidationError(f"Unknown config key: {key}")

        # Set the value
        current[keys[-1]] = value

        # Reload config from the modified dictionary
        try:
            self._config = Config(**config_dict)
        except pydantic.ValidationError as e:
            raise ValidationError(f"Invalid value for {key}: {value!r}") from e
        self.save_config()

    def reset(self, key: Optional[str] = None) -> None:
        """Reset configuration to defaults."""
        if key is None:
            self._config = Config()
        else:
            # Reset specific key to default
            default_config = Config()
            default_value = self.get_from_config(default_config, key)
            self.set(key, default_value)
        self.save_config()

    def get_from_config(self, config: Config, key: str) -> Any:
        """Get value from a config object using dot notation."""
        value: Any = config
        for k in key.split("."):
            if not isinstance(value, BaseModel) or k not in type(value).model_fields:
                raise ValidationError(f"Unknown config key: {key}")
            value = getattr(value, k)
        return value

    def list_profiles(self) -> list[str]:
        """List all available profiles."""
        profiles = []
        for config_file in self.config_dir.glob("*.json"):
            if not config_file.name.startswith("."):
                profiles.append(config_file.stem)
        return profiles


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(profile: str = "default") -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None or _config_manager.profile != profile:
        _config_manager = ConfigManager(profile)
    return _config_manager
