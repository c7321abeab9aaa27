"""
Configuration management using Pydantic Settings.

Architecture Decision: Why pydantic-settings?
- Type-safe configuration with validation
- Supports multiple sources (YAML, env vars, defaults)
- Easy to test with different configurations
"""

import logging
import os
from pathlib import Path
from typing import List, Literal, Optional

import yaml

from pydantic_settings import BaseSettings, SettingsConfigDict
from tasktracker.domain.models import UserPreferences

logger = logging.getLogger(__name__)

PREFERENCES_FILE = "settings.yaml"


class Settings(BaseSettings):
    """
    Application settings with multiple sources:
    1. Default values (hardcoded)
    2. YAML config file (user preferences)
    3. Environment variables (highest priority)
    """
    model_config = SettingsConfigDict(
        env_prefix='TASKTRACKER_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    # Application paths
    app_name: str = "TaskTracker"
    config_dir: Optional[Path] = None
    data_dir: Optional[Path] = None
    cache_dir: Optional[Path] = None

    # Storage
    storage_backend: Literal["sqlite", "json", "memory"] = "sqlite"
    database_url: Optional[str] = None

    # Snapshot keys
    tasks_key: str = "todos"
    goals_key: str = "goals"
    dark_mode_key: str = "darkMode"

    # Logging
    log_level: str = "INFO"

    # User preferences
    preferences: UserPreferences = UserPreferences()

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._init_paths()
        self._load_yaml_config()

    def _init_paths(self):
        """Fill in unset directories with per-user defaults and create them"""
        folder = self.app_name.lower()
        if self.config_dir is None:
            self.config_dir = _user_base("XDG_CONFIG_HOME", Path(".config")) / folder
        if self.data_dir is None:
            self.data_dir = _user_base("XDG_DATA_HOME", Path(".local", "share")) / folder
        if self.cache_dir is None:
            self.cache_dir = self.data_dir / "cache"

        for directory in (self.config_dir, self.data_dir, self.cache_dir):
            directory.mkdir(parents=True, exist_ok=True)

    def _preference_files(self) -> List[Path]:
        """settings.yaml candidates, the project checkout before the user's config dir"""
        return [Path("config") / PREFERENCES_FILE, self.config_dir / PREFERENCES_FILE]

    def _load_yaml_config(self):
        for candidate in self._preference_files():
            if not candidate.exists():
                continue
            data = yaml.safe_load(candidate.read_text(encoding="utf-8"))
            if data:
                logger.debug("Loaded preferences from %s", candidate)
                self.preferences = UserPreferences(**data)
            return

    def save_preferences(self) -> Path:
        """Write the current preferences to the user's settings.yaml"""
        target = self.config_dir / PREFERENCES_FILE
        target.write_text(
            yaml.safe_dump(self.preferences.model_dump(mode="json"), default_flow_style=False),
            encoding="utf-8",
        )
        return target

    def get_db_url(self) -> str:
        """Explicit database_url, or a SQLite file in the data directory"""
        return self.database_url or f"sqlite:///{self.data_dir / 'tasktracker.db'}"


def _user_base(xdg_var: str, home_relative: Path) -> Path:
    """Per-user base directory: %APPDATA% on Windows, XDG variable or a home subfolder elsewhere"""
    if os.name == "nt":
        return Path(os.environ["APPDATA"])
    override = os.environ.get(xdg_var)
    return Path(override) if override else Path.home() / home_relative


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Process-wide Settings, built on first use"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Rebuild the process-wide Settings from environment and YAML"""
    global _settings
    _settings = Settings()
    return _settings
