"""Configuration loader for the dice roller."""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class DiceConfig(BaseModel):
    """Dice configuration."""

    seed: int | None = Field(
        default=None, description="Seed for the random source; None uses OS entropy"
    )


class GameConfig(BaseModel):
    """Game configuration."""

    default_language: str = Field(default="en")
    dice: DiceConfig = Field(default_factory=DiceConfig)


class FrontendConfig(BaseModel):
    """Frontend configuration."""

    show_face_label: bool = Field(
        default=True, description="Show the rolled value as text under the die"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")
    file: str | None = Field(default="logs/dice_roller.log")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{v}', expected one of {', '.join(LOG_LEVELS)}")
        return level


class Settings(BaseModel):
    """Complete application settings."""

    game: GameConfig = Field(default_factory=GameConfig)
    frontend: FrontendConfig = Field(default_factory=FrontendConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def find_config_file() -> Path | None:
    """Find settings.yaml: DICE_ROLLER_CONFIG env, project root, or cwd."""
    env_path = os.environ.get("DICE_ROLLER_CONFIG")
    if env_path:
        path = Path(env_path)
        if path.exists():
            return path

    current = Path(__file__).resolve()
    for parent in current.parents:
        config_path = parent / "config" / "settings.yaml"
        if config_path.exists():
            return config_path
        if (parent / "pyproject.toml").exists():
            break

    cwd_config = Path("config/settings.yaml")
    if cwd_config.exists():
        return cwd_config

    return None


def get_config_file_path() -> Path:
    """Get the project config path (for saving)."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / "pyproject.toml").exists():
            return parent / "config" / "settings.yaml"
    return Path("config/settings.yaml")


def load_settings_from_file(path: Path) -> dict[str, Any]:
    """Load settings dict from a YAML file."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data or {}


def save_settings_to_file(settings: Settings, path: Path | None = None) -> None:
    """Save settings to YAML file."""
    if path is None:
        path = get_config_file_path()

    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(
            settings.model_dump(),
            f,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get application settings (cached). Falls back to defaults on a bad file."""
    config_path = find_config_file()

    if config_path:
        try:
            data = load_settings_from_file(config_path)
            return Settings.model_validate(data)
        except Exception as e:
            logger.warning("Failed to load config from %s: %s; using default settings", config_path, e)

    return Settings()


def reset_settings() -> None:
    """Clear cached settings."""
    get_settings.cache_clear()


def reload_settings() -> Settings:
    """Force reload settings from file."""
    reset_settings()
    return get_settings()
