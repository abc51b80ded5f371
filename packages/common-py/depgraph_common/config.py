"""
depgraph Settings

Environment-driven configuration shared by the CLI and the engine.
Values are read from DEPGRAPH_* environment variables.

Usage:
    from depgraph_common.config import get_settings

    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import LOG_FORMATS, LOG_LEVELS, Defaults, EnvVars


class Settings(BaseSettings):
    """Process-wide depgraph settings."""

    model_config = SettingsConfigDict(env_prefix=EnvVars.PREFIX, extra="ignore")

    log_level: str = Defaults.LOG_LEVEL
    log_format: str = Defaults.LOG_FORMAT
    detect_cycles: bool = Defaults.DETECT_CYCLES
    echo_commands: bool = Defaults.ECHO_COMMANDS

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.lower()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got '{value}'")
        return value

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {LOG_FORMATS}, got '{value}'")
        return value


def get_settings(**overrides) -> Settings:
    """Build settings from the environment, applying explicit overrides."""
    return Settings(**overrides)
