"""
Hostcheck Settings - Configuration management using Pydantic Settings.

Loads configuration from environment variables and .env files.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HostcheckSettings(BaseSettings):
    """
    Hostcheck configuration settings.

    Settings are loaded from:
    1. Environment variables (highest priority)
    2. .env file in current directory
    3. Default values (lowest priority)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="HC_",  # All Hostcheck env vars must start with HC_
    )

    # Logging Configuration
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR) (env: HC_LOG_LEVEL)",
    )

    # Backend Configuration
    package_managers: list[str] = Field(
        default=["dpkg", "rpm", "pacman"],
        description="Package managers to probe, highest priority first (env: HC_PACKAGE_MANAGERS, JSON list)",
    )

    probe_args: list[str] = Field(
        default=["--version"],
        description="Arguments used to probe whether a backend program exists (env: HC_PROBE_ARGS, JSON list)",
    )

    # Configuration file locations
    apt_sources_path: str = Field(
        default="/etc/apt/sources.list",
        description="apt sources file read by the PPA check (env: HC_APT_SOURCES_PATH)",
    )

    yum_conf_path: str = Field(
        default="/etc/yum.conf",
        description="yum configuration read by the yum repo checks (env: HC_YUM_CONF_PATH)",
    )

    pacman_conf_path: str = Field(
        default="/etc/pacman.conf",
        description="pacman configuration read by the IgnorePkg check (env: HC_PACMAN_CONF_PATH)",
    )


# Global settings instance
_settings: HostcheckSettings | None = None


def get_settings() -> HostcheckSettings:
    """
    Get the global settings instance.

    Creates the settings instance on first call, then returns cached instance.

    Returns:
        HostcheckSettings instance
    """
    global _settings
    if _settings is None:
        _settings = HostcheckSettings()
    return _settings


def reload_settings() -> HostcheckSettings:
    """
    Reload settings from environment/files.

    Useful for testing or when .env file changes.

    Returns:
        Fresh HostcheckSettings instance
    """
    global _settings
    _settings = HostcheckSettings()
    return _settings
