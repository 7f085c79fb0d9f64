import logging
import os
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from mcuuid.domain.player.model.value import Mode
from mcuuid.domain.shared.error import ConfigurationError


# =============================================================================
# Directory Service Configuration
# =============================================================================


class DirectoryConfig(BaseModel):
    """Mojang directory service configuration (nested in Config)."""

    profile_by_name_url: str = "https://api.mojang.com/users/profiles/minecraft/{username}"
    profile_by_uuid_url: str = (
        "https://sessionserver.mojang.com/session/minecraft/profile/{uuid}"
    )
    timeout: float | None = None  # None = use the httpx default
    user_agent: str = "mcuuid"

    def profile_by_name(self, username: str) -> str:
        # Raw username, not escaped: a "?" or "/" in it changes the request URL.
        return self.profile_by_name_url.format(username=username)

    def profile_by_uuid(self, uuid: str) -> str:
        return self.profile_by_uuid_url.format(uuid=uuid)


# =============================================================================
# Application Configuration
# =============================================================================


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Load settings from YAML file specified by MCUUID_CONFIG_FILE env var."""

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get the value for a field from the YAML config."""
        yaml_data = self._load_yaml_config()
        field_value = yaml_data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all settings from YAML file."""
        return self._load_yaml_config()

    def _load_yaml_config(self) -> dict[str, Any]:
        """Load config from YAML file if specified."""
        config_file = os.environ.get("MCUUID_CONFIG_FILE")
        if config_file:
            path = Path(config_file)
            if path.exists():
                return yaml.safe_load(path.read_text()) or {}
        return {}


class LoggingConfig(BaseModel):
    """Logging configuration (nested in Config, uses env_nested_delimiter)."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> str | None:
        """Get log file path from MCUUID_LOG_FILE env var."""
        return os.environ.get("MCUUID_LOG_FILE")


class Config(BaseSettings):
    modes: frozenset[Mode] = frozenset({Mode.ONLINE, Mode.OFFLINE})
    directory: DirectoryConfig = DirectoryConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = {
        "env_prefix": "MCUUID_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",  # Allows MCUUID_DIRECTORY__TIMEOUT override
        "extra": "ignore",  # Unrelated MCUUID_* keys in .env (e.g. MCUUID_LIVE_DIRECTORY)
    }

    @field_validator("modes")
    @classmethod
    def require_a_mode(cls, v: frozenset[Mode]) -> frozenset[Mode]:
        if not v:
            raise ConfigurationError(
                "please select at least one mode (online, offline)",
                code="no_modes",
            )
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to include YAML config.

        Priority (highest to lowest):
        1. init_settings - values passed to Config()
        2. env_settings - environment variables
        3. dotenv_settings - .env file
        4. yaml_settings - MCUUID_CONFIG_FILE yaml
        5. file_secret_settings - secrets from files
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


def configure_logging(config: LoggingConfig) -> None:
    """Configure Python logging based on config.

    Intended for scripts and services embedding mcuuid; the library itself
    never calls it.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(config.format, datefmt=config.date_format)

    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(config.level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(config.level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.debug("Logging configured: level=%s, file=%s", config.level, config.file)
