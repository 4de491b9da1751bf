"""Configuration manager backed by dynaconf."""

import os
from typing import Any, Optional, TypeVar

from dynaconf import Dynaconf
from pydantic import BaseModel, ValidationError

from cloud_data_sources.config.schemas import (
    AppConfig,
    AWSProviderConfig,
    LoggingConfig,
    OCIProviderConfig,
)
from cloud_data_sources.datasource.exceptions import DataSourceConfigurationError
from cloud_data_sources.helpers.logger import get_logger

logger = get_logger(__name__)

ENVVAR_PREFIX = "CDS"
CONFIG_PATH_ENVVAR = "CDS_CONFIG_PATH"

T = TypeVar("T", bound=BaseModel)

_SECTIONS: dict[type, str] = {
    LoggingConfig: "logging",
    OCIProviderConfig: "oci",
    AWSProviderConfig: "aws",
}


def _lower_keys(data: Any) -> Any:
    """Lower-case mapping keys recursively; dynaconf upper-cases top-level keys."""
    if isinstance(data, dict):
        return {str(k).lower(): _lower_keys(v) for k, v in data.items()}
    if isinstance(data, list):
        return [_lower_keys(item) for item in data]
    return data


class ConfigurationManager:
    """
    Load application configuration from an optional settings file and
    ``CDS_``-prefixed environment variables.

    The manager is created explicitly and passed to whoever needs it.
    """

    def __init__(self, config_file: Optional[str] = None) -> None:
        config_file = config_file or os.environ.get(CONFIG_PATH_ENVVAR)
        if config_file and not os.path.exists(config_file):
            raise DataSourceConfigurationError(f"Configuration file not found: {config_file}")

        self.config_file = config_file
        self._settings = Dynaconf(
            envvar_prefix=ENVVAR_PREFIX,
            settings_files=[config_file] if config_file else [],
            load_dotenv=True,
            merge_enabled=True,
        )
        self._app_config: Optional[AppConfig] = None

    def get_app_config(self) -> AppConfig:
        """Return the validated application configuration."""
        if self._app_config is None:
            raw = _lower_keys(self._settings.as_dict())
            known = {k: v for k, v in raw.items() if k in AppConfig.model_fields}
            try:
                self._app_config = AppConfig(**known)
            except ValidationError as e:
                raise DataSourceConfigurationError(f"Invalid configuration: {e}") from e

            logger.debug(
                "Configuration loaded from %s", self.config_file or "environment/defaults"
            )
        return self._app_config

    def get_typed(self, model_cls: type[T]) -> T:
        """
        Get a typed configuration section.

        Args:
            model_cls: Schema class of the section (e.g. OCIProviderConfig)

        Returns:
            The validated section
        """
        if model_cls is AppConfig:
            return self.get_app_config()
        section = _SECTIONS.get(model_cls)
        if section is None:
            raise ValueError(f"Unsupported configuration type: {model_cls.__name__}")
        return getattr(self.get_app_config(), section)

    def get(self, key: str, default: Any = None) -> Any:
        """Retrieve a raw configuration value by key."""
        return self._settings.get(key, default)
