from cloud_data_sources.config.schemas.app_schema import (
    AppConfig,
    AWSProviderConfig,
    LoggingConfig,
    OCIProviderConfig,
    RetryConfig,
)

__all__ = [
    "AppConfig",
    "AWSProviderConfig",
    "LoggingConfig",
    "OCIProviderConfig",
    "RetryConfig",
]
