"""Application configuration schema."""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    destination: Literal["console", "file", "both"] = Field(
        "console", description="Where log records are written"
    )
    directory: str = Field("./logs", description="Directory for the log file")
    filename: str = Field("cloud_data_sources.log", description="Log file name")
    json_format: bool = Field(False, description="Render log records as JSON")


class RetryConfig(BaseModel):
    """Retry policy handed to the SDK with every request."""

    enabled: bool = Field(True, description="Retry failed requests")
    max_attempts: int = Field(8, ge=1, le=20, description="Maximum attempts per request")
    total_elapsed_time_seconds: int = Field(
        600, ge=1, description="Upper bound on time spent retrying one request"
    )
    max_wait_between_calls_seconds: int = Field(
        45, ge=1, description="Maximum sleep between two attempts"
    )
    base_sleep_time_seconds: int = Field(1, ge=1, description="Base sleep for the backoff")


class OCIProviderConfig(BaseModel):
    """OCI provider configuration."""

    auth: Literal["api_key", "instance_principal"] = Field(
        "api_key", description="How the SDK client authenticates"
    )
    config_file: str = Field("~/.oci/config", description="OCI SDK config file")
    profile: str = Field("DEFAULT", description="Profile inside the OCI config file")
    region: Optional[str] = Field(None, description="Region override")
    retry: RetryConfig = Field(default_factory=RetryConfig, description="SDK retry policy")


class AWSProviderConfig(BaseModel):
    """AWS provider configuration."""

    region: str = Field("eu-west-1", description="AWS region")
    profile: Optional[str] = Field(None, description="AWS profile name")
    max_retries: int = Field(3, ge=0, le=20, description="botocore max retry attempts")
    retry_mode: Literal["legacy", "standard", "adaptive"] = Field(
        "adaptive", description="botocore retry mode"
    )
    connect_timeout: int = Field(5, ge=1, description="Connect timeout in seconds")
    read_timeout: int = Field(10, ge=1, description="Read timeout in seconds")
    endpoint_url: Optional[str] = Field(None, description="Custom endpoint URL")


class AppConfig(BaseModel):
    """Top-level configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    oci: OCIProviderConfig = Field(default_factory=OCIProviderConfig)
    aws: AWSProviderConfig = Field(default_factory=AWSProviderConfig)
