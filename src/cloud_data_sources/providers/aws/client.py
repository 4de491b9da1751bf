"""AWS client wrapper with additional functionality."""

from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ProfileNotFound

from cloud_data_sources.config.schemas import AWSProviderConfig
from cloud_data_sources.datasource.exceptions import DataSourceConfigurationError
from cloud_data_sources.helpers.logger import get_logger


class AWSClient:
    """Wrapper for AWS service clients with additional functionality."""

    def __init__(self, config: AWSProviderConfig, logger=None) -> None:
        """
        Initialize AWS client wrapper.

        Args:
            config: AWS provider configuration
            logger: Optional logger, defaults to the module logger
        """
        self.config = config
        self._logger = logger or get_logger(__name__)
        self.region_name = config.region
        self.profile_name = config.profile

        # Retry policy travels with every client created from this config
        self.boto_config = Config(
            region_name=self.region_name,
            retries={
                "max_attempts": config.max_retries,
                "mode": config.retry_mode,
            },
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
        )

        try:
            self.session = boto3.Session(
                region_name=self.region_name, profile_name=self.profile_name
            )
        except (ProfileNotFound, BotoCoreError) as e:
            raise DataSourceConfigurationError(f"AWS client initialization failed: {e}") from e

        self._rds_client = None

        self._logger.info(
            "AWS client initialized with region: %s, profile: %s, retries: %d (%s), timeouts: connect=%ds, read=%ds",
            self.region_name,
            self.profile_name or "default",
            config.max_retries,
            config.retry_mode,
            config.connect_timeout,
            config.read_timeout,
        )

    def _create_client(self, service_name: str):
        kwargs = {"config": self.boto_config}
        if self.config.endpoint_url:
            kwargs["endpoint_url"] = self.config.endpoint_url
        return self.session.client(service_name, **kwargs)

    @property
    def rds_client(self):
        """Lazy initialization of RDS client."""
        if self._rds_client is None:
            self._logger.debug("Initializing RDS client on first use")
            self._rds_client = self._create_client("rds")
        return self._rds_client

    def retry_policy(self) -> Optional[dict]:
        """
        Per-request retry policy.

        botocore applies retries at client level through ``boto_config``, so
        nothing extra is attached to individual requests.
        """
        return None
