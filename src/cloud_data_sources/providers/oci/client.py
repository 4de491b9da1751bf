"""OCI client wrapper with lazy service clients."""

import os
from typing import Any, Optional

import oci

from cloud_data_sources.config.schemas import OCIProviderConfig
from cloud_data_sources.datasource.exceptions import DataSourceConfigurationError
from cloud_data_sources.helpers.logger import get_logger
from cloud_data_sources.providers.oci.retry import build_retry_policy


class OCIClient:
    """Wrapper for OCI service clients sharing one SDK configuration."""

    def __init__(self, config: OCIProviderConfig, logger=None) -> None:
        """
        Initialize the OCI client wrapper.

        Args:
            config: OCI provider configuration
            logger: Optional logger, defaults to the module logger
        """
        self.config = config
        self._logger = logger or get_logger(__name__)
        self._sdk_config: Optional[dict[str, Any]] = None
        self._signer = None
        self._database_client = None

        self._logger.debug(
            "OCI client configured with auth: %s, profile: %s, region: %s",
            config.auth,
            config.profile,
            config.region or "from config file",
        )

    def _load_sdk_config(self) -> dict[str, Any]:
        """Build the SDK config dict (and signer, for instance principals)."""
        if self._sdk_config is not None:
            return self._sdk_config

        if self.config.auth == "instance_principal":
            self._signer = oci.auth.signers.InstancePrincipalsSecurityTokenSigner()
            sdk_config: dict[str, Any] = {"region": self.config.region or self._signer.region}
        else:
            config_file = os.path.expanduser(self.config.config_file)
            try:
                sdk_config = oci.config.from_file(
                    file_location=config_file, profile_name=self.config.profile
                )
            except (oci.exceptions.ConfigFileNotFound, oci.exceptions.ProfileNotFound) as e:
                raise DataSourceConfigurationError(f"OCI configuration failed: {e}") from e

            if self.config.region:
                sdk_config["region"] = self.config.region
            try:
                oci.config.validate_config(sdk_config)
            except oci.exceptions.InvalidConfig as e:
                raise DataSourceConfigurationError(f"OCI configuration is invalid: {e}") from e

        self._sdk_config = sdk_config
        self._logger.info("OCI SDK configured for region %s", sdk_config.get("region"))
        return sdk_config

    def _client_kwargs(self) -> dict[str, Any]:
        return {"signer": self._signer} if self._signer is not None else {}

    @property
    def database_client(self):
        """Lazy initialization of the Database service client."""
        if self._database_client is None:
            sdk_config = self._load_sdk_config()
            self._logger.debug("Initializing OCI Database client on first use")
            self._database_client = oci.database.DatabaseClient(sdk_config, **self._client_kwargs())
        return self._database_client

    def retry_policy(self):
        """Retry strategy attached to each request."""
        return build_retry_policy(self.config.retry)
