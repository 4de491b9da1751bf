"""Data source registry and read dispatch."""

from typing import Any, Mapping, Optional

from cloud_data_sources.config.manager import ConfigurationManager
from cloud_data_sources.config.schemas import AWSProviderConfig, OCIProviderConfig
from cloud_data_sources.datasource.base import DataSource
from cloud_data_sources.datasource.exceptions import EntityNotFoundError
from cloud_data_sources.helpers.logger import get_logger
from cloud_data_sources.providers.aws import AWSClient
from cloud_data_sources.providers.aws.rds import RDSDBInstanceDataSource, RDSDBInstancesDataSource
from cloud_data_sources.providers.oci import OCIClient
from cloud_data_sources.providers.oci.database import (
    DatabaseDatabaseDataSource,
    DatabaseDatabasesDataSource,
)

DATA_SOURCES: dict[str, tuple[str, type[DataSource]]] = {
    DatabaseDatabasesDataSource.name: ("oci", DatabaseDatabasesDataSource),
    DatabaseDatabaseDataSource.name: ("oci", DatabaseDatabaseDataSource),
    RDSDBInstancesDataSource.name: ("aws", RDSDBInstancesDataSource),
    RDSDBInstanceDataSource.name: ("aws", RDSDBInstanceDataSource),
}


class DataSourceProvider:
    """
    Entry point for callers: resolves a data source by name, gives it the
    provider client it needs and turns the read into a state mapping.

    Clients may be injected; otherwise they are built from configuration on
    first use and reused for the lifetime of the provider.
    """

    def __init__(
        self,
        config_manager: Optional[ConfigurationManager] = None,
        oci_client: Optional[OCIClient] = None,
        aws_client: Optional[AWSClient] = None,
        logger=None,
    ) -> None:
        self._config_manager = config_manager
        self._clients: dict[str, Any] = {}
        if oci_client is not None:
            self._clients["oci"] = oci_client
        if aws_client is not None:
            self._clients["aws"] = aws_client
        self._logger = logger or get_logger(__name__)

    @staticmethod
    def data_source_names() -> list[str]:
        return sorted(DATA_SOURCES)

    def _get_config_manager(self) -> ConfigurationManager:
        if self._config_manager is None:
            self._config_manager = ConfigurationManager()
        return self._config_manager

    def _get_client(self, provider_type: str) -> Any:
        if provider_type not in self._clients:
            config_manager = self._get_config_manager()
            if provider_type == "oci":
                client = OCIClient(config_manager.get_typed(OCIProviderConfig), self._logger)
            elif provider_type == "aws":
                client = AWSClient(config_manager.get_typed(AWSProviderConfig), self._logger)
            else:
                raise ValueError(f"Unsupported provider type: {provider_type}")
            self._clients[provider_type] = client
        return self._clients[provider_type]

    def get_data_source(self, name: str) -> DataSource:
        """
        Create the data source registered under ``name``.

        :raises ValueError: If no data source is registered under that name.
        """
        if name not in DATA_SOURCES:
            raise ValueError(f"Unsupported data source: {name}")
        provider_type, data_source_cls = DATA_SOURCES[name]
        return data_source_cls(self._get_client(provider_type), logger=self._logger)

    def read(self, name: str, config: Mapping[str, Any]) -> dict[str, Any]:
        """
        Run a read and return its state.

        A missing entity voids the state (empty id) instead of failing; any
        other error aborts the read.
        """
        data_source = self.get_data_source(name)
        try:
            result = data_source.read(config)
        except EntityNotFoundError as e:
            self._logger.warning("%s: %s, clearing state", name, e)
            return {"id": ""}
        return result.to_state()
