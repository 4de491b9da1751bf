"""oci_database_database: one database by OCID."""

from typing import Any, Optional

import oci
from pydantic import Field

from cloud_data_sources.datasource.base import DataSourceArguments, SingularDataSource
from cloud_data_sources.datasource.exceptions import EntityNotFoundError
from cloud_data_sources.models.field_value import Record
from cloud_data_sources.providers.oci.client import OCIClient
from cloud_data_sources.providers.oci.database.normalizers import database_normalizer


class DatabaseArguments(DataSourceArguments):
    database_id: str = Field(..., min_length=1)


class DatabaseDatabaseDataSource(SingularDataSource[DatabaseArguments]):
    name = "oci_database_database"
    arguments_model = DatabaseArguments

    client: OCIClient

    def get(self, args: DatabaseArguments) -> Any:
        try:
            response = self.client.database_client.get_database(
                args.database_id, retry_strategy=self.client.retry_policy()
            )
        except oci.exceptions.ServiceError as e:
            if e.status == 404:
                raise EntityNotFoundError("Database", args.database_id) from e
            raise
        return response.data

    def normalize(self, raw: Any) -> Record:
        return database_normalizer.normalize(raw)

    def entity_id(self, args: DatabaseArguments, record: Record) -> Optional[str]:
        return record.get("id") or args.database_id
