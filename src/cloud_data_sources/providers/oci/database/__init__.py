from cloud_data_sources.providers.oci.database.database_data_source import (
    DatabaseDatabaseDataSource,
)
from cloud_data_sources.providers.oci.database.databases_data_source import (
    DatabaseDatabasesDataSource,
)

__all__ = ["DatabaseDatabaseDataSource", "DatabaseDatabasesDataSource"]
