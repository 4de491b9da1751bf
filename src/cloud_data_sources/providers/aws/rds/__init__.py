from cloud_data_sources.providers.aws.rds.db_instance_data_source import RDSDBInstanceDataSource
from cloud_data_sources.providers.aws.rds.db_instances_data_source import (
    RDSDBInstancesDataSource,
)

__all__ = ["RDSDBInstanceDataSource", "RDSDBInstancesDataSource"]
