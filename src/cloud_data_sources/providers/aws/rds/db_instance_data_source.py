"""aws_rds_db_instance: one RDS DB instance by identifier."""

from typing import Any, Optional

from botocore.exceptions import ClientError
from pydantic import Field

from cloud_data_sources.datasource.base import DataSourceArguments, SingularDataSource
from cloud_data_sources.datasource.exceptions import EntityNotFoundError
from cloud_data_sources.models.field_value import Record
from cloud_data_sources.providers.aws.client import AWSClient
from cloud_data_sources.providers.aws.rds.normalizers import db_instance_normalizer

NOT_FOUND_ERROR_CODES = {"DBInstanceNotFound", "DBInstanceNotFoundFault"}


class DBInstanceArguments(DataSourceArguments):
    db_instance_identifier: str = Field(..., min_length=1)


class RDSDBInstanceDataSource(SingularDataSource[DBInstanceArguments]):
    name = "aws_rds_db_instance"
    arguments_model = DBInstanceArguments

    client: AWSClient

    def get(self, args: DBInstanceArguments) -> Any:
        try:
            response = self.client.rds_client.describe_db_instances(
                DBInstanceIdentifier=args.db_instance_identifier
            )
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in NOT_FOUND_ERROR_CODES:
                raise EntityNotFoundError("DBInstance", args.db_instance_identifier) from e
            raise

        instances = response.get("DBInstances", [])
        if not instances:
            raise EntityNotFoundError("DBInstance", args.db_instance_identifier)
        return instances[0]

    def normalize(self, raw: Any) -> Record:
        return db_instance_normalizer.normalize(raw)

    def entity_id(self, args: DBInstanceArguments, record: Record) -> Optional[str]:
        return record.get("arn") or args.db_instance_identifier
