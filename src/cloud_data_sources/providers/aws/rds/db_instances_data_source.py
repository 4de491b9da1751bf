"""aws_rds_db_instances: RDS DB instances of the configured region."""

from typing import Any, Optional

from cloud_data_sources.datasource.base import CollectionArguments, CollectionDataSource
from cloud_data_sources.datasource.paginator import ListRequest, Page
from cloud_data_sources.models.field_value import Record
from cloud_data_sources.providers.aws.client import AWSClient
from cloud_data_sources.providers.aws.rds.normalizers import db_instance_normalizer


class DBInstancesArguments(CollectionArguments):
    engine: Optional[str] = None


class RDSDBInstancesDataSource(CollectionDataSource[DBInstancesArguments]):
    """List DB instances, following the ``Marker`` continuation token."""

    name = "aws_rds_db_instances"
    arguments_model = DBInstancesArguments
    collection_key = "db_instances"

    client: AWSClient

    def build_request(self, args: DBInstancesArguments) -> ListRequest:
        params: dict[str, Any] = {}
        if args.engine is not None:
            params["Filters"] = [{"Name": "engine", "Values": [args.engine]}]
        return ListRequest(params=params, retry_policy=self.client.retry_policy())

    def list_page(self, request: ListRequest) -> Page:
        # One page per call instead of get_paginator("describe_db_instances"):
        # the shared Paginator drives the Marker loop for every provider.
        kwargs = dict(request.params)
        if request.page is not None:
            kwargs["Marker"] = request.page

        response = self.client.rds_client.describe_db_instances(**kwargs)
        return Page(items=response.get("DBInstances", []), next_page=response.get("Marker"))

    def normalize(self, raw: Any) -> Record:
        return db_instance_normalizer.normalize(raw)
