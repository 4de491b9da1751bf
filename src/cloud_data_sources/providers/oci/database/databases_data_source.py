"""oci_database_databases: databases of a DB home."""

from typing import Any, Optional

from pydantic import Field

from cloud_data_sources.datasource.base import CollectionArguments, CollectionDataSource
from cloud_data_sources.datasource.paginator import ListRequest, Page
from cloud_data_sources.models.field_value import Record
from cloud_data_sources.providers.oci.client import OCIClient
from cloud_data_sources.providers.oci.database.normalizers import database_normalizer


class DatabasesArguments(CollectionArguments):
    compartment_id: str = Field(..., min_length=1)
    db_home_id: str = Field(..., min_length=1)
    db_name: Optional[str] = None
    state: Optional[str] = Field(None, description="Lifecycle state, e.g. AVAILABLE")


class DatabaseDatabasesDataSource(CollectionDataSource[DatabasesArguments]):
    """List the databases of a DB home, following ``opc-next-page`` tokens."""

    name = "oci_database_databases"
    arguments_model = DatabasesArguments
    collection_key = "databases"

    client: OCIClient

    def build_request(self, args: DatabasesArguments) -> ListRequest:
        params: dict[str, Any] = {
            "compartment_id": args.compartment_id,
            "db_home_id": args.db_home_id,
        }
        if args.db_name is not None:
            params["db_name"] = args.db_name
        if args.state is not None:
            params["lifecycle_state"] = args.state

        return ListRequest(params=params, retry_policy=self.client.retry_policy())

    def list_page(self, request: ListRequest) -> Page:
        kwargs = dict(request.params)
        if request.page is not None:
            kwargs["page"] = request.page
        if request.retry_policy is not None:
            kwargs["retry_strategy"] = request.retry_policy

        response = self.client.database_client.list_databases(**kwargs)
        return Page(items=list(response.data or []), next_page=response.next_page)

    def normalize(self, raw: Any) -> Record:
        return database_normalizer.normalize(raw)
