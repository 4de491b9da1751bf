"""Tests for the oci_database_databases and oci_database_database data sources."""

import oci
import pytest

from cloud_data_sources.datasource.exceptions import (
    DataSourceValidationError,
    EntityNotFoundError,
)
from cloud_data_sources.providers.oci.database import (
    DatabaseDatabaseDataSource,
    DatabaseDatabasesDataSource,
)

BASE_ARGS = {
    "compartment_id": "ocid1.compartment.oc1..test",
    "db_home_id": "ocid1.dbhome.oc1..test",
}


class TestDatabaseDatabasesDataSource:
    """Test listing databases through a mocked Database client."""

    def test_builds_request_from_arguments(self, oci_client, oci_response_factory):
        oci_client.database_client.list_databases.return_value = oci_response_factory([])
        data_source = DatabaseDatabasesDataSource(oci_client)

        data_source.read({**BASE_ARGS, "db_name": "db1", "state": "AVAILABLE"})

        oci_client.database_client.list_databases.assert_called_once_with(
            compartment_id="ocid1.compartment.oc1..test",
            db_home_id="ocid1.dbhome.oc1..test",
            db_name="db1",
            lifecycle_state="AVAILABLE",
            retry_strategy="retry-policy",
        )

    def test_optional_arguments_not_sent(self, oci_client, oci_response_factory):
        oci_client.database_client.list_databases.return_value = oci_response_factory([])

        DatabaseDatabasesDataSource(oci_client).read(BASE_ARGS)

        kwargs = oci_client.database_client.list_databases.call_args.kwargs
        assert "db_name" not in kwargs
        assert "lifecycle_state" not in kwargs
        assert "page" not in kwargs

    def test_follows_next_page_and_filters(
        self, oci_client, oci_response_factory, database_summary_factory
    ):
        """Page 1 has two databases and token T2, page 2 has one; two are AVAILABLE."""
        oci_client.database_client.list_databases.side_effect = [
            oci_response_factory(
                [
                    database_summary_factory("db-a", db_name="a"),
                    database_summary_factory("db-b", db_name="b", lifecycle_state="TERMINATED"),
                ],
                next_page="T2",
            ),
            oci_response_factory([database_summary_factory("db-c", db_name="c")]),
        ]

        state = DatabaseDatabasesDataSource(oci_client).read(
            {**BASE_ARGS, "filter": [{"name": "state", "values": ["AVAILABLE"]}]}
        ).to_state()

        assert [db["id"] for db in state["databases"]] == ["db-a", "db-c"]
        assert state["id"].startswith("ds-")
        assert state["compartment_id"] == BASE_ARGS["compartment_id"]
        second_call = oci_client.database_client.list_databases.call_args_list[1]
        assert second_call.kwargs["page"] == "T2"
        assert second_call.kwargs["retry_strategy"] == "retry-policy"

    def test_regex_filter_on_db_name(
        self, oci_client, oci_response_factory, database_summary_factory
    ):
        oci_client.database_client.list_databases.return_value = oci_response_factory(
            [
                database_summary_factory("1", db_name="db1"),
                database_summary_factory("2", db_name="mydb1"),
                database_summary_factory("3"),
            ]
        )

        result = DatabaseDatabasesDataSource(oci_client).read(
            {**BASE_ARGS, "filter": [{"name": "db_name", "values": ["^db.*"], "regex": True}]}
        )

        assert [db["id"] for db in result.records] == ["1"]

    def test_service_error_propagates_unchanged(
        self, oci_client, oci_response_factory, database_summary_factory
    ):
        error = oci.exceptions.ServiceError(500, "InternalServerError", {}, "try again")
        oci_client.database_client.list_databases.side_effect = [
            oci_response_factory([database_summary_factory("db-a")], next_page="T2"),
            error,
        ]

        with pytest.raises(oci.exceptions.ServiceError) as exc_info:
            DatabaseDatabasesDataSource(oci_client).read(BASE_ARGS)

        assert exc_info.value is error

    def test_requires_db_home_id(self, oci_client):
        with pytest.raises(DataSourceValidationError) as exc_info:
            DatabaseDatabasesDataSource(oci_client).read({"compartment_id": "c"})

        assert "db_home_id" in exc_info.value.errors
        oci_client.database_client.list_databases.assert_not_called()


class TestDatabaseDatabaseDataSource:
    """Test reading one database."""

    def test_read(self, oci_client, oci_response_factory, database_summary_factory):
        oci_client.database_client.get_database.return_value = oci_response_factory(
            database_summary_factory("ocid1.database.oc1..x", db_name="db1")
        )

        state = DatabaseDatabaseDataSource(oci_client).read(
            {"database_id": "ocid1.database.oc1..x"}
        ).to_state()

        oci_client.database_client.get_database.assert_called_once_with(
            "ocid1.database.oc1..x", retry_strategy="retry-policy"
        )
        assert state["id"] == "ocid1.database.oc1..x"
        assert state["database_id"] == "ocid1.database.oc1..x"
        assert state["db_name"] == "db1"
        assert state["freeform_tags"] == {}

    def test_not_found(self, oci_client):
        oci_client.database_client.get_database.side_effect = oci.exceptions.ServiceError(
            404, "NotAuthorizedOrNotFound", {}, "not found"
        )

        with pytest.raises(EntityNotFoundError) as exc_info:
            DatabaseDatabaseDataSource(oci_client).read({"database_id": "ocid1.database.oc1..y"})

        assert exc_info.value.entity_id == "ocid1.database.oc1..y"

    def test_other_service_errors_propagate(self, oci_client):
        error = oci.exceptions.ServiceError(401, "NotAuthenticated", {}, "bad key")
        oci_client.database_client.get_database.side_effect = error

        with pytest.raises(oci.exceptions.ServiceError) as exc_info:
            DatabaseDatabaseDataSource(oci_client).read({"database_id": "x"})

        assert exc_info.value is error
