"""Global test configuration and fixtures."""

import json
import logging
import os
import shutil
import sys
import tempfile
from collections.abc import Generator
from datetime import datetime, timezone
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Optional
from unittest.mock import Mock

import boto3
import pytest
from moto import mock_aws

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from cloud_data_sources.config.manager import ConfigurationManager  # noqa: E402
from cloud_data_sources.datasource.paginator import ListRequest, Page  # noqa: E402
from cloud_data_sources.helpers.logger import configure_library_logging  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up test environment variables."""
    os.environ.update(
        {
            "AWS_DEFAULT_REGION": "us-east-1",
            "AWS_ACCESS_KEY_ID": "testing",
            "AWS_SECRET_ACCESS_KEY": "testing",
            "AWS_SECURITY_TOKEN": "testing",
            "AWS_SESSION_TOKEN": "testing",
            "CDS_CONSOLE_ENABLED": "true",
        }
    )


@pytest.fixture(autouse=True)
def clean_cds_environment(monkeypatch):
    """Keep CDS_ settings from the developer shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("CDS_") and key != "CDS_CONSOLE_ENABLED":
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config_dict() -> dict[str, Any]:
    """Basic test configuration dictionary."""
    return {
        "logging": {"level": "DEBUG", "destination": "console"},
        "oci": {
            "config_file": "/nonexistent/oci/config",
            "profile": "TEST",
            "region": "eu-frankfurt-1",
            "retry": {"enabled": True, "max_attempts": 4},
        },
        "aws": {"region": "us-east-1", "max_retries": 2, "retry_mode": "standard"},
    }


@pytest.fixture
def test_config_file(temp_dir: Path, test_config_dict: dict[str, Any]) -> Path:
    """Create a test configuration file."""
    config_file = temp_dir / "test_config.json"
    with open(config_file, "w") as f:
        json.dump(test_config_dict, f, indent=2)
    return config_file


@pytest.fixture
def config_manager(test_config_file: Path) -> ConfigurationManager:
    """Create a test configuration manager."""
    return ConfigurationManager(str(test_config_file))


@pytest.fixture
def aws_mocks():
    """Set up AWS service mocks."""
    with mock_aws():
        yield


@pytest.fixture
def rds_client(aws_mocks):
    """Create a mocked RDS client."""
    return boto3.client("rds", region_name="us-east-1")


class FakeListOperation:
    """
    List operation returning canned pages keyed by continuation token.

    ``pages`` is a list of (items, next_token) tuples served in order; an
    Exception in place of a tuple is raised when that page is requested.
    """

    def __init__(self, pages: list[Any]) -> None:
        self.pages = pages
        self.requests: list[ListRequest] = []

    def __call__(self, request: ListRequest) -> Page:
        self.requests.append(request)
        page = self.pages[len(self.requests) - 1]
        if isinstance(page, Exception):
            raise page
        items, next_token = page
        return Page(items=list(items), next_page=next_token)


@pytest.fixture
def fake_list_operation():
    return FakeListOperation


def make_database_summary(
    db_id: str,
    db_name: Optional[str] = None,
    lifecycle_state: str = "AVAILABLE",
    **overrides: Any,
) -> SimpleNamespace:
    """Build an object shaped like oci.database.models.DatabaseSummary."""
    attributes = {
        "id": db_id,
        "compartment_id": "ocid1.compartment.oc1..test",
        "db_home_id": "ocid1.dbhome.oc1..test",
        "db_name": db_name,
        "db_unique_name": None,
        "db_workload": "OLTP",
        "character_set": "AL32UTF8",
        "ncharacter_set": "AL16UTF16",
        "pdb_name": None,
        "lifecycle_state": lifecycle_state,
        "lifecycle_details": None,
        "time_created": datetime(2019, 5, 1, 12, 30, tzinfo=timezone.utc),
        "connection_strings": None,
        "db_backup_config": None,
        "freeform_tags": None,
        "defined_tags": None,
    }
    attributes.update(overrides)
    return SimpleNamespace(**attributes)


@pytest.fixture
def database_summary_factory():
    return make_database_summary


def make_oci_response(data: Any, next_page: Optional[str] = None) -> SimpleNamespace:
    """Build an object shaped like oci.response.Response."""
    return SimpleNamespace(data=data, next_page=next_page, status=200, headers={})


@pytest.fixture
def oci_response_factory():
    return make_oci_response


@pytest.fixture
def oci_client():
    """OCIClient stand-in with a mocked Database service client."""
    client = Mock()
    client.database_client = Mock()
    client.retry_policy.return_value = "retry-policy"
    return client


@pytest.fixture
def reset_logging():
    """Drop handlers installed by setup_logging and route structlog back to stdlib."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in before and type(handler) in (logging.FileHandler, logging.StreamHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    configure_library_logging()
