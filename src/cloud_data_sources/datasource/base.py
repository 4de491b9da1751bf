"""
Base classes for data sources.

A collection data source pages through a vendor list operation, normalizes
every raw record, applies the caller's filters and stamps the read with a
synthetic identifier. A singular data source fetches one entity by id.
Both receive their SDK client handle at construction.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Mapping, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cloud_data_sources.datasource.exceptions import DataSourceValidationError
from cloud_data_sources.datasource.filters import apply_filters
from cloud_data_sources.datasource.paginator import ListRequest, Page, Paginator
from cloud_data_sources.helpers.logger import get_logger
from cloud_data_sources.helpers.utils import generate_data_source_id
from cloud_data_sources.models.collection import CollectionResult, SingularResult
from cloud_data_sources.models.field_value import Record
from cloud_data_sources.models.filter_model import Filter

A = TypeVar("A", bound=BaseModel)


class DataSourceArguments(BaseModel):
    """Base for data source argument schemas."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class CollectionArguments(DataSourceArguments):
    """Arguments shared by every collection data source."""

    filter: list[Filter] = Field(default_factory=list, description="Post-fetch filters")


class DataSource(ABC, Generic[A]):
    """Common plumbing: client injection, logging and argument validation."""

    name: ClassVar[str]
    arguments_model: ClassVar[type[BaseModel]]

    def __init__(self, client: Any, logger=None) -> None:
        """
        Args:
            client: Provider client wrapper used for SDK calls
            logger: Optional logger, defaults to the module logger
        """
        self.client = client
        self._logger = logger or get_logger(self.__class__.__module__)

    def parse_arguments(self, config: Mapping[str, Any]) -> A:
        """
        Validate raw arguments against the data source schema.

        Raises:
            DataSourceValidationError: If any argument is missing or invalid
        """
        try:
            return self.arguments_model.model_validate(dict(config or {}))
        except ValidationError as e:
            errors = {
                ".".join(str(part) for part in error["loc"]) or "arguments": error["msg"]
                for error in e.errors()
            }
            details = "; ".join(f"{field}: {message}" for field, message in errors.items())
            raise DataSourceValidationError(
                f"Invalid arguments for {self.name} - {details}", errors
            ) from e

    @staticmethod
    def echo_arguments(args: BaseModel) -> dict[str, Any]:
        """Arguments as written back into state."""
        return args.model_dump(exclude_none=True)


class CollectionDataSource(DataSource[A]):
    """Paginated collection read followed by declarative filtering."""

    collection_key: ClassVar[str]

    @abstractmethod
    def build_request(self, args: A) -> ListRequest:
        """Build the first-page request from validated arguments."""

    @abstractmethod
    def list_page(self, request: ListRequest) -> Page:
        """Issue one list call and return its page."""

    @abstractmethod
    def normalize(self, raw: Any) -> Record:
        """Normalize one raw record."""

    def fetch_all(self, args: A) -> list[Any]:
        return Paginator(self.list_page, logger=self._logger).fetch_all(self.build_request(args))

    def read(self, config: Mapping[str, Any]) -> CollectionResult:
        """
        Run one collection read.

        Args:
            config: Raw data source arguments

        Returns:
            CollectionResult with the filtered records in fetch order

        Raises:
            DataSourceValidationError: If the arguments are invalid
            InvalidFilterError: If a filter regex does not compile
        """
        args = self.parse_arguments(config)
        raw_records = self.fetch_all(args)
        records = [self.normalize(raw) for raw in raw_records]
        filtered = apply_filters(records, args.filter)

        result = CollectionResult(
            id=generate_data_source_id(),
            collection_key=self.collection_key,
            records=filtered,
            arguments=self.echo_arguments(args),
        )
        self._logger.info(
            "Read %s: %d of %d records kept after %d filters (id=%s)",
            self.name,
            len(filtered),
            len(records),
            len(args.filter),
            result.id,
        )
        return result


class SingularDataSource(DataSource[A]):
    """Single entity read by identifier."""

    @abstractmethod
    def get(self, args: A) -> Any:
        """
        Fetch the raw entity.

        Raises:
            EntityNotFoundError: If the entity does not exist
        """

    @abstractmethod
    def normalize(self, raw: Any) -> Record:
        """Normalize the raw entity."""

    @abstractmethod
    def entity_id(self, args: A, record: Record) -> Optional[str]:
        """Identifier stored as the state id."""

    def read(self, config: Mapping[str, Any]) -> SingularResult:
        args = self.parse_arguments(config)
        record = self.normalize(self.get(args))
        result = SingularResult(
            id=self.entity_id(args, record) or "",
            record=record,
            arguments=self.echo_arguments(args),
        )
        self._logger.info("Read %s %s", self.name, result.id)
        return result
