"""Flatten vendor response records into plain field mappings."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Optional, Sequence

from cloud_data_sources.models.field_value import Record


class FieldKind(str, Enum):
    SCALAR = "scalar"
    TAGS = "tags"
    NESTED = "nested"
    NESTED_LIST = "nested_list"


@dataclass(frozen=True)
class FieldMapping:
    """
    Declares one output field of a normalized record.

    Attributes:
        name: Output field name
        source: Attribute (SDK model) or key (response dict) on the raw record
        kind: How the value is written, see FieldKind
        convert: Optional conversion applied to a present value
        normalizer: Sub-normalizer for NESTED and NESTED_LIST fields
    """

    name: str
    source: str
    kind: FieldKind = FieldKind.SCALAR
    convert: Optional[Callable[[Any], Any]] = None
    normalizer: Optional["RecordNormalizer"] = None


def read_attribute(raw: Any, source: str) -> Any:
    """Read ``source`` from a response dict or an SDK model object."""
    if isinstance(raw, Mapping):
        return raw.get(source)
    return getattr(raw, source, None)


def to_scalar(value: Any) -> Any:
    """Unwrap vendor typed values into plain scalars."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    return value


class RecordNormalizer:
    """Normalize raw records according to a static list of field mappings."""

    def __init__(self, fields: Sequence[FieldMapping]) -> None:
        for mapping in fields:
            if mapping.kind in (FieldKind.NESTED, FieldKind.NESTED_LIST) and not mapping.normalizer:
                raise ValueError(f"Field {mapping.name!r} needs a sub-normalizer")
        self.fields = tuple(fields)

    @property
    def field_names(self) -> list[str]:
        return [mapping.name for mapping in self.fields]

    def normalize(self, raw: Any) -> Record:
        """
        Build the record for one raw entity.

        Absent scalars are left out, tag maps are always present, absent
        nested blocks are written as None and present ones as a one-element
        list.
        """
        result: Record = {}

        for mapping in self.fields:
            value = read_attribute(raw, mapping.source)

            if mapping.kind is FieldKind.TAGS:
                value = value if value is not None else {}
                result[mapping.name] = mapping.convert(value) if mapping.convert else dict(value)
                continue

            if mapping.kind is FieldKind.NESTED:
                result[mapping.name] = (
                    [mapping.normalizer.normalize(value)] if value is not None else None
                )
                continue

            if value is None:
                continue

            if mapping.kind is FieldKind.NESTED_LIST:
                result[mapping.name] = [mapping.normalizer.normalize(item) for item in value]
            else:
                if isinstance(value, (list, tuple)):
                    value = [to_scalar(item) for item in value]
                else:
                    value = to_scalar(value)
                result[mapping.name] = mapping.convert(value) if mapping.convert else value

        return result

    def __call__(self, raw: Any) -> Record:
        return self.normalize(raw)
