"""Read results handed back to the caller."""

from dataclasses import dataclass, field
from typing import Any

from cloud_data_sources.models.field_value import Record


@dataclass(frozen=True)
class CollectionResult:
    """Ordered records of one collection read plus its synthetic identifier."""

    id: str
    collection_key: str
    records: list[Record]
    arguments: dict[str, Any] = field(default_factory=dict)

    def to_state(self) -> dict[str, Any]:
        state: dict[str, Any] = {"id": self.id}
        state.update(self.arguments)
        state[self.collection_key] = self.records
        return state


@dataclass(frozen=True)
class SingularResult:
    """One entity read by identifier."""

    id: str
    record: Record
    arguments: dict[str, Any] = field(default_factory=dict)

    def to_state(self) -> dict[str, Any]:
        state: dict[str, Any] = dict(self.arguments)
        state.update(self.record)
        state["id"] = self.id
        return state
