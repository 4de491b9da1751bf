from cloud_data_sources.models.collection import CollectionResult, SingularResult
from cloud_data_sources.models.field_value import FieldValue, Record, ValueKind, kind_of
from cloud_data_sources.models.filter_model import Filter

__all__ = [
    "CollectionResult",
    "FieldValue",
    "Filter",
    "Record",
    "SingularResult",
    "ValueKind",
    "kind_of",
]
