"""Field value variants carried by normalized records."""

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Union

FieldValue = Union[None, str, bool, int, float, Mapping[str, Any], Sequence[Any]]
Record = dict[str, FieldValue]


class ValueKind(str, Enum):
    NULL = "null"
    STRING = "string"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    MAPPING = "mapping"
    SEQUENCE = "sequence"


_SCALAR_KINDS = (ValueKind.STRING, ValueKind.BOOL, ValueKind.INT, ValueKind.FLOAT)


def kind_of(value: Any) -> ValueKind:
    """
    Classify a record value.

    Args:
        value: A value taken from a normalized record

    Returns:
        The matching ValueKind

    Raises:
        TypeError: If the value is not one of the supported variants
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, str):
        return ValueKind.STRING
    # bool is a subclass of int
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, int):
        return ValueKind.INT
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, Sequence):
        return ValueKind.SEQUENCE
    raise TypeError(f"Unsupported record value type: {type(value).__name__}")


def scalar_to_string(value: Any) -> str:
    """Render a scalar record value the way filter values are written."""
    kind = kind_of(value)
    if kind is ValueKind.STRING:
        return value
    if kind is ValueKind.BOOL:
        return "true" if value else "false"
    if kind in (ValueKind.INT, ValueKind.FLOAT):
        return str(value)
    raise TypeError(f"Not a scalar value: {kind.value}")


def to_filter_strings(value: Any) -> list[str]:
    """
    Return the string forms a filter predicate compares against.

    Scalars yield one string, sequences of scalars yield one per element.
    Nulls, mappings and sequences of nested records yield nothing, so they
    never match.
    """
    kind = kind_of(value)
    if kind in _SCALAR_KINDS:
        return [scalar_to_string(value)]
    if kind is ValueKind.SEQUENCE:
        return [scalar_to_string(item) for item in value if kind_of(item) in _SCALAR_KINDS]
    if kind in (ValueKind.NULL, ValueKind.MAPPING):
        return []
    raise TypeError(f"Unhandled value kind: {kind.value}")
