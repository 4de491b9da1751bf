"""Post-fetch filtering of normalized records."""

import re
from typing import Any, Callable, Iterable, Mapping, Sequence, Union

from cloud_data_sources.datasource.exceptions import InvalidFilterError
from cloud_data_sources.models.field_value import Record, to_filter_strings
from cloud_data_sources.models.filter_model import Filter

RecordPredicate = Callable[[Record], bool]

_MISSING = object()


def _as_filter(raw: Union[Filter, Mapping[str, Any]]) -> Filter:
    return raw if isinstance(raw, Filter) else Filter(**raw)


def build_predicate(filter_: Filter) -> RecordPredicate:
    """
    Compile one filter into a record predicate.

    Raises:
        InvalidFilterError: If a regex value does not compile
    """
    name = filter_.name

    if filter_.regex:
        patterns = []
        for value in filter_.values:
            try:
                patterns.append(re.compile(value))
            except re.error as e:
                raise InvalidFilterError(name, value, str(e)) from e

        def matches(candidate: str) -> bool:
            return any(pattern.search(candidate) for pattern in patterns)

    else:
        accepted = frozenset(filter_.values)

        def matches(candidate: str) -> bool:
            return candidate in accepted

    def predicate(record: Record) -> bool:
        value = record.get(name, _MISSING)
        if value is _MISSING:
            return False
        return any(matches(candidate) for candidate in to_filter_strings(value))

    return predicate


def apply_filters(
    records: Iterable[Record],
    filters: Sequence[Union[Filter, Mapping[str, Any]]],
) -> list[Record]:
    """
    Keep the records that satisfy every filter, preserving their order.

    Args:
        records: Normalized records
        filters: Filter models or their dict form; empty keeps everything

    Returns:
        The surviving records, in their original order

    Raises:
        InvalidFilterError: If any regex filter fails to compile
    """
    predicates = [build_predicate(_as_filter(f)) for f in filters or ()]
    if not predicates:
        return list(records)

    return [record for record in records if all(p(record) for p in predicates)]
