"""Field mappings for OCI Database records."""

from typing import Any, Mapping, Optional

from cloud_data_sources.datasource.normalizer import FieldKind, FieldMapping, RecordNormalizer


def defined_tags_to_map(defined_tags: Optional[Mapping[str, Mapping[str, Any]]]) -> dict[str, str]:
    """Flatten ``{"namespace": {"key": value}}`` into ``{"namespace.key": "value"}``."""
    result: dict[str, str] = {}
    for namespace, tags in (defined_tags or {}).items():
        for key, value in (tags or {}).items():
            result[f"{namespace}.{key}"] = str(value)
    return result


backup_destination_details_normalizer = RecordNormalizer(
    [
        FieldMapping("id", "id"),
        FieldMapping("type", "type"),
    ]
)

db_backup_config_normalizer = RecordNormalizer(
    [
        FieldMapping("auto_backup_enabled", "auto_backup_enabled"),
        FieldMapping("auto_backup_window", "auto_backup_window"),
        FieldMapping(
            "backup_destination_details",
            "backup_destination_details",
            kind=FieldKind.NESTED_LIST,
            normalizer=backup_destination_details_normalizer,
        ),
        FieldMapping("recovery_window_in_days", "recovery_window_in_days"),
    ]
)

connection_strings_normalizer = RecordNormalizer(
    [
        FieldMapping("all_connection_strings", "all_connection_strings", kind=FieldKind.TAGS),
        FieldMapping("cdb_default", "cdb_default"),
        FieldMapping("cdb_ip_default", "cdb_ip_default"),
    ]
)

# Shared by DatabaseSummary (list) and Database (get) models.
database_normalizer = RecordNormalizer(
    [
        FieldMapping("character_set", "character_set"),
        FieldMapping("compartment_id", "compartment_id"),
        FieldMapping(
            "connection_strings",
            "connection_strings",
            kind=FieldKind.NESTED,
            normalizer=connection_strings_normalizer,
        ),
        FieldMapping(
            "db_backup_config",
            "db_backup_config",
            kind=FieldKind.NESTED,
            normalizer=db_backup_config_normalizer,
        ),
        FieldMapping("db_home_id", "db_home_id"),
        FieldMapping("db_name", "db_name"),
        FieldMapping("db_unique_name", "db_unique_name"),
        FieldMapping("db_workload", "db_workload"),
        FieldMapping(
            "defined_tags", "defined_tags", kind=FieldKind.TAGS, convert=defined_tags_to_map
        ),
        FieldMapping("freeform_tags", "freeform_tags", kind=FieldKind.TAGS),
        FieldMapping("id", "id"),
        FieldMapping("lifecycle_details", "lifecycle_details"),
        FieldMapping("ncharacter_set", "ncharacter_set"),
        FieldMapping("pdb_name", "pdb_name"),
        FieldMapping("state", "lifecycle_state"),
        FieldMapping("time_created", "time_created"),
    ]
)
