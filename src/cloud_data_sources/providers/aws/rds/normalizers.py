"""Field mappings for RDS DB instance records."""

from typing import Any, Optional

from cloud_data_sources.datasource.normalizer import FieldKind, FieldMapping, RecordNormalizer


def tag_list_to_map(tag_list: Optional[list[dict[str, Any]]]) -> dict[str, str]:
    """Convert an AWS ``[{"Key": k, "Value": v}]`` tag list into a mapping."""
    if isinstance(tag_list, dict):
        return dict(tag_list)
    return {tag["Key"]: tag.get("Value", "") for tag in tag_list or []}


endpoint_normalizer = RecordNormalizer(
    [
        FieldMapping("address", "Address"),
        FieldMapping("port", "Port"),
        FieldMapping("hosted_zone_id", "HostedZoneId"),
    ]
)

db_instance_normalizer = RecordNormalizer(
    [
        FieldMapping("id", "DBInstanceIdentifier"),
        FieldMapping("arn", "DBInstanceArn"),
        FieldMapping("db_instance_class", "DBInstanceClass"),
        FieldMapping("engine", "Engine"),
        FieldMapping("engine_version", "EngineVersion"),
        FieldMapping("state", "DBInstanceStatus"),
        FieldMapping("db_name", "DBName"),
        FieldMapping("allocated_storage", "AllocatedStorage"),
        FieldMapping("multi_az", "MultiAZ"),
        FieldMapping("availability_zone", "AvailabilityZone"),
        FieldMapping("time_created", "InstanceCreateTime"),
        FieldMapping("endpoint", "Endpoint", kind=FieldKind.NESTED, normalizer=endpoint_normalizer),
        FieldMapping("tags", "TagList", kind=FieldKind.TAGS, convert=tag_list_to_map),
    ]
)
