"""Filter predicate model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cloud_data_sources.models.field_value import scalar_to_string


class Filter(BaseModel):
    """A caller-supplied (name, values, regex) predicate applied after fetch."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Top-level record field to test")
    values: list[str] = Field(..., min_length=1, description="Accepted values or patterns")
    regex: bool = Field(False, description="Treat values as regular expressions")

    @field_validator("values", mode="before")
    @classmethod
    def _stringify_values(cls, value: Any) -> Any:
        """
        Accept scalar JSON values (numbers, booleans) the way they print in state.

        Anything else (null, objects, arrays) is left for validation to reject.
        """
        if isinstance(value, list):
            return [
                scalar_to_string(v) if isinstance(v, (str, bool, int, float)) else v
                for v in value
            ]
        return value
