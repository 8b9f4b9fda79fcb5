"""Search request schema - body of POST /elastic."""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class SearchRequest(BaseModel):
    # Strict: "5" or true for size, 42 for a string field are decode errors
    model_config = ConfigDict(strict=True)

    # Missing fields fall back to zero values, unknown fields are ignored
    username: str = ""
    password: str = ""
    addresses: str = ""  # comma-separated node URLs
    elasticquery: Any = None  # forwarded as-is
    index: str = ""  # comma-separated index names
    sort: str = ""  # comma-separated, e.g. "date:desc,_score"
    size: int = 0

    @field_validator("username", "password", "addresses", "index", "sort", "size", mode="before")
    @classmethod
    def null_as_zero_value(cls, value: Any, info: ValidationInfo) -> Any:
        """JSON null leaves the field at its zero value."""
        if value is None:
            return cls.model_fields[info.field_name].default
        return value
