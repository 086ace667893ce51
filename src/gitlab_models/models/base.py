"""Base model for GitLab resources and request parameters."""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Any, Self

from pydantic import BaseModel, PlainSerializer

from ..form import format_date, format_timestamp

# yyyy-MM-dd'T'HH:mm:ssXXX on the wire
Timestamp = Annotated[datetime, PlainSerializer(format_timestamp, return_type=str, when_used="json")]
# yyyy-MM-dd on the wire
DateOnly = Annotated[date, PlainSerializer(format_date, return_type=str, when_used="json")]


class GitLabModel(BaseModel):
    """Base model with common behavior for all GitLab models.

    Every field is optional; ``None`` means the field is not set. Assignments
    are validated, so ``model.field = value`` behaves like a typed setter.
    """

    model_config = {"extra": "ignore", "populate_by_name": True, "validate_assignment": True}

    @classmethod
    def from_api(cls, data: dict[str, Any], *, strict_enums: bool = True) -> Self:
        return cls.model_validate(data, context={"strict_enums": strict_enums})

    @classmethod
    def from_json(cls, text: str | bytes, *, strict_enums: bool = True) -> Self:
        return cls.model_validate_json(text, context={"strict_enums": strict_enums})

    def with_values(self, **values: Any) -> Self:
        """Set several fields at once and return this instance for chaining.

        Fields may be named by attribute or by wire alias (``public``, ``_links``).
        """
        by_alias = {
            field.alias: name for name, field in type(self).model_fields.items() if field.alias
        }
        for name, value in values.items():
            setattr(self, by_alias.get(name, name), value)
        return self

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: int | None = 2) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)

    def __str__(self) -> str:
        return self.to_json()
