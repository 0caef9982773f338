"""Shared base for records decoded from API JSON."""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _coerce_id(value: Any) -> Any:
    # Admin and some legacy ids arrive as JSON numbers.
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


StrID = Annotated[str, BeforeValidator(_coerce_id)]


class Resource(BaseModel):
    """Base for API resources: unknown keys ignored, absent fields stay None."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_json(self) -> dict[str, Any]:
        """Dump to a JSON-ready dict, omitting absent fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
