"""Base models for Pub/Sub wire payloads."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelCaseModel(BaseModel):
    """Base model that uses camelCase field aliases to match the Pub/Sub JSON API."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict:
        """Dump to a JSON-ready dict with camelCase keys, dropping unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
