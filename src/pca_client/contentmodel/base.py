"""Shared pydantic base for content-model types."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ContentModel(BaseModel):
    """Snake_case attributes in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_variable(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
