"""GraphQL request and response envelopes."""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field, field_serializer, field_validator

Converter = Callable[[Any], Any]
"""Maps an extracted JSON fragment to a typed result."""


class GraphQLRequest(BaseModel):
    """An executable GraphQL document with its bound variables.

    ``variables`` is a read-only view over a private copy of the mapping the
    request was created with.
    """

    query: str
    variables: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)
    operation_name: str | None = None
    converter: Converter | None = None
    timeout: float | None = None

    model_config = {"frozen": True}

    @field_validator("variables", mode="after")
    @classmethod
    def freeze_variables(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(copy.deepcopy(dict(value)))

    @field_serializer("variables")
    def serialize_variables(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return copy.deepcopy(dict(value))

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"query": self.query, "variables": copy.deepcopy(dict(self.variables))}
        if self.operation_name:
            payload["operationName"] = self.operation_name
        return payload


class GraphQLErrorLocation(BaseModel):
    line: int
    column: int


class GraphQLError(BaseModel):
    message: str
    locations: list[GraphQLErrorLocation] = Field(default_factory=list)
    path: list[str | int] | None = None
    extensions: dict[str, Any] | None = None


class GraphQLResponse(BaseModel):
    """Decoded GraphQL response envelope."""

    data: dict[str, Any] | None = None
    errors: list[GraphQLError] = Field(default_factory=list)
    extensions: dict[str, Any] | None = None

    def field(self, *path: str) -> Any:
        """Walk ``data`` along *path*, returning ``None`` at the first missing step."""
        node: Any = self.data
        for key in path:
            if not isinstance(node, dict):
                return None
            node = node.get(key)
        return node
