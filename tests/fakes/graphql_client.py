"""In-memory GraphQL client fake."""

from __future__ import annotations

from typing import Any

from pca_client.contracts.client import GraphQLClient
from pca_client.contracts.request import GraphQLRequest, GraphQLResponse


class FakeGraphQLClient(GraphQLClient):
    """Records executed requests and answers each one with ``data``."""

    def __init__(self, data: dict[str, Any] | None = None, *, timeout: float | None = 30.0) -> None:
        self.data = data
        self.requests: list[GraphQLRequest] = []
        self.schema_payload: dict[str, Any] = {"queryType": {"name": "Query"}, "types": []}
        self.closed = False
        self._timeout = timeout

    @property
    def timeout(self) -> float | None:
        return self._timeout

    @timeout.setter
    def timeout(self, value: float | None) -> None:
        self._timeout = value

    @property
    def last_request(self) -> GraphQLRequest:
        return self.requests[-1]

    async def execute(self, request: GraphQLRequest) -> GraphQLResponse:
        self.requests.append(request)
        return GraphQLResponse(data=self.data)

    async def schema(self) -> dict[str, Any]:
        return self.schema_payload

    async def aclose(self) -> None:
        self.closed = True
