"""GraphQL-over-HTTP client backed by httpx."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from graphql import get_introspection_query
from pydantic import ValidationError

from pca_client.contracts.client import GraphQLClient
from pca_client.contracts.exceptions import GraphQLClientError
from pca_client.contracts.request import GraphQLRequest, GraphQLResponse
from pca_client.graphql._retrying_transport import RetryingTransport, SyncRetryingTransport

logger = logging.getLogger(__name__)

INTROSPECTION_QUERY = get_introspection_query(descriptions=True)

_LIMITS = httpx.Limits(max_connections=20, max_keepalive_connections=10)


def _transport_error(exc: httpx.TransportError, timeout: float | None) -> GraphQLClientError:
    if isinstance(exc, httpx.TimeoutException):
        return GraphQLClientError(f"GraphQL request timed out after {timeout}s")
    return GraphQLClientError(f"GraphQL transport failure: {exc}")


class HttpGraphQLClient(GraphQLClient):
    """Posts GraphQL requests as JSON to a single endpoint.

    Transient HTTP failures are retried by :class:`RetryingTransport`.
    :meth:`execute_sync` runs on its own ``httpx.Client`` over a
    :class:`SyncRetryingTransport`, created on first use, so blocking calls
    never touch an event loop. Injected ``http_client``/``sync_http_client``
    instances are owned by the caller and :meth:`aclose` leaves them open.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        token: str | None = None,
        timeout: float | None = 30.0,
        max_retries: int = 3,
        headers: dict[str, str] | None = None,
        http_client: httpx.AsyncClient | None = None,
        sync_http_client: httpx.Client | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._timeout = timeout
        self._max_retries = max_retries
        self._schema: dict[str, Any] | None = None

        request_headers = {"Accept": "application/json", **(headers or {})}
        if token:
            request_headers["Authorization"] = f"Bearer {token}"
        self._headers = request_headers

        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            transport=RetryingTransport(max_retries=max_retries),
            limits=_LIMITS,
        )
        self._owns_sync_client = sync_http_client is None
        self._sync_client = sync_http_client

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def timeout(self) -> float | None:
        return self._timeout

    @timeout.setter
    def timeout(self, value: float | None) -> None:
        self._timeout = value

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
        if self._owns_sync_client and self._sync_client is not None:
            self._sync_client.close()

    async def execute(self, request: GraphQLRequest) -> GraphQLResponse:
        timeout = self._timeout_for(request)
        logger.debug("Executing GraphQL request against %s", self._endpoint)
        try:
            response = await self._client.post(
                self._endpoint,
                json=request.to_payload(),
                headers=self._headers,
                timeout=timeout,
            )
        except httpx.TransportError as exc:
            raise _transport_error(exc, timeout) from exc
        return self._decode(response)

    def execute_sync(self, request: GraphQLRequest) -> GraphQLResponse:
        timeout = self._timeout_for(request)
        logger.debug("Executing blocking GraphQL request against %s", self._endpoint)
        try:
            response = self._get_sync_client().post(
                self._endpoint,
                json=request.to_payload(),
                headers=self._headers,
                timeout=timeout,
            )
        except httpx.TransportError as exc:
            raise _transport_error(exc, timeout) from exc
        return self._decode(response)

    async def schema(self) -> dict[str, Any]:
        """Fetch the endpoint's schema by introspection; cached after the first call."""
        if self._schema is None:
            response = await self.execute(
                GraphQLRequest(query=INTROSPECTION_QUERY, operation_name="IntrospectionQuery")
            )
            schema = response.field("__schema")
            if not isinstance(schema, dict):
                raise GraphQLClientError("Introspection response is missing __schema")
            self._schema = schema
        return self._schema

    def _timeout_for(self, request: GraphQLRequest) -> float | None:
        return request.timeout if request.timeout is not None else self._timeout

    def _get_sync_client(self) -> httpx.Client:
        if self._sync_client is None:
            self._sync_client = httpx.Client(
                transport=SyncRetryingTransport(max_retries=self._max_retries),
                limits=_LIMITS,
            )
        return self._sync_client

    def _decode(self, response: httpx.Response) -> GraphQLResponse:
        if response.is_error:
            raise GraphQLClientError(
                f"GraphQL endpoint returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise GraphQLClientError(
                "GraphQL endpoint returned a non-JSON body", status_code=response.status_code
            ) from exc
        if not isinstance(payload, dict):
            raise GraphQLClientError("GraphQL response is not a JSON object", status_code=response.status_code)

        try:
            parsed = GraphQLResponse.model_validate(payload)
        except ValidationError as exc:
            raise GraphQLClientError(f"Malformed GraphQL response: {exc}", status_code=response.status_code) from exc

        if parsed.errors:
            if parsed.data is None:
                raise GraphQLClientError(
                    f"GraphQL returned errors: {[error.message for error in parsed.errors]}",
                    status_code=response.status_code,
                    errors=payload.get("errors"),
                )
            logger.warning("GraphQL returned partial data with %d error(s)", len(parsed.errors))
        return parsed
