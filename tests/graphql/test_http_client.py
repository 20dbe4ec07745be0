"""Tests for HttpGraphQLClient over an httpx mock transport."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from pca_client.contracts.exceptions import GraphQLClientError
from pca_client.contracts.request import GraphQLRequest
from pca_client.graphql import HttpGraphQLClient, RetryingTransport, SyncRetryingTransport

ENDPOINT = "https://cd.example.com/cd/api"


def _client(
    handler: Callable[[httpx.Request], httpx.Response], **kwargs: Any
) -> tuple[HttpGraphQLClient, httpx.AsyncClient]:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpGraphQLClient(ENDPOINT, http_client=http_client, **kwargs), http_client


# ---------------------------------------------------------------------------
# Request encoding
# ---------------------------------------------------------------------------


class TestRequestEncoding:
    @pytest.mark.asyncio
    async def test_posts_json_payload_with_bearer_token(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"data": {"page": {"id": "640"}}})

        client, _ = _client(handler, token="secret", headers={"X-Preview": "1"})
        response = await client.execute(
            GraphQLRequest(query="query page { page { id } }", variables={"pageId": 640}, operation_name="page")
        )

        assert response.field("page", "id") == "640"
        sent = seen[0]
        assert sent.method == "POST"
        assert str(sent.url) == ENDPOINT
        assert sent.headers["Authorization"] == "Bearer secret"
        assert sent.headers["X-Preview"] == "1"
        assert json.loads(sent.content) == {
            "query": "query page { page { id } }",
            "variables": {"pageId": 640},
            "operationName": "page",
        }

    @pytest.mark.asyncio
    async def test_omits_authorization_without_token(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"data": {}})

        client, _ = _client(handler)
        await client.execute(GraphQLRequest(query="{ a }"))

        assert "Authorization" not in seen[0].headers

    @pytest.mark.asyncio
    async def test_request_timeout_overrides_client_timeout(self) -> None:
        timeouts: list[dict[str, float | None]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            timeouts.append(request.extensions["timeout"])
            return httpx.Response(200, json={"data": {}})

        client, _ = _client(handler, timeout=10.0)
        await client.execute(GraphQLRequest(query="{ a }"))
        await client.execute(GraphQLRequest(query="{ a }", timeout=2.0))
        client.timeout = 5.0
        await client.execute(GraphQLRequest(query="{ a }"))

        assert [entry["read"] for entry in timeouts] == [10.0, 2.0, 5.0]
        assert client.timeout == 5.0


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------


class TestErrorMapping:
    @pytest.mark.asyncio
    async def test_http_error_status(self) -> None:
        client, _ = _client(lambda request: httpx.Response(401, text="unauthorized"))

        with pytest.raises(GraphQLClientError, match="HTTP 401") as exc_info:
            await client.execute(GraphQLRequest(query="{ a }"))

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_non_json_body(self) -> None:
        client, _ = _client(lambda request: httpx.Response(200, text="<html>maintenance</html>"))

        with pytest.raises(GraphQLClientError, match="non-JSON"):
            await client.execute(GraphQLRequest(query="{ a }"))

    @pytest.mark.asyncio
    async def test_non_object_body(self) -> None:
        client, _ = _client(lambda request: httpx.Response(200, json=[1, 2]))

        with pytest.raises(GraphQLClientError, match="not a JSON object"):
            await client.execute(GraphQLRequest(query="{ a }"))

    @pytest.mark.asyncio
    async def test_errors_without_data_raise(self) -> None:
        errors = [{"message": "Validation error of type FieldUndefined", "locations": [{"line": 1, "column": 3}]}]
        client, _ = _client(lambda request: httpx.Response(200, json={"data": None, "errors": errors}))

        with pytest.raises(GraphQLClientError, match="FieldUndefined") as exc_info:
            await client.execute(GraphQLRequest(query="{ a }"))

        assert exc_info.value.errors == errors
        assert exc_info.value.status_code == 200

    @pytest.mark.asyncio
    async def test_errors_with_partial_data_are_returned(self, caplog: pytest.LogCaptureFixture) -> None:
        payload = {"data": {"page": None}, "errors": [{"message": "Page not published"}]}
        client, _ = _client(lambda request: httpx.Response(200, json=payload))

        response = await client.execute(GraphQLRequest(query="{ page { id } }"))

        assert response.data == {"page": None}
        assert response.errors[0].message == "Page not published"
        assert "partial data" in caplog.text

    @pytest.mark.asyncio
    async def test_transport_failure(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client, _ = _client(handler)

        with pytest.raises(GraphQLClientError, match="transport failure"):
            await client.execute(GraphQLRequest(query="{ a }"))

    @pytest.mark.asyncio
    async def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client, _ = _client(handler, timeout=1.5)

        with pytest.raises(GraphQLClientError, match="timed out after 1.5s"):
            await client.execute(GraphQLRequest(query="{ a }"))


# ---------------------------------------------------------------------------
# Blocking execution
# ---------------------------------------------------------------------------


class TestExecuteSync:
    def test_repeated_blocking_calls_share_one_client(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"data": {"call": len(seen)}})

        sync_http_client = httpx.Client(transport=httpx.MockTransport(handler))
        client = HttpGraphQLClient(ENDPOINT, token="secret", timeout=4.0, sync_http_client=sync_http_client)

        first = client.execute_sync(GraphQLRequest(query="{ call }"))
        second = client.execute_sync(GraphQLRequest(query="{ call }", timeout=1.0))

        assert first.data == {"call": 1}
        assert second.data == {"call": 2}
        assert [request.headers["Authorization"] for request in seen] == ["Bearer secret", "Bearer secret"]
        assert [request.extensions["timeout"]["read"] for request in seen] == [4.0, 1.0]

    @pytest.mark.asyncio
    async def test_blocking_call_works_inside_running_loop(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"data": {"a": 1}}))
        sync_http_client = httpx.Client(transport=transport)
        client = HttpGraphQLClient(ENDPOINT, sync_http_client=sync_http_client)

        assert client.execute_sync(GraphQLRequest(query="{ a }")).data == {"a": 1}

    def test_blocking_call_maps_errors(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = HttpGraphQLClient(ENDPOINT, sync_http_client=httpx.Client(transport=httpx.MockTransport(handler)))

        with pytest.raises(GraphQLClientError, match="transport failure"):
            client.execute_sync(GraphQLRequest(query="{ a }"))

    def test_blocking_call_maps_http_status(self) -> None:
        sync_http_client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(503)))
        client = HttpGraphQLClient(ENDPOINT, sync_http_client=sync_http_client)

        with pytest.raises(GraphQLClientError, match="HTTP 503"):
            client.execute_sync(GraphQLRequest(query="{ a }"))

    @pytest.mark.asyncio
    async def test_owned_sync_client_is_created_lazily_and_closed(self) -> None:
        client = HttpGraphQLClient(ENDPOINT, max_retries=2)

        assert client._sync_client is None
        sync_http_client = client._get_sync_client()
        assert client._get_sync_client() is sync_http_client
        assert isinstance(sync_http_client._transport, SyncRetryingTransport)
        assert sync_http_client._transport.max_retries == 2

        await client.aclose()

        assert sync_http_client.is_closed

    @pytest.mark.asyncio
    async def test_injected_sync_client_is_left_open(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"data": {}}))
        sync_http_client = httpx.Client(transport=transport)
        client = HttpGraphQLClient(ENDPOINT, sync_http_client=sync_http_client)

        await client.aclose()

        assert not sync_http_client.is_closed
        sync_http_client.close()


# ---------------------------------------------------------------------------
# Schema introspection
# ---------------------------------------------------------------------------


class TestSchema:
    @pytest.mark.asyncio
    async def test_schema_is_fetched_once(self) -> None:
        calls: list[dict[str, Any]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(json.loads(request.content))
            return httpx.Response(200, json={"data": {"__schema": {"queryType": {"name": "Query"}, "types": []}}})

        client, _ = _client(handler)

        first = await client.schema()
        second = await client.schema()

        assert first == {"queryType": {"name": "Query"}, "types": []}
        assert second is first
        assert len(calls) == 1
        assert calls[0]["operationName"] == "IntrospectionQuery"
        assert "fragment TypeRef on __Type" in calls[0]["query"]

    @pytest.mark.asyncio
    async def test_schema_missing_raises(self) -> None:
        client, _ = _client(lambda request: httpx.Response(200, json={"data": {}}))

        with pytest.raises(GraphQLClientError, match="__schema"):
            await client.schema()


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_injected_http_client_is_left_open(self) -> None:
        client, http_client = _client(lambda request: httpx.Response(200, json={"data": {}}))

        async with client:
            pass

        assert not http_client.is_closed
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_owned_http_client_is_closed(self) -> None:
        client = HttpGraphQLClient(ENDPOINT, max_retries=5)

        assert isinstance(client._client._transport, RetryingTransport)
        assert client._client._transport.max_retries == 5
        assert client.endpoint == ENDPOINT

        await client.aclose()

        assert client._client.is_closed
