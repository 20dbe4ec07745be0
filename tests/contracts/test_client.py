"""Tests for the concrete helpers on the GraphQLClient contract."""

from __future__ import annotations

import pytest
from pydantic import BaseModel

from pca_client.contracts.exceptions import ResponseMappingError
from pca_client.contracts.request import GraphQLRequest
from tests.fakes.graphql_client import FakeGraphQLClient


class _PageLinkData(BaseModel):
    pageLink: dict[str, str]  # noqa: N815


@pytest.mark.asyncio
async def test_execute_typed_validates_data() -> None:
    client = FakeGraphQLClient({"pageLink": {"url": "/about"}})

    result = await client.execute_typed(GraphQLRequest(query="{ pageLink { url } }"), _PageLinkData)

    assert result == _PageLinkData(pageLink={"url": "/about"})


@pytest.mark.asyncio
async def test_execute_typed_raises_mapping_error() -> None:
    client = FakeGraphQLClient({"unexpected": 1})

    with pytest.raises(ResponseMappingError):
        await client.execute_typed(GraphQLRequest(query="{ a }"), _PageLinkData)


def test_execute_sync_runs_request() -> None:
    client = FakeGraphQLClient({"a": 1})

    response = client.execute_sync(GraphQLRequest(query="{ a }"))

    assert response.data == {"a": 1}
    assert len(client.requests) == 1


@pytest.mark.asyncio
async def test_async_context_manager_closes_client() -> None:
    client = FakeGraphQLClient()

    async with client as entered:
        assert entered is client

    assert client.closed is True
