"""Shared test fixtures for pca-client tests."""

from __future__ import annotations

import pytest

from pca_client.contentmodel import ClaimValue, ContextData
from tests.fakes.graphql_client import FakeGraphQLClient


@pytest.fixture
def fake_client() -> FakeGraphQLClient:
    """A GraphQL client returning no data until a test sets ``data``."""
    return FakeGraphQLClient()


@pytest.fixture
def locale_context() -> ContextData:
    return ContextData(claim_values=[ClaimValue(uri="taf:language", value="en")])
