from __future__ import annotations

import json
from pathlib import Path

import pytest

from pca_client.api import PublicContentApi
from pca_client.contentmodel import ClaimValue, ContextData
from pca_client.contracts.config import PcaClientConfig
from pca_client.contracts.exceptions import AuthenticationError, ConfigError
from pca_client.graphql import HttpGraphQLClient
from pca_client.sdk import create_public_content_api, load_config

ENDPOINT = "https://cd.example.com/cd/api"


# ---------------------------------------------------------------------------
# load_config
# ---------------------------------------------------------------------------


def test_load_config_reads_json(tmp_path: Path) -> None:
    config_path = tmp_path / "pca-client.json"
    config_path.write_text(
        json.dumps(
            {
                "endpoint": ENDPOINT,
                "auth": "env",
                "timeout": 5,
                "headers": {"X-Preview": "1"},
                "default_claims": [{"uri": "taf:language", "value": "en"}],
            }
        ),
        encoding="utf-8",
    )

    config = load_config(config_path)

    assert config.endpoint == ENDPOINT
    assert config.auth == "env"
    assert config.timeout == 5.0
    assert config.headers == {"X-Preview": "1"}
    assert config.default_claims == [ClaimValue(uri="taf:language", value="en")]


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="failed reading config file"):
        load_config(tmp_path / "missing.json")


def test_load_config_invalid_json(tmp_path: Path) -> None:
    config_path = tmp_path / "pca-client.json"
    config_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError, match="invalid JSON"):
        load_config(config_path)


def test_load_config_invalid_values(tmp_path: Path) -> None:
    config_path = tmp_path / "pca-client.json"
    config_path.write_text(json.dumps({"endpoint": ENDPOINT, "auth": "token"}), encoding="utf-8")

    with pytest.raises(ConfigError, match="invalid config"):
        load_config(config_path)


# ---------------------------------------------------------------------------
# create_public_content_api
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_create_public_content_api_wires_http_client() -> None:
    config = PcaClientConfig(
        endpoint=ENDPOINT,
        auth="token",
        token="tok_123",
        timeout=7.5,
        max_retries=1,
        headers={"X-Preview": "1"},
        default_claims=[ClaimValue(uri="taf:language", value="en")],
    )

    async with await create_public_content_api(config) as api:
        assert isinstance(api, PublicContentApi)
        client = api.client
        assert isinstance(client, HttpGraphQLClient)
        assert client.endpoint == ENDPOINT
        assert client.timeout == 7.5
        assert client._headers["Authorization"] == "Bearer tok_123"
        assert client._headers["X-Preview"] == "1"
        assert api.default_context_data == ContextData(claim_values=[ClaimValue(uri="taf:language", value="en")])


@pytest.mark.asyncio
async def test_create_public_content_api_without_claims_or_token() -> None:
    async with await create_public_content_api(PcaClientConfig(endpoint=ENDPOINT)) as api:
        assert api.default_context_data is None
        assert "Authorization" not in api.client._headers  # type: ignore[attr-defined]


@pytest.mark.asyncio
async def test_create_public_content_api_propagates_auth_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PCA_CLIENT_TOKEN", raising=False)

    with pytest.raises(AuthenticationError):
        await create_public_content_api(PcaClientConfig(endpoint=ENDPOINT, auth="env"))
