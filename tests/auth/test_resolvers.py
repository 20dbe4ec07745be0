import pytest

from pca_client.auth.resolvers import EnvTokenResolver, NoTokenResolver, StaticTokenResolver
from pca_client.contracts.exceptions import AuthenticationError


@pytest.mark.asyncio
async def test_env_resolver_reads_and_strips_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PCA_CLIENT_TOKEN", "  abc  ")

    assert await EnvTokenResolver().resolve() == "abc"


@pytest.mark.asyncio
async def test_env_resolver_uses_custom_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CD_TOKEN", "xyz")

    assert await EnvTokenResolver(variable="CD_TOKEN").resolve() == "xyz"


@pytest.mark.asyncio
@pytest.mark.parametrize("value", [None, "", "   "])
async def test_env_resolver_raises_when_missing(monkeypatch: pytest.MonkeyPatch, value: str | None) -> None:
    if value is None:
        monkeypatch.delenv("PCA_CLIENT_TOKEN", raising=False)
    else:
        monkeypatch.setenv("PCA_CLIENT_TOKEN", value)

    with pytest.raises(AuthenticationError, match="PCA_CLIENT_TOKEN"):
        await EnvTokenResolver().resolve()


@pytest.mark.asyncio
async def test_static_resolver() -> None:
    assert await StaticTokenResolver(token=" tok ").resolve() == "tok"

    with pytest.raises(AuthenticationError, match="empty"):
        await StaticTokenResolver(token=" ").resolve()


@pytest.mark.asyncio
async def test_none_resolver_returns_no_token() -> None:
    assert await NoTokenResolver().resolve() is None
