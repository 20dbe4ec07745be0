import pytest

from pca_client.auth.factory import create_token_resolver
from pca_client.auth.resolvers.env import EnvTokenResolver
from pca_client.auth.resolvers.none import NoTokenResolver
from pca_client.auth.resolvers.static import StaticTokenResolver
from pca_client.contracts.config import PcaClientConfig
from pca_client.contracts.exceptions import ConfigError

ENDPOINT = "https://cd.example.com/cd/api"


def test_factory_creates_none_resolver_by_default() -> None:
    resolver = create_token_resolver(PcaClientConfig(endpoint=ENDPOINT))

    assert isinstance(resolver, NoTokenResolver)


def test_factory_creates_env_resolver_with_configured_variable() -> None:
    resolver = create_token_resolver(PcaClientConfig(endpoint=ENDPOINT, auth="env", token_env="CD_TOKEN"))

    assert isinstance(resolver, EnvTokenResolver)
    assert resolver.variable == "CD_TOKEN"


def test_factory_creates_static_resolver() -> None:
    resolver = create_token_resolver(PcaClientConfig(endpoint=ENDPOINT, auth="token", token="tok_123"))

    assert isinstance(resolver, StaticTokenResolver)
    assert resolver.token == "tok_123"


def test_factory_raises_for_unknown_auth_mode() -> None:
    config = PcaClientConfig.model_construct(endpoint=ENDPOINT, auth="unsupported", token=None, token_env="X")

    with pytest.raises(ConfigError, match="Unknown auth mode"):
        create_token_resolver(config)
