"""Token resolver factory."""

from __future__ import annotations

from pca_client.auth.base import TokenResolver
from pca_client.auth.resolvers.env import EnvTokenResolver
from pca_client.auth.resolvers.none import NoTokenResolver
from pca_client.auth.resolvers.static import StaticTokenResolver
from pca_client.contracts.config import PcaClientConfig
from pca_client.contracts.exceptions import ConfigError

RESOLVERS: dict[str, type[TokenResolver]] = {
    "none": NoTokenResolver,
    "env": EnvTokenResolver,
    "token": StaticTokenResolver,
}


def create_token_resolver(config: PcaClientConfig) -> TokenResolver:
    auth_mode = config.auth
    if auth_mode not in RESOLVERS:
        raise ConfigError(f"Unknown auth mode: {auth_mode}")

    if auth_mode == "none":
        return NoTokenResolver()
    if auth_mode == "env":
        return EnvTokenResolver(variable=config.token_env)
    return StaticTokenResolver(token=config.token or "")
