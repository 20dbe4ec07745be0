"""Concrete token resolvers."""

from pca_client.auth.resolvers.env import EnvTokenResolver
from pca_client.auth.resolvers.none import NoTokenResolver
from pca_client.auth.resolvers.static import StaticTokenResolver

__all__ = ["EnvTokenResolver", "NoTokenResolver", "StaticTokenResolver"]
