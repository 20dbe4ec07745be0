"""Auth module public exports."""

from pca_client.auth.base import TokenResolver
from pca_client.auth.factory import create_token_resolver

__all__ = ["TokenResolver", "create_token_resolver"]
