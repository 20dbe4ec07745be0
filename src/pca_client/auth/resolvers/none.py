"""Anonymous access: no token."""

from __future__ import annotations

from pca_client.auth.base import TokenResolver


class NoTokenResolver(TokenResolver):
    async def resolve(self) -> None:
        return None
