"""Exception hierarchy for the Public Content API client."""

from __future__ import annotations

from typing import Any


class PublicContentApiError(Exception):
    """Base exception for all pca-client errors."""


class ConfigError(PublicContentApiError):
    """Configuration loading or validation failure."""


class AuthenticationError(PublicContentApiError):
    """Credentials could not be resolved or were rejected."""


class QueryTemplateError(PublicContentApiError):
    """A named query template or fragment could not be loaded."""


class QueryBuilderError(PublicContentApiError):
    """The query builder was asked to build an incomplete request."""


class GraphQLClientError(PublicContentApiError):
    """The GraphQL endpoint could not execute a request.

    Attributes:
        status_code: HTTP status code, when the failure came from the transport.
        errors: GraphQL ``errors`` entries returned by the endpoint.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or []


class ResponseMappingError(PublicContentApiError):
    """A response payload could not be mapped to the expected content type."""
