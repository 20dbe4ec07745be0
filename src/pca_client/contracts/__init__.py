"""Public contracts for pca-client."""

from pca_client.contracts.client import GraphQLClient
from pca_client.contracts.config import PcaClientConfig
from pca_client.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    GraphQLClientError,
    PublicContentApiError,
    QueryBuilderError,
    QueryTemplateError,
    ResponseMappingError,
)
from pca_client.contracts.request import (
    Converter,
    GraphQLError,
    GraphQLErrorLocation,
    GraphQLRequest,
    GraphQLResponse,
)

__all__ = [
    "AuthenticationError",
    "ConfigError",
    "Converter",
    "GraphQLClient",
    "GraphQLClientError",
    "GraphQLError",
    "GraphQLErrorLocation",
    "GraphQLRequest",
    "GraphQLResponse",
    "PcaClientConfig",
    "PublicContentApiError",
    "QueryBuilderError",
    "QueryTemplateError",
    "ResponseMappingError",
]
