"""Public API surface for pca-client."""

from pca_client.api import PublicContentApi
from pca_client.auth import create_token_resolver
from pca_client.contentmodel import (
    Ancestor,
    CmUri,
    ContentIncludeMode,
    ContentNamespace,
    ContentType,
    ContextData,
    DataModelType,
    DcpType,
    InputItemFilter,
    InputSortParam,
    PageInclusion,
    Pagination,
)
from pca_client.contracts import (
    AuthenticationError,
    ConfigError,
    GraphQLClient,
    GraphQLClientError,
    GraphQLRequest,
    GraphQLResponse,
    PcaClientConfig,
    PublicContentApiError,
    QueryBuilderError,
    QueryTemplateError,
    ResponseMappingError,
)
from pca_client.graphql import HttpGraphQLClient
from pca_client.query import QueryBuilder, graphql_requests
from pca_client.sdk import create_public_content_api, load_config

__all__ = [
    "Ancestor",
    "AuthenticationError",
    "CmUri",
    "ConfigError",
    "ContentIncludeMode",
    "ContentNamespace",
    "ContentType",
    "ContextData",
    "DataModelType",
    "DcpType",
    "GraphQLClient",
    "GraphQLClientError",
    "GraphQLRequest",
    "GraphQLResponse",
    "HttpGraphQLClient",
    "InputItemFilter",
    "InputSortParam",
    "PageInclusion",
    "Pagination",
    "PcaClientConfig",
    "PublicContentApi",
    "PublicContentApiError",
    "QueryBuilder",
    "QueryTemplateError",
    "QueryBuilderError",
    "ResponseMappingError",
    "create_public_content_api",
    "create_token_resolver",
    "graphql_requests",
    "load_config",
]
