"""Default GraphQL-over-HTTP execution client."""

from pca_client.graphql._retrying_transport import RetryingTransport, SyncRetryingTransport
from pca_client.graphql.http_client import HttpGraphQLClient

__all__ = ["HttpGraphQLClient", "RetryingTransport", "SyncRetryingTransport"]
