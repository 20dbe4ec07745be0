"""Query templates, the fluent query builder, and predefined requests."""

from pca_client.query import requests as graphql_requests
from pca_client.query.builder import QueryBuilder
from pca_client.query.templates import load_fragment, load_query

__all__ = ["QueryBuilder", "graphql_requests", "load_fragment", "load_query"]
