"""Tests for the pca-client exception hierarchy."""

from __future__ import annotations

from pca_client.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    GraphQLClientError,
    PublicContentApiError,
    QueryBuilderError,
    QueryTemplateError,
    ResponseMappingError,
)


class TestExceptionHierarchy:
    """Tests for exception inheritance."""

    def test_all_exceptions_inherit_from_public_content_api_error(self) -> None:
        assert issubclass(ConfigError, PublicContentApiError)
        assert issubclass(AuthenticationError, PublicContentApiError)
        assert issubclass(QueryTemplateError, PublicContentApiError)
        assert issubclass(QueryBuilderError, PublicContentApiError)
        assert issubclass(GraphQLClientError, PublicContentApiError)
        assert issubclass(ResponseMappingError, PublicContentApiError)


class TestGraphQLClientError:
    def test_defaults(self) -> None:
        exc = GraphQLClientError("boom")
        assert str(exc) == "boom"
        assert exc.status_code is None
        assert exc.errors == []

    def test_stores_status_code_and_errors(self) -> None:
        errors = [{"message": "Field 'foo' undefined"}]
        exc = GraphQLClientError("bad query", status_code=400, errors=errors)
        assert exc.status_code == 400
        assert exc.errors == errors
