"""Fluent builder for :class:`~pca_client.contracts.request.GraphQLRequest`."""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any

from pca_client.contentmodel.base import ContentModel
from pca_client.contentmodel.cm_uri import CmUri
from pca_client.contentmodel.enums import ContentIncludeMode, ContentNamespace
from pca_client.contentmodel.inputs import (
    ClaimValue,
    ContextData,
    InputComponentPresentationFilter,
    InputItemFilter,
    InputPublicationFilter,
    InputSortParam,
    Pagination,
)
from pca_client.contracts.exceptions import QueryBuilderError
from pca_client.contracts.request import Converter, GraphQLRequest
from pca_client.query.templates import apply_regions, apply_tags, load_query, resolve_fragments

logger = logging.getLogger(__name__)

CUSTOM_META_ARGS_TAG = "customMetaArgs"
VARIANT_ARGS_TAG = "variantArgs"
RECURSE_ITEMS_TAG = "recurseItems"
FRAGMENT_LIST_TAG = "fragmentList"
INCLUDE_CONTENT_REGION = "includeContent"

# Tags every template may carry; unresolved ones render as empty text.
KNOWN_TAGS = (CUSTOM_META_ARGS_TAG, VARIANT_ARGS_TAG, RECURSE_ITEMS_TAG, FRAGMENT_LIST_TAG)

# Cap applied when unbounded sitemap recursion is requested.
MAX_DESCENDANT_LEVELS = 10

_RECURSE_FRAGMENT = "TaxonomyItemFields"


def _graphql_string(value: str) -> str:
    return json.dumps(value)


def _recurse_items(levels: int) -> str:
    selection = ""
    for _ in range(levels):
        selection = f"... on TaxonomySitemapItem {{ items {{ ...{_RECURSE_FRAGMENT} {selection}}} }} "
    return selection.strip()


def to_variable_value(value: Any) -> Any:
    """Convert *value* into its JSON variable representation."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, ContentModel):
        return value.to_variable()
    if isinstance(value, CmUri):
        return str(value)
    if isinstance(value, (list, tuple)):
        return [to_variable_value(item) for item in value]
    return value


class QueryBuilder:
    """Accumulates a query template and its variables.

    Every ``with_*`` method returns the builder so calls can be chained::

        request = (
            QueryBuilder()
            .with_query_resource("PageById", load_fragments=True)
            .with_namespace(ContentNamespace.SITES)
            .with_publication_id(5)
            .with_page_id(640)
            .build()
        )
    """

    def __init__(self) -> None:
        self._query: str | None = None
        self._query_name: str | None = None
        self._load_fragments = False
        self._variables: dict[str, Any] = {}
        self._structure_tags: dict[str, str] = {}
        self._value_tags: dict[str, str] = {}
        self._regions: dict[str, bool] = {}
        self._claims: list[ClaimValue] = []
        self._has_context = False
        self._operation_name: str | None = None
        self._converter: Converter | None = None
        self._timeout: float | None = None

    # ------------------------------------------------------------------
    # Query source
    # ------------------------------------------------------------------

    def with_query_resource(self, name: str, load_fragments: bool = False) -> QueryBuilder:
        self._query = load_query(name)
        self._query_name = name
        self._load_fragments = load_fragments
        return self

    def with_query(self, query: str) -> QueryBuilder:
        self._query = query
        self._query_name = None
        return self

    def load_fragments(self) -> QueryBuilder:
        self._load_fragments = True
        return self

    def replace_tag(self, name: str, value: str) -> QueryBuilder:
        self._structure_tags[name] = value
        return self

    def with_include_region(self, name: str, include: bool) -> QueryBuilder:
        self._regions[name] = include
        return self

    def with_operation_name(self, name: str | None) -> QueryBuilder:
        self._operation_name = name
        return self

    # ------------------------------------------------------------------
    # Variables
    # ------------------------------------------------------------------

    def with_variable(self, name: str, value: Any) -> QueryBuilder:
        self._variables[name] = to_variable_value(value)
        return self

    def with_namespace(self, ns: ContentNamespace) -> QueryBuilder:
        return self.with_variable("namespaceId", int(ns))

    def with_publication_id(self, publication_id: int) -> QueryBuilder:
        return self.with_variable("publicationId", publication_id)

    def with_page_id(self, page_id: int) -> QueryBuilder:
        return self.with_variable("pageId", page_id)

    def with_binary_id(self, binary_id: int) -> QueryBuilder:
        return self.with_variable("binaryId", binary_id)

    def with_url(self, url: str) -> QueryBuilder:
        return self.with_variable("url", url)

    def with_cm_uri(self, cm_uri: CmUri) -> QueryBuilder:
        return (
            self.with_variable("namespaceId", cm_uri.namespace_id)
            .with_variable("publicationId", cm_uri.publication_id)
            .with_variable("cmUri", str(cm_uri))
        )

    def with_render_content(self, render_content: bool) -> QueryBuilder:
        return self.with_variable("renderContent", render_content)

    def with_content_include_mode(self, mode: ContentIncludeMode) -> QueryBuilder:
        self._regions[INCLUDE_CONTENT_REGION] = mode is not ContentIncludeMode.EXCLUDE
        if mode is ContentIncludeMode.EXCLUDE:
            self._variables.pop("renderContent", None)
            return self
        return self.with_render_content(mode is ContentIncludeMode.INCLUDE_DATA_AND_RENDER)

    def with_render_relative_link(self, render_relative_link: bool) -> QueryBuilder:
        return self.with_variable("renderRelativeLink", render_relative_link)

    def with_pagination(self, pagination: Pagination | None) -> QueryBuilder:
        if pagination is None:
            return self
        return self.with_variable("first", pagination.first).with_variable("after", pagination.after)

    def with_input_item_filter(self, item_filter: InputItemFilter | None) -> QueryBuilder:
        return self.with_variable("inputItemFilter", item_filter)

    def with_input_sort_param(self, sort: InputSortParam | None) -> QueryBuilder:
        return self.with_variable("inputSortParam", sort)

    def with_input_publication_filter(self, publication_filter: InputPublicationFilter | None) -> QueryBuilder:
        return self.with_variable("inputPublicationFilter", publication_filter)

    def with_input_component_presentation_filter(
        self, presentation_filter: InputComponentPresentationFilter | None
    ) -> QueryBuilder:
        return self.with_variable("filter", presentation_filter)

    # ------------------------------------------------------------------
    # Template arguments
    # ------------------------------------------------------------------

    def with_custom_meta_filter(self, custom_meta_filter: str | None) -> QueryBuilder:
        args = f"(filter: {_graphql_string(custom_meta_filter)})" if custom_meta_filter else ""
        self._value_tags[CUSTOM_META_ARGS_TAG] = args
        return self

    def with_variant_args(self, url: str | None) -> QueryBuilder:
        args = f"(url: {_graphql_string(url)})" if url else ""
        self._value_tags[VARIANT_ARGS_TAG] = args
        return self

    def with_descendant_levels(self, descendant_levels: int) -> QueryBuilder:
        levels = MAX_DESCENDANT_LEVELS if descendant_levels < 0 else min(descendant_levels, MAX_DESCENDANT_LEVELS)
        self._structure_tags[RECURSE_ITEMS_TAG] = _recurse_items(levels)
        return self

    # ------------------------------------------------------------------
    # Context claims
    # ------------------------------------------------------------------

    def with_context_data(self, *context_data: ContextData | None) -> QueryBuilder:
        for data in context_data:
            if data is None:
                continue
            self._claims.extend(data.claim_values)
            self._has_context = True
        return self

    def with_context_claim(self, claim: ClaimValue) -> QueryBuilder:
        self._claims.append(claim)
        self._has_context = True
        return self

    # ------------------------------------------------------------------
    # Result handling
    # ------------------------------------------------------------------

    def with_converter(self, converter: Converter | None) -> QueryBuilder:
        self._converter = converter
        return self

    def with_timeout(self, timeout: float | None) -> QueryBuilder:
        self._timeout = timeout
        return self

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def build(self) -> GraphQLRequest:
        """Assemble the request. The builder itself is left unchanged.

        Tags are substituted in a single pass, so text inserted for one tag is
        never rescanned for another.
        """
        if self._query is None:
            raise QueryBuilderError("No query set. Call with_query_resource() or with_query() before build().")

        tags = {tag: "" for tag in KNOWN_TAGS} | self._structure_tags | self._value_tags

        def render(text: str) -> str:
            return apply_tags(apply_regions(text, self._regions), tags)

        document = render(self._query)
        if self._load_fragments:
            document = resolve_fragments(document, render)

        variables = dict(self._variables)
        if self._has_context:
            variables["contextData"] = [to_variable_value(claim) for claim in self._claims]

        logger.debug("Built request %s with variables %s", self._query_name or "<inline>", sorted(variables))
        return GraphQLRequest(
            query=document,
            variables=variables,
            operation_name=self._operation_name,
            converter=self._converter,
            timeout=self._timeout,
        )
