"""Typed Public Content API facade over a :class:`GraphQLClient`."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pca_client.contentmodel.cm_uri import CmUri
from pca_client.contentmodel.converters import model_converter
from pca_client.contentmodel.enums import (
    Ancestor,
    ContentIncludeMode,
    ContentNamespace,
    ContentType,
    DataModelType,
    DcpType,
    PageInclusion,
)
from pca_client.contentmodel.inputs import (
    ContextData,
    InputComponentPresentationFilter,
    InputItemFilter,
    InputPublicationFilter,
    InputSortParam,
    Pagination,
)
from pca_client.contentmodel.items import (
    BinaryComponent,
    ComponentPresentation,
    ComponentPresentationConnection,
    ItemConnection,
    Keyword,
    KeywordConnection,
    Page,
    PageConnection,
    Publication,
    PublicationConnection,
    PublicationMapping,
    SitemapItem,
    StructureGroup,
    StructureGroupConnection,
    TaxonomySitemapItem,
)
from pca_client.contracts.client import GraphQLClient
from pca_client.contracts.request import GraphQLRequest, GraphQLResponse
from pca_client.query import requests as graphql_requests

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PublicContentApi(GraphQLClient):
    """Content operations on top of an injected :class:`GraphQLClient`.

    Every operation builds a named request, executes it, and unwraps a single
    field of the response ``data``. A missing field yields ``None``. Errors
    raised by the underlying client propagate unchanged.

    Args:
        client: Executes the GraphQL documents.
        default_context_data: Claims sent with every request, ahead of any
            per-call context data.
        request_timeout: Overrides the client timeout for facade requests.
    """

    def __init__(
        self,
        client: GraphQLClient,
        *,
        default_context_data: ContextData | None = None,
        request_timeout: float | None = None,
    ) -> None:
        self._client = client
        self._default_context_data = default_context_data
        self._request_timeout = request_timeout

    # ------------------------------------------------------------------
    # GraphQLClient forwarding
    # ------------------------------------------------------------------

    @property
    def client(self) -> GraphQLClient:
        return self._client

    @property
    def default_context_data(self) -> ContextData | None:
        return self._default_context_data

    @default_context_data.setter
    def default_context_data(self, value: ContextData | None) -> None:
        self._default_context_data = value

    @property
    def timeout(self) -> float | None:
        return self._client.timeout

    @timeout.setter
    def timeout(self, value: float | None) -> None:
        self._client.timeout = value

    async def execute(self, request: GraphQLRequest) -> GraphQLResponse:
        return await self._client.execute(request)

    async def execute_typed(self, request: GraphQLRequest, model: type[T]) -> T:
        return await self._client.execute_typed(request, model)

    def execute_sync(self, request: GraphQLRequest) -> GraphQLResponse:
        return self._client.execute_sync(request)

    async def schema(self) -> dict[str, Any]:
        return await self._client.schema()

    async def aclose(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Pages
    # ------------------------------------------------------------------

    async def get_page(
        self,
        ns: ContentNamespace,
        publication_id: int,
        page_id: int,
        *,
        custom_meta_filter: str | None = None,
        content_include_mode: ContentIncludeMode = ContentIncludeMode.INCLUDE_DATA,
        context_data: ContextData | None = None,
    ) -> Page | None:
        request = graphql_requests.page_by_id(
            ns,
            publication_id,
            page_id,
            custom_meta_filter=custom_meta_filter,
            content_include_mode=content_include_mode,
            context_data=context_data,
            global_context_data=self._default_context_data,
        )
        return await self._fetch(request, Page, "page")

    async def get_page_by_url(
        self,
        ns: ContentNamespace,
        publication_id: int,
        url: str,
        *,
        custom_meta_filter: str | None = None,
        content_include_mode: ContentIncludeMode = ContentIncludeMode.INCLUDE_DATA,
        context_data: ContextData | None = None,
    ) -> Page | None:
        request = graphql_requests.page_by_url(
            ns,
            publication_id,
            url,
            custom_meta_filter=custom_meta_filter,
            content_include_mode=content_include_mode,
            context_data=context_data,
            global_context_data=self._default_context_data,
        )
        return await self._fetch(request, Page, "page")

    async def get_page_by_cm_uri(
        self,
        cm_uri: CmUri,
        *,
        custom_meta_filter: str | None = None,
        content_include_mode: ContentIncludeMode = ContentIncludeMode.INCLUDE_DATA,
        context_data: ContextData | None = None,
    ) -> Page | None:
        request = graphql_requests.page_by_cm_uri(
            cm_uri,
            custom_meta_filter=custom_meta_filter,
            content_include_mode=content_include_mode,
            context_data=context_data,
            global_context_data=self._default_context_data,
        )
        return await self._fetch(request, Page, "page")

    async def get_pages(
        self,
        ns: ContentNamespace,
        url: str,
        *,
        pagination: Pagination | None = None,
        custom_meta_filter: str | None = None,
        content_include_mode: ContentIncludeMode = ContentIncludeMode.INCLUDE_DATA,
        context_data: ContextData | None = None,
    ) -> PageConnection | None:
        request = graphql_requests.pages_by_url(
            ns,
            url,
            pagination=pagination,
            custom_meta_filter=custom_meta_filter,
            content_include_mode=content_include_mode,
            context_data=context_data,
            global_context_data=self._default_context_data,
        )
        return await self._fetch(request, PageConnection, "pages")

    # ------------------------------------------------------------------
    # Binary components
    # ------------------------------------------------------------------

    async def get_binary_component(
        self,
        ns: ContentNamespace,
        publication_id: int,
        binary_id: int,
        *,
        custom_meta_filter: str | None = None,
        context_data: ContextData | None = None,
    ) -> BinaryComponent | None:
        request = graphql_requests.binary_component_by_id(
            ns,
            publication_id,
            binary_id,
            custom_meta_filter=custom_meta_filter,
            context_data=context_data,
            global_context_data=self._default_context_data,
        )
        return await self._fetch(request, BinaryComponent, "binaryComponent")

    async def get_binary_component_by_url(
        self,
        ns: ContentNamespace,
        publication_id: int,
        url: str,
        *,
        custom_meta_filter: str | None = None,
        context_data: ContextData | None = None,
    ) -> BinaryComponent | None:
        request = graphql_requests.binary_component_by_url(
            ns,
            publication_id,
            url,
            custom_meta_filter=custom_meta_filter,
            context_data=context_data,
            global_context_data=self._default_context_data,
        )
        return await self._fetch(request, BinaryComponent, "binaryComponent")

    async def get_binary_component_by_cm_uri(
        self,
        cm_uri: CmUri,
        *,
        custom_meta_filter: str | None = None,
        context_data: ContextData | None = None,
    ) -> BinaryComponent | None:
        request = graphql_requests.binary_component_by_cm_uri(
            cm_uri,
            custom_meta_filter=custom_meta_filter,
            context_data=context_data,
            global_context_data=self._default_context_data,
        )
        return await self._fetch(request, BinaryComponent, "binaryComponent")

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    async def execute_item_query(
        self,
        item_filter: InputItemFilter | None,
        sort: InputSortParam | None = None,
        pagination: Pagination | None = None,
        *,
        custom_meta_filter: str | None = None,
        content_include_mode: ContentIncludeMode = ContentIncludeMode.INCLUDE_DATA,
        include_container_items: bool = False,
        context_data: ContextData | None = None,
    ) -> ItemConnection | None:
        request = graphql_requests.item_query(
            item_filter,
            sort,
            pagination,
            custom_meta_filter=custom_meta_filter,
            content_include_mode=content_include_mode,
            include_container_items=include_container_items,
            context_data=context_data,
            global_context_data=self._default_context_data,
        )
        return await self._fetch(request, ItemConnection, "items")

    # ------------------------------------------------------------------
    # Publications
    # ------------------------------------------------------------------

    async def get_publication(
        self,
        ns: ContentNamespace,
        publication_id: int,
        *,
        custom_meta_filter: str | None = None,
        context_data: ContextData | None = None,
    ) -> Publication | None:
        request = graphql_requests.publication(
            ns,
            publication_id,
            custom_meta_filter=custom_meta_filter,
            context_data=context_data,
            global_context_data=self._default_context_data,
        )
        return await self._fetch(request, Publication, "publication")

    async def get_publications(
        self,
        ns: ContentNamespace,
        pagination: Pagination | None = None,
        publication_filter: InputPublicationFilter | None = None,
        *,
        custom_meta_filter: str | None = None,
        context_data: ContextData | None = None,
    ) -> PublicationConnection | None:
        request = graphql_requests.publications(
            ns,
            pagination,
            publication_filter,
            custom_meta_filter=custom_meta_filter,
            context_data=context_data,
            global_context_data=self._default_context_data,
        )
        return await self._fetch(request, PublicationConnection, "publications")

    async def get_publication_mapping(self, ns: ContentNamespace, url: str) -> PublicationMapping | None:
        request = graphql_requests.publication_mapping(ns, url)
        return await self._fetch(request, PublicationMapping, "publicationMapping")

    # ------------------------------------------------------------------
    # Keywords and structure groups
    # ------------------------------------------------------------------

    async def get_keywords(
        self,
        ns: ContentNamespace,
        publication_id: int,
        pagination: Pagination | None = None,
        *,
        custom_meta_filter: str | None = None,
        context_data: ContextData | None = None,
    ) -> KeywordConnection | None:
        """Return the publication's top-level taxonomy keywords (its categories)."""
        request = graphql_requests.keywords(
            ns,
            publication_id,
            pagination,
            custom_meta_filter=custom_meta_filter,
            context_data=context_data,
            global_context_data=self._default_context_data,
        )
        return await self._fetch(request, KeywordConnection, "categories")

    async def get_keyword(
        self,
        ns: ContentNamespace,
        publication_id: int,
        category_id: int,
        keyword_id: int,
        *,
        custom_meta_filter: str | None = None,
        context_data: ContextData | None = None,
    ) -> Keyword | None:
        request = graphql_requests.keyword(
            ns,
            publication_id,
            category_id,
            keyword_id,
            custom_meta_filter=custom_meta_filter,
            context_data=context_data,
            global_context_data=self._default_context_data,
        )
        return await self._fetch(request, Keyword, "keyword")

    async def get_structure_groups(
        self,
        ns: ContentNamespace,
        publication_id: int,
        pagination: Pagination | None = None,
        *,
        custom_meta_filter: str | None = None,
        context_data: ContextData | None = None,
    ) -> StructureGroupConnection | None:
        request = graphql_requests.structure_groups(
            ns,
            publication_id,
            pagination,
            custom_meta_filter=custom_meta_filter,
            context_data=context_data,
            global_context_data=self._default_context_data,
        )
        return await self._fetch(request, StructureGroupConnection, "structureGroups")

    async def get_structure_group(
        self,
        ns: ContentNamespace,
        publication_id: int,
        structure_group_id: int,
        *,
        custom_meta_filter: str | None = None,
        context_data: ContextData | None = None,
    ) -> StructureGroup | None:
        request = graphql_requests.structure_group(
            ns,
            publication_id,
            structure_group_id,
            custom_meta_filter=custom_meta_filter,
            context_data=context_data,
            global_context_data=self._default_context_data,
        )
        return await self._fetch(request, StructureGroup, "structureGroup")

    # ------------------------------------------------------------------
    # Component presentations
    # ------------------------------------------------------------------

    async def get_component_presentation(
        self,
        ns: ContentNamespace,
        publication_id: int,
        component_id: int,
        template_id: int,
        *,
        custom_meta_filter: str | None = None,
        content_include_mode: ContentIncludeMode = ContentIncludeMode.INCLUDE_DATA,
        context_data: ContextData | None = None,
    ) -> ComponentPresentation | None:
        request = graphql_requests.component_presentation(
            ns,
            publication_id,
            component_id,
            template_id,
            custom_meta_filter=custom_meta_filter,
            content_include_mode=content_include_mode,
            context_data=context_data,
            global_context_data=self._default_context_data,
        )
        return await self._fetch(request, ComponentPresentation, "componentPresentation")

    async def get_component_presentations(
        self,
        ns: ContentNamespace,
        publication_id: int,
        presentation_filter: InputComponentPresentationFilter | None = None,
        sort: InputSortParam | None = None,
        pagination: Pagination | None = None,
        *,
        custom_meta_filter: str | None = None,
        content_include_mode: ContentIncludeMode = ContentIncludeMode.INCLUDE_DATA,
        context_data: ContextData | None = None,
    ) -> ComponentPresentationConnection | None:
        request = graphql_requests.component_presentations(
            ns,
            publication_id,
            presentation_filter,
            sort,
            pagination,
            custom_meta_filter=custom_meta_filter,
            content_include_mode=content_include_mode,
            context_data=context_data,
            global_context_data=self._default_context_data,
        )
        return await self._fetch(request, ComponentPresentationConnection, "componentPresentations")

    # ------------------------------------------------------------------
    # Link resolution
    # ------------------------------------------------------------------

    async def resolve_page_link(
        self, ns: ContentNamespace, publication_id: int, page_id: int, render_relative_link: bool = True
    ) -> str | None:
        request = graphql_requests.resolve_page_link(ns, publication_id, page_id, render_relative_link)
        return await self._fetch(request, str, "pageLink", "url")

    async def resolve_component_link(
        self,
        ns: ContentNamespace,
        publication_id: int,
        component_id: int,
        source_page_id: int | None = None,
        exclude_component_template_id: int | None = None,
        render_relative_link: bool = True,
    ) -> str | None:
        request = graphql_requests.resolve_component_link(
            ns, publication_id, component_id, source_page_id, exclude_component_template_id, render_relative_link
        )
        return await self._fetch(request, str, "componentLink", "url")

    async def resolve_binary_link(
        self,
        ns: ContentNamespace,
        publication_id: int,
        binary_id: int,
        variant_id: str | None = None,
        render_relative_link: bool = True,
    ) -> str | None:
        request = graphql_requests.resolve_binary_link(ns, publication_id, binary_id, variant_id, render_relative_link)
        return await self._fetch(request, str, "binaryLink", "url")

    async def resolve_dynamic_component_link(
        self,
        ns: ContentNamespace,
        publication_id: int,
        page_id: int,
        component_id: int,
        template_id: int,
        render_relative_link: bool = True,
    ) -> str | None:
        request = graphql_requests.resolve_dynamic_component_link(
            ns, publication_id, page_id, component_id, template_id, render_relative_link
        )
        return await self._fetch(request, str, "dynamicComponentLink", "url")

    # ------------------------------------------------------------------
    # Model service
    # ------------------------------------------------------------------

    async def get_page_model_data(
        self,
        ns: ContentNamespace,
        publication_id: int,
        page_id: int,
        content_type: ContentType = ContentType.MODEL,
        model_type: DataModelType = DataModelType.R2,
        page_inclusion: PageInclusion = PageInclusion.INCLUDE,
        *,
        content_include_mode: ContentIncludeMode = ContentIncludeMode.INCLUDE_DATA,
        context_data: ContextData | None = None,
    ) -> Any:
        """Return the page's ``rawContent.data`` as produced by the model service."""
        request = graphql_requests.page_model_data_by_id(
            ns,
            publication_id,
            page_id,
            content_type,
            model_type,
            page_inclusion,
            content_include_mode=content_include_mode,
            context_data=context_data,
            global_context_data=self._default_context_data,
        )
        return await self._fetch(request, None, "page", "rawContent", "data")

    async def get_page_model_data_by_url(
        self,
        ns: ContentNamespace,
        publication_id: int,
        url: str,
        content_type: ContentType = ContentType.MODEL,
        model_type: DataModelType = DataModelType.R2,
        page_inclusion: PageInclusion = PageInclusion.INCLUDE,
        *,
        content_include_mode: ContentIncludeMode = ContentIncludeMode.INCLUDE_DATA,
        context_data: ContextData | None = None,
    ) -> Any:
        request = graphql_requests.page_model_data_by_url(
            ns,
            publication_id,
            url,
            content_type,
            model_type,
            page_inclusion,
            content_include_mode=content_include_mode,
            context_data=context_data,
            global_context_data=self._default_context_data,
        )
        return await self._fetch(request, None, "page", "rawContent", "data")

    async def get_entity_model_data(
        self,
        ns: ContentNamespace,
        publication_id: int,
        entity_id: int,
        template_id: int,
        content_type: ContentType = ContentType.MODEL,
        model_type: DataModelType = DataModelType.R2,
        dcp_type: DcpType = DcpType.DEFAULT,
        *,
        content_include_mode: ContentIncludeMode = ContentIncludeMode.INCLUDE_DATA,
        context_data: ContextData | None = None,
    ) -> Any:
        """Return the component presentation's ``rawContent.data``."""
        request = graphql_requests.entity_model_data(
            ns,
            publication_id,
            entity_id,
            template_id,
            content_type,
            model_type,
            dcp_type,
            content_include_mode=content_include_mode,
            context_data=context_data,
            global_context_data=self._default_context_data,
        )
        return await self._fetch(request, None, "componentPresentation", "rawContent", "data")

    # ------------------------------------------------------------------
    # Sitemap
    # ------------------------------------------------------------------

    async def get_sitemap(
        self,
        ns: ContentNamespace,
        publication_id: int,
        descendant_levels: int,
        *,
        context_data: ContextData | None = None,
    ) -> TaxonomySitemapItem | None:
        request = graphql_requests.sitemap(
            ns,
            publication_id,
            descendant_levels,
            context_data=context_data,
            global_context_data=self._default_context_data,
        )
        return await self._fetch(request, TaxonomySitemapItem, "sitemap")

    async def get_sitemap_subtree(
        self,
        ns: ContentNamespace,
        publication_id: int,
        taxonomy_node_id: str | None,
        descendant_levels: int,
        ancestor: Ancestor = Ancestor.NONE,
        *,
        context_data: ContextData | None = None,
    ) -> list[SitemapItem] | None:
        request = graphql_requests.sitemap_subtree(
            ns,
            publication_id,
            taxonomy_node_id,
            descendant_levels,
            ancestor,
            context_data=context_data,
            global_context_data=self._default_context_data,
        )
        return await self._fetch(request, list[SitemapItem], "sitemapSubtree")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _fetch(self, request: GraphQLRequest, model: Any, *path: str) -> Any:
        if self._request_timeout is not None and request.timeout is None:
            request = request.model_copy(update={"timeout": self._request_timeout})

        response = await self._client.execute(request)
        payload = response.field(*path)
        if payload is None:
            logger.debug("No result at data.%s", ".".join(path))
            return None

        if request.converter is not None:
            return request.converter(payload)
        if model is None:
            return payload
        return model_converter(model)(payload)
