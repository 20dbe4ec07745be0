"""Predefined GraphQL requests for the Public Content API.

Each function binds one named query template and its variables. The
returned :class:`~pca_client.contracts.request.GraphQLRequest` can be passed to
any :class:`~pca_client.contracts.client.GraphQLClient`.
"""

from __future__ import annotations

from pca_client.claims import create_claim
from pca_client.contentmodel.cm_uri import CmUri
from pca_client.contentmodel.converters import ItemConverter, TaxonomyItemConverter
from pca_client.contentmodel.enums import (
    Ancestor,
    ContentIncludeMode,
    ContentNamespace,
    ContentType,
    DataModelType,
    DcpType,
    FilterItemType,
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
from pca_client.contracts.request import GraphQLRequest
from pca_client.query.builder import FRAGMENT_LIST_TAG, QueryBuilder


def fragment_name(item_type: FilterItemType) -> str:
    """``STRUCTURE_GROUP`` -> ``StructureGroupFields``."""
    return "".join(part.capitalize() for part in item_type.value.split("_")) + "Fields"


# ----------------------------------------------------------------------
# Pages
# ----------------------------------------------------------------------


def page_by_id(
    ns: ContentNamespace,
    publication_id: int,
    page_id: int,
    *,
    custom_meta_filter: str | None = None,
    content_include_mode: ContentIncludeMode = ContentIncludeMode.INCLUDE_DATA,
    context_data: ContextData | None = None,
    global_context_data: ContextData | None = None,
) -> GraphQLRequest:
    return (
        QueryBuilder()
        .with_query_resource("PageById", load_fragments=True)
        .with_namespace(ns)
        .with_publication_id(publication_id)
        .with_page_id(page_id)
        .with_custom_meta_filter(custom_meta_filter)
        .with_content_include_mode(content_include_mode)
        .with_context_data(global_context_data, context_data)
        .build()
    )


def page_by_url(
    ns: ContentNamespace,
    publication_id: int,
    url: str,
    *,
    custom_meta_filter: str | None = None,
    content_include_mode: ContentIncludeMode = ContentIncludeMode.INCLUDE_DATA,
    context_data: ContextData | None = None,
    global_context_data: ContextData | None = None,
) -> GraphQLRequest:
    return (
        QueryBuilder()
        .with_query_resource("PageByUrl", load_fragments=True)
        .with_namespace(ns)
        .with_publication_id(publication_id)
        .with_url(url)
        .with_custom_meta_filter(custom_meta_filter)
        .with_content_include_mode(content_include_mode)
        .with_context_data(global_context_data, context_data)
        .build()
    )


def page_by_cm_uri(
    cm_uri: CmUri,
    *,
    custom_meta_filter: str | None = None,
    content_include_mode: ContentIncludeMode = ContentIncludeMode.INCLUDE_DATA,
    context_data: ContextData | None = None,
    global_context_data: ContextData | None = None,
) -> GraphQLRequest:
    return (
        QueryBuilder()
        .with_query_resource("PageByCmUri", load_fragments=True)
        .with_cm_uri(cm_uri)
        .with_custom_meta_filter(custom_meta_filter)
        .with_content_include_mode(content_include_mode)
        .with_context_data(global_context_data, context_data)
        .build()
    )


def pages_by_url(
    ns: ContentNamespace,
    url: str,
    *,
    pagination: Pagination | None = None,
    custom_meta_filter: str | None = None,
    content_include_mode: ContentIncludeMode = ContentIncludeMode.INCLUDE_DATA,
    context_data: ContextData | None = None,
    global_context_data: ContextData | None = None,
) -> GraphQLRequest:
    return (
        QueryBuilder()
        .with_query_resource("PagesByUrl", load_fragments=True)
        .with_namespace(ns)
        .with_url(url)
        .with_pagination(pagination)
        .with_custom_meta_filter(custom_meta_filter)
        .with_content_include_mode(content_include_mode)
        .with_context_data(global_context_data, context_data)
        .build()
    )


# ----------------------------------------------------------------------
# Binary components
# ----------------------------------------------------------------------


def binary_component_by_id(
    ns: ContentNamespace,
    publication_id: int,
    binary_id: int,
    *,
    custom_meta_filter: str | None = None,
    context_data: ContextData | None = None,
    global_context_data: ContextData | None = None,
) -> GraphQLRequest:
    return (
        QueryBuilder()
        .with_query_resource("BinaryComponentById", load_fragments=True)
        .with_namespace(ns)
        .with_publication_id(publication_id)
        .with_binary_id(binary_id)
        .with_custom_meta_filter(custom_meta_filter)
        .with_context_data(global_context_data, context_data)
        .build()
    )


def binary_component_by_url(
    ns: ContentNamespace,
    publication_id: int,
    url: str,
    *,
    custom_meta_filter: str | None = None,
    context_data: ContextData | None = None,
    global_context_data: ContextData | None = None,
) -> GraphQLRequest:
    return (
        QueryBuilder()
        .with_query_resource("BinaryComponentByUrl", load_fragments=True)
        .with_namespace(ns)
        .with_publication_id(publication_id)
        .with_url(url)
        .with_variant_args(url)
        .with_custom_meta_filter(custom_meta_filter)
        .with_context_data(global_context_data, context_data)
        .build()
    )


def binary_component_by_cm_uri(
    cm_uri: CmUri,
    *,
    custom_meta_filter: str | None = None,
    context_data: ContextData | None = None,
    global_context_data: ContextData | None = None,
) -> GraphQLRequest:
    return (
        QueryBuilder()
        .with_query_resource("BinaryComponentByCmUri", load_fragments=True)
        .with_cm_uri(cm_uri)
        .with_custom_meta_filter(custom_meta_filter)
        .with_context_data(global_context_data, context_data)
        .build()
    )


# ----------------------------------------------------------------------
# Item queries
# ----------------------------------------------------------------------


def item_query(
    item_filter: InputItemFilter | None,
    sort: InputSortParam | None,
    pagination: Pagination | None,
    *,
    custom_meta_filter: str | None = None,
    content_include_mode: ContentIncludeMode = ContentIncludeMode.INCLUDE_DATA,
    include_container_items: bool = False,
    context_data: ContextData | None = None,
    global_context_data: ContextData | None = None,
) -> GraphQLRequest:
    builder = QueryBuilder().with_query_resource("ItemQuery", load_fragments=True)

    # Only the fragments matching the filtered item types are selected.
    if item_filter is not None and item_filter.item_types:
        fragments = dict.fromkeys(fragment_name(item_type) for item_type in item_filter.item_types)
        builder.replace_tag(FRAGMENT_LIST_TAG, "\n".join(f"...{fragment}" for fragment in fragments))

    return (
        builder.with_include_region("includeContainerItems", include_container_items)
        .with_pagination(pagination)
        .with_custom_meta_filter(custom_meta_filter)
        .with_content_include_mode(content_include_mode)
        .with_input_item_filter(item_filter)
        .with_input_sort_param(sort)
        .with_context_data(global_context_data, context_data)
        .with_converter(ItemConverter())
        .build()
    )


# ----------------------------------------------------------------------
# Publications
# ----------------------------------------------------------------------


def publication(
    ns: ContentNamespace,
    publication_id: int,
    *,
    custom_meta_filter: str | None = None,
    context_data: ContextData | None = None,
    global_context_data: ContextData | None = None,
) -> GraphQLRequest:
    return (
        QueryBuilder()
        .with_query_resource("Publication", load_fragments=True)
        .with_namespace(ns)
        .with_publication_id(publication_id)
        .with_custom_meta_filter(custom_meta_filter)
        .with_context_data(global_context_data, context_data)
        .build()
    )


def publications(
    ns: ContentNamespace,
    pagination: Pagination | None,
    publication_filter: InputPublicationFilter | None = None,
    *,
    custom_meta_filter: str | None = None,
    context_data: ContextData | None = None,
    global_context_data: ContextData | None = None,
) -> GraphQLRequest:
    return (
        QueryBuilder()
        .with_query_resource("Publications", load_fragments=True)
        .with_namespace(ns)
        .with_pagination(pagination)
        .with_input_publication_filter(publication_filter)
        .with_custom_meta_filter(custom_meta_filter)
        .with_context_data(global_context_data, context_data)
        .build()
    )


def publication_mapping(ns: ContentNamespace, url: str) -> GraphQLRequest:
    return (
        QueryBuilder()
        .with_query_resource("PublicationMapping", load_fragments=True)
        .with_namespace(ns)
        .with_variable("siteUrl", url)
        .build()
    )


# ----------------------------------------------------------------------
# Keywords and structure groups
# ----------------------------------------------------------------------


def keywords(
    ns: ContentNamespace,
    publication_id: int,
    pagination: Pagination | None = None,
    *,
    custom_meta_filter: str | None = None,
    context_data: ContextData | None = None,
    global_context_data: ContextData | None = None,
) -> GraphQLRequest:
    return (
        QueryBuilder()
        .with_query_resource("Keywords", load_fragments=True)
        .with_namespace(ns)
        .with_publication_id(publication_id)
        .with_pagination(pagination)
        .with_custom_meta_filter(custom_meta_filter)
        .with_context_data(global_context_data, context_data)
        .build()
    )


def keyword(
    ns: ContentNamespace,
    publication_id: int,
    category_id: int,
    keyword_id: int,
    *,
    custom_meta_filter: str | None = None,
    context_data: ContextData | None = None,
    global_context_data: ContextData | None = None,
) -> GraphQLRequest:
    return (
        QueryBuilder()
        .with_query_resource("Keyword", load_fragments=True)
        .with_namespace(ns)
        .with_publication_id(publication_id)
        .with_variable("categoryId", category_id)
        .with_variable("keywordId", keyword_id)
        .with_custom_meta_filter(custom_meta_filter)
        .with_context_data(global_context_data, context_data)
        .build()
    )


def structure_groups(
    ns: ContentNamespace,
    publication_id: int,
    pagination: Pagination | None = None,
    *,
    custom_meta_filter: str | None = None,
    context_data: ContextData | None = None,
    global_context_data: ContextData | None = None,
) -> GraphQLRequest:
    return (
        QueryBuilder()
        .with_query_resource("StructureGroups", load_fragments=True)
        .with_namespace(ns)
        .with_publication_id(publication_id)
        .with_pagination(pagination)
        .with_custom_meta_filter(custom_meta_filter)
        .with_context_data(global_context_data, context_data)
        .build()
    )


def structure_group(
    ns: ContentNamespace,
    publication_id: int,
    structure_group_id: int,
    *,
    custom_meta_filter: str | None = None,
    context_data: ContextData | None = None,
    global_context_data: ContextData | None = None,
) -> GraphQLRequest:
    return (
        QueryBuilder()
        .with_query_resource("StructureGroup", load_fragments=True)
        .with_namespace(ns)
        .with_publication_id(publication_id)
        .with_variable("structureGroupId", structure_group_id)
        .with_custom_meta_filter(custom_meta_filter)
        .with_context_data(global_context_data, context_data)
        .build()
    )


# ----------------------------------------------------------------------
# Component presentations
# ----------------------------------------------------------------------


def component_presentation(
    ns: ContentNamespace,
    publication_id: int,
    component_id: int,
    template_id: int,
    *,
    custom_meta_filter: str | None = None,
    content_include_mode: ContentIncludeMode = ContentIncludeMode.INCLUDE_DATA,
    context_data: ContextData | None = None,
    global_context_data: ContextData | None = None,
) -> GraphQLRequest:
    return (
        QueryBuilder()
        .with_query_resource("ComponentPresentation", load_fragments=True)
        .with_namespace(ns)
        .with_publication_id(publication_id)
        .with_variable("componentId", component_id)
        .with_variable("templateId", template_id)
        .with_custom_meta_filter(custom_meta_filter)
        .with_content_include_mode(content_include_mode)
        .with_context_data(global_context_data, context_data)
        .build()
    )


def component_presentations(
    ns: ContentNamespace,
    publication_id: int,
    presentation_filter: InputComponentPresentationFilter | None,
    sort: InputSortParam | None,
    pagination: Pagination | None,
    *,
    custom_meta_filter: str | None = None,
    content_include_mode: ContentIncludeMode = ContentIncludeMode.INCLUDE_DATA,
    context_data: ContextData | None = None,
    global_context_data: ContextData | None = None,
) -> GraphQLRequest:
    return (
        QueryBuilder()
        .with_query_resource("ComponentPresentations", load_fragments=True)
        .with_namespace(ns)
        .with_publication_id(publication_id)
        .with_input_component_presentation_filter(presentation_filter)
        .with_input_sort_param(sort)
        .with_pagination(pagination)
        .with_custom_meta_filter(custom_meta_filter)
        .with_content_include_mode(content_include_mode)
        .with_context_data(global_context_data, context_data)
        .build()
    )


# ----------------------------------------------------------------------
# Link resolution
# ----------------------------------------------------------------------


def resolve_page_link(
    ns: ContentNamespace, publication_id: int, page_id: int, render_relative_link: bool
) -> GraphQLRequest:
    return (
        QueryBuilder()
        .with_query_resource("ResolvePageLink", load_fragments=True)
        .with_namespace(ns)
        .with_publication_id(publication_id)
        .with_page_id(page_id)
        .with_render_relative_link(render_relative_link)
        .build()
    )


def resolve_component_link(
    ns: ContentNamespace,
    publication_id: int,
    component_id: int,
    source_page_id: int | None,
    exclude_component_template_id: int | None,
    render_relative_link: bool,
) -> GraphQLRequest:
    return (
        QueryBuilder()
        .with_query_resource("ResolveComponentLink", load_fragments=True)
        .with_namespace(ns)
        .with_publication_id(publication_id)
        .with_render_relative_link(render_relative_link)
        .with_variable("targetComponentId", component_id)
        .with_variable("sourcePageId", source_page_id)
        .with_variable("excludeComponentTemplateId", exclude_component_template_id)
        .build()
    )


def resolve_binary_link(
    ns: ContentNamespace,
    publication_id: int,
    binary_id: int,
    variant_id: str | None,
    render_relative_link: bool,
) -> GraphQLRequest:
    return (
        QueryBuilder()
        .with_query_resource("ResolveBinaryLink", load_fragments=True)
        .with_namespace(ns)
        .with_publication_id(publication_id)
        .with_render_relative_link(render_relative_link)
        .with_binary_id(binary_id)
        .with_variable("variantId", variant_id)
        .build()
    )


def resolve_dynamic_component_link(
    ns: ContentNamespace,
    publication_id: int,
    page_id: int,
    component_id: int,
    template_id: int,
    render_relative_link: bool,
) -> GraphQLRequest:
    return (
        QueryBuilder()
        .with_query_resource("ResolveDynamicComponentLink", load_fragments=True)
        .with_namespace(ns)
        .with_publication_id(publication_id)
        .with_render_relative_link(render_relative_link)
        .with_variable("targetPageId", page_id)
        .with_variable("targetComponentId", component_id)
        .with_variable("targetTemplateId", template_id)
        .build()
    )


# ----------------------------------------------------------------------
# Model service
# ----------------------------------------------------------------------


def page_model_data_by_id(
    ns: ContentNamespace,
    publication_id: int,
    page_id: int,
    content_type: ContentType,
    model_type: DataModelType,
    page_inclusion: PageInclusion,
    *,
    content_include_mode: ContentIncludeMode = ContentIncludeMode.INCLUDE_DATA,
    context_data: ContextData | None = None,
    global_context_data: ContextData | None = None,
) -> GraphQLRequest:
    return (
        QueryBuilder()
        .with_query_resource("PageModelById", load_fragments=True)
        .with_namespace(ns)
        .with_publication_id(publication_id)
        .with_page_id(page_id)
        .with_content_include_mode(content_include_mode)
        .with_context_data(global_context_data, context_data)
        .with_context_claim(create_claim(content_type))
        .with_context_claim(create_claim(model_type))
        .with_context_claim(create_claim(page_inclusion))
        .build()
    )


def page_model_data_by_url(
    ns: ContentNamespace,
    publication_id: int,
    url: str,
    content_type: ContentType,
    model_type: DataModelType,
    page_inclusion: PageInclusion,
    *,
    content_include_mode: ContentIncludeMode = ContentIncludeMode.INCLUDE_DATA,
    context_data: ContextData | None = None,
    global_context_data: ContextData | None = None,
) -> GraphQLRequest:
    return (
        QueryBuilder()
        .with_query_resource("PageModelByUrl", load_fragments=True)
        .with_namespace(ns)
        .with_publication_id(publication_id)
        .with_url(url)
        .with_content_include_mode(content_include_mode)
        .with_context_data(global_context_data, context_data)
        .with_context_claim(create_claim(content_type))
        .with_context_claim(create_claim(model_type))
        .with_context_claim(create_claim(page_inclusion))
        .build()
    )


def entity_model_data(
    ns: ContentNamespace,
    publication_id: int,
    entity_id: int,
    template_id: int,
    content_type: ContentType,
    model_type: DataModelType,
    dcp_type: DcpType,
    *,
    content_include_mode: ContentIncludeMode = ContentIncludeMode.INCLUDE_DATA,
    context_data: ContextData | None = None,
    global_context_data: ContextData | None = None,
) -> GraphQLRequest:
    return (
        QueryBuilder()
        .with_query_resource("EntityModelById", load_fragments=True)
        .with_namespace(ns)
        .with_publication_id(publication_id)
        .with_variable("componentId", entity_id)
        .with_variable("templateId", template_id)
        .with_content_include_mode(content_include_mode)
        .with_context_data(global_context_data, context_data)
        .with_context_claim(create_claim(content_type))
        .with_context_claim(create_claim(model_type))
        .with_context_claim(create_claim(dcp_type))
        .build()
    )


# ----------------------------------------------------------------------
# Sitemap / taxonomy
# ----------------------------------------------------------------------


def sitemap(
    ns: ContentNamespace,
    publication_id: int,
    descendant_levels: int,
    *,
    context_data: ContextData | None = None,
    global_context_data: ContextData | None = None,
) -> GraphQLRequest:
    return (
        QueryBuilder()
        .with_query_resource("Sitemap", load_fragments=True)
        .with_namespace(ns)
        .with_publication_id(publication_id)
        .with_descendant_levels(descendant_levels)
        .with_context_data(global_context_data, context_data)
        .with_converter(TaxonomyItemConverter())
        .build()
    )


def sitemap_subtree(
    ns: ContentNamespace,
    publication_id: int,
    taxonomy_node_id: str | None,
    descendant_levels: int,
    ancestor: Ancestor = Ancestor.NONE,
    *,
    context_data: ContextData | None = None,
    global_context_data: ContextData | None = None,
) -> GraphQLRequest:
    template = "SitemapSubtreeNoRecurse" if descendant_levels == 0 else "SitemapSubtree"
    return (
        QueryBuilder()
        .with_query_resource(template, load_fragments=True)
        .with_namespace(ns)
        .with_publication_id(publication_id)
        .with_variable("taxonomyNodeId", taxonomy_node_id)
        .with_variable("ancestor", ancestor)
        .with_context_data(global_context_data, context_data)
        .with_descendant_levels(descendant_levels)
        .with_converter(TaxonomyItemConverter())
        .build()
    )
