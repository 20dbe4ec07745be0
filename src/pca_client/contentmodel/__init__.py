"""Typed content model of the content-delivery backend.

Re-exports the public model classes for convenient access::

    from pca_client.contentmodel import ContentNamespace, Page, Pagination
"""

from pca_client.contentmodel.cm_uri import CmUri
from pca_client.contentmodel.converters import ItemConverter, TaxonomyItemConverter, model_converter
from pca_client.contentmodel.enums import (
    Ancestor,
    ClaimValueType,
    ContentIncludeMode,
    ContentNamespace,
    ContentType,
    DataModelType,
    DcpType,
    FilterItemType,
    ItemType,
    PageInclusion,
    SortFieldType,
    SortOrderType,
)
from pca_client.contentmodel.inputs import (
    ClaimValue,
    ContextData,
    InputComponentPresentationFilter,
    InputCustomMetaCriteria,
    InputItemFilter,
    InputKeywordCriteria,
    InputPublicationFilter,
    InputSchemaCriteria,
    InputSortParam,
    InputTemplateCriteria,
    Pagination,
)
from pca_client.contentmodel.items import (
    BinaryComponent,
    BinaryVariant,
    Category,
    Component,
    ComponentPresentation,
    ComponentPresentationConnection,
    Connection,
    CustomMeta,
    Edge,
    Item,
    ItemConnection,
    Keyword,
    KeywordConnection,
    Page,
    PageConnection,
    PageSitemapItem,
    Publication,
    PublicationConnection,
    PublicationMapping,
    RawContent,
    SitemapItem,
    StructureGroup,
    StructureGroupConnection,
    TaxonomySitemapItem,
)

__all__ = [
    "Ancestor",
    "BinaryComponent",
    "BinaryVariant",
    "Category",
    "ClaimValue",
    "ClaimValueType",
    "CmUri",
    "Component",
    "ComponentPresentation",
    "ComponentPresentationConnection",
    "Connection",
    "ContentIncludeMode",
    "ContentNamespace",
    "ContentType",
    "ContextData",
    "CustomMeta",
    "DataModelType",
    "DcpType",
    "Edge",
    "FilterItemType",
    "InputComponentPresentationFilter",
    "InputCustomMetaCriteria",
    "InputItemFilter",
    "InputKeywordCriteria",
    "InputPublicationFilter",
    "InputSchemaCriteria",
    "InputSortParam",
    "InputTemplateCriteria",
    "Item",
    "ItemConnection",
    "ItemConverter",
    "ItemType",
    "Keyword",
    "KeywordConnection",
    "Page",
    "PageConnection",
    "PageInclusion",
    "PageSitemapItem",
    "Pagination",
    "Publication",
    "PublicationConnection",
    "PublicationMapping",
    "RawContent",
    "SitemapItem",
    "SortFieldType",
    "SortOrderType",
    "StructureGroup",
    "StructureGroupConnection",
    "TaxonomyItemConverter",
    "TaxonomySitemapItem",
    "model_converter",
]
