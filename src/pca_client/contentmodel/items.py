"""Response-side content types returned by the content-delivery backend."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import Field

from pca_client.contentmodel.base import ContentModel

NodeT = TypeVar("NodeT")


class Edge(ContentModel, Generic[NodeT]):
    cursor: str | None = None
    node: NodeT | None = None


class Connection(ContentModel, Generic[NodeT]):
    """Relay-style connection; only ``edges`` are exposed by the backend."""

    edges: list[Edge[NodeT]] = Field(default_factory=list)

    @property
    def nodes(self) -> list[NodeT]:
        return [edge.node for edge in self.edges if edge.node is not None]

    @property
    def end_cursor(self) -> str | None:
        return self.edges[-1].cursor if self.edges else None


class CustomMeta(ContentModel):
    id: str | None = None
    key: str
    value: str | None = None
    value_type: str | None = None


class RawContent(ContentModel):
    id: str | None = None
    charset: str | None = None
    content: str | None = None
    data: Any = None


class Item(ContentModel):
    """Root of all content items."""

    typename: str | None = Field(default=None, alias="__typename")
    id: str | None = None
    item_id: int | None = None
    item_type: int | None = None
    namespace_id: int | None = None
    publication_id: int | None = None
    owning_publication_id: int | None = None
    title: str | None = None
    creation_date: str | None = None
    updated_date: str | None = None
    initial_publish_date: str | None = None
    last_publish_date: str | None = None
    custom_metas: Connection[CustomMeta] | None = None


class Publication(Item):
    publication_key: str | None = None
    publication_url: str | None = None
    publication_path: str | None = None
    multimedia_url: str | None = None
    multimedia_path: str | None = None


class Page(Item):
    url: str | None = None
    page_template_id: int | None = None
    raw_content: RawContent | None = None


class StructureGroup(Item):
    directory: str | None = None


class Component(Item):
    schema_id: int | None = None
    multimedia: bool | None = None


class Keyword(Item):
    key: str | None = None
    description: str | None = None
    taxonomy_id: str | None = None


class Category(Item):
    description: str | None = None


class BinaryVariant(ContentModel):
    binary_id: int | None = None
    variant_id: str | None = None
    description: str | None = None
    download_url: str | None = None
    path: str | None = None
    type: str | None = None
    url: str | None = None


class BinaryComponent(Item):
    variants: Connection[BinaryVariant] | None = None


class ComponentPresentation(Item):
    component: Component | None = None
    raw_content: RawContent | None = None


class PublicationMapping(ContentModel):
    cm_uri: str | None = None
    domain: str | None = None
    environment_purpose: str | None = None
    namespace_id: int | None = None
    path: str | None = None
    port: str | None = None
    protocol: str | None = None
    publication_id: int | None = None


class SitemapItem(ContentModel):
    typename: str | None = Field(default=None, alias="__typename")
    id: str | None = None
    type: str | None = None
    title: str | None = None
    original_title: str | None = None
    url: str | None = None
    published_date: str | None = None
    visible: bool | None = None


class PageSitemapItem(SitemapItem):
    pass


class TaxonomySitemapItem(SitemapItem):
    key: str | None = None
    description: str | None = None
    has_child_nodes: bool | None = None
    classified_items_count: int | None = None
    items: list[SitemapItem] | None = None


ItemConnection = Connection[Item]
PageConnection = Connection[Page]
PublicationConnection = Connection[Publication]
ComponentPresentationConnection = Connection[ComponentPresentation]
KeywordConnection = Connection[Keyword]
StructureGroupConnection = Connection[StructureGroup]
