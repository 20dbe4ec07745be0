"""Result converters that map raw JSON fragments onto content-model types.

A converter is any callable taking the extracted JSON fragment and returning
the typed result. Requests carry at most one converter; the facade applies it
after unwrapping the response envelope.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import TypeAdapter, ValidationError

from pca_client.contentmodel.items import (
    BinaryComponent,
    Category,
    Component,
    ComponentPresentation,
    Edge,
    Item,
    ItemConnection,
    Keyword,
    Page,
    PageSitemapItem,
    Publication,
    SitemapItem,
    StructureGroup,
    TaxonomySitemapItem,
)
from pca_client.contracts.exceptions import ResponseMappingError


class ItemConverter:
    """Resolves polymorphic item nodes to concrete types by ``__typename``."""

    ITEM_TYPES: ClassVar[dict[str, type[Item]]] = {
        "Page": Page,
        "Publication": Publication,
        "Component": Component,
        "ComponentPresentation": ComponentPresentation,
        "Keyword": Keyword,
        "Category": Category,
        "StructureGroup": StructureGroup,
        "BinaryComponent": BinaryComponent,
    }

    def __call__(self, payload: Any) -> Any:
        if payload is None:
            return None
        if isinstance(payload, list):
            return [self.convert_item(node) for node in payload]
        if isinstance(payload, dict) and "edges" in payload:
            return self.convert_connection(payload)
        return self.convert_item(payload)

    def convert_connection(self, payload: dict[str, Any]) -> ItemConnection:
        edges: list[Edge[Item]] = []
        for edge in payload.get("edges") or []:
            if not isinstance(edge, dict):
                continue
            node = edge.get("node")
            edges.append(
                Edge[Item](cursor=edge.get("cursor"), node=self.convert_item(node) if node is not None else None)
            )
        return ItemConnection(edges=edges)

    def convert_item(self, node: Any) -> Item:
        if not isinstance(node, dict):
            raise ResponseMappingError(f"Expected an item object, got {type(node).__name__}")
        model = self.ITEM_TYPES.get(str(node.get("__typename", "")), Item)
        try:
            return model.model_validate(node)
        except ValidationError as exc:
            raise ResponseMappingError(f"Unable to map item to {model.__name__}: {exc}") from exc


class TaxonomyItemConverter:
    """Maps sitemap nodes, recursing through taxonomy ``items``."""

    def __call__(self, payload: Any) -> Any:
        if payload is None:
            return None
        if isinstance(payload, list):
            return [self.convert_node(node) for node in payload]
        return self.convert_node(payload)

    def convert_node(self, node: Any) -> SitemapItem:
        if not isinstance(node, dict):
            raise ResponseMappingError(f"Expected a sitemap object, got {type(node).__name__}")

        typename = node.get("__typename")
        try:
            if typename == "TaxonomySitemapItem" or (typename is None and "items" in node):
                children = node.get("items")
                converted = dict(node)
                if children is not None:
                    converted["items"] = [self.convert_node(child) for child in children]
                return TaxonomySitemapItem.model_validate(converted)
            if typename == "PageSitemapItem":
                return PageSitemapItem.model_validate(node)
            return SitemapItem.model_validate(node)
        except ValidationError as exc:
            raise ResponseMappingError(f"Unable to map sitemap node: {exc}") from exc


def model_converter(model: Any) -> Any:
    """Build a converter validating payloads as *model* (a type or a ``list[...]`` alias)."""
    adapter: TypeAdapter[Any] = TypeAdapter(model)

    def convert(payload: Any) -> Any:
        if payload is None:
            return None
        try:
            return adapter.validate_python(payload)
        except ValidationError as exc:
            raise ResponseMappingError(f"Unable to map result to {model!r}: {exc}") from exc

    return convert
