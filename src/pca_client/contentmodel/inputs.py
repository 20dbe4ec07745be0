"""Request-side input types: claims, context data, paging, and filters."""

from __future__ import annotations

from pydantic import Field

from pca_client.contentmodel.base import ContentModel
from pca_client.contentmodel.enums import ClaimValueType, FilterItemType, SortFieldType, SortOrderType


class ClaimValue(ContentModel):
    """A key/value assertion that steers server-side content resolution."""

    uri: str
    value: str
    type: ClaimValueType = ClaimValueType.STRING


class ContextData(ContentModel):
    """An ordered bag of claim values sent with a request."""

    claim_values: list[ClaimValue] = Field(default_factory=list)

    def merged(self, *others: ContextData | None) -> ContextData:
        """Return a new instance holding these claims followed by each of *others*."""
        claims = list(self.claim_values)
        for other in others:
            if other is not None:
                claims.extend(other.claim_values)
        return ContextData(claim_values=claims)


class Pagination(ContentModel):
    first: int | None = None
    after: str | None = None


class InputCustomMetaCriteria(ContentModel):
    key: str
    value: str | None = None
    value_type: str | None = None
    scope: str | None = None


class InputSchemaCriteria(ContentModel):
    id: int | None = None
    title: str | None = None


class InputTemplateCriteria(ContentModel):
    id: int | None = None
    title: str | None = None


class InputKeywordCriteria(ContentModel):
    category: str | None = None
    category_id: int | None = None
    key: str | None = None
    keyword_id: int | None = None
    namespace_id: int | None = None
    publication_id: int | None = None


class InputItemFilter(ContentModel):
    item_types: list[FilterItemType] | None = None
    namespace_ids: list[int] | None = None
    publication_ids: list[int] | None = None
    custom_meta: InputCustomMetaCriteria | None = None
    schema_: InputSchemaCriteria | None = Field(default=None, alias="schema")
    keyword: InputKeywordCriteria | None = None
    and_: list[InputItemFilter] | None = Field(default=None, alias="and")
    or_: list[InputItemFilter] | None = Field(default=None, alias="or")


class InputSortParam(ContentModel):
    order: SortOrderType = SortOrderType.ASCENDING
    sort_by: SortFieldType = SortFieldType.TITLE


class InputPublicationFilter(ContentModel):
    custom_meta: InputCustomMetaCriteria | None = None


class InputComponentPresentationFilter(ContentModel):
    custom_meta: InputCustomMetaCriteria | None = None
    keyword: InputKeywordCriteria | None = None
    schema_: InputSchemaCriteria | None = Field(default=None, alias="schema")
    template: InputTemplateCriteria | None = None
    and_: list[InputComponentPresentationFilter] | None = Field(default=None, alias="and")
    or_: list[InputComponentPresentationFilter] | None = Field(default=None, alias="or")
