"""Model-service context claims."""

from __future__ import annotations

from enum import Enum

from pca_client.contentmodel.enums import ClaimValueType, ContentType, DataModelType, DcpType, PageInclusion
from pca_client.contentmodel.inputs import ClaimValue

MODEL_TYPE_URI = "dxa:modelservice:model:type"
CONTENT_TYPE_URI = "dxa:modelservice:content:type"
PAGE_INCLUDE_REGIONS_URI = "dxa:modelservice:model:page:includeregions"
ENTITY_DCP_TYPE_URI = "dxa:modelservice:model:entity:dcptype"

_CLAIM_URIS: dict[type[Enum], str] = {
    ContentType: CONTENT_TYPE_URI,
    DataModelType: MODEL_TYPE_URI,
    PageInclusion: PAGE_INCLUDE_REGIONS_URI,
    DcpType: ENTITY_DCP_TYPE_URI,
}


def create_claim(value: ContentType | DataModelType | PageInclusion | DcpType) -> ClaimValue:
    """Build the string claim the model service expects for *value*."""
    uri = _CLAIM_URIS.get(type(value))
    if uri is None:
        raise TypeError(f"No model-service claim for {type(value).__name__}")
    return ClaimValue(uri=uri, type=ClaimValueType.STRING, value=value.name)
