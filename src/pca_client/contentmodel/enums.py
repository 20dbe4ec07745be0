"""Enumerated types of the content-delivery schema."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class ContentNamespace(IntEnum):
    """Content Manager namespace; the value is the backend ``namespaceId``."""

    SITES = 1
    DOCS = 2


class ContentIncludeMode(StrEnum):
    EXCLUDE = "EXCLUDE"
    INCLUDE_DATA = "INCLUDE_DATA"
    INCLUDE_DATA_AND_RENDER = "INCLUDE_DATA_AND_RENDER"


class ContentType(StrEnum):
    RAW = "RAW"
    MODEL = "MODEL"


class DataModelType(StrEnum):
    R2 = "R2"
    DD4T = "DD4T"


class PageInclusion(StrEnum):
    INCLUDE = "INCLUDE"
    EXCLUDE = "EXCLUDE"


class DcpType(StrEnum):
    DEFAULT = "DEFAULT"
    HIGHEST_PRIORITY = "HIGHEST_PRIORITY"


class FilterItemType(StrEnum):
    PUBLICATION = "PUBLICATION"
    STRUCTURE_GROUP = "STRUCTURE_GROUP"
    PAGE = "PAGE"
    COMPONENT = "COMPONENT"
    KEYWORD = "KEYWORD"
    CATEGORY = "CATEGORY"


class Ancestor(StrEnum):
    NONE = "NONE"
    INCLUDE = "INCLUDE"
    ONLY = "ONLY"


class ClaimValueType(StrEnum):
    STRING = "STRING"
    INT = "INT"
    LONG = "LONG"
    FLOAT = "FLOAT"
    DOUBLE = "DOUBLE"
    BOOLEAN = "BOOLEAN"
    DATE = "DATE"


class SortFieldType(StrEnum):
    CREATION_DATE = "CREATION_DATE"
    UPDATED_DATE = "UPDATED_DATE"
    LAST_PUBLISH_DATE = "LAST_PUBLISH_DATE"
    INITIAL_PUBLISH_DATE = "INITIAL_PUBLISH_DATE"
    TITLE = "TITLE"


class SortOrderType(StrEnum):
    ASCENDING = "Ascending"
    DESCENDING = "Descending"


class ItemType(IntEnum):
    """Content Manager item type identifiers as used in CM URIs."""

    PUBLICATION = 1
    FOLDER = 2
    STRUCTURE_GROUP = 4
    SCHEMA = 8
    COMPONENT = 16
    COMPONENT_TEMPLATE = 32
    PAGE = 64
    PAGE_TEMPLATE = 128
    TARGET_GROUP = 256
    CATEGORY = 512
    KEYWORD = 1024
    TEMPLATE_BUILDING_BLOCK = 2048
    BUSINESS_PROCESS_TYPE = 4096
    VIRTUAL_FOLDER = 8192
