import pytest

from pca_client.contentmodel import CmUri, ContentNamespace, ItemType


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("tcm:5-123-64", CmUri(ContentNamespace.SITES, 5, 123, ItemType.PAGE)),
        ("tcm:5-123", CmUri(ContentNamespace.SITES, 5, 123, ItemType.COMPONENT)),
        ("ish:1-2-16-v3", CmUri(ContentNamespace.DOCS, 1, 2, ItemType.COMPONENT, version=3)),
        ("  tcm:0-4-1 ", CmUri(ContentNamespace.SITES, 0, 4, ItemType.PUBLICATION)),
    ],
)
def test_parse(raw: str, expected: CmUri) -> None:
    parsed = CmUri.parse(raw)

    assert parsed.namespace == expected.namespace
    assert parsed.publication_id == expected.publication_id
    assert parsed.item_id == expected.item_id
    assert parsed.item_type == expected.item_type
    assert parsed.version == expected.version


@pytest.mark.parametrize("raw", ["", "tcm:", "tcm:a-1", "5-123-64", "tcm:5-123-64-x", "tcm:5-123-3"])
def test_parse_rejects_malformed_uris(raw: str) -> None:
    with pytest.raises(ValueError):
        CmUri.parse(raw)


def test_parse_rejects_unknown_prefix() -> None:
    with pytest.raises(ValueError, match="namespace"):
        CmUri.parse("abc:5-123-64")


def test_str_always_includes_item_type() -> None:
    assert str(CmUri.parse("tcm:5-123")) == "tcm:5-123-16"
    assert str(CmUri.parse("ish:1-2-64-v7")) == "ish:1-2-64-v7"


def test_prefix_and_namespace_id() -> None:
    uri = CmUri(ContentNamespace.DOCS, 3, 9, ItemType.PAGE)

    assert uri.prefix == "ish"
    assert uri.namespace_id == 2


def test_equality_with_strings_and_uris() -> None:
    uri = CmUri.parse("tcm:5-123-16")

    assert uri == "tcm:5-123"
    assert uri == CmUri(ContentNamespace.SITES, 5, 123)
    assert uri != "tcm:5-124"
    assert uri != "not a uri"
    assert uri != 42


def test_hash_matches_canonical_form() -> None:
    assert len({CmUri.parse("tcm:5-123"), CmUri.parse("tcm:5-123-16")}) == 1
