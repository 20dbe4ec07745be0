"""Content Manager URI parsing and formatting."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from pca_client.contentmodel.enums import ContentNamespace, ItemType

logger = logging.getLogger(__name__)

_CM_URI_PATTERN = re.compile(
    r"^(?P<prefix>[a-zA-Z]+):(?P<publication_id>\d+)-(?P<item_id>\d+)"
    r"(?:-(?P<item_type>\d+))?(?:-v(?P<version>\d+))?$"
)

_PREFIX_TO_NAMESPACE: dict[str, ContentNamespace] = {
    "tcm": ContentNamespace.SITES,
    "ish": ContentNamespace.DOCS,
}
_NAMESPACE_TO_PREFIX = {namespace: prefix for prefix, namespace in _PREFIX_TO_NAMESPACE.items()}


@dataclass(frozen=True, eq=False)
class CmUri:
    """Identifier of a Content Manager item, e.g. ``tcm:5-123-64`` or ``ish:1-2-16-v3``.

    Attributes:
        namespace: Namespace the item lives in (``tcm`` or ``ish`` prefix).
        publication_id: Owning publication.
        item_id: Item identifier within the publication.
        item_type: Content Manager item type; components when omitted.
        version: Optional version suffix (``-vN``).
    """

    namespace: ContentNamespace
    publication_id: int
    item_id: int
    item_type: ItemType = ItemType.COMPONENT
    version: int | None = None

    @classmethod
    def parse(cls, value: str) -> CmUri:
        """Parse *value*.

        Raises:
            ValueError: If the URI is malformed, or names an unknown namespace
                prefix or item type.
        """
        match = _CM_URI_PATTERN.match(value.strip())
        if match is None:
            raise ValueError(f"Unable to parse CM URI: {value!r}")

        prefix = match.group("prefix")
        namespace = _PREFIX_TO_NAMESPACE.get(prefix)
        if namespace is None:
            raise ValueError(f"Unable to resolve namespace {prefix!r}")

        raw_item_type = match.group("item_type")
        item_type = ItemType(int(raw_item_type)) if raw_item_type else ItemType.COMPONENT
        raw_version = match.group("version")
        return cls(
            namespace=namespace,
            publication_id=int(match.group("publication_id")),
            item_id=int(match.group("item_id")),
            item_type=item_type,
            version=int(raw_version) if raw_version else None,
        )

    @property
    def prefix(self) -> str:
        return _NAMESPACE_TO_PREFIX[self.namespace]

    @property
    def namespace_id(self) -> int:
        return int(self.namespace)

    def __str__(self) -> str:
        suffix = f"-v{self.version}" if self.version is not None else ""
        return f"{self.prefix}:{self.publication_id}-{self.item_id}-{int(self.item_type)}{suffix}"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            try:
                other = CmUri.parse(other)
            except ValueError:
                logger.debug("Unable to parse uri %r; treating it as different from %s", other, self)
                return False
        if not isinstance(other, CmUri):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))
