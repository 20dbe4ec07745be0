"""Named GraphQL query templates packaged with the client.

Templates live in ``pca_client/queries/<Name>.graphql`` and fragments in
``pca_client/queries/fragments/<Name>.graphql``. Templates may contain three
kinds of markers that the query builder resolves:

* ``@tag`` markers, replaced with builder-provided text,
* ``#region <name>`` / ``#endregion`` line pairs, kept or stripped as a unit,
* fragment spreads (``...Name``), resolved to packaged fragment definitions.

Fragment spreads are read from the parsed document, so text inside string
values and comments never resolves a fragment.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from functools import lru_cache
from importlib import resources
from typing import Any

from graphql import FragmentDefinitionNode, FragmentSpreadNode, GraphQLSyntaxError, Visitor, parse, visit

from pca_client.contracts.exceptions import QueryTemplateError

logger = logging.getLogger(__name__)

_QUERY_PACKAGE = "pca_client.queries"
_FRAGMENT_DIR = "fragments"
_TEMPLATE_SUFFIX = ".graphql"

_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_TAG = re.compile(r"@([A-Za-z_][A-Za-z0-9_]*)")
_REGION_START = re.compile(r"^\s*#region\s+([A-Za-z_][A-Za-z0-9_]*)\s*$")
_REGION_END = re.compile(r"^\s*#endregion\b")


def _read_resource(*parts: str) -> str:
    resource = resources.files(_QUERY_PACKAGE).joinpath(*parts)
    try:
        return resource.read_text(encoding="utf-8")
    except (FileNotFoundError, IsADirectoryError) as exc:
        raise QueryTemplateError(f"Query resource not found: {'/'.join(parts)}") from exc


@lru_cache(maxsize=None)
def load_query(name: str) -> str:
    """Return the text of the named query template."""
    if not _NAME.match(name):
        raise QueryTemplateError(f"Invalid query template name: {name!r}")
    logger.debug("Loading query template %s", name)
    return _read_resource(f"{name}{_TEMPLATE_SUFFIX}")


@lru_cache(maxsize=None)
def load_fragment(name: str) -> str:
    """Return the text of the named fragment definition."""
    if not _NAME.match(name):
        raise QueryTemplateError(f"Invalid fragment name: {name!r}")
    logger.debug("Loading fragment %s", name)
    return _read_resource(_FRAGMENT_DIR, f"{name}{_TEMPLATE_SUFFIX}")


def apply_tags(document: str, tags: Mapping[str, str]) -> str:
    """Replace each ``@name`` marker whose name is in *tags*; other ``@`` tokens are kept."""

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        return tags[name] if name in tags else match.group(0)

    return _TAG.sub(replace, document)


def apply_regions(document: str, regions: Mapping[str, bool]) -> str:
    """Keep or strip ``#region`` blocks; regions missing from *regions* are kept.

    Region markers are always removed. Nested regions are stripped together
    with their enclosing region.
    """
    output: list[str] = []
    stack: list[bool] = []
    for line in document.splitlines():
        start = _REGION_START.match(line)
        if start:
            stack.append(regions.get(start.group(1), True))
            continue
        if _REGION_END.match(line):
            if not stack:
                raise QueryTemplateError("Unbalanced #endregion marker in query template")
            stack.pop()
            continue
        if all(stack):
            output.append(line)
    if stack:
        raise QueryTemplateError("Unterminated #region marker in query template")
    return "\n".join(output) + ("\n" if document.endswith("\n") else "")


class _FragmentCollector(Visitor):
    def __init__(self) -> None:
        super().__init__()
        self.spreads: list[str] = []
        self.definitions: set[str] = set()

    def enter_fragment_spread(self, node: FragmentSpreadNode, *_args: Any) -> None:
        self.spreads.append(node.name.value)

    def enter_fragment_definition(self, node: FragmentDefinitionNode, *_args: Any) -> None:
        self.definitions.add(node.name.value)


def _collect_fragments(document: str) -> _FragmentCollector:
    try:
        ast = parse(document, no_location=True)
    except GraphQLSyntaxError as exc:
        raise QueryTemplateError(f"Invalid GraphQL document: {exc.message}") from exc
    collector = _FragmentCollector()
    visit(ast, collector)
    return collector


def fragment_spreads(document: str) -> list[str]:
    """Return the named fragment spreads in *document*, in first-use order."""
    return list(dict.fromkeys(_collect_fragments(document).spreads))


def resolve_fragments(document: str, render: Callable[[str], str] | None = None) -> str:
    """Append definitions for every fragment *document* uses, transitively, once each.

    *render* is applied to each loaded fragment before it is parsed and
    appended, so fragments receive the same tag and region treatment as the
    document itself.
    """
    collector = _collect_fragments(document)
    defined = set(collector.definitions)
    pending = [name for name in dict.fromkeys(collector.spreads) if name not in defined]
    definitions: list[str] = []
    while pending:
        name = pending.pop(0)
        if name in defined:
            continue
        fragment = load_fragment(name)
        if render is not None:
            fragment = render(fragment)
        defined.add(name)
        definitions.append(fragment.strip())
        pending.extend(spread for spread in fragment_spreads(fragment) if spread not in defined)

    if not definitions:
        return document
    return "\n\n".join([document.rstrip(), *definitions]) + "\n"
