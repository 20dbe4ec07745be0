"""Command-line interface for pca-client."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Any

from pydantic import BaseModel
from rich.console import Console

from pca_client import (
    AuthenticationError,
    CmUri,
    ConfigError,
    ContentIncludeMode,
    ContentNamespace,
    GraphQLClientError,
    PublicContentApi,
    QueryBuilder,
    QueryBuilderError,
    QueryTemplateError,
    ResponseMappingError,
    create_public_content_api,
    load_config,
)

_NAMESPACES = {"sites": ContentNamespace.SITES, "docs": ContentNamespace.DOCS}


def _package_version() -> str:
    try:
        return version("pca-client")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pca")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", required=True, help="Path to pca-client.json")
    common.add_argument("--namespace", choices=sorted(_NAMESPACES), default="sites", help="Content namespace")
    common.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    page_parser = subparsers.add_parser("page", parents=[common], help="Fetch a page")
    page_parser.add_argument("--publication-id", type=int, help="Publication id (with --page-id or --url)")
    target = page_parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--page-id", type=int, help="Page item id")
    target.add_argument("--url", help="Page URL")
    target.add_argument("--cm-uri", help="Page CM URI, e.g. tcm:5-123-64")
    page_parser.add_argument(
        "--content",
        choices=[mode.value for mode in ContentIncludeMode],
        default=ContentIncludeMode.INCLUDE_DATA.value,
        help="Raw content inclusion",
    )

    publication_parser = subparsers.add_parser("publication", parents=[common], help="Fetch a publication")
    publication_parser.add_argument("--publication-id", type=int, required=True)

    link_parser = subparsers.add_parser("resolve-link", parents=[common], help="Resolve a page, component or binary link")
    link_parser.add_argument("kind", choices=["page", "component", "binary"])
    link_parser.add_argument("--publication-id", type=int, required=True)
    link_parser.add_argument("--id", dest="item_id", type=int, required=True, help="Target item id")
    link_parser.add_argument("--absolute", action="store_true", help="Render an absolute link")

    sitemap_parser = subparsers.add_parser("sitemap", parents=[common], help="Fetch the sitemap or a subtree")
    sitemap_parser.add_argument("--publication-id", type=int, required=True)
    sitemap_parser.add_argument("--node-id", help="Taxonomy node id for a subtree")
    sitemap_parser.add_argument("--levels", type=int, default=1, help="Descendant levels (-1 for maximum)")

    query_parser = subparsers.add_parser("query", parents=[common], help="Execute a named query template")
    query_parser.add_argument("name", help="Query template name, e.g. PageById")
    query_parser.add_argument("--variables", default="{}", help="Query variables as a JSON object")

    return parser


def _to_json_data(result: Any) -> Any:
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(result, list):
        return [_to_json_data(entry) for entry in result]
    return result


async def _dispatch(api: PublicContentApi, args: argparse.Namespace) -> Any:
    ns = _NAMESPACES[args.namespace]

    if args.command == "page":
        mode = ContentIncludeMode(args.content)
        if args.cm_uri:
            return await api.get_page_by_cm_uri(_parse_cm_uri(args.cm_uri), content_include_mode=mode)
        if args.publication_id is None:
            raise ConfigError("--publication-id is required with --page-id or --url")
        if args.url:
            return await api.get_page_by_url(ns, args.publication_id, args.url, content_include_mode=mode)
        return await api.get_page(ns, args.publication_id, args.page_id, content_include_mode=mode)

    if args.command == "publication":
        return await api.get_publication(ns, args.publication_id)

    if args.command == "resolve-link":
        relative = not args.absolute
        if args.kind == "page":
            return await api.resolve_page_link(ns, args.publication_id, args.item_id, relative)
        if args.kind == "component":
            return await api.resolve_component_link(ns, args.publication_id, args.item_id, render_relative_link=relative)
        return await api.resolve_binary_link(ns, args.publication_id, args.item_id, render_relative_link=relative)

    if args.command == "sitemap":
        if args.node_id:
            return await api.get_sitemap_subtree(ns, args.publication_id, args.node_id, args.levels)
        return await api.get_sitemap(ns, args.publication_id, args.levels)

    try:
        variables = json.loads(args.variables)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"--variables is not valid JSON: {exc}") from exc
    if not isinstance(variables, dict):
        raise ConfigError("--variables must be a JSON object")
    builder = QueryBuilder().with_query_resource(args.name, load_fragments=True)
    for name, value in variables.items():
        builder.with_variable(name, value)
    response = await api.execute(builder.build())
    return response.model_dump(mode="json", exclude_none=True)


def _parse_cm_uri(raw: str) -> CmUri:
    try:
        return CmUri.parse(raw)
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc


async def _run(args: argparse.Namespace) -> Any:
    config = load_config(args.config)
    async with await create_public_content_api(config) as api:
        return await _dispatch(api, args)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        result = asyncio.run(_run(args))
        Console().print_json(data=_to_json_data(result))
        return 0
    except (ConfigError, QueryTemplateError, QueryBuilderError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (AuthenticationError, GraphQLClientError, ResponseMappingError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except Exception as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
