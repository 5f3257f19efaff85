"""Command-line front door for assettree.

Reads an asset-tree JSON document (a root object or an array of roots),
runs one tree operation, and prints the result as JSON on stdout.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from .asset_model import (
    Asset,
    asset_from_mapping,
    asset_to_mapping,
    filter_included_file_assets,
    find_all_descendant_assets_by_uri,
    find_descendant_asset_by_uri,
    find_entry_point_assets,
    get_all_notes,
    include_asset,
    recursive_absolute_to_relative_path,
    recursive_relative_to_absolute_path,
)
from .config import load_extra_ignore_names, load_log_level, load_path_separator, save_extra_ignore_names
from .logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _read_document(source: str) -> object:
    """Load JSON from ``source``; ``-`` reads stdin."""
    try:
        text = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"Cannot read {source}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON in {source}: {exc}") from exc


@dataclass(frozen=True)
class AssetDocument:
    """Root assets read from one JSON document plus its top-level shape."""

    roots: list[Asset]
    is_array: bool


def load_assets(source: str) -> AssetDocument:
    """Return the root assets described by the document at ``source``.

    ``is_array`` records whether the document was an array of roots, so
    results can be written back in the same shape.
    """
    document = _read_document(source)
    if isinstance(document, dict):
        raw_roots = [document]
    elif isinstance(document, list):
        raw_roots = document
    else:
        raise SystemExit(f"Asset tree in {source} must be a JSON object or array.")

    roots = [asset for asset in (asset_from_mapping(raw) for raw in raw_roots) if asset is not None]
    if len(roots) != len(raw_roots):
        logger.warning("skipped %d malformed root entries in %s", len(raw_roots) - len(roots), source)
    return AssetDocument(roots=roots, is_array=isinstance(document, list))


def _write_json(value: object) -> None:
    sys.stdout.write(json.dumps(value, indent=2) + "\n")


def _write_assets(assets: list[Asset | None], is_array: bool) -> None:
    """Write ``assets`` as an array, or as one object (``null`` when pruned)."""
    mappings = [asset_to_mapping(asset) for asset in assets if asset is not None]
    if is_array:
        _write_json(mappings)
    else:
        _write_json(mappings[0] if mappings else None)


def _cmd_relativize(args: argparse.Namespace) -> int:
    document = load_assets(args.tree)
    _write_assets(recursive_absolute_to_relative_path(args.root, document.roots) or [], document.is_array)
    return 0


def _cmd_absolutize(args: argparse.Namespace) -> int:
    document = load_assets(args.tree)
    _write_assets(recursive_relative_to_absolute_path(args.root, document.roots) or [], document.is_array)
    return 0


def _cmd_filter(args: argparse.Namespace) -> int:
    document = load_assets(args.tree)
    _write_assets([filter_included_file_assets(asset) for asset in document.roots], document.is_array)
    return 0


def _cmd_notes(args: argparse.Namespace) -> int:
    notes: list[dict[str, object]] = []
    for asset in load_assets(args.tree).roots:
        notes.extend(get_all_notes(asset))
    _write_json(notes)
    return 0


def _cmd_entrypoints(args: argparse.Namespace) -> int:
    entry_points: list[Asset] = []
    for asset in load_assets(args.tree).roots:
        find_entry_point_assets(asset, entry_points)
    _write_json([asset.uri for asset in entry_points])
    return 0


def _cmd_find(args: argparse.Namespace) -> int:
    for asset in load_assets(args.tree).roots:
        found = find_descendant_asset_by_uri(asset, args.uri)
        if found is not None:
            _write_json(asset_to_mapping(found))
            return 0
    logger.info("no asset with uri %s", args.uri)
    return 1


def _cmd_ancestors(args: argparse.Namespace) -> int:
    sep = args.sep if args.sep is not None else load_path_separator()
    _write_json(find_all_descendant_assets_by_uri(args.asset_uri, args.root_uri, sep=sep))
    return 0


def _cmd_include(args: argparse.Namespace) -> int:
    extra_ignored = load_extra_ignore_names()
    _write_json({uri: include_asset(uri, extra_ignored) for uri in args.uris})
    return 0


def _cmd_ignore_names(args: argparse.Namespace) -> int:
    names = set(load_extra_ignore_names())
    if args.add or args.remove:
        names.update(args.add)
        names.difference_update(args.remove)
        save_extra_ignore_names(list(names))
        names = set(load_extra_ignore_names())
    _write_json(sorted(names))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="assettree",
        description="Query, filter and re-root project asset trees stored as JSON.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: from config, else WARNING).")
    commands = parser.add_subparsers(dest="command", required=True)

    relativize = commands.add_parser("relativize", help="Make file/folder URIs relative to ROOT.")
    relativize.add_argument("root", help="Absolute project root path.")
    relativize.add_argument("tree", help="Asset-tree JSON file, or - for stdin.")
    relativize.set_defaults(handler=_cmd_relativize)

    absolutize = commands.add_parser("absolutize", help="Resolve file/folder URIs against ROOT.")
    absolutize.add_argument("root", help="Absolute project root path.")
    absolutize.add_argument("tree", help="Asset-tree JSON file, or - for stdin.")
    absolutize.set_defaults(handler=_cmd_absolutize)

    filter_cmd = commands.add_parser("filter", help="Drop assets the file handler marked as excluded.")
    filter_cmd.add_argument("tree", help="Asset-tree JSON file, or - for stdin.")
    filter_cmd.set_defaults(handler=_cmd_filter)

    notes = commands.add_parser("notes", help="List every note tagged with its asset URI.")
    notes.add_argument("tree", help="Asset-tree JSON file, or - for stdin.")
    notes.set_defaults(handler=_cmd_notes)

    entrypoints = commands.add_parser("entrypoints", help="List URIs of entry-point assets.")
    entrypoints.add_argument("tree", help="Asset-tree JSON file, or - for stdin.")
    entrypoints.set_defaults(handler=_cmd_entrypoints)

    find = commands.add_parser("find", help="Print the asset with URI (exit 1 when absent).")
    find.add_argument("tree", help="Asset-tree JSON file, or - for stdin.")
    find.add_argument("uri", help="Exact URI to look up.")
    find.set_defaults(handler=_cmd_find)

    ancestors = commands.add_parser("ancestors", help="List folder paths between ASSET_URI and ROOT_URI.")
    ancestors.add_argument("asset_uri")
    ancestors.add_argument("root_uri")
    ancestors.add_argument("--sep", choices=["/", "\\"], default=None, help="Path separator (default: from config, else OS).")
    ancestors.set_defaults(handler=_cmd_ancestors)

    include = commands.add_parser("include", help="Report whether each URI would be shown.")
    include.add_argument("uris", nargs="+", metavar="URI")
    include.set_defaults(handler=_cmd_include)

    ignore_names = commands.add_parser("ignore-names", help="Show or edit configured extra names to hide.")
    ignore_names.add_argument("--add", action="append", default=[], metavar="NAME", help="Hide NAME (repeatable).")
    ignore_names.add_argument("--remove", action="append", default=[], metavar="NAME", help="Stop hiding NAME (repeatable).")
    ignore_names.set_defaults(handler=_cmd_ignore_names)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run one asset-tree command.

    Exits with the command's status; ``find`` exits 1 when nothing matches.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level if args.log_level is not None else load_log_level())

    status = args.handler(args)
    if status:
        raise SystemExit(status)


if __name__ == "__main__":
    main()
