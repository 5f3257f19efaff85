"""Read-only lookups over asset trees.

URI comparisons are exact and case-sensitive. Traversals use an explicit
stack, so tree depth is not limited by the interpreter recursion limit. Trees
are assumed to be acyclic.
"""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping

from .types import Asset


def iter_assets(asset: Asset | None) -> Iterator[Asset]:
    """Yield ``asset`` and every descendant in depth-first pre-order."""
    if asset is None:
        return
    stack = [asset]
    while stack:
        node = stack.pop()
        yield node
        if node.children:
            stack.extend(child for child in reversed(node.children) if child is not None)


def find_child_asset_by_uri(asset: Asset | None, uri: str | None) -> Asset | None:
    """Return the direct child of ``asset`` whose URI equals ``uri``."""
    if asset is None or not uri or asset.children is None:
        return None
    return next((child for child in asset.children if child is not None and child.uri == uri), None)


def find_descendant_asset_by_uri(asset: Asset | None, uri: str | None) -> Asset | None:
    """Return the first node in ``asset``'s subtree whose URI equals ``uri``.

    The root counts as its own descendant, so it is matched before any child.
    """
    if asset is None or not uri:
        return None
    return next((node for node in iter_assets(asset) if node.uri == uri), None)


def find_all_descendant_assets_by_uri(
    asset_uri: str | None,
    root_uri: str | None,
    sep: str = os.sep,
) -> list[str]:
    """List the ancestor paths between ``asset_uri`` and ``root_uri``.

    Works purely on URI text, innermost first. Neither the starting URI nor
    ``root_uri`` is included. Returns an empty list when ``asset_uri`` does
    not start with ``root_uri``.
    """
    descendants: list[str] = []
    if not asset_uri or not root_uri or not asset_uri.startswith(root_uri):
        return descendants

    first_sep = root_uri.find(sep)
    root_prefix = root_uri[:first_sep] if first_sep >= 0 else ""

    current = asset_uri
    while current != root_uri:
        last_sep = current.rfind(sep)
        if last_sep == -1:
            break
        current = current[:last_sep]
        if current != root_uri and current != root_prefix:
            descendants.append(current)
    return descendants


def find_entry_point_assets(asset: Asset | None, accumulator: list[Asset] | None = None) -> list[Asset]:
    """Collect every node flagged ``entrypoint`` in pre-order.

    Matches are appended to ``accumulator`` (a new list when omitted), which
    is also the return value.
    """
    entry_points = accumulator if accumulator is not None else []
    for node in iter_assets(asset):
        if isinstance(node.attributes, Mapping) and node.attributes.get("entrypoint"):
            entry_points.append(node)
    return entry_points


__all__ = [
    "iter_assets",
    "find_child_asset_by_uri",
    "find_descendant_asset_by_uri",
    "find_all_descendant_assets_by_uri",
    "find_entry_point_assets",
]
