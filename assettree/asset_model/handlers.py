"""Handler metadata lookup and the file-handler inclusion filter.

Handlers annotate assets with entries shaped ``{"id": ..., "include": ...}``
plus handler-specific fields. Presence of the file handler's entry is a
three-way signal: absent means not classified yet (keep), ``include`` true
means keep, ``include`` false drops the node and its whole subtree.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import replace

from .types import Asset

FILE_HANDLER_ID = "StatWrap.FileHandler"


def get_handler_metadata(
    handler_id: str | None,
    metadata: Sequence[Mapping[str, object]] | None,
) -> Mapping[str, object] | None:
    """Return the first metadata entry produced by ``handler_id``."""
    if not metadata:
        return None
    if not handler_id or not handler_id.strip():
        return None
    return next((entry for entry in metadata if isinstance(entry, Mapping) and entry.get("id") == handler_id), None)


def _excluded_by_file_handler(asset: Asset) -> bool:
    entry = get_handler_metadata(FILE_HANDLER_ID, asset.metadata)
    return entry is not None and not entry.get("include")


def filter_included_file_assets(asset: Asset | None) -> Asset | None:
    """Return ``asset`` pruned to the nodes the file handler marks includable.

    Nodes that keep a children list are shallow copies with a fresh list, so
    the input tree is never modified. Leaves without a children list are
    returned as-is. Returns ``None`` when the root itself is excluded.
    """
    if asset is None or _excluded_by_file_handler(asset):
        return None
    if asset.children is None:
        return asset

    filtered = replace(asset, children=[])
    stack = [(asset, filtered)]
    while stack:
        source, target = stack.pop()
        for child in source.children:
            if child is None or _excluded_by_file_handler(child):
                continue
            if child.children is None:
                target.children.append(child)
                continue
            child_copy = replace(child, children=[])
            target.children.append(child_copy)
            stack.append((child, child_copy))
    return filtered


__all__ = [
    "FILE_HANDLER_ID",
    "get_handler_metadata",
    "filter_included_file_assets",
]
