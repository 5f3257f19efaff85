"""Domain datatypes for project asset trees.

An asset is one node of a research project's structure: a file, a real
directory, a synthetic folder grouping, or an external URL resource.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import assert_never

EXTERNAL_RESOURCES_URI = "External Resources"


class AssetType(str, Enum):
    """Closed set of asset kinds."""

    FILE = "file"
    DIRECTORY = "directory"
    FOLDER = "folder"
    URL = "url"


@dataclass
class Asset:
    """One node in the asset tree.

    ``children is None`` means the node carries no children list at all, which
    is distinct from an empty list. ``extra`` holds crawler/handler fields the
    model does not name so that copies never lose them.
    """

    uri: str | None = None
    type: AssetType | None = None
    name: str | None = None
    attributes: dict[str, object] | None = None
    metadata: list[dict[str, object]] | None = None
    notes: list[dict[str, object]] | None = None
    children: list["Asset"] | None = None
    extra: dict[str, object] | None = None


def _clone_node(asset: Asset) -> Asset:
    """Copy every field of one node except ``children``."""
    return Asset(
        uri=asset.uri,
        type=asset.type,
        name=asset.name,
        attributes=copy.deepcopy(asset.attributes),
        metadata=copy.deepcopy(asset.metadata),
        notes=copy.deepcopy(asset.notes),
        children=None,
        extra=copy.deepcopy(asset.extra),
    )


def clone_asset(asset: Asset) -> Asset:
    """Return a structurally independent copy of ``asset`` and its subtree."""
    root = _clone_node(asset)
    stack = [(asset, root)]
    while stack:
        source, target = stack.pop()
        if source.children is None:
            continue
        target.children = []
        for child in source.children:
            if child is None:
                continue
            child_copy = _clone_node(child)
            target.children.append(child_copy)
            stack.append((child, child_copy))
    return root


def is_archived(asset: Asset | None) -> bool:
    """Return whether the asset has the ``archived`` attribute set to ``True``."""
    if asset is None or not isinstance(asset.attributes, Mapping):
        return False
    return asset.attributes.get("archived") is True


def is_external_asset(asset: Asset | None) -> bool:
    """Return whether ``asset`` is an external (URL) resource."""
    if asset is None:
        return False
    match asset.type:
        case AssetType.URL:
            return True
        case AssetType.FILE | AssetType.DIRECTORY | AssetType.FOLDER | None:
            return False
        case _:
            assert_never(asset.type)


def should_convert_path(asset: Asset | None) -> bool:
    """Return whether ``asset.uri`` is a filesystem path eligible for conversion."""
    if asset is None:
        return False
    match asset.type:
        case AssetType.FILE | AssetType.DIRECTORY | AssetType.FOLDER:
            return True
        case AssetType.URL | None:
            return False
        case _:
            assert_never(asset.type)


def create_empty_external_assets() -> Asset:
    """Return an empty container for external resources, shaped like project assets."""
    return Asset(uri=EXTERNAL_RESOURCES_URI, type=AssetType.FOLDER, children=[])


__all__ = [
    "EXTERNAL_RESOURCES_URI",
    "AssetType",
    "Asset",
    "clone_asset",
    "is_archived",
    "is_external_asset",
    "should_convert_path",
    "create_empty_external_assets",
]
