"""Display-name and extension helpers for assets."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from typing import assert_never

from .types import Asset, AssetType

_ANY_SEPARATOR = re.compile(r"[\\/]")


def _uri_of(item: object) -> str:
    """Accept a raw URI string or anything carrying a ``uri``."""
    if not item:
        return ""
    if isinstance(item, str):
        return item
    if isinstance(item, Mapping):
        uri = item.get("uri")
    else:
        uri = getattr(item, "uri", None)
    return uri if isinstance(uri, str) else ""


def get_asset_name_from_uri(item: str | Asset | Mapping[str, object] | None, sep: str = os.sep) -> str:
    """Return the last path segment (name plus extension) of a URI."""
    return _uri_of(item).split(sep)[-1]


def get_extension_from_uri(item: str | Asset | Mapping[str, object] | None) -> str:
    """Return the text after the last ``.`` of the file name, without the dot.

    Both ``/`` and ``\\`` separate segments. Names without a dot, or whose
    only dot is the first character (``.gitignore``), have no extension.
    """
    basename = _ANY_SEPARATOR.split(_uri_of(item))[-1]
    pos = basename.rfind(".")
    if basename == "" or pos < 1:
        return ""
    return basename[pos + 1 :]


def get_asset_name_for_tree(asset: Asset | None) -> str:
    """Format the label shown for ``asset`` in a tree view."""
    if asset is None:
        return ""

    match asset.type:
        case AssetType.URL:
            uri = asset.uri or ""
            if not asset.name or not asset.name.strip():
                return uri
            return f"{asset.name} ({uri})"
        case AssetType.FILE | AssetType.DIRECTORY | AssetType.FOLDER | None:
            return get_asset_name_from_uri(asset)
        case _:
            assert_never(asset.type)


__all__ = [
    "get_asset_name_from_uri",
    "get_extension_from_uri",
    "get_asset_name_for_tree",
]
