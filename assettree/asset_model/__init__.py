"""Domain model and algorithms for project asset trees.

This package contains non-UI tree primitives:
- asset datatypes (file, directory, folder, URL) with nested children
- absolute/relative URI conversion for single assets and whole trees
- lookups by URI, ancestor-path enumeration and entry-point collection
- handler metadata access and the file-handler inclusion filter
- note flattening and display-name helpers
"""

from __future__ import annotations

from .types import (
    EXTERNAL_RESOURCES_URI,
    Asset,
    AssetType,
    clone_asset,
    create_empty_external_assets,
    is_archived,
    is_external_asset,
    should_convert_path,
)
from .paths import (
    absolute_to_relative_path,
    absolute_to_relative_path_for_array,
    recursive_absolute_to_relative_path,
    recursive_path_conversion,
    recursive_relative_to_absolute_path,
    relative_to_absolute_path,
    relative_to_absolute_path_for_array,
)
from .ignore import FILE_IGNORE_LIST, include_asset
from .search import (
    find_all_descendant_assets_by_uri,
    find_child_asset_by_uri,
    find_descendant_asset_by_uri,
    find_entry_point_assets,
    iter_assets,
)
from .handlers import FILE_HANDLER_ID, filter_included_file_assets, get_handler_metadata
from .notes import get_all_notes
from .naming import get_asset_name_for_tree, get_asset_name_from_uri, get_extension_from_uri
from .mapping import asset_from_mapping, asset_to_mapping

__all__ = [
    "EXTERNAL_RESOURCES_URI",
    "Asset",
    "AssetType",
    "clone_asset",
    "create_empty_external_assets",
    "is_archived",
    "is_external_asset",
    "should_convert_path",
    "relative_to_absolute_path",
    "absolute_to_relative_path",
    "recursive_path_conversion",
    "recursive_relative_to_absolute_path",
    "recursive_absolute_to_relative_path",
    "relative_to_absolute_path_for_array",
    "absolute_to_relative_path_for_array",
    "FILE_IGNORE_LIST",
    "include_asset",
    "iter_assets",
    "find_child_asset_by_uri",
    "find_descendant_asset_by_uri",
    "find_all_descendant_assets_by_uri",
    "find_entry_point_assets",
    "FILE_HANDLER_ID",
    "get_handler_metadata",
    "filter_included_file_assets",
    "get_all_notes",
    "get_asset_name_from_uri",
    "get_extension_from_uri",
    "get_asset_name_for_tree",
    "asset_from_mapping",
    "asset_to_mapping",
]
