"""Convert between crawler-produced JSON-like dicts and ``Asset`` trees.

Keys the model does not name are kept in ``Asset.extra`` and written back
out unchanged. Keys absent on input stay absent on output. Known fields of
the wrong shape (non-string uri, non-dict attributes, non-list children and
so on) are dropped with a DEBUG log line.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping

from .types import Asset, AssetType

logger = logging.getLogger(__name__)

_KNOWN_KEYS = frozenset({"uri", "type", "name", "attributes", "metadata", "notes", "children"})


def _string_field(data: Mapping[str, object], key: str) -> str | None:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    logger.debug("dropping non-string %s %r", key, value)
    return None


def _entries_field(data: Mapping[str, object], key: str) -> list[dict[str, object]] | None:
    """Return a copy of a list-of-mappings field, dropping malformed entries."""
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        logger.debug("dropping non-list %s on %r", key, data.get("uri"))
        return None
    entries: list[dict[str, object]] = []
    for entry in value:
        if not isinstance(entry, Mapping):
            logger.debug("dropping non-mapping %s entry on %r", key, data.get("uri"))
            continue
        entries.append(copy.deepcopy(dict(entry)))
    return entries


def _node_from_mapping(data: Mapping[str, object]) -> Asset:
    extra = {key: copy.deepcopy(value) for key, value in data.items() if key not in _KNOWN_KEYS}
    raw_type = data.get("type")
    asset_type: AssetType | None = None
    if raw_type is not None:
        try:
            asset_type = AssetType(raw_type)
        except ValueError:
            logger.debug("unknown asset type %r on %r", raw_type, data.get("uri"))
            extra["type"] = raw_type

    attributes = data.get("attributes")
    if attributes is not None and not isinstance(attributes, Mapping):
        logger.debug("dropping non-mapping attributes on %r", data.get("uri"))
        attributes = None

    return Asset(
        uri=_string_field(data, "uri"),
        type=asset_type,
        name=_string_field(data, "name"),
        attributes=copy.deepcopy(dict(attributes)) if attributes is not None else None,
        metadata=_entries_field(data, "metadata"),
        notes=_entries_field(data, "notes"),
        children=None,
        extra=extra or None,
    )


def asset_from_mapping(data: Mapping[str, object] | None) -> Asset | None:
    """Build an ``Asset`` tree from nested mappings."""
    if not isinstance(data, Mapping):
        return None

    root = _node_from_mapping(data)
    stack = [(data, root)]
    while stack:
        source, target = stack.pop()
        raw_children = source.get("children")
        if raw_children is None:
            continue
        if not isinstance(raw_children, list):
            logger.debug("dropping non-list children under %r", target.uri)
            continue
        target.children = []
        for raw_child in raw_children:
            if not isinstance(raw_child, Mapping):
                logger.debug("dropping non-mapping child under %r", target.uri)
                continue
            child = _node_from_mapping(raw_child)
            target.children.append(child)
            stack.append((raw_child, child))
    return root


def _node_to_mapping(asset: Asset) -> dict[str, object]:
    data: dict[str, object] = {}
    if asset.uri is not None:
        data["uri"] = asset.uri
    if asset.type is not None:
        data["type"] = asset.type.value
    if asset.name is not None:
        data["name"] = asset.name
    for key in ("attributes", "metadata", "notes"):
        value = getattr(asset, key)
        if value is not None:
            data[key] = copy.deepcopy(value)
    if asset.extra:
        for key, value in asset.extra.items():
            data.setdefault(key, copy.deepcopy(value))
    return data


def asset_to_mapping(asset: Asset | None) -> dict[str, object] | None:
    """Return the nested-dict form of an ``Asset`` tree."""
    if asset is None:
        return None

    root = _node_to_mapping(asset)
    stack = [(asset, root)]
    while stack:
        source, target = stack.pop()
        if source.children is None:
            continue
        children: list[dict[str, object]] = []
        target["children"] = children
        for child in source.children:
            child_data = _node_to_mapping(child)
            children.append(child_data)
            stack.append((child, child_data))
    return root


__all__ = [
    "asset_from_mapping",
    "asset_to_mapping",
]
