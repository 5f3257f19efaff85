"""Flatten notes across an asset tree."""

from __future__ import annotations

from collections.abc import Mapping

from .search import iter_assets
from .types import Asset


def get_all_notes(asset: Asset | None) -> list[dict[str, object]]:
    """Return every note in the tree, each tagged with its owner's ``uri``.

    Order is pre-order: a node's own notes come before any descendant's.
    """
    notes: list[dict[str, object]] = []
    for node in iter_assets(asset):
        if node.notes:
            notes.extend({**note, "uri": node.uri} for note in node.notes if isinstance(note, Mapping))
    return notes


__all__ = ["get_all_notes"]
