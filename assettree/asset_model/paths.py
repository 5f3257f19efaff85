"""Absolute/relative URI conversion for single assets and whole trees.

Relative URIs always use ``/`` so a persisted tree reads the same on every
operating system. Only FILE, DIRECTORY and FOLDER nodes are converted; URL
URIs are opaque and never treated as paths.
"""

from __future__ import annotations

import logging
import os
import posixpath
from collections.abc import Callable

from .types import Asset, clone_asset, should_convert_path

logger = logging.getLogger(__name__)

PathWorker = Callable[[str, Asset], "str | None"]


def relative_to_absolute_path(project_root: str, asset: Asset | None) -> str | None:
    """Return ``asset.uri`` resolved against ``project_root``.

    Does not modify the asset. Returns ``None`` when there is no URI.
    """
    if asset is None or asset.uri is None:
        return None
    return os.path.abspath(os.path.join(project_root, asset.uri))


def absolute_to_relative_path(project_root: str, asset: Asset | None) -> str | None:
    """Return ``asset.uri`` relative to ``project_root`` with ``/`` separators.

    Returns ``None`` when there is no URI or the URI is not absolute, which
    guards against converting an already-relative tree twice.
    """
    if asset is None or asset.uri is None or not os.path.isabs(asset.uri):
        return None

    try:
        relative_path = os.path.relpath(asset.uri, project_root)
    except ValueError:
        # Different drives on Windows; there is no relative form.
        logger.debug("no relative path from %s to %s", project_root, asset.uri)
        relative_path = asset.uri
    if relative_path == os.curdir:
        relative_path = ""
    return relative_path.replace(os.sep, posixpath.sep)


def _convert_tree(project_root: str, asset: Asset, worker: PathWorker) -> Asset:
    """Rewrite URIs in place across ``asset``'s subtree."""
    stack = [asset]
    while stack:
        node = stack.pop()
        if not should_convert_path(node):
            continue
        node.uri = worker(project_root, node)
        if node.children:
            stack.extend(child for child in node.children if child is not None)
    return asset


def recursive_path_conversion(
    project_root: str | None,
    assets: Asset | list[Asset] | None,
    worker: PathWorker,
) -> Asset | list[Asset] | None:
    """Return a deep copy of ``assets`` with every eligible URI run through ``worker``.

    ``assets`` may be one root asset or a list of root assets. The input is
    never modified. When ``assets`` is empty or ``project_root`` is ``None``
    the input itself is returned.
    """
    if not assets or project_root is None:
        if project_root is None and assets:
            logger.debug("skipping path conversion without a project root")
        return assets

    if isinstance(assets, list):
        return [
            _convert_tree(project_root, clone_asset(asset), worker) if asset is not None else None
            for asset in assets
        ]
    return _convert_tree(project_root, clone_asset(assets), worker)


def recursive_relative_to_absolute_path(
    project_root: str | None,
    assets: Asset | list[Asset] | None,
) -> Asset | list[Asset] | None:
    """Copy ``assets`` with every nested URI made absolute."""
    return recursive_path_conversion(project_root, assets, relative_to_absolute_path)


def recursive_absolute_to_relative_path(
    project_root: str | None,
    assets: Asset | list[Asset] | None,
) -> Asset | list[Asset] | None:
    """Copy ``assets`` with every nested URI made project-relative."""
    return recursive_path_conversion(project_root, assets, absolute_to_relative_path)


def _convert_path_for_array(
    project_root: str | None,
    assets: list[Asset] | None,
    worker: PathWorker,
) -> list[Asset] | None:
    """Convert top-level URIs of ``assets`` in place and return the same list.

    Children are not visited.
    """
    if assets is None or project_root is None:
        return assets

    for asset in assets:
        if should_convert_path(asset):
            asset.uri = worker(project_root, asset)
    return assets


def absolute_to_relative_path_for_array(
    project_root: str | None,
    assets: list[Asset] | None,
) -> list[Asset] | None:
    """Make each top-level asset URI relative. Modifies ``assets``."""
    return _convert_path_for_array(project_root, assets, absolute_to_relative_path)


def relative_to_absolute_path_for_array(
    project_root: str | None,
    assets: list[Asset] | None,
) -> list[Asset] | None:
    """Make each top-level asset URI absolute. Modifies ``assets``."""
    return _convert_path_for_array(project_root, assets, relative_to_absolute_path)


__all__ = [
    "PathWorker",
    "relative_to_absolute_path",
    "absolute_to_relative_path",
    "recursive_path_conversion",
    "recursive_relative_to_absolute_path",
    "recursive_absolute_to_relative_path",
    "absolute_to_relative_path_for_array",
    "relative_to_absolute_path_for_array",
]
