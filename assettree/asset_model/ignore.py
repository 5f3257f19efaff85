"""Names that are hidden from every asset view.

Matching is exact and case-sensitive on the final path segment; there is no
glob or regex support.
"""

from __future__ import annotations

import os
from collections.abc import Iterable

PROJECT_FILE = ".statwrap-project.json"
LOG_FILE = ".statwrap.log"
BASE_FOLDER = ".statwrap"

FILE_IGNORE_LIST: frozenset[str] = frozenset(
    {
        ".DS_Store",
        "Thumbs.db",
        # Placeholder used inside template projects
        ".keep",
        PROJECT_FILE,
        LOG_FILE,
        BASE_FOLDER,
        ".git",
        ".gitignore",
        ".vs",
        ".pytest_cache",
        ".ipynb_checkpoints",
        ".Rhistory",
        ".Rproj.user",
    }
)

_SEPARATORS = os.sep + (os.altsep or "")


def include_asset(uri: str | None, extra_ignored: Iterable[str] = ()) -> bool:
    """Return whether a file or folder at ``uri`` should normally be shown.

    ``extra_ignored`` adds names for this call only; ``FILE_IGNORE_LIST``
    always applies.
    """
    if not uri or not isinstance(uri, str):
        return False

    file_name = os.path.basename(uri.strip().rstrip(_SEPARATORS))
    if file_name == "":
        return False
    if file_name in FILE_IGNORE_LIST:
        return False
    return file_name not in frozenset(extra_ignored)


__all__ = [
    "PROJECT_FILE",
    "LOG_FILE",
    "BASE_FOLDER",
    "FILE_IGNORE_LIST",
    "include_asset",
]
