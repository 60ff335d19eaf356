# filebundler/ordering.py
from __future__ import annotations

from typing import List, Sequence

from filebundler.config import SORT_BY_NAME, SORT_BY_TYPE
from filebundler.discovery import FileEntry


def order_files(entries: Sequence[FileEntry], sort: str) -> List[FileEntry]:
    """
    Order discovered files for bundling.

    "name" sorts by file name, "type" by extension then file name. Any other
    value keeps discovery order, which follows the filesystem's directory
    listing and is not guaranteed to match across platforms.
    """
    if sort == SORT_BY_NAME:
        return sorted(entries, key=lambda e: e.name)
    if sort == SORT_BY_TYPE:
        return sorted(entries, key=lambda e: (e.extension, e.name))
    return list(entries)
