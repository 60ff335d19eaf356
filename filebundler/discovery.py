# filebundler/discovery.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Collection, Iterable, List, Optional

from filebundler.logger import get_logger

# build-artifact directories skipped when they sit directly under the scan root
EXCLUDED_DIRECTORIES = frozenset({"bin", "debug", "obj"})


def file_extension(name: str) -> str:
    """
    Extension of `name` including the dot, taken from the last ".".

    Unlike Path.suffix, a dot-file such as ".py" has the extension ".py";
    a trailing dot gives no extension.
    """
    _, dot, ext = name.rpartition(".")
    return dot + ext if dot and ext else ""


@dataclass(frozen=True)
class FileEntry:
    path: Path
    root: Path

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def extension(self) -> str:
        return file_extension(self.path.name)

    @property
    def relative_path(self) -> str:
        return os.path.relpath(self.path, self.root)


def _raise_walk_error(error: OSError) -> None:
    raise error


def is_excluded(relative_path: str) -> bool:
    """True when the first directory segment of `relative_path` is denylisted."""
    directory = os.path.dirname(relative_path)
    if not directory:
        return False
    first_segment = directory.split(os.sep)[0]
    return first_segment.lower() in EXCLUDED_DIRECTORIES


def discover_files(
    root: Path,
    extensions: Iterable[str],
    exclude: Optional[Collection[Path]] = None,
) -> List[FileEntry]:
    """
    Walk `root` and return the files whose extension is in `extensions`.

    Extensions are compared case-insensitively and include the leading dot.
    Files under a top-level excluded directory are skipped, as are the paths
    in `exclude` (absolute). Entries come back in walk order. Errors raised
    while walking are not swallowed.
    """
    logger = get_logger(__name__)
    root = Path(root).absolute()
    wanted = {ext.lower() for ext in extensions}
    skipped = {Path(p).absolute() for p in (exclude or ())}

    entries: List[FileEntry] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        if Path(dirpath) == root:
            # Prune denylisted top-level directories in place
            dirnames[:] = [d for d in dirnames if d.lower() not in EXCLUDED_DIRECTORIES]

        for filename in filenames:
            path = Path(dirpath) / filename
            if file_extension(filename).lower() not in wanted:
                continue
            if path in skipped:
                logger.debug("Skipping bundle output %s", path)
                continue
            if is_excluded(os.path.relpath(path, root)):
                continue
            entries.append(FileEntry(path=path, root=root))

    logger.info("Discovered %d file(s) under %s", len(entries), root)
    return entries
