# filebundler/renderer.py
from __future__ import annotations

from pathlib import Path
from typing import Iterator, List

from filebundler.config import BundleConfig
from filebundler.discovery import FileEntry

START_MARKER = "// Start of file: {name}"
RELATIVE_PATH_MARKER = "// Relative path: {path}"
END_MARKER = "// End of file: {name}"
AUTHOR_MARKER = "// Author: {author}"


def read_lines(path: Path) -> List[str]:
    """
    Read a whole text file as UTF-8 and split it into lines.

    A byte-order mark is dropped; "\\r\\n", "\\r" and "\\n" all end a line and a
    final line terminator does not produce an extra empty line.
    """
    with open(path, "r", encoding="utf-8-sig", newline=None) as f:
        content = f.read()

    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def is_blank(line: str) -> bool:
    return not line.strip()


def render_file(entry: FileEntry, config: BundleConfig) -> Iterator[str]:
    """Yield the bundle lines for one file, without line terminators."""
    yield START_MARKER.format(name=entry.name)
    yield ""

    if config.note:
        yield RELATIVE_PATH_MARKER.format(path=entry.relative_path)
        yield ""

    lines = read_lines(entry.path)
    if config.remove_empty_lines:
        lines = [line for line in lines if not is_blank(line)]
    yield from lines

    yield ""
    yield END_MARKER.format(name=entry.name)
    yield ""


def render_author(author: str) -> List[str]:
    return [AUTHOR_MARKER.format(author=author), ""]
