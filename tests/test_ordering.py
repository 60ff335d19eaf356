# tests/test_ordering.py
from __future__ import annotations

from pathlib import Path

from filebundler.discovery import FileEntry
from filebundler.ordering import order_files

ROOT = Path("/project")


def _entries(*rel_paths):
    return [FileEntry(path=ROOT / rel, root=ROOT) for rel in rel_paths]


def test_sort_by_name_uses_file_name_not_path():
    entries = _entries("z/a.py", "a/c.py", "m/b.py")

    ordered = order_files(entries, "name")

    assert [e.name for e in ordered] == ["a.py", "b.py", "c.py"]


def test_sort_by_type_orders_extension_then_name():
    entries = _entries("b.py", "z.cs", "a.py", "a.cs", "m.java")

    ordered = order_files(entries, "type")

    assert [e.name for e in ordered] == ["a.cs", "z.cs", "m.java", "a.py", "b.py"]


def test_unknown_sort_keeps_discovery_order():
    entries = _entries("c.py", "a.py", "b.py")

    assert order_files(entries, "size") == entries
    assert order_files(entries, "NAME") == entries


def test_ordering_returns_new_list():
    entries = _entries("b.py", "a.py")

    ordered = order_files(entries, "name")

    assert ordered is not entries
    assert [e.name for e in entries] == ["b.py", "a.py"]
