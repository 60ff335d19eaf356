# tests/test_renderer.py
from __future__ import annotations

from filebundler.discovery import FileEntry
from filebundler.renderer import read_lines, render_author, render_file
from tests.conftest import make_config, make_tree


def _entry(root, rel):
    return FileEntry(path=root / rel, root=root)


def test_render_file_with_markers(tmp_project_root):
    make_tree(tmp_project_root, {"a.py": "x\n\ny\n"})

    lines = list(render_file(_entry(tmp_project_root, "a.py"), make_config(tmp_project_root)))

    assert lines == [
        "// Start of file: a.py",
        "",
        "x",
        "",
        "y",
        "",
        "// End of file: a.py",
        "",
    ]


def test_render_file_removes_blank_and_whitespace_lines(tmp_project_root):
    make_tree(tmp_project_root, {"a.py": "x\n\n   \n\t\ny\n"})
    config = make_config(tmp_project_root, remove_empty_lines=True)

    lines = list(render_file(_entry(tmp_project_root, "a.py"), config))

    assert lines == ["// Start of file: a.py", "", "x", "y", "", "// End of file: a.py", ""]


def test_render_file_adds_relative_path_note(tmp_project_root):
    make_tree(tmp_project_root, {"src/pkg/a.py": "x\n"})
    config = make_config(tmp_project_root, note=True)

    lines = list(render_file(_entry(tmp_project_root, "src/pkg/a.py"), config))

    assert lines[:4] == [
        "// Start of file: a.py",
        "",
        "// Relative path: src/pkg/a.py",
        "",
    ]
    assert lines[4] == "x"


def test_read_lines_handles_line_endings_and_bom(tmp_project_root):
    path = tmp_project_root / "mixed.cs"
    path.write_bytes(b"\xef\xbb\xbfone\r\ntwo\rthree\nfour")

    assert read_lines(path) == ["one", "two", "three", "four"]


def test_read_lines_trailing_newline_and_empty_file(tmp_project_root):
    make_tree(tmp_project_root, {"a.txt": "a\n\n", "empty.txt": ""})

    assert read_lines(tmp_project_root / "a.txt") == ["a", ""]
    assert read_lines(tmp_project_root / "empty.txt") == []


def test_render_author():
    assert render_author("Ada") == ["// Author: Ada", ""]
