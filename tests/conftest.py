# tests/conftest.py
from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

import logging
import pytest

from filebundler.config import BundleConfig


@pytest.fixture
def tmp_project_root(tmp_path: Path) -> Path:
    """
    Temporary scan root used for tests.
    """
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def test_logger() -> logging.Logger:
    """
    Logger for tests – records propagate to caplog, nothing is printed.
    """
    logger = logging.getLogger("filebundler-tests")
    logger.setLevel(logging.DEBUG)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger


@pytest.fixture
def no_sigint_handler(monkeypatch):
    """Keep cli.main() from replacing the test runner's Ctrl+C handler."""
    import cli

    monkeypatch.setattr(cli.signal, "signal", lambda *args, **kwargs: None)


def make_tree(root: Path, files: Dict[str, str]) -> Path:
    """
    Create `files` (relative path -> text content) under `root`.
    """
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


def make_config(
    root: Path,
    language: str = "py",
    output: str = "out.txt",
    note: bool = False,
    sort: str = "name",
    remove_empty_lines: bool = False,
    author: Optional[str] = None,
) -> BundleConfig:
    """
    Helper to construct a BundleConfig scanning `root`.
    """
    return BundleConfig(
        output=Path(output),
        language=language,
        note=note,
        sort=sort,
        remove_empty_lines=remove_empty_lines,
        author=author,
        root=root,
    )
