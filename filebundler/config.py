# filebundler/config.py
from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from filebundler.languages import select_languages

SORT_BY_NAME = "name"
SORT_BY_TYPE = "type"
DEFAULT_SORT = SORT_BY_NAME


@dataclass(frozen=True)
class BundleConfig:
    """
    Options of one `bundle` invocation.

    `languages` is resolved from the raw `language` selector at construction
    and may be empty; the writer reports that case to the user.
    """

    output: Path
    language: str
    note: bool = False
    sort: str = DEFAULT_SORT
    remove_empty_lines: bool = False
    author: Optional[str] = None
    root: Path = field(default_factory=Path.cwd)
    languages: Tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        if not str(self.output).strip():
            raise ValueError("output must be a non-empty path")
        if self.language is None:
            raise ValueError("language must be provided")

        # frozen: assign derived/normalized fields through object.__setattr__
        object.__setattr__(self, "output", Path(self.output))
        object.__setattr__(self, "root", Path(self.root))
        object.__setattr__(self, "languages", tuple(select_languages(self.language)))

    @property
    def output_path(self) -> Path:
        """Absolute output path; relative outputs are taken against the scan root."""
        if self.output.is_absolute():
            return self.output
        return (self.root / self.output).absolute()

    @property
    def has_author(self) -> bool:
        return self.author is not None and bool(self.author.strip())

    @staticmethod
    def from_args(args: argparse.Namespace, root: Optional[Path] = None) -> "BundleConfig":
        return BundleConfig(
            output=args.output,
            language=args.language,
            note=bool(args.note),
            sort=args.sort if args.sort is not None else DEFAULT_SORT,
            remove_empty_lines=bool(args.remove_empty_lines),
            author=args.author,
            root=Path(root) if root is not None else Path.cwd(),
        )
