# filebundler/response_file.py
from __future__ import annotations

import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from filebundler.config import DEFAULT_SORT

RESPONSE_FILE_NAME = "bundle.rsp"

_QUOTES = ("\"", "'")


@dataclass(frozen=True)
class ResponseFileOptions:
    """Answers collected for a `bundle` response file."""

    output: str
    language: str
    note: bool = False
    sort: str = DEFAULT_SORT
    remove_empty_lines: bool = False
    author: Optional[str] = None


def build_response_file(options: ResponseFileOptions) -> str:
    """Serialize options to one flag per line; boolean flags are written bare."""
    lines = [
        f"--output {options.output}",
        f"--language {options.language}",
    ]
    if options.note:
        lines.append("--note")
    lines.append(f"--sort {options.sort}")
    if options.remove_empty_lines:
        lines.append("--remove-empty-lines")
    if options.author is not None and options.author.strip():
        lines.append(f"--author \"{options.author}\"")
    return "\n".join(lines) + "\n"


def write_response_file(options: ResponseFileOptions, directory: Optional[Path] = None) -> Path:
    target = Path(directory if directory is not None else Path.cwd()) / RESPONSE_FILE_NAME
    with target.open("w", encoding="utf-8") as f:
        f.write(build_response_file(options))
    return target


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    return value


def _tokenize(line: str) -> List[str]:
    # Quote-aware, "#" starts a comment; backslashes stay literal (Windows paths)
    lexer = shlex.shlex(line, posix=True)
    lexer.whitespace_split = True
    lexer.commenters = "#"
    lexer.escape = ""
    return list(lexer)


def split_response_line(line: str) -> List[str]:
    """
    Turn one response-file line into arguments.

    Lines are split into quote-aware tokens and "#" comments are dropped, so
    "-o out.txt -l py" gives four arguments. A single flag followed by a
    value with spaces and no further options ("--output my bundle.txt", as
    written by the wizard) keeps the rest of the line as one value.
    Blank and comment-only lines give nothing.
    """
    stripped = line.strip()
    if not stripped:
        return []

    try:
        tokens = _tokenize(stripped)
    except ValueError:
        # unbalanced quote: fall back to flag + raw remainder
        flag, _, value = stripped.partition(" ")
        value = value.strip()
        return [flag, _unquote(value)] if value else [flag]

    if len(tokens) > 2 and tokens[0].startswith("-"):
        if not any(token.startswith("-") for token in tokens[1:]):
            return [tokens[0], " ".join(tokens[1:])]

    return tokens
