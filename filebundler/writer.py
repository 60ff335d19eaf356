# filebundler/writer.py
from __future__ import annotations

import logging
import os
import stat
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence

from filebundler.config import BundleConfig
from filebundler.discovery import FileEntry, discover_files
from filebundler.languages import extensions_for, supported_languages_text
from filebundler.logger import get_logger
from filebundler.ordering import order_files
from filebundler.renderer import render_author, render_file

NO_LANGUAGES_MESSAGE = "No valid languages selected. Supported languages are: {supported}"
NO_FILES_MESSAGE = "No files found matching the selected languages and criteria."
SUCCESS_MESSAGE = "Bundle created successfully at {path}"
ERROR_MESSAGE = "Error: {error}"


class BundleStatus(Enum):
    OK = "OK"
    NO_LANGUAGES = "NO_LANGUAGES"
    NO_FILES = "NO_FILES"
    IO_ERROR = "IO_ERROR"


@dataclass(frozen=True)
class BundleResult:
    status: BundleStatus
    message: str
    output_path: Optional[Path] = None
    file_count: int = 0

    @property
    def ok(self) -> bool:
        return self.status is BundleStatus.OK


def _new_file_mode(target: Path) -> int:
    if target.exists():
        return stat.S_IMODE(target.stat().st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class BundleWriter:
    """
    Runs one bundle operation: validate languages, discover, order, write.

    The bundle is written to a temporary file next to the output and moved
    over it only once every file has been rendered, so a failed run leaves no
    partial bundle and keeps any previous output intact. Outcomes are returned
    as a BundleResult; only OSError/UnicodeError are turned into results.
    """

    def __init__(self, config: BundleConfig, logger: Optional[logging.Logger] = None) -> None:
        self.config = config
        self.logger = logger or get_logger(__name__)

    def run(self) -> BundleResult:
        config = self.config

        if not config.languages:
            self.logger.info("No valid languages in selector %r", config.language)
            return BundleResult(
                BundleStatus.NO_LANGUAGES,
                NO_LANGUAGES_MESSAGE.format(supported=supported_languages_text()),
            )

        output = config.output_path
        try:
            entries = discover_files(
                config.root,
                extensions_for(config.languages),
                exclude=[output],
            )
            if not entries:
                self.logger.info(
                    "No files matched languages=%s under %s", ",".join(config.languages), config.root
                )
                return BundleResult(BundleStatus.NO_FILES, NO_FILES_MESSAGE)

            entries = order_files(entries, config.sort)
            self._write_bundle(output, entries)
        except (OSError, UnicodeError) as exc:
            self.logger.info(
                "Bundle to %s failed: %s",
                output,
                exc,
                extra={"status": BundleStatus.IO_ERROR.value, "output": str(output)},
            )
            return BundleResult(BundleStatus.IO_ERROR, ERROR_MESSAGE.format(error=exc), output)

        self.logger.info(
            "Bundled %d file(s) into %s",
            len(entries),
            output,
            extra={"status": BundleStatus.OK.value, "output": str(output), "file_count": len(entries)},
        )
        return BundleResult(
            BundleStatus.OK,
            SUCCESS_MESSAGE.format(path=output),
            output,
            file_count=len(entries),
        )

    def _write_bundle(self, output: Path, entries: Sequence[FileEntry]) -> None:
        mode = _new_file_mode(output)
        temp_name: Optional[str] = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                prefix=output.name + "-",
                suffix=".tmp",
                dir=output.parent,
                delete=False,
            ) as out:
                temp_name = out.name

                if self.config.has_author:
                    for line in render_author(self.config.author):
                        out.write(line + "\n")

                for entry in entries:
                    self.logger.debug("Rendering %s", entry.relative_path)
                    try:
                        for line in render_file(entry, self.config):
                            out.write(line + "\n")
                    except UnicodeDecodeError as exc:
                        raise UnicodeError(
                            f"{entry.relative_path} is not valid UTF-8 text "
                            f"({exc.reason} at byte {exc.start})"
                        ) from exc

            os.chmod(temp_name, mode)
            os.replace(temp_name, output)
            temp_name = None
        finally:
            # Only set when the bundle did not make it to the output path
            if temp_name is not None and os.path.exists(temp_name):
                try:
                    os.unlink(temp_name)
                except OSError:
                    self.logger.exception("Failed to remove temporary file %s", temp_name)
