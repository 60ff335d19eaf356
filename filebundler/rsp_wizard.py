# filebundler/rsp_wizard.py
from __future__ import annotations

from pathlib import Path
from typing import Optional, TextIO

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, InvalidResponse, Prompt

from filebundler.config import DEFAULT_SORT
from filebundler.logger import get_logger
from filebundler.response_file import RESPONSE_FILE_NAME, ResponseFileOptions, write_response_file


class _LineInputMixin:
    """Drop the line terminator left by readline() when answers come from a stream."""

    @classmethod
    def get_input(cls, console, prompt, password, stream=None) -> str:
        value = super().get_input(console, prompt, password, stream=stream)
        return value.rstrip("\r\n")


class LinePrompt(_LineInputMixin, Prompt):
    pass


class YesNoConfirm(_LineInputMixin, Confirm):
    """Confirm prompt answered with yes/no (y/n also accepted)."""

    choices = ["yes", "no"]
    validate_error_message = "[prompt.invalid]Please enter yes or no"

    def process_response(self, value: str) -> bool:
        value = value.strip().lower()
        if value in ("yes", "y"):
            return True
        if value in ("no", "n"):
            return False
        raise InvalidResponse(self.validate_error_message)


def collect_options(console: Console, stream: Optional[TextIO] = None) -> ResponseFileOptions:
    output = LinePrompt.ask(
        "Enter output file path and name (e.g., output.txt)",
        console=console,
        stream=stream,
    )
    language = LinePrompt.ask(
        "Enter programming languages (comma-separated, or 'all')",
        console=console,
        stream=stream,
    )
    note = YesNoConfirm.ask(
        "Include source file information as comments?",
        default=False,
        console=console,
        stream=stream,
    )
    sort = LinePrompt.ask(
        "Sort files by 'name' or 'type'",
        default=DEFAULT_SORT,
        console=console,
        stream=stream,
    )
    remove_empty_lines = YesNoConfirm.ask(
        "Remove empty lines?",
        default=False,
        console=console,
        stream=stream,
    )
    author = LinePrompt.ask(
        "Enter author name (optional)",
        default="",
        show_default=False,
        console=console,
        stream=stream,
    )

    return ResponseFileOptions(
        output=output.strip(),
        language=language.strip(),
        note=note,
        sort=sort.strip() or DEFAULT_SORT,
        remove_empty_lines=remove_empty_lines,
        author=author.strip() or None,
    )


def run_wizard(
    console: Optional[Console] = None,
    stream: Optional[TextIO] = None,
    cwd: Optional[Path] = None,
) -> Path:
    """Ask for the bundle options and save them as bundle.rsp in `cwd`."""
    console = console or Console()
    logger = get_logger(__name__)

    console.print(Panel.fit("[bold cyan]Create a bundle response file[/bold cyan]", border_style="cyan"))

    options = collect_options(console, stream)
    target = write_response_file(options, cwd)
    logger.info("Response file written to %s", target)

    console.print(f"[green]Response file created: {RESPONSE_FILE_NAME}[/green]", highlight=False)
    console.print(f"To use it, run: fib bundle @{RESPONSE_FILE_NAME}", markup=False, highlight=False)
    return target
