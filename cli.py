from __future__ import annotations

import argparse
import signal
from pathlib import Path
from typing import List

from dotenv import find_dotenv, load_dotenv

from filebundler.config import DEFAULT_SORT, BundleConfig
from filebundler.response_file import split_response_line
from filebundler.rsp_wizard import run_wizard
from filebundler.writer import BundleWriter

EXIT_OK = 0
EXIT_ERROR = 1


def _handle_sigint(signum, frame) -> None:
    print("\n[INTERRUPTED] fib terminated by user (Ctrl+C).")
    raise SystemExit(130)  # 130 is the conventional exit code for SIGINT


class ResponseFileArgumentParser(argparse.ArgumentParser):
    """ArgumentParser whose @file lines may carry a flag and its value together."""

    def convert_arg_line_to_args(self, arg_line: str) -> List[str]:
        return split_response_line(arg_line)


def _build_parser() -> argparse.ArgumentParser:
    parser = ResponseFileArgumentParser(
        prog="fib",
        description="File Bundler – bundle code files into a single file",
        fromfile_prefix_chars="@",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    # --------------------
    # bundle command
    # --------------------
    bundle_p = sub.add_parser("bundle", help="Bundle code files to a single file.")
    bundle_p.add_argument(
        "-o",
        "--output",
        required=True,
        help="File path and name of the bundle.",
    )
    bundle_p.add_argument(
        "-l",
        "--language",
        required=True,
        help="Comma-separated languages (cs, c, cpp, js, jsx, py, java, txt) or 'all'.",
    )
    bundle_p.add_argument(
        "-n",
        "--note",
        action="store_true",
        help="Add the relative path of each source file as a comment.",
    )
    bundle_p.add_argument(
        "-s",
        "--sort",
        default=DEFAULT_SORT,
        help="Sort files by 'name' or 'type'. Default: name.",
    )
    bundle_p.add_argument(
        "-r",
        "--remove-empty-lines",
        action="store_true",
        help="Remove empty lines.",
    )
    bundle_p.add_argument(
        "-a",
        "--author",
        default=None,
        help="Author name to add as a comment.",
    )

    # --------------------
    # create-rsp command
    # --------------------
    sub.add_parser("create-rsp", help="Create a response file for the bundle command.")

    return parser


def _run_bundle(args: argparse.Namespace) -> int:
    try:
        config = BundleConfig.from_args(args, root=Path.cwd())
    except ValueError as exc:
        print(f"Error: {exc}")
        return EXIT_ERROR

    result = BundleWriter(config).run()
    print(result.message)
    return EXIT_OK if result.ok else EXIT_ERROR


def _run_create_rsp() -> int:
    try:
        run_wizard()
    except OSError as exc:
        print(f"Error: {exc}")
        return EXIT_ERROR
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    # Register Ctrl+C handler as early as possible
    signal.signal(signal.SIGINT, _handle_sigint)

    load_dotenv(find_dotenv(usecwd=True))

    args = _build_parser().parse_args(argv)

    if args.command == "bundle":
        return _run_bundle(args)

    if args.command == "create-rsp":
        return _run_create_rsp()

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
