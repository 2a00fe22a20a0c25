from __future__ import annotations

import argparse
from typing import List, Optional

from handlers import watch
from logger import describe, log_err, log_info, log_warn
from path_utilities import ReadError, read_file
from result import Result, match


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="result-demo",
        description="Read a file and report the outcome as a Result.",
    )
    parser.add_argument("path", help="file to read")
    parser.add_argument(
        "--watch",
        action="store_true",
        help="keep running and report again whenever the file changes",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="unwrap the result at the end, failing hard if the read failed",
    )
    return parser


def report(result: Result[str, ReadError]) -> int:
    """Print the outcome of a read and return the matching exit code."""
    result.inspect_err(lambda _: log_warn("seems there was an error"))
    log_info(describe(result))

    return match(result, _print_contents, _print_error)


def _print_contents(contents: str) -> int:
    print(contents)
    return 0


def _print_error(error: ReadError) -> int:
    log_err(f"error is {getattr(error, 'strerror', None) or error}")
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the demo."""
    args = build_parser().parse_args(argv)

    result = read_file(args.path)
    code = report(result)

    if args.watch:
        watch(args.path, report)

    if args.strict:
        result.expect("failed to read file")

    return code


if __name__ == "__main__":
    raise SystemExit(main())
