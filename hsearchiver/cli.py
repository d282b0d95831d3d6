"""Command-line entry point for creating and extracting archives."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence
from pathlib import Path
from typing import Optional

from .decoder import decode
from .encoder import encode

_USAGE_LINES = (
    "Archiver",
    "Commands:",
    "archiver -c archive_name file1 [file2...]\t\tto compress file and save result in archive_name",
    "archiver -d archive_name\t\t\t\tto uncompress archive",
    "archiver -h\t\t\t\t\t\tto see help_message",
)


def help_message() -> str:
    """Print the usage text and return it."""
    text = "\n".join(_USAGE_LINES)
    print(text)
    return text


def _report_time(start: float) -> None:
    elapsed_ms = int((time.monotonic() - start) * 1000)
    print(f"TIME: {elapsed_ms} MS")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the archiver with ``argv`` (without the program name)."""
    args = list(sys.argv[1:] if argv is None else argv)

    if len(args) >= 2 and args[0] == "-c":
        start = time.monotonic()
        try:
            encode(args[1], args[2:])
        except FileNotFoundError as exc:
            print(f'"{exc.filename}" is not exist')
            return 111
        _report_time(start)
        return 0

    if len(args) >= 2 and args[0] == "-d":
        archive = Path(args[1])
        if not archive.is_file():
            print(f"{args[1]} is not exists")
            return 1
        start = time.monotonic()
        with open(archive, "rb") as stream:
            decode(stream, Path.cwd())
        _report_time(start)
        return 0

    help_message()
    return 111


if __name__ == "__main__":
    sys.exit(main())