"""Reading archives: the canonical code table and the extraction loop."""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path
from typing import BinaryIO, Optional, Union

from .bitio import BitReader
from .constants import ARCHIVE_END, FILENAME_END, ONE_MORE_FILE, SIZE_OF_LCHAR
from .trie import DecodingTrie, next_code


def canonical_codes(symbols: Sequence[int], length_counts: Sequence[int]) -> dict[int, str]:
    """Rebuild canonical codes from symbols in code order and per-length counts.

    ``length_counts[i]`` is the number of codes of length ``i + 1``.
    """
    if sum(length_counts) > len(symbols):
        raise ValueError("code length counts exceed the number of symbols")
    codes: dict[int, str] = {}
    remaining = iter(symbols)
    last = ""
    for count in length_counts:
        last += "0"
        for _ in range(count):
            codes[next(remaining)] = last
            last = next_code(last)
    return codes


def _read_header(reader: BitReader) -> tuple[list[int], list[int]]:
    try:
        size = reader.read(SIZE_OF_LCHAR)
        symbols = [reader.read(SIZE_OF_LCHAR) for _ in range(size)]
        length_counts: list[int] = []
        total = 0
        while total < size:
            count = reader.read(SIZE_OF_LCHAR)
            length_counts.append(count)
            total += count
    except EOFError as exc:
        raise ValueError("truncated archive header") from exc
    return symbols, length_counts


def decode(stream: BinaryIO, output_dir: Union[str, os.PathLike]) -> list[Path]:
    """Extract every file of the archive read from ``stream`` into ``output_dir``.

    Returns the paths of the files written, in archive order.
    """
    reader = BitReader(stream)
    symbols, length_counts = _read_header(reader)
    trie = DecodingTrie(canonical_codes(symbols, length_counts))

    directory = Path(output_dir)
    written: list[Path] = []
    name = bytearray()
    out: Optional[BinaryIO] = None
    try:
        for bit in reader.bits():
            trie.feed(bit)
            if not trie.is_terminal():
                continue
            symbol = trie.symbol()
            trie.reset()
            if symbol == FILENAME_END:
                if out is not None:
                    out.close()
                target = directory / os.fsdecode(bytes(name))
                name.clear()
                out = open(target, "wb")
                written.append(target)
            elif symbol == ONE_MORE_FILE:
                if out is not None:
                    out.close()
                    out = None
            elif symbol == ARCHIVE_END:
                break
            elif out is None:
                name.append(symbol)
            else:
                out.write(bytes((symbol,)))
    finally:
        if out is not None:
            out.close()
    return written