"""Building archives: symbol counting, canonical Huffman codes and the writer."""

from __future__ import annotations

import errno
import os
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Union

from .bitio import BitWriter
from .constants import ARCHIVE_END, FILENAME_END, ONE_MORE_FILE, SIZE_OF_LCHAR
from .trie import build_huffman_codes, next_code

_CHUNK_SIZE = 1 << 16

PathLike = Union[str, os.PathLike]


def count_symbols(data: Iterable[int], counts: Mapping[int, int]) -> Counter:
    """Return ``counts`` with every byte of ``data`` added to it."""
    result = Counter(counts)
    result.update(data)
    return result


def canonicalize(codes: Mapping[int, str]) -> list[tuple[int, str]]:
    """Replace Huffman codes by canonical codes of the same lengths.

    Symbols are ordered by code length, then by symbol; symbols with an
    empty code are left out. Returns the ``(symbol, code)`` pairs in that order.
    """
    ordered = sorted(
        ((symbol, code) for symbol, code in codes.items() if code),
        key=lambda pair: (len(pair[1]), pair[0]),
    )
    result: list[tuple[int, str]] = []
    last = ""
    for symbol, code in ordered:
        if len(last) < len(code):
            last += "0" * (len(code) - len(last))
        result.append((symbol, last))
        last = next_code(last)
    return result


def code_length_counts(ordered: Sequence[tuple[int, str]]) -> list[int]:
    """Count codes of each length from 1 up to the longest code."""
    if not ordered:
        return []
    lengths = Counter(len(code) for _, code in ordered)
    longest = max(lengths)
    return [lengths.get(length, 0) for length in range(1, longest + 1)]


def _read_chunks(path: Path) -> Iterable[bytes]:
    with open(path, "rb") as stream:
        while chunk := stream.read(_CHUNK_SIZE):
            yield chunk


def encode(archive_path: PathLike, input_paths: Iterable[PathLike]) -> None:
    """Compress the given files into a single archive at ``archive_path``.

    Raises FileNotFoundError if an input file does not exist.
    """
    paths = [Path(path) for path in input_paths]
    counts: Counter = Counter({FILENAME_END: 1, ONE_MORE_FILE: 1, ARCHIVE_END: 1})
    for path in paths:
        if not path.exists():
            raise FileNotFoundError(errno.ENOENT, "input file does not exist", str(path))
        counts = count_symbols(os.fsencode(path.name), counts)
        for chunk in _read_chunks(path):
            counts = count_symbols(chunk, counts)

    huffman = build_huffman_codes(counts)
    ordered = canonicalize(huffman)
    codes = dict(ordered)

    with open(archive_path, "wb") as archive:
        writer = BitWriter(archive)
        writer.write(len(huffman), SIZE_OF_LCHAR)
        for symbol, _ in ordered:
            writer.write(symbol, SIZE_OF_LCHAR)
        for count in code_length_counts(ordered):
            writer.write(count, SIZE_OF_LCHAR)

        for position, path in enumerate(paths):
            for byte in os.fsencode(path.name):
                writer.write_code(codes[byte])
            writer.write_code(codes[FILENAME_END])
            for chunk in _read_chunks(path):
                for byte in chunk:
                    writer.write_code(codes[byte])
            if position < len(paths) - 1:
                writer.write_code(codes[ONE_MORE_FILE])

        writer.write_code(codes[ARCHIVE_END])
        writer.flush()