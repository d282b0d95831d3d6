"""Bit-level reading and writing over binary streams, most significant bit first."""

from __future__ import annotations

from collections.abc import Iterator
from typing import BinaryIO

from .constants import SIZE_OF_CHAR


class BitWriter:
    """Packs bits into bytes and writes them to a binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._buffer = 0
        self._size = 0

    def _add_bit(self, bit: int) -> None:
        self._buffer = ((self._buffer << 1) | (bit & 1)) & 0xFF
        self._size += 1
        if self._size == SIZE_OF_CHAR:
            self._stream.write(bytes((self._buffer,)))
            self._buffer = 0
            self._size = 0

    def write(self, value: int, bits: int) -> None:
        """Write the low ``bits`` bits of ``value``, most significant first."""
        if value < 0:
            raise ValueError("value must not be negative")
        if bits < 0:
            raise ValueError("bit count must not be negative")
        for shift in range(bits - 1, -1, -1):
            self._add_bit(value >> shift & 1)

    def write_code(self, code: str) -> None:
        """Write a code given as a string of '0' and '1' characters."""
        for char in code:
            if char not in "01":
                raise ValueError(f"invalid bit character {char!r} in code")
            self._add_bit(char == "1")

    def flush(self) -> None:
        """Pad pending bits with zeros and write the final byte.

        A byte is always written, a zero byte when no bits are pending.
        """
        while 0 < self._size < SIZE_OF_CHAR:
            self._buffer = (self._buffer << 1) & 0xFF
            self._size += 1
        self._stream.write(bytes((self._buffer,)))
        self._buffer = 0
        self._size = 0


class BitReader:
    """Reads bits from a binary stream, most significant bit of each byte first."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._buffer = 0
        self._size = 0

    def _next_bit(self) -> int:
        if self._size == 0:
            chunk = self._stream.read(1)
            if not chunk:
                raise EOFError("unexpected end of bit stream")
            self._buffer = chunk[0]
            self._size = SIZE_OF_CHAR
        self._size -= 1
        return self._buffer >> self._size & 1

    def read(self, bits: int) -> int:
        """Read ``bits`` bits and return them as an unsigned integer."""
        if bits < 0:
            raise ValueError("bit count must not be negative")
        result = 0
        for _ in range(bits):
            result = (result << 1) | self._next_bit()
        return result

    def bits(self) -> Iterator[int]:
        """Yield the remaining bits until the stream is exhausted."""
        while True:
            try:
                bit = self._next_bit()
            except EOFError:
                return
            yield bit