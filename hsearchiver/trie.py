"""Huffman tree construction and the bit-by-bit decoding trie."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Optional, Union

from .priority_queue import PriorityQueue


@dataclass(eq=False)
class HuffmanNode:
    """A node of a Huffman tree, ordered by weight then smallest symbol."""

    weight: int
    symbol: int
    left: Optional[HuffmanNode] = None
    right: Optional[HuffmanNode] = None
    terminal: bool = True

    def __lt__(self, other: HuffmanNode) -> bool:
        return self.weight < other.weight or (
            self.weight == other.weight and self.symbol < other.symbol
        )

    @classmethod
    def merge(cls, first: HuffmanNode, second: HuffmanNode) -> HuffmanNode:
        """Join two subtrees; ``first`` becomes the '0' branch."""
        return cls(
            weight=first.weight + second.weight,
            symbol=min(first.symbol, second.symbol),
            left=first,
            right=second,
            terminal=False,
        )


def _count_items(counts: Union[Mapping[int, int], Sequence[int]]) -> list[tuple[int, int]]:
    pairs = counts.items() if isinstance(counts, Mapping) else enumerate(counts)
    return sorted((symbol, count) for symbol, count in pairs if count)


def build_huffman_codes(counts: Union[Mapping[int, int], Sequence[int]]) -> dict[int, str]:
    """Build Huffman codes for every symbol with a non-zero count.

    ``counts`` maps symbols to frequencies, or is a sequence indexed by symbol.
    A lone symbol gets the code "0".
    """
    items = _count_items(counts)
    if not items:
        return {}
    if len(items) == 1:
        return {items[0][0]: "0"}

    queue: PriorityQueue[HuffmanNode] = PriorityQueue()
    for symbol, count in items:
        queue.push(HuffmanNode(count, symbol))
    while len(queue) > 1:
        first = queue.pop()
        second = queue.pop()
        queue.push(HuffmanNode.merge(first, second))

    codes: dict[int, str] = {}
    stack: list[tuple[HuffmanNode, str]] = [(queue.pop(), "")]
    while stack:
        node, prefix = stack.pop()
        if node.terminal:
            codes[node.symbol] = prefix
        if node.right is not None:
            stack.append((node.right, prefix + "1"))
        if node.left is not None:
            stack.append((node.left, prefix + "0"))
    return codes


def next_code(code: str) -> str:
    """Return the binary string one greater, growing by a digit on overflow."""
    stripped = code.rstrip("1")
    ones = len(code) - len(stripped)
    if not stripped:
        return "1" + "0" * ones
    return stripped[:-1] + "1" + "0" * ones


class _TrieNode:
    __slots__ = ("children", "symbol")

    def __init__(self) -> None:
        self.children: list[Optional[_TrieNode]] = [None, None]
        self.symbol: Optional[int] = None


class DecodingTrie:
    """Walks a code trie one bit at a time to recognise symbols."""

    def __init__(self, codes: Mapping[int, str]) -> None:
        self._root = _TrieNode()
        self._current = self._root
        for symbol, code in sorted(codes.items()):
            if not code:
                continue
            for char in code:
                if char not in "01":
                    raise ValueError(f"invalid bit character {char!r} in code")
                self.feed(char == "1")
            self._current.symbol = symbol
            self.reset()

    def feed(self, bit: int) -> None:
        """Follow the branch for ``bit``, creating it if it does not exist."""
        index = 1 if bit else 0
        child = self._current.children[index]
        if child is None:
            child = _TrieNode()
            self._current.children[index] = child
        self._current = child

    def reset(self) -> None:
        """Return to the root."""
        self._current = self._root

    def is_terminal(self) -> bool:
        """Whether the bits fed since the last reset form a complete code."""
        return self._current.symbol is not None

    def symbol(self) -> int:
        """The symbol of the complete code reached."""
        if self._current.symbol is None:
            raise ValueError("current position is not a complete code")
        return self._current.symbol