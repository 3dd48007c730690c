# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Name dispatcher: builtin name -> block of the overload table.

Blocks are laid out in name first-seen order. The k-th name starts right
after the overloads of all preceding names, and starts are 1-based so that
`(0, 0)` can mean "not a builtin". Consumers read rows
`[start - 1, start - 1 + count)`.

The in-memory index is a character trie, so a lookup walks at most
`len(name)` nodes and never raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Tuple

NOT_FOUND: Tuple[int, int] = (0, 0)


@dataclass(frozen=True)
class NameBlock:
	name: str
	start: int  # 1-based
	count: int


class _TrieNode:
	__slots__ = ("children", "block")

	def __init__(self) -> None:
		self.children: Dict[str, _TrieNode] = {}
		self.block: Optional[Tuple[int, int]] = None


class NameIndex:
	"""Immutable name -> (start, count) mapping backed by a trie."""

	def __init__(self, blocks: Iterable[NameBlock]) -> None:
		self._blocks: Tuple[NameBlock, ...] = tuple(blocks)
		self._root = _TrieNode()
		for block in self._blocks:
			if block.start < 1 or block.count < 1:
				raise ValueError(f"invalid block for builtin '{block.name}': ({block.start}, {block.count})")
			node = self._root
			for ch in block.name:
				node = node.children.setdefault(ch, _TrieNode())
			if node.block is not None:
				raise ValueError(f"builtin '{block.name}' has more than one block")
			node.block = (block.start, block.count)

	@classmethod
	def from_counts(cls, counts: Iterable[Tuple[str, int]]) -> "NameIndex":
		"""Lay out consecutive blocks from (name, overload count) pairs in order."""
		blocks = []
		cumulative = 1
		for name, count in counts:
			blocks.append(NameBlock(name=name, start=cumulative, count=count))
			cumulative += count
		return cls(blocks)

	def lookup(self, name: object) -> Tuple[int, int]:
		"""Return `(start, count)` for a builtin name, `(0, 0)` otherwise."""
		if not isinstance(name, str):
			return NOT_FOUND
		node = self._root
		for ch in name:
			nxt = node.children.get(ch)
			if nxt is None:
				return NOT_FOUND
			node = nxt
		return node.block if node.block is not None else NOT_FOUND

	@property
	def blocks(self) -> Tuple[NameBlock, ...]:
		return self._blocks

	def __iter__(self) -> Iterator[NameBlock]:
		return iter(self._blocks)

	def __len__(self) -> int:
		return len(self._blocks)

	def __contains__(self, name: object) -> bool:
		return self.lookup(name) != NOT_FOUND


__all__ = ["NOT_FOUND", "NameBlock", "NameIndex"]
