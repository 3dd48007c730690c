# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Overload collection.

Groups declarations by builtin name. Name order is first-seen order and the
declarations of one name keep their relative order. Nothing is merged here:
two overloads of the same name with identical signatures stay two entries.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Protocol, Tuple, TypeVar


class _Named(Protocol):
	@property
	def name(self) -> str: ...


_T = TypeVar("_T", bound=_Named)


def collect_overloads(decls: Iterable[_T]) -> Dict[str, Tuple[_T, ...]]:
	"""Return an insertion-ordered mapping name -> declarations of that name."""
	grouped: Dict[str, List[_T]] = {}
	for decl in decls:
		grouped.setdefault(decl.name, []).append(decl)
	return {name: tuple(items) for name, items in grouped.items()}


__all__ = ["collect_overloads"]
