# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Projection of signature-table descriptors onto a semantic type context.

Steps, in order:
  1. base: the concrete type of the descriptor's base id, or the context's
     Void when the base has no concrete type (abstract placeholder);
  2. vector: wrap as an extended vector when `vector_width > 0`;
  3. pointer: qualify with the address space, then take a pointer.

Vector wrapping happens before pointer wrapping, so a pointer to a vector is
expressible and a vector of pointers is never produced.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

from builtin_tablegen.core.types_protocol import TypeContext
from builtin_tablegen.tables.signatures import TypeDescriptor


class TypeProjector:
	"""Projects descriptors using the concrete type names of a catalog's base types."""

	def __init__(self, qual_types: Sequence[Optional[str]]) -> None:
		self._qual_types: Tuple[Optional[str], ...] = tuple(qual_types)

	def base_qual_type(self, base_id: int) -> Optional[str]:
		if 0 <= base_id < len(self._qual_types):
			return self._qual_types[base_id]
		return None

	def project(self, ctx: TypeContext, ty: TypeDescriptor) -> Any:
		rt = ctx.ensure_void()
		# Abstract bases (and ids outside the vocabulary) keep the Void default.
		qual = self.base_qual_type(ty.base_id)
		if qual is not None:
			rt = ctx.ensure_builtin(qual)
		if ty.vector_width > 0:
			rt = ctx.ensure_ext_vector(rt, ty.vector_width)
		if ty.is_pointer:
			rt = ctx.ensure_addr_space_qual(rt, ty.address_space)
			rt = ctx.ensure_pointer(rt)
		return rt


__all__ = ["TypeProjector"]
