# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Type-system context protocol for builtin type projection.

The projector (in-memory and generated) never constructs semantic types on
its own; it asks a context for them. `TypeTable` is the shipped
implementation, but a downstream analyzer can hand in its own object as long
as it provides these methods. Returned handles are opaque.
"""

from __future__ import annotations

from typing import Any, Protocol

from .types_core import AddressSpace


class TypeContext(Protocol):
	"""Factory for the semantic types a builtin type descriptor can denote."""

	def ensure_void(self) -> Any:
		"""Return the "no type" default used for abstract base types."""
		...

	def ensure_builtin(self, name: str) -> Any:
		"""Return the concrete type named `name` (e.g. `FloatTy`)."""
		...

	def ensure_ext_vector(self, elem: Any, width: int) -> Any:
		...

	def ensure_addr_space_qual(self, inner: Any, addr_space: AddressSpace) -> Any:
		...

	def ensure_pointer(self, pointee: Any) -> Any:
		...


__all__ = ["TypeContext"]
