# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Minimal semantic type core used as the projection target for builtin types.

TypeIds are opaque ints indexing into a TypeTable. TypeKind keeps the universe
small: builtin scalars named after the concrete type they stand for
(`FloatTy`, `IntTy`, ...), Void, extended vectors, address-space qualified
types and pointers. Derived types are interned so structurally equal requests
return the same TypeId.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, List, Tuple


TypeId = int  # opaque handle into the TypeTable


class AddressSpace(Enum):
	"""Memory region qualifiers for pointer types (OpenCL naming)."""

	DEFAULT = "Default"
	OPENCL_GLOBAL = "opencl_global"
	OPENCL_LOCAL = "opencl_local"
	OPENCL_CONSTANT = "opencl_constant"
	OPENCL_PRIVATE = "opencl_private"
	OPENCL_GENERIC = "opencl_generic"

	@classmethod
	def from_name(cls, name: str) -> "AddressSpace":
		"""
		Resolve a catalog spelling to an AddressSpace.

		Accepts the bare name (`opencl_global`) as well as a qualified spelling
		(`clang::LangAS::opencl_global`); the last `::` component wins.
		"""
		short = name.rsplit("::", 1)[-1]
		for member in cls:
			if member.value == short:
				return member
		raise ValueError(f"unknown address space '{name}'")


class TypeKind(Enum):
	"""Kinds of types understood by the minimal type core."""

	VOID = auto()
	BUILTIN = auto()
	EXT_VECTOR = auto()
	ADDR_SPACE = auto()
	POINTER = auto()


@dataclass(frozen=True)
class TypeDef:
	"""Definition of a type stored in the TypeTable."""

	kind: TypeKind
	name: str
	param_types: List[TypeId]
	vector_width: int | None = None  # only meaningful for TypeKind.EXT_VECTOR
	addr_space: AddressSpace | None = None  # only meaningful for TypeKind.ADDR_SPACE


class TypeTable:
	"""
	Simple type table that owns TypeIds.

	Satisfies the `TypeContext` protocol consumed by the type projector.
	"""

	def __init__(self) -> None:
		self._defs: Dict[TypeId, TypeDef] = {}
		self._next_id: TypeId = 1  # reserve 0 for "invalid"
		self._void_type: TypeId | None = None
		self._builtins: Dict[str, TypeId] = {}
		self._derived: Dict[Tuple[object, ...], TypeId] = {}

	def ensure_void(self) -> TypeId:
		"""Return a stable Void TypeId, creating it once."""
		if self._void_type is None:
			self._void_type = self._add(TypeKind.VOID, "void", [])
		return self._void_type

	def ensure_builtin(self, name: str) -> TypeId:
		"""Return a stable builtin TypeId for a concrete type name (e.g. `FloatTy`)."""
		ty = self._builtins.get(name)
		if ty is None:
			ty = self._add(TypeKind.BUILTIN, name, [])
			self._builtins[name] = ty
		return ty

	def ensure_ext_vector(self, elem: TypeId, width: int) -> TypeId:
		"""Return a stable `width`-lane extended vector of `elem`."""
		if width <= 0:
			raise ValueError("vector width must be positive")
		key = ("vec", elem, width)
		if key not in self._derived:
			self._derived[key] = self._add(TypeKind.EXT_VECTOR, "ExtVector", [elem], vector_width=width)
		return self._derived[key]

	def ensure_addr_space_qual(self, inner: TypeId, addr_space: AddressSpace) -> TypeId:
		"""
		Return `inner` qualified with `addr_space`.

		Qualifying with the Default address space leaves the type unchanged, and
		re-qualifying an already qualified type with its own space is a no-op.
		"""
		if addr_space is AddressSpace.DEFAULT:
			return inner
		td = self.get(inner)
		if td.kind is TypeKind.ADDR_SPACE:
			if td.addr_space is addr_space:
				return inner
			raise ValueError("type is already qualified with a different address space")
		key = ("as", inner, addr_space)
		if key not in self._derived:
			self._derived[key] = self._add(TypeKind.ADDR_SPACE, "AddrSpace", [inner], addr_space=addr_space)
		return self._derived[key]

	def ensure_pointer(self, pointee: TypeId) -> TypeId:
		"""Return a stable pointer TypeId to `pointee`."""
		key = ("ptr", pointee)
		if key not in self._derived:
			self._derived[key] = self._add(TypeKind.POINTER, "Pointer", [pointee])
		return self._derived[key]

	def _add(
		self,
		kind: TypeKind,
		name: str,
		params: List[TypeId],
		*,
		vector_width: int | None = None,
		addr_space: AddressSpace | None = None,
	) -> TypeId:
		ty_id = self._next_id
		self._next_id += 1
		self._defs[ty_id] = TypeDef(
			kind=kind,
			name=name,
			param_types=list(params),
			vector_width=vector_width if kind is TypeKind.EXT_VECTOR else None,
			addr_space=addr_space if kind is TypeKind.ADDR_SPACE else None,
		)
		return ty_id

	def get(self, ty: TypeId) -> TypeDef:
		"""Fetch the TypeDef for a given TypeId."""
		return self._defs[ty]

	def describe(self, ty: TypeId) -> str:
		"""Render a TypeId as readable text, e.g. `pointer to (address space opencl_global) IntTy`."""
		td = self.get(ty)
		if td.kind is TypeKind.VOID:
			return "void"
		if td.kind is TypeKind.BUILTIN:
			return td.name
		inner = self.describe(td.param_types[0])
		if td.kind is TypeKind.EXT_VECTOR:
			return f"{td.vector_width}-wide vector of {inner}"
		if td.kind is TypeKind.ADDR_SPACE:
			assert td.addr_space is not None
			return f"(address space {td.addr_space.value}) {inner}"
		return f"pointer to {inner}"


__all__ = ["AddressSpace", "TypeId", "TypeKind", "TypeDef", "TypeTable"]
