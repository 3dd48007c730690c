# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Type descriptors and signature deduplication.

A signature is the ordered tuple of type descriptors of one overload (return
type first). All distinct signatures share one flat table; each occupies one
contiguous run and overloads refer to it by start offset. Two overloads with
structurally equal signatures, whatever their names, get the same offset.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from builtin_tablegen.catalog.records import TypeDecl
from builtin_tablegen.core.diagnostics import CatalogError
from builtin_tablegen.core.types_core import AddressSpace


@dataclass(frozen=True)
class TypeDescriptor:
	"""One entry of the signature table. `vector_width == 0` means scalar."""

	base_id: int
	vector_width: int = 0
	address_space: AddressSpace = AddressSpace.DEFAULT
	is_pointer: bool = False


Signature = Tuple[TypeDescriptor, ...]


class TypeVocabulary:
	"""
	Base-type enumeration plus the descriptor of every type record.

	Base ids follow the first-seen order of type names over the type
	declarations; all records sharing a name share its base id and must agree
	on the concrete type they stand for.
	"""

	def __init__(self, names: Sequence[str], qual_types: Sequence[Optional[str]], descriptors: Dict[str, TypeDescriptor]) -> None:
		self.names: Tuple[str, ...] = tuple(names)
		self.qual_types: Tuple[Optional[str], ...] = tuple(qual_types)
		self._descriptors = dict(descriptors)

	@classmethod
	def from_decls(cls, decls: Iterable[TypeDecl]) -> "TypeVocabulary":
		base_ids: Dict[str, int] = {}
		qual_types: List[Optional[str]] = []
		qual_owner: List[TypeDecl] = []
		seen: Dict[str, TypeDecl] = {}
		descriptors: Dict[str, TypeDescriptor] = {}
		for decl in decls:
			if not decl.name.isidentifier():
				raise CatalogError.at(
					decl.span.field("name"), "E-CATALOG-FIELD", f"type name '{decl.name}' is not a valid identifier"
				)
			if decl.vec_width < 0:
				raise CatalogError.at(
					decl.span.field("vec_width"),
					"E-CATALOG-FIELD",
					f"type '{decl.key}' has negative vector width {decl.vec_width}",
				)
			prev = seen.get(decl.key)
			if prev is not None:
				if prev != decl:
					raise CatalogError.at(
						decl.span,
						"E-TYPE-DUP",
						f"type '{decl.key}' is declared twice with different fields",
						notes=[f"first declared at {prev.span.format()}"],
					)
				continue
			seen[decl.key] = decl
			base_id = base_ids.get(decl.name)
			if base_id is None:
				base_id = len(qual_types)
				base_ids[decl.name] = base_id
				qual_types.append(decl.qual_type)
				qual_owner.append(decl)
			elif qual_types[base_id] != decl.qual_type:
				raise CatalogError.at(
					decl.span.field("qual_type"),
					"E-TYPE-QUAL",
					f"type name '{decl.name}' maps to both '{qual_types[base_id] or 'null'}' and '{decl.qual_type or 'null'}'",
					notes=[f"first mapping from type '{qual_owner[base_id].key}'"],
				)
			descriptors[decl.key] = TypeDescriptor(
				base_id=base_id,
				vector_width=decl.vec_width,
				address_space=decl.addr_space,
				is_pointer=decl.is_pointer,
			)
		return cls(list(base_ids), qual_types, descriptors)

	def descriptor(self, key: str) -> Optional[TypeDescriptor]:
		return self._descriptors.get(key)


class SignatureRegistry:
	"""
	Interns signatures into the shared signature table.

	The registry is keyed by the structural tuple, so lookups are hash-based,
	but offsets and table order are exactly those of a first-fit linear scan:
	a new signature is appended at the current cumulative length.
	"""

	def __init__(self) -> None:
		self._starts: Dict[Signature, int] = {}
		self._table: List[TypeDescriptor] = []
		self._runs: List[Tuple[int, int]] = []

	def intern(self, signature: Sequence[TypeDescriptor]) -> int:
		"""Return the start offset of `signature`, appending it on first sight."""
		key = tuple(signature)
		if not key:
			raise ValueError("signature must contain at least the return type")
		start = self._starts.get(key)
		if start is None:
			start = len(self._table)
			self._starts[key] = start
			self._table.extend(key)
			self._runs.append((start, len(key)))
		return start

	@property
	def table(self) -> Tuple[TypeDescriptor, ...]:
		return tuple(self._table)

	@property
	def runs(self) -> Tuple[Tuple[int, int], ...]:
		"""(start, length) of every distinct signature, in table order."""
		return tuple(self._runs)

	def __len__(self) -> int:
		return len(self._runs)


__all__ = ["TypeDescriptor", "Signature", "TypeVocabulary", "SignatureRegistry"]
