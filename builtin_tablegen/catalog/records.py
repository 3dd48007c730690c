# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Typed catalog records.

The catalog is the already-compiled declarative input: type declarations,
version declarations and builtin overload declarations, in declaration order.
Records reference each other by `key` (the record identity in the source
schema), never by Python object identity.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from builtin_tablegen.core.span import Span
from builtin_tablegen.core.types_core import AddressSpace

# Spelling of the "no direct concrete type" sentinel in catalogs.
NULL_QUAL_TYPE = "null"


@dataclass(frozen=True)
class VersionDecl:
	"""A language version record, e.g. CL20 -> 200."""

	key: str
	version: int
	span: Span = field(default_factory=Span, compare=False)


@dataclass(frozen=True)
class TypeDecl:
	"""
	A type record usable in builtin signatures.

	Several records may share one base `name` (e.g. `float` and its vector
	forms); `qual_type` is None for abstract bases with no concrete type.
	"""

	key: str
	name: str
	vec_width: int = 0
	addr_space: AddressSpace = AddressSpace.DEFAULT
	is_pointer: bool = False
	qual_type: Optional[str] = None
	span: Span = field(default_factory=Span, compare=False)


@dataclass(frozen=True)
class BuiltinDecl:
	"""One overload of a builtin: return type key first, then parameter type keys."""

	name: str
	signature: Tuple[str, ...]
	version: Optional[str]
	extension: str = ""
	span: Span = field(default_factory=Span, compare=False)


@dataclass(frozen=True)
class Catalog:
	"""Fully parsed catalog in declaration order."""

	types: Tuple[TypeDecl, ...] = ()
	builtins: Tuple[BuiltinDecl, ...] = ()
	versions: Tuple[VersionDecl, ...] = ()
	name: Optional[str] = None
	file: Optional[str] = field(default=None, compare=False)

	def to_obj(self) -> dict[str, Any]:
		"""Encode back to the JSON catalog shape (used for fingerprinting)."""
		obj: dict[str, Any] = {
			"format": "builtin-catalog",
			"version": 0,
			"versions": [{"def": v.key, "version": v.version} for v in self.versions],
			"types": [
				{
					"def": t.key,
					"name": t.name,
					"vec_width": t.vec_width,
					"addr_space": t.addr_space.value,
					"is_pointer": t.is_pointer,
					"qual_type": t.qual_type if t.qual_type is not None else NULL_QUAL_TYPE,
				}
				for t in self.types
			],
			"builtins": [
				{"name": b.name, "signature": list(b.signature), "extension": b.extension, "version": b.version}
				for b in self.builtins
			],
		}
		if self.name is not None:
			obj["name"] = self.name
		return obj

	def fingerprint(self) -> str:
		"""sha256 over the canonical JSON encoding of the catalog."""
		return sha256_hex(canonical_json_bytes(self.to_obj()))


def canonical_json_bytes(obj: Any) -> bytes:
	"""
	Render a catalog object as canonical JSON for fingerprinting.

	The encoding is UTF-8 with sorted keys and no insignificant whitespace, so
	equal catalogs hash equally whatever their source formatting was.
	"""
	return json.dumps(obj, sort_keys=True, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def sha256_hex(data: bytes) -> str:
	return hashlib.sha256(data).hexdigest()


__all__ = [
	"NULL_QUAL_TYPE",
	"VersionDecl",
	"TypeDecl",
	"BuiltinDecl",
	"Catalog",
	"canonical_json_bytes",
	"sha256_hex",
]
