# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Single generation pass: Catalog -> BuiltinTables.

Pass structure:
  1. build the type vocabulary (base-type enumeration + per-record descriptors);
  2. walk builtin declarations in catalog order, resolving each signature to
     descriptors and interning it in the shared signature table;
  3. group the resulting rows by name (first-seen name order);
  4. flatten the groups into the overload table and lay out the name index.

Signatures are interned in declaration order, not in grouped order, so the
signature table layout matches the order overloads appear in the catalog.
Any malformed entry raises CatalogError and no tables are produced.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from builtin_tablegen.catalog.records import BuiltinDecl, Catalog, VersionDecl
from builtin_tablegen.core.diagnostics import CatalogError
from builtin_tablegen.core.types_protocol import TypeContext
from builtin_tablegen.tables.name_index import NameIndex
from builtin_tablegen.tables.overloads import collect_overloads
from builtin_tablegen.tables.projector import TypeProjector
from builtin_tablegen.tables.signatures import (
	Signature,
	SignatureRegistry,
	TypeDescriptor,
	TypeVocabulary,
)


@dataclass(frozen=True)
class OverloadRow:
	"""One overload: a run of the signature table plus extension/version metadata."""

	name: str  # owning builtin; informational for consumers
	signature_start: int
	signature_len: int
	extension: str
	version: int


@dataclass(frozen=True)
class BuiltinTables:
	"""Immutable output of one generation pass."""

	catalog_name: Optional[str]
	catalog_sha256: str
	type_names: Tuple[str, ...]
	qual_types: Tuple[Optional[str], ...]
	signature_table: Tuple[TypeDescriptor, ...]
	signature_runs: Tuple[Tuple[int, int], ...]
	overload_table: Tuple[OverloadRow, ...]
	name_index: NameIndex

	def lookup(self, name: object) -> Tuple[int, int]:
		"""Dispatcher contract: 1-based `(start, count)` or `(0, 0)`."""
		return self.name_index.lookup(name)

	def overloads_for(self, name: object) -> Tuple[OverloadRow, ...]:
		start, count = self.lookup(name)
		if count == 0:
			return ()
		return self.overload_table[start - 1 : start - 1 + count]

	def signature_of(self, row: OverloadRow) -> Signature:
		return self.signature_table[row.signature_start : row.signature_start + row.signature_len]

	@property
	def projector(self) -> TypeProjector:
		return TypeProjector(self.qual_types)

	def project(self, ctx: TypeContext, ty: TypeDescriptor) -> Any:
		return self.projector.project(ctx, ty)


def build_tables(catalog: Catalog) -> BuiltinTables:
	"""Run the generation pass over a catalog."""
	vocab = TypeVocabulary.from_decls(catalog.types)
	versions = _index_versions(catalog)
	registry = SignatureRegistry()

	rows = [_make_row(decl, vocab, versions, registry) for decl in catalog.builtins]
	grouped = collect_overloads(rows)

	overload_table = tuple(row for block in grouped.values() for row in block)
	name_index = NameIndex.from_counts((name, len(block)) for name, block in grouped.items())
	return BuiltinTables(
		catalog_name=catalog.name,
		catalog_sha256=catalog.fingerprint(),
		type_names=vocab.names,
		qual_types=vocab.qual_types,
		signature_table=registry.table,
		signature_runs=registry.runs,
		overload_table=overload_table,
		name_index=name_index,
	)


def _index_versions(catalog: Catalog) -> Dict[str, VersionDecl]:
	out: Dict[str, VersionDecl] = {}
	for v in catalog.versions:
		prev = out.get(v.key)
		if prev is not None and prev.version != v.version:
			raise CatalogError.at(
				v.span,
				"E-VERSION-DUP",
				f"version '{v.key}' is declared as both {prev.version} and {v.version}",
				phase="tables",
			)
		out.setdefault(v.key, v)
	return out


def _make_row(
	decl: BuiltinDecl,
	vocab: TypeVocabulary,
	versions: Dict[str, VersionDecl],
	registry: SignatureRegistry,
) -> OverloadRow:
	if not decl.name or not decl.name.isprintable():
		raise CatalogError.at(
			decl.span.field("name"),
			"E-CATALOG-FIELD",
			f"builtin name {decl.name!r} must be a non-empty printable string",
			phase="tables",
		)
	if not decl.signature:
		raise CatalogError.at(
			decl.span.field("signature"),
			"E-SIG-EMPTY",
			f"builtin '{decl.name}' has an empty signature (a return type is required)",
			phase="tables",
		)
	sig: list[TypeDescriptor] = []
	for idx, key in enumerate(decl.signature):
		desc = vocab.descriptor(key)
		if desc is None:
			raise CatalogError.at(
				decl.span.field("signature").index(idx),
				"E-TYPE-UNDECLARED",
				f"builtin '{decl.name}' references undeclared type '{key}'",
				phase="tables",
			)
		sig.append(desc)
	if decl.version is None:
		raise CatalogError.at(
			decl.span.field("version"),
			"E-VERSION-MISSING",
			f"builtin '{decl.name}' has no version reference",
			phase="tables",
		)
	version = versions.get(decl.version)
	if version is None:
		raise CatalogError.at(
			decl.span.field("version"),
			"E-VERSION-MISSING",
			f"builtin '{decl.name}' references undeclared version '{decl.version}'",
			phase="tables",
		)
	start = registry.intern(sig)
	return OverloadRow(
		name=decl.name,
		signature_start=start,
		signature_len=len(sig),
		extension=decl.extension,
		version=version.version,
	)


__all__ = ["OverloadRow", "BuiltinTables", "build_tables"]
