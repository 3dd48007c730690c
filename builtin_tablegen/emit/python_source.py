# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Python source emitter for BuiltinTables.

The emitted module is self-contained apart from importing `AddressSpace` and
holds, in order:
  - `TypeID`: one enum member per distinct base type name (`T_<name>`);
  - `SignatureType` / `BuiltinDecl`: record declarations;
  - `SIGNATURE_TABLE`: every distinct signature once, marked with its start;
  - `BUILTIN_TABLE`: overload rows grouped per builtin name;
  - `is_builtin(name)`: 1-based `(start, count)` into BUILTIN_TABLE, or `(0, 0)`;
  - `project_type(ctx, ty)`: SignatureType -> semantic type via `ctx`.

Example rows:
	# 12
	SignatureType(TypeID.T_uchar, 4, AddressSpace.DEFAULT, False),
	SignatureType(TypeID.T_float, 4, AddressSpace.DEFAULT, False),
is the signature at index 12 returning a 4-lane uchar vector and taking a
4-lane float vector, and
	# acos
	BuiltinDecl(2, 0, '', 100),
is an acos overload introduced in version 100, outside any extension, whose
two types (return + one argument) start at index 0 of SIGNATURE_TABLE.
"""

from __future__ import annotations

from typing import List

from builtin_tablegen.emit.string_matcher import emit_string_matcher
from builtin_tablegen.tables.builder import BuiltinTables
from builtin_tablegen.tables.signatures import TypeDescriptor

TYPE_ENUM_PREFIX = "T_"


def render_python_source(tables: BuiltinTables) -> str:
	"""Render the generated module text."""
	lines: List[str] = []
	_emit_header(tables, lines)
	_emit_declarations(tables, lines)
	_emit_signature_table(tables, lines)
	_emit_builtin_table(tables, lines)
	_emit_string_matcher(tables, lines)
	_emit_type_projector(tables, lines)
	return "\n".join(lines) + "\n"


def type_enum_member(name: str) -> str:
	return f"{TYPE_ENUM_PREFIX}{name}"


def _emit_header(tables: BuiltinTables, lines: List[str]) -> None:
	lines.append("# Builtin overload tables. Autogenerated by builtin_tablegen; do not edit.")
	if tables.catalog_name:
		lines.append(f"# catalog: {tables.catalog_name}")
	lines.append(f"# catalog sha256: {tables.catalog_sha256}")
	lines.append("")
	lines.append("from __future__ import annotations")
	lines.append("")
	lines.append("from enum import IntEnum")
	lines.append("from typing import Any, NamedTuple, Tuple")
	lines.append("")
	lines.append("from builtin_tablegen.core.types_core import AddressSpace")
	lines.append("")


def _emit_declarations(tables: BuiltinTables, lines: List[str]) -> None:
	lines.append("")
	lines.append("class TypeID(IntEnum):")
	if not tables.type_names:
		lines.append("\tpass")
	for idx, name in enumerate(tables.type_names):
		lines.append(f"\t{type_enum_member(name)} = {idx}")
	lines.extend(
		[
			"",
			"",
			"class SignatureType(NamedTuple):",
			'\t"""Type used in a prototype of a builtin function."""',
			"",
			"\t# A type (e.g. float, int, ...)",
			"\ttype_id: TypeID",
			"\t# Size of vector (if applicable)",
			"\tvector_width: int",
			"\t# Address space of the pointer (if applicable)",
			"\taddr_space: AddressSpace",
			"\t# Whether the type is a pointer",
			"\tis_pointer: bool",
			"",
			"",
			"class BuiltinDecl(NamedTuple):",
			'\t"""One overload of a builtin function."""',
			"",
			"\t# Number of types in the signature (return type included)",
			"\tnum_types: int",
			"\t# Index in SIGNATURE_TABLE of the return type",
			"\tsig_index: int",
			"\t# Extension to which it belongs (e.g. cl_khr_subgroups)",
			"\textension: str",
			"\t# Version in which it was introduced (e.g. 200)",
			"\tversion: int",
			"",
		]
	)


def _render_descriptor(tables: BuiltinTables, ty: TypeDescriptor) -> str:
	return (
		f"SignatureType(TypeID.{type_enum_member(tables.type_names[ty.base_id])}, "
		f"{ty.vector_width}, AddressSpace.{ty.address_space.name}, {ty.is_pointer})"
	)


def _emit_signature_table(tables: BuiltinTables, lines: List[str]) -> None:
	lines.append("")
	lines.append("SIGNATURE_TABLE: Tuple[SignatureType, ...] = (")
	for start, length in tables.signature_runs:
		lines.append(f"\t# {start}")
		for ty in tables.signature_table[start : start + length]:
			lines.append(f"\t{_render_descriptor(tables, ty)},")
	lines.append(")")
	lines.append("")


def _emit_builtin_table(tables: BuiltinTables, lines: List[str]) -> None:
	lines.append("")
	lines.append("BUILTIN_TABLE: Tuple[BuiltinDecl, ...] = (")
	for block in tables.name_index:
		lines.append(f"\t# {block.name}")
		for row in tables.overload_table[block.start - 1 : block.start - 1 + block.count]:
			lines.append(f"\tBuiltinDecl({row.signature_len}, {row.signature_start}, {row.extension!r}, {row.version}),")
	lines.append(")")
	lines.append("")


def _emit_string_matcher(tables: BuiltinTables, lines: List[str]) -> None:
	matches = [(block.name, f"return ({block.start}, {block.count})") for block in tables.name_index]
	lines.append("")
	lines.append("def is_builtin(name: str) -> Tuple[int, int]:")
	lines.append('\t"""')
	lines.append("\tReturn (0, 0) if `name` is not a recognized builtin, else (start, count)")
	lines.append("\twhere BUILTIN_TABLE[start - 1 : start - 1 + count] are its overloads.")
	lines.append('\t"""')
	if matches:
		lines.append("\tif not isinstance(name, str):")
		lines.append("\t\treturn (0, 0)")
		lines.append("\tlength = len(name)")
		lines.extend(emit_string_matcher("name", "length", matches, "\t"))
	lines.append("\treturn (0, 0)")
	lines.append("")


def _emit_type_projector(tables: BuiltinTables, lines: List[str]) -> None:
	lines.append("")
	lines.append("def project_type(ctx: Any, ty: SignatureType) -> Any:")
	lines.append('\t"""Return the semantic type `ctx` associates with a SignatureType entry."""')
	lines.append("\trt = ctx.ensure_void()")
	first = True
	for name, qual in zip(tables.type_names, tables.qual_types):
		# Abstract base types have no concrete type and keep the Void default.
		if qual is None:
			continue
		kw = "if" if first else "elif"
		first = False
		lines.append(f"\t{kw} ty.type_id == TypeID.{type_enum_member(name)}:")
		lines.append(f"\t\trt = ctx.ensure_builtin({qual!r})")
	lines.extend(
		[
			"",
			"\tif ty.vector_width > 0:",
			"\t\trt = ctx.ensure_ext_vector(rt, ty.vector_width)",
			"",
			"\tif ty.is_pointer:",
			"\t\trt = ctx.ensure_addr_space_qual(rt, ty.addr_space)",
			"\t\trt = ctx.ensure_pointer(rt)",
			"",
			"\treturn rt",
		]
	)


__all__ = ["TYPE_ENUM_PREFIX", "render_python_source", "type_enum_member"]
