# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from pathlib import Path

from builtin_tablegen.catalog.loader import load_catalog
from builtin_tablegen.catalog.records import Catalog
from builtin_tablegen.core.types_core import AddressSpace, TypeTable
from builtin_tablegen.emit.python_source import render_python_source
from builtin_tablegen.tables.builder import build_tables


def test_trig_module_text(trig_catalog: Catalog):
	tables = build_tables(trig_catalog)
	src = render_python_source(tables)

	assert src.startswith("# Builtin overload tables. Autogenerated by builtin_tablegen; do not edit.\n# catalog: trig\n")
	assert f"# catalog sha256: {tables.catalog_sha256}" in src
	assert "\tT_float = 0\n\tT_double = 1\n" in src
	assert (
		"SIGNATURE_TABLE: Tuple[SignatureType, ...] = (\n"
		"\t# 0\n"
		"\tSignatureType(TypeID.T_float, 0, AddressSpace.DEFAULT, False),\n"
		"\tSignatureType(TypeID.T_float, 0, AddressSpace.DEFAULT, False),\n"
		"\t# 2\n"
		"\tSignatureType(TypeID.T_double, 0, AddressSpace.DEFAULT, False),\n"
		"\tSignatureType(TypeID.T_double, 0, AddressSpace.DEFAULT, False),\n"
		")\n"
	) in src
	assert (
		"BUILTIN_TABLE: Tuple[BuiltinDecl, ...] = (\n"
		"\t# cos\n"
		"\tBuiltinDecl(2, 0, '', 100),\n"
		"\tBuiltinDecl(2, 2, '', 100),\n"
		"\t# sin\n"
		"\tBuiltinDecl(2, 0, '', 100),\n"
		")\n"
	) in src


def test_generated_dispatcher_matches_scenario(trig_catalog: Catalog, exec_generated):
	ns = exec_generated(render_python_source(build_tables(trig_catalog)))
	is_builtin = ns["is_builtin"]

	assert is_builtin("cos") == (1, 2)
	assert is_builtin("sin") == (3, 1)
	assert is_builtin("tan") == (0, 0)
	assert is_builtin("") == (0, 0)
	assert is_builtin(None) == (0, 0)


def test_generated_module_agrees_with_tables(sample_catalog_path: Path, exec_generated):
	tables = build_tables(load_catalog(sample_catalog_path))
	ns = exec_generated(render_python_source(tables))
	type_id = ns["TypeID"]

	assert [m.name for m in type_id] == ["T_" + n for n in tables.type_names]
	assert len(ns["SIGNATURE_TABLE"]) == len(tables.signature_table)
	for gen, ty in zip(ns["SIGNATURE_TABLE"], tables.signature_table):
		assert (int(gen.type_id), gen.vector_width, gen.addr_space, gen.is_pointer) == (
			ty.base_id,
			ty.vector_width,
			ty.address_space,
			ty.is_pointer,
		)
	assert [tuple(d) for d in ns["BUILTIN_TABLE"]] == [
		(r.signature_len, r.signature_start, r.extension, r.version) for r in tables.overload_table
	]

	probes = [b.name for b in tables.name_index] + ["", "co", "coss", "sig", "signs", "fr", "frac", "vload", "get_sub_group", "Cos"]
	for name in probes:
		assert ns["is_builtin"](name) == tables.lookup(name)


def test_generated_projector_agrees_with_in_memory(sample_catalog_path: Path, exec_generated):
	tables = build_tables(load_catalog(sample_catalog_path))
	ns = exec_generated(render_python_source(tables))

	for gen, ty in zip(ns["SIGNATURE_TABLE"], tables.signature_table):
		gen_ctx = TypeTable()
		mem_ctx = TypeTable()
		assert gen_ctx.describe(ns["project_type"](gen_ctx, gen)) == mem_ctx.describe(tables.project(mem_ctx, ty))


def test_generated_projector_examples(sample_catalog_path: Path, exec_generated):
	tables = build_tables(load_catalog(sample_catalog_path))
	ns = exec_generated(render_python_source(tables))
	sig_type = ns["SignatureType"]
	type_id = ns["TypeID"]
	ctx = TypeTable()

	float4 = ns["project_type"](ctx, sig_type(type_id.T_float, 4, AddressSpace.DEFAULT, False))
	int_ptr = ns["project_type"](ctx, sig_type(type_id.T_int, 0, AddressSpace.OPENCL_GLOBAL, True))
	abstract = ns["project_type"](ctx, sig_type(type_id.T_gentype, 0, AddressSpace.DEFAULT, False))

	assert ctx.describe(float4) == "4-wide vector of FloatTy"
	assert ctx.describe(int_ptr) == "pointer to (address space opencl_global) IntTy"
	assert ctx.describe(abstract) == "void"


def test_empty_catalog_module_is_valid(empty_catalog: Catalog, exec_generated):
	ns = exec_generated(render_python_source(build_tables(empty_catalog)))

	assert ns["SIGNATURE_TABLE"] == ()
	assert ns["BUILTIN_TABLE"] == ()
	assert len(ns["TypeID"]) == 0
	assert ns["is_builtin"]("cos") == (0, 0)


def test_rendering_is_deterministic(sample_catalog_path: Path):
	cat = load_catalog(sample_catalog_path)

	assert render_python_source(build_tables(cat)) == render_python_source(build_tables(cat))
