from __future__ import annotations

import pytest

from builtin_tablegen.core.types_core import AddressSpace, TypeKind, TypeTable


def test_type_table_interns_builtins_and_void():
	table = TypeTable()
	float_ty = table.ensure_builtin("FloatTy")
	void_ty = table.ensure_void()

	assert table.get(float_ty).kind is TypeKind.BUILTIN
	assert table.get(float_ty).name == "FloatTy"
	assert float_ty == table.ensure_builtin("FloatTy")
	assert table.get(void_ty).kind is TypeKind.VOID
	assert void_ty == table.ensure_void()
	assert float_ty != void_ty


def test_type_table_interns_derived_types():
	table = TypeTable()
	int_ty = table.ensure_builtin("IntTy")

	vec = table.ensure_ext_vector(int_ty, 4)
	assert vec == table.ensure_ext_vector(int_ty, 4)
	assert vec != table.ensure_ext_vector(int_ty, 2)
	assert table.get(vec).param_types == [int_ty]
	assert table.get(vec).vector_width == 4

	glob = table.ensure_addr_space_qual(int_ty, AddressSpace.OPENCL_GLOBAL)
	assert glob == table.ensure_addr_space_qual(int_ty, AddressSpace.OPENCL_GLOBAL)
	assert table.get(glob).addr_space is AddressSpace.OPENCL_GLOBAL

	ptr = table.ensure_pointer(glob)
	assert ptr == table.ensure_pointer(glob)
	assert table.get(ptr).kind is TypeKind.POINTER


def test_default_address_space_is_unqualified():
	table = TypeTable()
	int_ty = table.ensure_builtin("IntTy")

	assert table.ensure_addr_space_qual(int_ty, AddressSpace.DEFAULT) == int_ty


def test_requalifying_with_another_address_space_is_rejected():
	table = TypeTable()
	local = table.ensure_addr_space_qual(table.ensure_builtin("IntTy"), AddressSpace.OPENCL_LOCAL)

	assert table.ensure_addr_space_qual(local, AddressSpace.OPENCL_LOCAL) == local
	with pytest.raises(ValueError):
		table.ensure_addr_space_qual(local, AddressSpace.OPENCL_GLOBAL)


def test_vector_width_must_be_positive():
	table = TypeTable()
	with pytest.raises(ValueError):
		table.ensure_ext_vector(table.ensure_builtin("FloatTy"), 0)


def test_describe_renders_nested_types():
	table = TypeTable()
	float4 = table.ensure_ext_vector(table.ensure_builtin("FloatTy"), 4)
	ptr = table.ensure_pointer(table.ensure_addr_space_qual(float4, AddressSpace.OPENCL_PRIVATE))

	assert table.describe(float4) == "4-wide vector of FloatTy"
	assert table.describe(ptr) == "pointer to (address space opencl_private) 4-wide vector of FloatTy"
	assert table.describe(table.ensure_void()) == "void"


def test_address_space_from_name_accepts_qualified_spelling():
	assert AddressSpace.from_name("Default") is AddressSpace.DEFAULT
	assert AddressSpace.from_name("opencl_generic") is AddressSpace.OPENCL_GENERIC
	assert AddressSpace.from_name("clang::LangAS::opencl_constant") is AddressSpace.OPENCL_CONSTANT
	with pytest.raises(ValueError):
		AddressSpace.from_name("opencl_shared")
