# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Shared fixtures for builtin_tablegen tests.

Provides:
- small in-Python catalogs (the cos/sin example and an empty catalog),
- the on-disk sample catalog,
- a helper executing generated Python source in a scratch namespace.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict

import pytest

from builtin_tablegen.catalog.records import BuiltinDecl, Catalog, TypeDecl, VersionDecl


@pytest.fixture
def data_dir() -> Path:
	return Path(__file__).parent / "data"


@pytest.fixture
def sample_catalog_path(data_dir: Path) -> Path:
	return data_dir / "opencl_sample.json"


@pytest.fixture
def trig_catalog() -> Catalog:
	"""`cos(float)`, `sin(float)`, `cos(double)`: cos/sin share `<float, float>`."""
	return Catalog(
		types=(
			TypeDecl(key="Float", name="float", qual_type="FloatTy"),
			TypeDecl(key="Double", name="double", qual_type="DoubleTy"),
		),
		builtins=(
			BuiltinDecl(name="cos", signature=("Float", "Float"), version="CL10"),
			BuiltinDecl(name="sin", signature=("Float", "Float"), version="CL10"),
			BuiltinDecl(name="cos", signature=("Double", "Double"), version="CL10"),
		),
		versions=(VersionDecl(key="CL10", version=100),),
		name="trig",
	)


@pytest.fixture
def empty_catalog() -> Catalog:
	return Catalog()


@pytest.fixture
def exec_generated() -> Callable[[str], Dict[str, Any]]:
	"""
	Return a function compiling and executing generated module text.

	Usage:
		ns = exec_generated(render_python_source(tables))
		assert ns["is_builtin"]("cos") == (1, 2)
	"""

	def _exec(source: str) -> Dict[str, Any]:
		ns: Dict[str, Any] = {"__name__": "generated_builtins"}
		exec(compile(source, "<generated_builtins>", "exec"), ns)
		return ns

	return _exec
