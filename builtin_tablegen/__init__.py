# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
builtin_tablegen: build-time generator for builtin-function overload tables.

A catalog of builtin declarations is turned into:
  - a deduplicated signature table (flat list of type descriptors),
  - a per-name overload table whose rows point into the signature table,
  - a name dispatcher returning 1-based (start, count) blocks, (0, 0) otherwise,
  - a type projector mapping descriptors to concrete semantic types.

Subpackages:
  core: diagnostics, spans, the type-system context
  catalog: typed input records and the JSON catalog loader
  tables: the single generation pass
  emit: Python source and JSON renderings of the generated tables
"""

from builtin_tablegen.catalog.loader import load_catalog, parse_catalog_obj
from builtin_tablegen.catalog.records import BuiltinDecl, Catalog, TypeDecl, VersionDecl
from builtin_tablegen.core.diagnostics import CatalogError, Diagnostic
from builtin_tablegen.tables.builder import BuiltinTables, build_tables

__all__ = [
	"BuiltinDecl",
	"BuiltinTables",
	"Catalog",
	"CatalogError",
	"Diagnostic",
	"TypeDecl",
	"VersionDecl",
	"build_tables",
	"load_catalog",
	"parse_catalog_obj",
]
