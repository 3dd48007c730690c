# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
JSON catalog ingestion (v0).

The catalog is produced by an external schema compiler; this module only
checks its shape and converts it into typed records. Cross-record checks
(undeclared types, dangling version references, inconsistent duplicate type
declarations) belong to the generation pass, which also has to apply them to
catalogs built directly in Python.

Minimal schema (pinned):
{
  "format": "builtin-catalog",
  "version": 0,
  "name": "<label>",                                    (optional)
  "versions": [ { "def": "CL10", "version": 100 } ],
  "types": [ { "def": "Float", "name": "float", "vec_width": 0,
               "addr_space": "Default", "is_pointer": false,
               "qual_type": "FloatTy" } ],
  "builtins": [ { "name": "cos", "signature": ["Float", "Float"],
                  "extension": "", "version": "CL10" } ]
}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from builtin_tablegen.catalog.records import NULL_QUAL_TYPE, BuiltinDecl, Catalog, TypeDecl, VersionDecl
from builtin_tablegen.core.diagnostics import CatalogError
from builtin_tablegen.core.span import Span
from builtin_tablegen.core.types_core import AddressSpace

CATALOG_FORMAT = "builtin-catalog"
CATALOG_VERSION = 0


def load_catalog(path: Path) -> Catalog:
	"""Read and validate a catalog file."""
	root = Span(file=str(path))
	try:
		obj = json.loads(path.read_text(encoding="utf-8"))
	except json.JSONDecodeError as err:
		raise CatalogError.at(root, "E-CATALOG-FORMAT", f"catalog is not valid JSON: {err.msg} (line {err.lineno})") from err
	return parse_catalog_obj(obj, file=str(path))


def parse_catalog_obj(obj: Any, *, file: str | None = None) -> Catalog:
	"""Validate a decoded catalog object and convert it into records."""
	root = Span(file=file)
	if not isinstance(obj, dict):
		raise CatalogError.at(root, "E-CATALOG-FORMAT", "catalog must be a JSON object")
	if obj.get("format") != CATALOG_FORMAT or obj.get("version") != CATALOG_VERSION:
		raise CatalogError.at(
			root,
			"E-CATALOG-FORMAT",
			"unsupported catalog format/version",
			notes=[f"expected format '{CATALOG_FORMAT}' version {CATALOG_VERSION}"],
		)
	name = obj.get("name")
	if name is not None and not isinstance(name, str):
		raise CatalogError.at(root.field("name"), "E-CATALOG-FIELD", "catalog name must be a string")

	versions = tuple(_decode_version(o, sp) for o, sp in _entries(obj, "versions", root))
	types = tuple(_decode_type(o, sp) for o, sp in _entries(obj, "types", root))
	builtins = tuple(_decode_builtin(o, sp) for o, sp in _entries(obj, "builtins", root))
	return Catalog(types=types, builtins=builtins, versions=versions, name=name, file=file)


def _entries(obj: Mapping[str, Any], key: str, root: Span) -> list[tuple[Mapping[str, Any], Span]]:
	span = root.field(key)
	items = obj.get(key, [])
	if not isinstance(items, list):
		raise CatalogError.at(span, "E-CATALOG-FIELD", f"catalog '{key}' must be a list")
	out: list[tuple[Mapping[str, Any], Span]] = []
	for idx, item in enumerate(items):
		item_span = span.index(idx)
		if not isinstance(item, dict):
			raise CatalogError.at(item_span, "E-CATALOG-FIELD", f"'{key}' entries must be JSON objects")
		out.append((item, item_span))
	return out


def _req_str(obj: Mapping[str, Any], key: str, span: Span) -> str:
	val = obj.get(key)
	if not isinstance(val, str) or not val:
		raise CatalogError.at(span.field(key), "E-CATALOG-FIELD", f"missing or invalid '{key}' (expected non-empty string)")
	return val


def _opt_str(obj: Mapping[str, Any], key: str, span: Span, default: str) -> str:
	val = obj.get(key, default)
	if not isinstance(val, str):
		raise CatalogError.at(span.field(key), "E-CATALOG-FIELD", f"invalid '{key}' (expected string)")
	return val


def _opt_int(obj: Mapping[str, Any], key: str, span: Span, default: int) -> int:
	val = obj.get(key, default)
	# bool is an int subclass; reject it explicitly.
	if isinstance(val, bool) or not isinstance(val, int):
		raise CatalogError.at(span.field(key), "E-CATALOG-FIELD", f"invalid '{key}' (expected integer)")
	return val


def _opt_bool(obj: Mapping[str, Any], key: str, span: Span, default: bool) -> bool:
	val = obj.get(key, default)
	if not isinstance(val, bool):
		raise CatalogError.at(span.field(key), "E-CATALOG-FIELD", f"invalid '{key}' (expected boolean)")
	return val


def _decode_version(obj: Mapping[str, Any], span: Span) -> VersionDecl:
	key = _req_str(obj, "def", span)
	if "version" not in obj:
		raise CatalogError.at(span.field("version"), "E-CATALOG-FIELD", "missing 'version'")
	return VersionDecl(key=key, version=_opt_int(obj, "version", span, 0), span=span)


def _decode_type(obj: Mapping[str, Any], span: Span) -> TypeDecl:
	key = _req_str(obj, "def", span)
	name = _req_str(obj, "name", span)
	vec_width = _opt_int(obj, "vec_width", span, 0)
	as_name = _opt_str(obj, "addr_space", span, AddressSpace.DEFAULT.value)
	try:
		addr_space = AddressSpace.from_name(as_name)
	except ValueError as err:
		raise CatalogError.at(span.field("addr_space"), "E-TYPE-ADDRSPACE", str(err)) from err
	is_pointer = _opt_bool(obj, "is_pointer", span, False)
	qual_obj = obj.get("qual_type", NULL_QUAL_TYPE)
	if qual_obj is None or qual_obj == NULL_QUAL_TYPE:
		qual_type = None
	elif isinstance(qual_obj, str) and qual_obj:
		qual_type = qual_obj
	else:
		raise CatalogError.at(span.field("qual_type"), "E-CATALOG-FIELD", "invalid 'qual_type' (expected type name or \"null\")")
	return TypeDecl(
		key=key,
		name=name,
		vec_width=vec_width,
		addr_space=addr_space,
		is_pointer=is_pointer,
		qual_type=qual_type,
		span=span,
	)


def _decode_builtin(obj: Mapping[str, Any], span: Span) -> BuiltinDecl:
	name = _req_str(obj, "name", span)
	if not name.isprintable():
		raise CatalogError.at(span.field("name"), "E-CATALOG-FIELD", f"builtin name {name!r} contains non-printable characters")
	sig_obj = obj.get("signature")
	if not isinstance(sig_obj, list):
		raise CatalogError.at(span.field("signature"), "E-CATALOG-FIELD", f"builtin '{name}' is missing its signature list")
	sig: list[str] = []
	for idx, ref in enumerate(sig_obj):
		if not isinstance(ref, str) or not ref:
			raise CatalogError.at(
				span.field("signature").index(idx), "E-CATALOG-FIELD", "signature entries must be type record names"
			)
		sig.append(ref)
	version = obj.get("version")
	if version is not None and not isinstance(version, str):
		raise CatalogError.at(span.field("version"), "E-CATALOG-FIELD", "invalid 'version' (expected version record name)")
	return BuiltinDecl(
		name=name,
		signature=tuple(sig),
		version=version,
		extension=_opt_str(obj, "extension", span, ""),
		span=span,
	)


__all__ = ["CATALOG_FORMAT", "CATALOG_VERSION", "load_catalog", "parse_catalog_obj"]
