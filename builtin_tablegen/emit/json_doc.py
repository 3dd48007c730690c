# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
JSON rendering of BuiltinTables (v0).

Carries the same indexing conventions as the Python module: 0-based offsets
into `signature_table`, 1-based block starts in `name_index` (consumers read
`builtin_table[start - 1 : start - 1 + count]`).
"""

from __future__ import annotations

import json
from typing import Any, Dict

from builtin_tablegen.tables.builder import BuiltinTables

DOC_FORMAT = "builtin-tables"
DOC_VERSION = 0


def tables_to_obj(tables: BuiltinTables) -> Dict[str, Any]:
	return {
		"format": DOC_FORMAT,
		"version": DOC_VERSION,
		"catalog": tables.catalog_name,
		"catalog_sha256": tables.catalog_sha256,
		"type_ids": [
			{"id": idx, "name": name, "qual_type": qual}
			for idx, (name, qual) in enumerate(zip(tables.type_names, tables.qual_types))
		],
		"signature_table": [
			{
				"type_id": ty.base_id,
				"vector_width": ty.vector_width,
				"addr_space": ty.address_space.value,
				"is_pointer": ty.is_pointer,
			}
			for ty in tables.signature_table
		],
		"builtin_table": [
			{
				"name": row.name,
				"num_types": row.signature_len,
				"sig_index": row.signature_start,
				"extension": row.extension,
				"version": row.version,
			}
			for row in tables.overload_table
		],
		"name_index": [{"name": b.name, "start": b.start, "count": b.count} for b in tables.name_index],
	}


def render_json_document(tables: BuiltinTables) -> str:
	"""Render the tables as indented, key-sorted JSON (stable across runs)."""
	return json.dumps(tables_to_obj(tables), indent=2, sort_keys=True, ensure_ascii=False) + "\n"


__all__ = ["DOC_FORMAT", "DOC_VERSION", "tables_to_obj", "render_json_document"]
