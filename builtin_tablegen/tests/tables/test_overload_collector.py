from __future__ import annotations

from builtin_tablegen.catalog.records import BuiltinDecl
from builtin_tablegen.tables.overloads import collect_overloads


def _decl(name: str, *sig: str) -> BuiltinDecl:
	return BuiltinDecl(name=name, signature=sig, version="CL10")


def test_groups_by_first_seen_name():
	decls = [_decl("cos", "F", "F"), _decl("sin", "F", "F"), _decl("cos", "D", "D"), _decl("abs", "I", "I")]

	grouped = collect_overloads(decls)

	assert list(grouped) == ["cos", "sin", "abs"]
	assert grouped["cos"] == (decls[0], decls[2])
	assert grouped["sin"] == (decls[1],)


def test_identical_overloads_stay_distinct_rows():
	decls = [_decl("cos", "F", "F"), _decl("cos", "F", "F")]

	grouped = collect_overloads(decls)

	assert len(grouped["cos"]) == 2


def test_empty_input():
	assert collect_overloads([]) == {}
