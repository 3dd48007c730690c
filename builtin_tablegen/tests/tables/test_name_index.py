from __future__ import annotations

import pytest

from builtin_tablegen.tables.name_index import NOT_FOUND, NameBlock, NameIndex


def test_blocks_accumulate_from_one():
	index = NameIndex.from_counts([("cos", 2), ("sin", 1), ("sqrt", 4)])

	assert index.blocks == (
		NameBlock(name="cos", start=1, count=2),
		NameBlock(name="sin", start=3, count=1),
		NameBlock(name="sqrt", start=4, count=4),
	)
	assert index.lookup("cos") == (1, 2)
	assert index.lookup("sin") == (3, 1)
	assert index.lookup("sqrt") == (4, 4)


def test_lookup_is_total():
	index = NameIndex.from_counts([("sin", 1), ("sign", 1), ("sinh", 1)])

	for name in ["", "s", "si", "sig", "signs", "SIN", "sin ", "cos", "\x00", "sinh\n"]:
		assert index.lookup(name) == NOT_FOUND
	assert index.lookup(None) == NOT_FOUND
	assert index.lookup(42) == NOT_FOUND
	assert index.lookup("sign") == (2, 1)
	assert "sinh" in index
	assert "sinhx" not in index


def test_empty_index():
	index = NameIndex.from_counts([])

	assert len(index) == 0
	assert index.lookup("anything") == NOT_FOUND


def test_rejects_invalid_blocks():
	with pytest.raises(ValueError):
		NameIndex([NameBlock(name="cos", start=0, count=1)])
	with pytest.raises(ValueError):
		NameIndex([NameBlock(name="cos", start=1, count=0)])
	with pytest.raises(ValueError):
		NameIndex.from_counts([("cos", 1), ("cos", 1)])
