# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Command-line front-end.

  builtin-tablegen gen CATALOG [-o OUT] [--format python|json] [--json]
  builtin-tablegen lookup CATALOG NAME...

Exit codes: 0 success, 1 catalog diagnostics, 2 usage or I/O failure.
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass
from pathlib import Path

from builtin_tablegen.catalog.loader import load_catalog
from builtin_tablegen.core.diagnostics import CatalogError, Diagnostic
from builtin_tablegen.emit.json_doc import render_json_document
from builtin_tablegen.emit.python_source import render_python_source
from builtin_tablegen.tables.builder import BuiltinTables, build_tables

OUTPUT_FORMATS = ("python", "json")


@dataclass(frozen=True)
class GenerateOptions:
	catalog_path: Path
	out_path: Path | None = None
	output_format: str = "python"
	json_diagnostics: bool = False


def generate(opts: GenerateOptions) -> str:
	"""Load the catalog, run the generation pass and render the requested document."""
	if opts.output_format not in OUTPUT_FORMATS:
		raise ValueError(f"unsupported output format '{opts.output_format}'")
	tables = _load_tables(opts.catalog_path)
	if opts.output_format == "json":
		return render_json_document(tables)
	return render_python_source(tables)


def _load_tables(path: Path) -> BuiltinTables:
	return build_tables(load_catalog(path))


def _report(diags: list[Diagnostic], *, json_mode: bool) -> None:
	if json_mode:
		print(json.dumps({"exit_code": 1, "diagnostics": [d.to_dict() for d in diags]}))
		return
	for d in diags:
		print(d.format_human(), file=sys.stderr)


def _build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(prog="builtin-tablegen", description="Generate builtin overload tables from a catalog")
	sub = p.add_subparsers(dest="cmd", required=True)

	gen = sub.add_parser("gen", help="Generate the tables, dispatcher and type projector")
	gen.add_argument("catalog", type=Path, help="Path to the catalog JSON")
	gen.add_argument("-o", "--output", type=Path, default=None, help="Output path (default: stdout)")
	gen.add_argument("--format", choices=OUTPUT_FORMATS, default="python", help="Output document format (default: python)")
	gen.add_argument("--json", action="store_true", help="Emit diagnostics as machine-readable JSON")

	lookup = sub.add_parser("lookup", help="Print the (start, count) block of builtin names")
	lookup.add_argument("catalog", type=Path, help="Path to the catalog JSON")
	lookup.add_argument("names", nargs="+", help="Builtin names to look up")
	lookup.add_argument("--json", action="store_true", help="Emit diagnostics as machine-readable JSON")
	return p


def main(argv: list[str] | None = None) -> int:
	p = _build_parser()
	args = p.parse_args(argv)

	if args.cmd == "gen":
		opts = GenerateOptions(
			catalog_path=args.catalog,
			out_path=args.output,
			output_format=args.format,
			json_diagnostics=bool(args.json),
		)
		try:
			text = generate(opts)
		except CatalogError as err:
			_report([err.diagnostic], json_mode=opts.json_diagnostics)
			return 1
		except OSError as err:
			print(f"{opts.catalog_path}:?:?: error: {err}", file=sys.stderr)
			return 2
		if opts.out_path is None:
			sys.stdout.write(text)
			return 0
		try:
			opts.out_path.parent.mkdir(parents=True, exist_ok=True)
			opts.out_path.write_text(text, encoding="utf-8")
		except OSError as err:
			print(f"{opts.out_path}:?:?: error: {err}", file=sys.stderr)
			return 2
		return 0

	if args.cmd == "lookup":
		try:
			tables = _load_tables(args.catalog)
		except CatalogError as err:
			_report([err.diagnostic], json_mode=bool(args.json))
			return 1
		except OSError as err:
			print(f"{args.catalog}:?:?: error: {err}", file=sys.stderr)
			return 2
		for name in args.names:
			start, count = tables.lookup(name)
			print(f"{name} {start} {count}")
		return 0

	p.error(f"unknown command '{args.cmd}'")
	return 2


__all__ = ["GenerateOptions", "generate", "main"]
