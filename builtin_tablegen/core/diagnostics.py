# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Common diagnostic structure for catalog ingestion and table generation.

Every malformed catalog entry aborts the whole generation run, so the pass
raises `CatalogError` carrying exactly one Diagnostic. The CLI renders it
either as a compiler-style line or as JSON.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .span import Span


@dataclass
class Diagnostic:
	"""Represents a generator diagnostic (error/warning/etc.)."""

	message: str
	code: str | None = None
	# Phase label: "catalog" for record/shape checks, "tables" for cross-record
	# references resolved by the generation pass.
	phase: str | None = None
	severity: str = "error"
	span: Span = field(default_factory=Span)  # Catalog location (Span() denotes unknown).
	notes: list[str] = field(default_factory=list)

	def __post_init__(self) -> None:
		if self.span is None:  # type: ignore[unreachable]
			self.span = Span()

	def format_human(self) -> str:
		code = f"[{self.code}] " if self.code else ""
		loc = f" (at {self.span.path})" if self.span.path else ""
		text = f"{self.span.file or '<catalog>'}:?:?: {self.severity}: {code}{self.message}{loc}"
		for note in self.notes:
			text += f"\n  note: {note}"
		return text

	def to_dict(self) -> dict[str, Any]:
		return {
			"phase": self.phase,
			"code": self.code,
			"message": self.message,
			"severity": self.severity,
			"file": self.span.file,
			"path": self.span.path,
			"line": None,
			"column": None,
			"notes": list(self.notes),
		}


class CatalogError(ValueError):
	"""
	Fatal catalog/invariant violation.

	This is a `ValueError` subclass so callers that only care about "bad input"
	can catch it generically, but it always carries a structured diagnostic.
	"""

	def __init__(self, diagnostic: Diagnostic) -> None:
		super().__init__(diagnostic.message)
		self.diagnostic = diagnostic

	@classmethod
	def at(cls, span: Span, code: str, message: str, *, phase: str = "catalog", notes: list[str] | None = None) -> "CatalogError":
		return cls(Diagnostic(message=message, code=code, phase=phase, span=span, notes=list(notes or [])))


__all__ = ["Diagnostic", "CatalogError"]
