# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Lightweight catalog location used by diagnostics.

Catalogs are JSON documents, so a location is the file (when known) plus a
JSON-path-like pointer into the document, e.g. `builtins[3].signature[1]`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Span:
	"""Represents a catalog location (best-effort file plus path inside the document)."""

	file: Optional[str] = None
	path: Optional[str] = None

	def child(self, segment: str) -> "Span":
		"""Return a span for a member of this location (`.field` or `[index]`)."""
		if self.path is None:
			return Span(file=self.file, path=segment.lstrip("."))
		return Span(file=self.file, path=f"{self.path}{segment}")

	def field(self, name: str) -> "Span":
		return self.child(f".{name}")

	def index(self, idx: int) -> "Span":
		return self.child(f"[{idx}]")

	def format(self) -> str:
		"""Render as `file:path` for human-readable output (`?` for unknown parts)."""
		return f"{self.file or '<catalog>'}:{self.path or '?'}"


__all__ = ["Span"]
