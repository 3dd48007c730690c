"""
builtin_tablegen.core: shared diagnostics and type-system primitives.

Modules:
  - span: catalog location attached to diagnostics
  - diagnostics: Diagnostic record and CatalogError
  - types_core: TypeId/TypeTable primitives and AddressSpace
  - types_protocol: TypeContext protocol used by the type projector
"""

__all__ = [
	"span",
	"diagnostics",
	"types_core",
	"types_protocol",
]
