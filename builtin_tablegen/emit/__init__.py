"""
builtin_tablegen.emit: renderings of BuiltinTables.

Modules:
  - python_source: self-contained Python module (tables, dispatcher, projector)
  - string_matcher: discriminating name dispatch used by python_source
  - json_doc: deterministic JSON document with the same tables
"""

__all__ = ["python_source", "string_matcher", "json_doc"]
