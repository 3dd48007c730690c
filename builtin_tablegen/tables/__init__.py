"""
builtin_tablegen.tables: the single generation pass.

Modules:
  - overloads: group overload declarations by builtin name
  - signatures: type descriptors, type vocabulary and signature deduplication
  - name_index: name -> (start, count) dispatcher
  - projector: descriptor -> semantic type projection
  - builder: ties the stages together into an immutable BuiltinTables
"""

__all__ = ["overloads", "signatures", "name_index", "projector", "builder"]
