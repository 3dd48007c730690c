"""
builtin_tablegen.catalog: typed catalog records and the JSON ingestion layer.
"""

__all__ = ["records", "loader"]
