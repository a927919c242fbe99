"""Core schema model and serialization."""

from toolschema.core.schema import DataType, Schema, schema_to_dict
from toolschema.core.schema_export import ExportOptions, export_schema, schema_to_json

__all__ = [
    "DataType",
    "ExportOptions",
    "Schema",
    "export_schema",
    "schema_to_dict",
    "schema_to_json",
]
