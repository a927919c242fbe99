"""Schema declarations for function-calling and structured-output APIs."""

from toolschema.core import DataType, Schema, schema_to_dict

__all__ = ["DataType", "Schema", "schema_to_dict"]
