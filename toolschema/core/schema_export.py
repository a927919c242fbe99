"""JSON rendering and file export for schema trees."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from toolschema.core.schema import Schema, schema_to_dict


@dataclass(frozen=True)
class ExportOptions:
    """Formatting options for rendered schema JSON."""

    indent: int = 2
    compact: bool = False


def schema_to_json(schema: Schema, *, indent: int = 2, compact: bool = False) -> str:
    """Render the wire representation of a schema as JSON text."""

    payload = schema_to_dict(schema)
    if compact:
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(payload, ensure_ascii=False, indent=indent)


def export_schema(
    schema: Schema,
    out_path: str | Path,
    options: ExportOptions | None = None,
) -> Path:
    """Write the schema JSON to the given path and return it."""

    options = options or ExportOptions()
    text = schema_to_json(schema, indent=options.indent, compact=options.compact)
    path = Path(out_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text + "\n", encoding="utf-8")
    return path
