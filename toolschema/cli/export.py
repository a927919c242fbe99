"""Export a Python-declared Schema as wire JSON."""

from __future__ import annotations

import argparse
import importlib

from toolschema.core.schema import Schema
from toolschema.core.schema_export import ExportOptions, export_schema, schema_to_json


def resolve_schema_ref(ref: str) -> Schema:
    """Load a Schema from a ``package.module:attribute`` reference.

    The attribute may be a Schema instance or a zero-argument callable
    returning one.
    """

    module_name, sep, attr_name = ref.partition(":")
    if not sep or not module_name or not attr_name:
        raise ValueError(
            f"Schema reference failed: expected 'module:attribute', got {ref!r}"
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ValueError(f"Schema reference failed: cannot import {module_name!r}: {exc}") from exc

    target = module
    for part in attr_name.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise ValueError(
                f"Schema reference failed: {module_name!r} has no attribute {attr_name!r}"
            ) from exc

    if callable(target) and not isinstance(target, Schema):
        target = target()
    if not isinstance(target, Schema):
        raise ValueError(
            f"Schema reference failed: {ref!r} is {type(target).__name__}, not Schema"
        )
    return target


def main(argv: list[str] | None = None) -> int:
    """Run the schema export CLI."""

    parser = argparse.ArgumentParser(description="Export a Schema declaration as JSON.")
    parser.add_argument("ref", help="Schema reference in the form module:attribute.")
    parser.add_argument("--out", help="Output JSON path (default: stdout).")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2).")
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Emit compact single-line JSON.",
    )
    args = parser.parse_args(argv)

    options = ExportOptions(indent=args.indent, compact=args.compact)
    try:
        schema = resolve_schema_ref(args.ref)
        if args.out:
            out_path = export_schema(schema, args.out, options)
            print(f"OK: {args.ref} -> {out_path}")
        else:
            print(schema_to_json(schema, indent=options.indent, compact=options.compact))
        return 0
    except Exception as exc:  # noqa: BLE001 - CLI boundary
        print(f"ERROR: {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
