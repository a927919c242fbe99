"""CLI package for toolschema tools."""

__all__ = ["export"]
