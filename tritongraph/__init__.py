"""Property graph primitives: typed nodes, relationships, property storage, a type registry and JSON output."""

__version__ = "0.1.0"

__all__ = ["property", "types", "ids", "node", "relationship", "json_output"]