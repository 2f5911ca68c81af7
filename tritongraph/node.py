"""Graph nodes: an id, a type id, a key and a set of properties."""

from __future__ import annotations

from typing import Any, Mapping

from tritongraph.property import PropertyContainer


def _format_item(value: Any) -> str:
    """Format one list element the way it appears in a node's text form."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def _format_value(value: Any) -> str:
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:g}"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_format_item(item) for item in value) + "]"
    return ""


class Node(PropertyContainer):
    """A vertex of the graph, identified by id and by (type, key)."""

    def __init__(
        self,
        id: int = 0,
        type_id: int = 0,
        key: str = "",
        properties: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(properties)
        self.id = id
        self.type_id = type_id
        self.key = key

    def __repr__(self) -> str:
        return (
            f"Node(id={self.id!r}, type_id={self.type_id!r}, "
            f"key={self.key!r}, properties={self.properties!r})"
        )

    def __str__(self) -> str:
        body = ", ".join(
            f'"{name}": {_format_value(value)}' for name, value in self.property_items()
        )
        return (
            f'{{ "id": {self.id}, "type_id": {self.type_id}, "key": "{self.key}", '
            f'"properties": {{ {body} }} }}'
        )