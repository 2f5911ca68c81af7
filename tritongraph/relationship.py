"""Graph relationships: a typed, directed edge between two nodes."""

from __future__ import annotations

from typing import Any, Mapping

from tritongraph.property import PropertyContainer


def _format_scalar(value: Any) -> str:
    """Format a scalar property value; other kinds produce no text."""
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:g}"
    return ""


class Relationship(PropertyContainer):
    """A directed edge from ``starting_node_id`` to ``ending_node_id``."""

    def __init__(
        self,
        id: int = 0,
        starting_node_id: int = 0,
        ending_node_id: int = 0,
        type_id: int = 0,
        properties: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(properties)
        self.id = id
        self.starting_node_id = starting_node_id
        self.ending_node_id = ending_node_id
        self.type_id = type_id

    def __repr__(self) -> str:
        return (
            f"Relationship(id={self.id!r}, starting_node_id={self.starting_node_id!r}, "
            f"ending_node_id={self.ending_node_id!r}, type_id={self.type_id!r}, "
            f"properties={self.properties!r})"
        )

    def __str__(self) -> str:
        body = ", ".join(
            f'"{name}": {_format_scalar(value)}' for name, value in self.property_items()
        )
        return (
            f'{{ "id": {self.id}, "type_id": {self.type_id}, '
            f'"starting_node_id": {self.starting_node_id}, '
            f'"ending_node_id": {self.ending_node_id}, '
            f'"properties": {{ {body} }} }}'
        )