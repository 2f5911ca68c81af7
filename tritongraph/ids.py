"""Node/relationship id pairs and groups of them by relationship type."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Ids:
    """The id of a neighbouring node and of the relationship leading to it."""

    node_id: int
    rel_id: int

    def __str__(self) -> str:
        return f"{{ node_id: {self.node_id}, rel_id: {self.rel_id} }} "


@dataclass
class Group:
    """All id pairs that share one relationship type."""

    rel_type_id: int
    ids: list[Ids] = field(default_factory=list)