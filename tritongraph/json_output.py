"""JSON text for property maps, value lists, nodes and relationships."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from tritongraph.node import Node
from tritongraph.relationship import Relationship


def _string(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _double(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"non-finite double value is not supported: {value!r}")
    return repr(value)


def _scalar(value: Any) -> str | None:
    """JSON text for a scalar property value, or None for other kinds."""
    if isinstance(value, str):
        return _string(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _double(value)
    return None


def _list_item(item: Any) -> str:
    """Format one element of a list property."""
    if isinstance(item, str):
        return _string(item)
    if isinstance(item, bool):
        return "1" if item else "0"
    if isinstance(item, int):
        return str(item)
    if isinstance(item, float):
        if math.isnan(item) or math.isinf(item):
            raise ValueError(f"non-finite double value is not supported: {item!r}")
        return f"{item:g}"
    raise TypeError(f"unsupported list element: {item!r}")


class PropertiesBuilder:
    """Builds a JSON object from property maps.

    Nested maps are flattened into the enclosing object; values of
    unsupported kinds are left out.
    """

    _OPEN = "{ "
    _CLOSE = " }"

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._first = True

    def add_properties(self, props: Mapping[str, Any]) -> None:
        """Add every supported entry of ``props``, sorted by name."""
        for name, value in sorted(props.items()):
            text = _scalar(value)
            if text is not None:
                self.add(name, text)
            elif isinstance(value, (list, tuple)):
                self.add_key(name)
                self._parts.append(
                    "[" + ", ".join(_list_item(item) for item in value) + "]"
                )
            elif isinstance(value, Mapping):
                self.add_properties(value)

    def add(self, name: str, text: str) -> None:
        """Add a member whose value is already JSON text."""
        self.add_key(name)
        self._parts.append(text)

    def add_key(self, name: str) -> None:
        """Start a member named ``name``; its value is written next."""
        if self._first:
            self._first = False
        else:
            self._parts.append(", ")
        self._parts.append(f"{_string(name)}: ")

    def as_json(self) -> str:
        """Return the finished object text."""
        return self._OPEN + "".join(self._parts) + self._CLOSE


class ValuesBuilder:
    """Builds a JSON array from scalar values and property maps."""

    def __init__(self) -> None:
        self._items: list[str] = []

    def add_values(self, values: Iterable[Any]) -> None:
        """Add each of ``values`` in order."""
        for value in values:
            self.add_value(value)

    def add_value(self, value: Any) -> None:
        """Add one value; maps become objects, unsupported kinds are skipped."""
        text = _scalar(value)
        if text is not None:
            self._items.append(text)
        elif isinstance(value, Mapping):
            self.add_properties(value)

    def add_properties(self, props: Mapping[str, Any]) -> None:
        """Add a property map as one object element of the array."""
        self._items.append(properties_to_json(props))

    def as_json(self) -> str:
        """Return the finished array text."""
        return "[" + ", ".join(self._items) + "]"


def properties_to_json(properties: Mapping[str, Any]) -> str:
    """Return the JSON object text for a property map."""
    builder = PropertiesBuilder()
    builder.add_properties(properties)
    return builder.as_json()


def _object(members: Iterable[tuple[str, str]]) -> str:
    return "{" + ", ".join(f"{_string(name)}: {text}" for name, text in members) + "}"


@dataclass
class NodeJson:
    """The JSON view of a node, with its type given by name."""

    id: int
    type: str
    key: str
    properties: Mapping[str, Any] | None = None

    @classmethod
    def from_node(cls, node: Node, type_name: str) -> NodeJson:
        """Describe ``node`` whose type is called ``type_name``."""
        return cls(node.id, type_name, node.key, node.properties)

    def to_json(self) -> str:
        """Return the node as a JSON object; properties are omitted if unset."""
        members = [
            ("id", str(self.id)),
            ("type", _string(self.type)),
            ("key", _string(self.key)),
        ]
        if self.properties is not None:
            members.append(("properties", properties_to_json(self.properties)))
        return _object(members)


@dataclass
class RelationshipJson:
    """The JSON view of a relationship, with its type given by name."""

    id: int
    type: str
    from_id: int
    to_id: int
    properties: Mapping[str, Any] | None = None

    @classmethod
    def from_relationship(
        cls, relationship: Relationship, type_name: str
    ) -> RelationshipJson:
        """Describe ``relationship`` whose type is called ``type_name``."""
        return cls(
            relationship.id,
            type_name,
            relationship.starting_node_id,
            relationship.ending_node_id,
            relationship.properties,
        )

    def to_json(self) -> str:
        """Return the relationship as a JSON object."""
        members = [
            ("id", str(self.id)),
            ("type", _string(self.type)),
            ("from", str(self.from_id)),
            ("to", str(self.to_id)),
        ]
        if self.properties is not None:
            members.append(("properties", properties_to_json(self.properties)))
        return _object(members)