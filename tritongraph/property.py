"""Named property values with interned keys, and a container that holds them."""

from __future__ import annotations

from typing import Any, ClassVar, Iterable, Mapping


class Property:
    """A single key/value pair whose key is stored as an interned token id."""

    __slots__ = ("token_id", "value")

    _token_to_id: ClassVar[dict[str, int]] = {}
    _id_to_token: ClassVar[dict[int, str]] = {}

    def __init__(self, key: str, value: Any) -> None:
        self.token_id = self._intern(key)
        self.value = value

    @classmethod
    def _intern(cls, key: str) -> int:
        token_id = cls._token_to_id.get(key)
        if token_id is None:
            token_id = len(cls._token_to_id) + 1
            cls._token_to_id[key] = token_id
            cls._id_to_token[token_id] = key
        return token_id

    @property
    def key(self) -> str:
        """The property name, or an empty string if the token is unknown."""
        return self._id_to_token.get(self.token_id, "")

    def __repr__(self) -> str:
        return f"Property({self.key!r}, {self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Property):
            return NotImplemented
        return self.token_id == other.token_id and self.value == other.value

    __hash__ = None  # type: ignore[assignment]


class PropertyContainer:
    """Holds an ordered list of properties, one per name."""

    def __init__(self, properties: Mapping[str, Any] | None = None) -> None:
        self._properties: list[Property] = []
        if properties:
            self._extend(properties)

    def _extend(self, properties: Mapping[str, Any]) -> None:
        self._properties.extend(
            Property(name, value) for name, value in sorted(properties.items())
        )

    @property
    def properties(self) -> dict[str, Any]:
        """All properties as a dictionary ordered by name."""
        result: dict[str, Any] = {}
        for prop in self._properties:
            result.setdefault(prop.key, prop.value)
        return dict(sorted(result.items()))

    def property_items(self) -> Iterable[tuple[str, Any]]:
        """Yield (name, value) pairs in insertion order."""
        for prop in self._properties:
            yield prop.key, prop.value

    def get_property(self, name: str) -> Any:
        """Return the value of ``name``, or None when it is not set."""
        for prop in self._properties:
            if prop.key == name:
                return prop.value
        return None

    def set_property(self, name: str, value: Any) -> None:
        """Set ``name`` to ``value``, replacing any earlier value."""
        self.delete_property(name)
        self._properties.append(Property(name, value))

    def delete_property(self, name: str) -> bool:
        """Remove ``name``; return True if it was present."""
        kept = [prop for prop in self._properties if prop.key != name]
        removed = len(kept) != len(self._properties)
        self._properties = kept
        return removed

    def set_properties(self, new_properties: Mapping[str, Any]) -> None:
        """Replace all properties with ``new_properties``."""
        self._properties = []
        self._extend(new_properties)

    def clear_properties(self) -> None:
        """Remove every property."""
        self._properties = []