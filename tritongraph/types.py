"""Registry of type names, their numeric ids and the member ids of each type."""

from __future__ import annotations


class Types:
    """Maps type names to ids and tracks which object ids belong to each type.

    Type id 0 is the reserved empty type and is never valid for membership.
    """

    def __init__(self) -> None:
        self._type_to_id: dict[str, int] = {"": 0}
        self._id_to_type: dict[int, str] = {0: ""}
        self._ids: dict[int, set[int]] = {0: set()}

    def get_type_id(self, token: str) -> int:
        """Return the id of ``token``, or 0 if it is unknown."""
        return self._type_to_id.get(token, 0)

    def insert_or_get_type_id(self, token: str) -> int:
        """Return the id of ``token``, registering it with the next id if new."""
        existing = self._type_to_id.get(token)
        if existing is not None:
            return existing
        type_id = len(self._type_to_id)
        self._register(token, type_id)
        return type_id

    def _register(self, token: str, type_id: int) -> None:
        self._type_to_id[token] = type_id
        self._id_to_type[type_id] = token
        self._ids.setdefault(type_id, set())

    def get_type(self, type_id: int) -> str:
        """Return the name for ``type_id``, or an empty string if unknown."""
        return self._id_to_type.get(type_id, self._id_to_type[0])

    def add_id(self, type_id: int, id: int) -> bool:
        """Add ``id`` to the members of ``type_id``; False if the type is invalid."""
        if not self.is_valid_type_id(type_id):
            return False
        self._ids[type_id].add(id)
        return True

    def remove_id(self, type_id: int, id: int) -> bool:
        """Remove ``id`` from ``type_id``; False if the type is invalid."""
        if not self.is_valid_type_id(type_id):
            return False
        self._ids[type_id].discard(id)
        return True

    def contains_id(self, type_id: int, id: int) -> bool:
        """Return True if ``id`` is a member of a valid ``type_id``."""
        return self.is_valid_type_id(type_id) and id in self._ids[type_id]

    def get_ids(self, type_id: int | None = None) -> set[int]:
        """Return a copy of the members of ``type_id``, or of all types if None.

        An invalid type id yields an empty set.
        """
        if type_id is None:
            return set().union(*self._ids.values())
        if self.is_valid_type_id(type_id):
            return set(self._ids[type_id])
        return set(self._ids[0])

    def is_valid_type_id(self, type_id: int) -> bool:
        """A valid type id is positive and below the number of registered types."""
        return 0 < type_id < len(self._id_to_type)

    def get_count(self, type_id: int) -> int:
        """Return the number of members of ``type_id``, or 0 if invalid."""
        if self.is_valid_type_id(type_id):
            return len(self._ids[type_id])
        return 0

    def size(self) -> int:
        """Return the number of registered types, excluding the empty type."""
        return len(self._id_to_type) - 1

    def get_types(self) -> set[str]:
        """Return the names of all registered types."""
        return {name for type_id, name in self._id_to_type.items() if type_id > 0}

    def get_type_ids(self) -> set[int]:
        """Return the ids of all registered types."""
        return {type_id for type_id in self._id_to_type if type_id > 0}

    def get_counts(self) -> dict[int, int]:
        """Return member counts keyed by type id, in id order."""
        return {
            type_id: len(self._ids[type_id])
            for type_id in sorted(self._id_to_type)
            if type_id > 0
        }

    def add_type_id(self, token: str, type_id: int) -> bool:
        """Register ``token`` under a chosen ``type_id``.

        Returns False if either the name or the id is already taken.
        """
        if token in self._type_to_id or type_id in self._id_to_type:
            return False
        self._register(token, type_id)
        return True