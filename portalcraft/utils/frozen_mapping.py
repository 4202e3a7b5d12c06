# portalcraft/utils/frozen_mapping.py
from collections.abc import Mapping


class FrozenMapping(Mapping):
    """
    Read-only, hashable mapping for dict-shaped fields on frozen models.
    Compares equal to any mapping with the same items, including a plain dict.
    """
    __slots__ = ("_data", "_hash")

    def __init__(self, data=()):
        self._data = dict(data)
        self._hash = None

    def __getitem__(self, key):
        return self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._data.items()))
        return self._hash

    def __repr__(self) -> str:
        return f"FrozenMapping({self._data!r})"
