"""Ordered path trees built from dotted attribute names.

A tree maps keys to either a scalar string or another tree::

    tree = PathTree()
    insert_path(tree, ["Author", "Name"], "Ann")
    tree.to_dict()  # {"Author": {"Name": "Ann"}}

Keys keep insertion order and are looked up by name. Under the default
``DuplicateKeyPolicy.APPEND`` a repeated key adds a second sibling entry
instead of replacing the first one.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from solidify_pages.enums import DuplicateKeyPolicy

_MISSING = object()


class PathTree:
    """Insertion-ordered key/value tree that tolerates repeated keys."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Sequence[tuple[str, Any]] = ()) -> None:
        self._entries: list[tuple[str, Any]] = list(entries)

    @classmethod
    def from_dict(cls, mapping: Mapping[str, Any]) -> PathTree:
        """Build a tree from nested mappings, converting every level."""
        return cls(
            [
                (key, cls.from_dict(value) if isinstance(value, Mapping) else value)
                for key, value in mapping.items()
            ]
        )

    def put(
        self, key: str, value: Any, policy: DuplicateKeyPolicy = DuplicateKeyPolicy.APPEND
    ) -> None:
        """Add *value* under *key*, resolving an existing key with *policy*."""
        index = self._index_of(key)
        if index is None or policy is DuplicateKeyPolicy.APPEND:
            self._entries.append((key, value))
            return

        current = self._entries[index][1]
        if (
            policy is DuplicateKeyPolicy.MERGE
            and isinstance(current, PathTree)
            and isinstance(value, PathTree)
        ):
            for child_key, child_value in value.items():
                current.put(child_key, child_value, policy)
            return

        self._entries[index] = (key, value)

    def get(self, key: str, default: Any = None) -> Any:
        index = self._index_of(key)
        return default if index is None else self._entries[index][1]

    def get_all(self, key: str) -> list[Any]:
        """Return every value stored under *key*, oldest first."""
        return [value for name, value in self._entries if name == key]

    def keys(self) -> list[str]:
        return [key for key, _ in self._entries]

    def values(self) -> list[Any]:
        return [value for _, value in self._entries]

    def items(self) -> list[tuple[str, Any]]:
        return list(self._entries)

    def has_duplicates(self) -> bool:
        """Return ``True`` if any level of the tree repeats a sibling key."""
        keys = self.keys()
        if len(keys) != len(set(keys)):
            return True
        return any(
            isinstance(value, PathTree) and value.has_duplicates() for value in self.values()
        )

    def walk(self, prefix: tuple[str, ...] = ()) -> Iterator[tuple[tuple[str, ...], Any]]:
        """Yield ``(segments, value)`` for every leaf, depth first."""
        for key, value in self._entries:
            if isinstance(value, PathTree):
                yield from value.walk((*prefix, key))
            else:
                yield (*prefix, key), value

    def to_dict(self) -> dict[str, Any]:
        """Convert to nested plain dicts. Later duplicate keys win."""
        return {
            key: value.to_dict() if isinstance(value, PathTree) else value
            for key, value in self._entries
        }

    def _index_of(self, key: str) -> int | None:
        for index in range(len(self._entries) - 1, -1, -1):
            if self._entries[index][0] == key:
                return index
        return None

    def __getitem__(self, key: str) -> Any:
        value = self.get(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __contains__(self, key: object) -> bool:
        return any(name == key for name, _ in self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PathTree):
            return self._entries == other._entries
        if isinstance(other, Mapping):
            return self.to_dict() == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PathTree({self._entries!r})"


def insert_path(
    tree: PathTree,
    segments: Sequence[str],
    value: str,
    *,
    policy: DuplicateKeyPolicy = DuplicateKeyPolicy.APPEND,
) -> None:
    """Insert *value* into *tree* at the branch named by *segments*.

    With one segment the value becomes a leaf. With more, a fresh subtree
    holding the remaining segments is built first and then inserted under
    the head segment. Segment text is taken verbatim, empty strings included.

    Raises:
        ValueError: If *segments* is empty.
    """
    if not segments:
        raise ValueError("Cannot insert a value at an empty path")

    head, tail = segments[0], segments[1:]
    if not tail:
        tree.put(head, value, policy)
        return

    subtree = PathTree()
    insert_path(subtree, tail, value, policy=policy)
    tree.put(head, subtree, policy)
