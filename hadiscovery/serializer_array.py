"""A bounded list of strings rendered as a JSON array."""

from __future__ import annotations

from collections.abc import Iterator

from .dictionary import (
    JSON_ARRAY_PREFIX,
    JSON_ARRAY_SUFFIX,
    JSON_ESCAPE_CHAR,
    JSON_PROPERTIES_SEPARATOR,
)


class SerializerArray:
    """An array of at most ``size`` strings that serializes to JSON."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._items: list[str] = []

    @property
    def capacity(self) -> int:
        """The maximum number of items the array holds."""
        return self._size

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def add(self, item: str) -> None:
        """Append ``item``; raises OverflowError when the array is full."""
        if len(self._items) >= self._size:
            raise OverflowError(f"array is full ({self._size} items)")
        self._items.append(str(item))

    def calculate_size(self) -> int:
        """Return the length of the serialized array."""
        return len(self.serialize())

    def serialize(self) -> str:
        """Return the array as JSON text, items quoted without escaping."""
        body = JSON_PROPERTIES_SEPARATOR.join(
            f"{JSON_ESCAPE_CHAR}{item}{JSON_ESCAPE_CHAR}" for item in self._items
        )
        return f"{JSON_ARRAY_PREFIX}{body}{JSON_ARRAY_SUFFIX}"

    def clear(self) -> None:
        """Remove all items."""
        self._items.clear()