"""Growable byte buffer with positional insertion and removal."""

from __future__ import annotations

from collections.abc import Iterator


class BinaryBuffer:
    """A sequence of bytes that can be appended to, inserted into and removed from."""

    __slots__ = ("_data", "_capacity")

    def __init__(self, initial_capacity: int = 0) -> None:
        if initial_capacity < 0:
            raise ValueError("capacity must not be negative")
        self._data = bytearray()
        self._capacity = initial_capacity

    @property
    def capacity(self) -> int:
        """Number of bytes the buffer is prepared to hold."""
        return max(self._capacity, len(self._data))

    def push(self, value: int) -> None:
        """Append one byte."""
        self._data.append(value)

    def insert(self, pos: int, value: int) -> None:
        """Insert one byte before position ``pos`` (``pos == len`` appends)."""
        if not 0 <= pos <= len(self._data):
            raise IndexError(f"insert position {pos} out of range")
        self._data.insert(pos, value)

    def remove(self, pos: int) -> None:
        """Remove the byte at position ``pos``."""
        if not 0 <= pos < len(self._data):
            raise IndexError(f"remove position {pos} out of range")
        del self._data[pos]

    def reserve(self, count: int) -> None:
        """Make room for at least ``count`` bytes; never shrinks."""
        if count < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = max(self._capacity, count)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __getitem__(self, index):
        item = self._data[index]
        return bytes(item) if isinstance(item, bytearray) else item

    def __repr__(self) -> str:
        return f"BinaryBuffer({bytes(self._data)!r})"