"""Numpy-backed growable arrays with explicit length.

Capacity doubles whenever an append finds the array full. The filled part
is tracked by an explicit length, so any value (including 0.0) is a legal
element.
"""
from __future__ import annotations

from typing import Any

import numpy as np

from .errors import AllocationError


class GrowableArray:
    """A dynamic array of a fixed numpy dtype with amortized doubling."""

    __slots__ = ("_data", "_size")

    def __init__(self, dtype: Any = np.float64, capacity: int = 4):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity!r}")
        self._data = self._allocate(np.dtype(dtype), capacity)
        self._size = 0

    @staticmethod
    def _allocate(dtype: np.dtype, capacity: int) -> np.ndarray:
        try:
            return np.empty(capacity, dtype=dtype)
        except (MemoryError, ValueError) as exc:
            raise AllocationError(f"cannot allocate {capacity} x {dtype} buffer: {exc}") from exc

    def __len__(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return int(self._data.shape[0])

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def append(self, value) -> None:
        if self._size == self.capacity:
            grown = self._allocate(self._data.dtype, self.capacity * 2)
            grown[: self._size] = self._data[: self._size]
            self._data = grown
        self._data[self._size] = value
        self._size += 1

    def clear(self) -> None:
        """Drop the contents but keep the current capacity."""
        self._size = 0

    def view(self) -> np.ndarray:
        """Read-only view of the filled part; invalidated by the next append."""
        v = self._data[: self._size]
        v.flags.writeable = False
        return v

    def freeze(self) -> np.ndarray:
        """Return an owned, read-only copy of the filled part."""
        out = self._data[: self._size].copy()
        out.flags.writeable = False
        return out

    def to_bytes(self) -> bytes:
        return self._data[: self._size].tobytes()

    def to_text(self) -> str:
        """Decode a uint8 buffer; bytes outside ASCII are kept via latin-1."""
        return self.to_bytes().decode("latin-1")

    def __repr__(self) -> str:
        return f"GrowableArray(dtype={self.dtype}, len={self._size}, capacity={self.capacity})"
