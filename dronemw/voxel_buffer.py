"""Bounded FIFO ring of voxels shared between a producer and a consumer."""

from __future__ import annotations

import threading

from dronemw.voxel import Voxel


class VoxelBuffer:
    """Ring buffer of ``capacity`` slots (a power of two); one slot stays free."""

    def __init__(self, capacity: int = 16384) -> None:
        if capacity <= 0 or capacity & (capacity - 1):
            raise ValueError(f"capacity must be a power of 2, got {capacity}")
        self.capacity = capacity
        self._mask = capacity - 1
        self._data: list[Voxel | None] = [None] * capacity
        self._head = 0
        self._tail = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return (self._head - self._tail) & self._mask

    def push(self, voxel: Voxel) -> bool:
        """Store a voxel; return False if the ring is full."""
        with self._lock:
            nxt = (self._head + 1) & self._mask
            if nxt == self._tail:
                return False
            self._data[self._head] = voxel
            self._head = nxt
            return True

    def pop_bulk(self, max_count: int) -> list[Voxel]:
        """Remove and return up to ``max_count`` voxels, oldest first."""
        with self._lock:
            available = (self._head - self._tail) & self._mask
            count = max(0, min(available, max_count))
            out = [self._data[(self._tail + i) & self._mask] for i in range(count)]
            self._tail = (self._tail + count) & self._mask
            return out