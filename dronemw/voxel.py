"""Compact voxel record: Morton position and packed RGB colour."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

_FORMAT = struct.Struct("<II")


@dataclass(frozen=True)
class Voxel:
    """A voxel as carried on the wire: 30-bit Morton code and 0x00RRGGBB colour."""

    morton: int
    rgb: int

    SIZE: ClassVar[int] = _FORMAT.size

    def __post_init__(self) -> None:
        for name in ("morton", "rgb"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFFFFFFFF:
                raise ValueError(f"{name} must fit in 32 bits, got {value}")

    def to_bytes(self) -> bytes:
        """Serialise to 8 little-endian bytes."""
        return _FORMAT.pack(self.morton, self.rgb)

    @classmethod
    def from_bytes(cls, data: bytes) -> Voxel:
        """Build a voxel from exactly 8 little-endian bytes."""
        if len(data) != cls.SIZE:
            raise ValueError(f"a voxel takes {cls.SIZE} bytes, got {len(data)}")
        morton, rgb = _FORMAT.unpack(data)
        return cls(morton, rgb)