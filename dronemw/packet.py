"""Packing voxels into MTU-sized datagrams behind a fixed 8-byte header."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

from dronemw.voxel import Voxel

_HEADER = struct.Struct("<BBHHH")


@dataclass
class PacketHeader:
    """Datagram header: version, flags, drone id, voxel count, reserved."""

    ver: int = 1
    flags: int = 0
    drone_id: int = 0
    count: int = 0
    reserved: int = 0

    SIZE: ClassVar[int] = _HEADER.size

    def to_bytes(self) -> bytes:
        """Serialise to 8 little-endian bytes."""
        return _HEADER.pack(
            self.ver & 0xFF,
            self.flags & 0xFF,
            self.drone_id & 0xFFFF,
            self.count & 0xFFFF,
            self.reserved & 0xFFFF,
        )


class PacketBuilder:
    """Accumulates voxels until the packet would exceed the MTU."""

    def __init__(self, mtu: int = 1400) -> None:
        if mtu < PacketHeader.SIZE:
            raise ValueError(f"mtu must be at least {PacketHeader.SIZE}, got {mtu}")
        self.mtu = mtu
        self._header = PacketHeader()
        self._payload = bytearray()

    @property
    def payload_capacity(self) -> int:
        return self.mtu - PacketHeader.SIZE

    def __len__(self) -> int:
        """Number of voxels currently held."""
        return len(self._payload) // Voxel.SIZE

    def reset(self, drone_id: int) -> None:
        """Set the drone id and drop any pending voxels."""
        self._header.drone_id = drone_id & 0xFFFF
        self._payload.clear()

    def add(self, voxel: Voxel) -> bool:
        """Append a voxel; return False if it does not fit."""
        if len(self._payload) + Voxel.SIZE > self.payload_capacity:
            return False
        self._payload += voxel.to_bytes()
        return True

    def finalize(self) -> bytes:
        """Return header plus payload, and empty the payload."""
        self._header.count = (len(self._payload) // Voxel.SIZE) & 0xFFFF
        packet = self._header.to_bytes() + bytes(self._payload)
        self._payload.clear()
        return packet