"""Periodic draining of the voxel buffer into packets sent over a transport."""

from __future__ import annotations

import threading

from dronemw.packet import PacketBuilder
from dronemw.transport import Transport
from dronemw.voxel_buffer import VoxelBuffer

DEFAULT_DRONE_ID = 1
DEFAULT_TRANSPORT_URL = "udp://127.0.0.1:48484"
DEFAULT_FLUSH_MS = 30
BATCH_SIZE = 256


class Streamer:
    """Moves voxels from a buffer into MTU-sized packets on a transport."""

    def __init__(
        self,
        buffer: VoxelBuffer,
        builder: PacketBuilder,
        transport: Transport,
        drone_id: int = DEFAULT_DRONE_ID,
        flush_ms: int = DEFAULT_FLUSH_MS,
    ) -> None:
        self.buffer = buffer
        self.builder = builder
        self.transport = transport
        self.drone_id = drone_id
        self.flush_ms = flush_ms
        self.builder.reset(drone_id)

    def _send_pending(self) -> None:
        self.transport.send(self.builder.finalize())
        self.builder.reset(self.drone_id)

    def flush_once(self) -> int:
        """Drain one batch, sending each packet as it fills; return voxels taken."""
        batch = self.buffer.pop_bulk(BATCH_SIZE)
        for voxel in batch:
            if not self.builder.add(voxel):
                self._send_pending()
                self.builder.add(voxel)
        return len(batch)

    def run(self, stop_event: threading.Event) -> None:
        """Flush every ``flush_ms`` until the event is set, then send the rest."""
        while not stop_event.is_set():
            self.flush_once()
            stop_event.wait(self.flush_ms / 1000)
        self.finish()

    def finish(self) -> bytes:
        """Send whatever is pending (at least the header) and return it."""
        packet = self.builder.finalize()
        if packet:
            self.transport.send(packet)
        return packet