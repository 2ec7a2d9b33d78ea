"""Turning occupied-cell marker points into voxels for the streaming buffer."""

from __future__ import annotations

from typing import Iterable, Sequence

from dronemw.morton import encode_morton10
from dronemw.voxel import Voxel
from dronemw.voxel_buffer import VoxelBuffer

TOPIC = "/occupied_cells_vis_array"
NODE_NAME = "octomap_voxel_streamer"
CELLS_PER_METRE = 20.0  # 5 cm resolution
GRID_OFFSET = 512
DEFAULT_RGB = 0x00AAAAAA


def _to_cell(coord: float) -> int:
    return int(coord * CELLS_PER_METRE + GRID_OFFSET) & 0xFFFFFFFF


def point_to_voxel(x: float, y: float, z: float) -> Voxel:
    """Quantise a point in metres to a grey voxel on the 5 cm grid."""
    morton = encode_morton10(_to_cell(x), _to_cell(y), _to_cell(z))
    return Voxel(morton, DEFAULT_RGB)


class OctomapSub:
    """Feeds the points of incoming marker arrays into a voxel buffer."""

    def __init__(self, buffer: VoxelBuffer, drone_id: int) -> None:
        self.buffer = buffer
        self.drone_id = drone_id

    def marker_callback(self, markers: Iterable[Iterable[Sequence[float]]]) -> int:
        """Push every (x, y, z) point of every marker; return how many were stored."""
        stored = 0
        for marker in markers:
            for x, y, z in marker:
                stored += self.buffer.push(point_to_voxel(x, y, z))
        return stored