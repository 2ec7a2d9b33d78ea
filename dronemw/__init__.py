"""Pack occupied voxels into compact packets and send them over UDP."""

__version__ = "0.1.0"