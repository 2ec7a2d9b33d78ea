"""Morton (Z-order) encoding of three 10-bit coordinates into 30 bits."""

_U32 = 0xFFFFFFFF


def _split(v: int) -> int:
    v &= _U32
    v = (v | (v << 16)) & 0x030000FF
    v = (v | (v << 8)) & 0x0300F00F
    v = (v | (v << 4)) & 0x030C30C3
    v = (v | (v << 2)) & 0x09249249
    return v


def _compact(v: int) -> int:
    v &= 0x09249249
    v = (v ^ (v >> 2)) & 0x030C30C3
    v = (v ^ (v >> 4)) & 0x0300F00F
    v = (v ^ (v >> 8)) & 0x030000FF
    v = (v ^ (v >> 16)) & 0x000003FF
    return v


def encode_morton10(x: int, y: int, z: int) -> int:
    """Interleave the low 10 bits of x, y and z into a 30-bit Morton code."""
    return _split(x) | (_split(y) << 1) | (_split(z) << 2)


def decode_morton10(m: int) -> tuple[int, int, int]:
    """Split a 30-bit Morton code back into its (x, y, z) coordinates."""
    m &= _U32
    return _compact(m), _compact(m >> 1), _compact(m >> 2)