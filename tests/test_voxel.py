import pytest

from dronemw.voxel import Voxel


def test_size_is_eight_bytes():
    assert len(Voxel(123, 0x00AAAAAA).to_bytes()) == Voxel.SIZE == 8


def test_wire_layout_is_little_endian():
    assert Voxel(1, 0x00AAAAAA).to_bytes() == b"\x01\x00\x00\x00\xaa\xaa\xaa\x00"


@pytest.mark.parametrize("morton,rgb", [(0, 0), (0x3FFFFFFF, 0x00FFFFFF), (0xFFFFFFFF, 0xFFFFFFFF)])
def test_round_trip(morton, rgb):
    voxel = Voxel(morton, rgb)
    assert Voxel.from_bytes(voxel.to_bytes()) == voxel


@pytest.mark.parametrize("data", [b"", b"\x00" * 7, b"\x00" * 9])
def test_from_bytes_rejects_wrong_length(data):
    with pytest.raises(ValueError):
        Voxel.from_bytes(data)


@pytest.mark.parametrize("morton,rgb", [(-1, 0), (0, 1 << 32)])
def test_out_of_range_fields_rejected(morton, rgb):
    with pytest.raises(ValueError):
        Voxel(morton, rgb)