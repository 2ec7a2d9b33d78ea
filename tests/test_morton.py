import pytest

from dronemw.morton import decode_morton10, encode_morton10


@pytest.mark.parametrize(
    "xyz",
    [(0, 0, 0), (1, 2, 3), (512, 512, 512), (1023, 0, 1023), (1023, 1023, 1023), (17, 900, 333)],
)
def test_round_trip(xyz):
    assert decode_morton10(encode_morton10(*xyz)) == xyz


def test_unit_axes_are_interleaved():
    assert encode_morton10(1, 0, 0) == 1
    assert encode_morton10(0, 1, 0) == 2
    assert encode_morton10(0, 0, 1) == 4


def test_all_ones_fills_thirty_bits():
    assert encode_morton10(1023, 1023, 1023) == 2**30 - 1


@pytest.mark.parametrize("xyz", [(5, 600, 77), (1023, 1, 512)])
def test_axes_combine_by_or(xyz):
    x, y, z = xyz
    combined = encode_morton10(x, 0, 0) | encode_morton10(0, y, 0) | encode_morton10(0, 0, z)
    assert combined == encode_morton10(x, y, z)


def test_bits_above_ten_are_dropped():
    assert encode_morton10(1024 + 3, 1024 + 5, 2048 + 7) == encode_morton10(3, 5, 7)


def test_decode_ignores_bits_outside_code():
    code = encode_morton10(10, 20, 30)
    assert decode_morton10(code | (1 << 31) | (1 << 30)) == (10, 20, 30)


def test_ordering_follows_x_within_cell():
    assert encode_morton10(0, 0, 0) < encode_morton10(1, 0, 0) < encode_morton10(0, 1, 0)