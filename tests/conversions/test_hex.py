from huelerp.conversions import decode_hex, encode_hex, canonical_hex, np_decode_hex, np_encode_hex
from huelerp.errors import MalformedHex, HueLerpError
from ..samples import samples_hex_rgb
import numpy as np
import pytest


def test_decode_hex():
    for hex_color, rgb in samples_hex_rgb.items():
        assert decode_hex(hex_color) == rgb


def test_encode_hex_is_uppercase_and_padded():
    assert encode_hex((255, 0, 0)) == "#FF0000"
    assert encode_hex((1, 2, 10)) == "#01020A"
    assert encode_hex((26, 43, 60)) == "#1A2B3C"


def test_round_trip_canonical_form():
    for hex_color in samples_hex_rgb:
        expected = "#" + hex_color.lstrip("#").upper()
        assert encode_hex(decode_hex(hex_color)) == expected
        assert canonical_hex(hex_color) == expected


@pytest.mark.parametrize("bad", ["#FFF", "FF00", "", "#", "#GG0000", "12345Z", "#FF0000FF", "##FF0000", " FF000"])
def test_decode_rejects_malformed(bad):
    with pytest.raises(MalformedHex):
        decode_hex(bad)


def test_malformed_hex_is_a_value_error():
    with pytest.raises(ValueError) as info:
        decode_hex("#12")
    assert isinstance(info.value, HueLerpError)
    assert info.value.value == "#12"


def test_decode_rejects_non_string():
    with pytest.raises(TypeError):
        decode_hex(0xFF0000)


def test_np_decode_hex():
    arr = np_decode_hex(samples_hex_rgb.keys())
    assert arr.dtype == np.uint8
    assert arr.shape == (len(samples_hex_rgb), 3)
    assert np.array_equal(arr, np.array(list(samples_hex_rgb.values())))


def test_np_encode_hex():
    arr = np.array([[255, 0, 0], [0, 128, 255]], dtype=np.uint8)
    assert np_encode_hex(arr) == ["#FF0000", "#0080FF"]
