import pytest

from oscpack.errors import BadCastError
from oscpack.writer import (
    encode_blob,
    encode_f32,
    encode_i32,
    encode_str,
    encode_timetag,
)


def test_encode_i32():
    assert encode_i32(0x01020304) == b"\x01\x02\x03\x04"
    assert encode_i32(0x5EEEEEED) == b"\x5E\xEE\xEE\xED"


def test_encode_f32():
    assert encode_f32(440.0) == b"\x43\xdc\x00\x00"


def test_encode_str_examples():
    assert encode_str("/ts") == b"/ts\0"
    assert encode_str("/example/path") == b"/example/path\0\0\0"
    assert encode_str("#bundle") == b"#bundle\0"


def test_encode_str_multiple_of_four_gets_full_word():
    assert encode_str("/m1,") == b"/m1,\0\0\0\0"


@pytest.mark.parametrize("text", ["", "a", "ab", "abc", "abcd", "abcde", "é"])
def test_encode_str_alignment(text):
    encoded = encode_str(text)
    assert len(encoded) % 4 == 0
    assert encoded.endswith(b"\0")
    assert encoded.rstrip(b"\0") == text.encode("utf-8")


def test_encode_blob_example():
    blob = bytes([0xDE, 0xAD, 0xBE, 0xEF, 0xFF])
    assert encode_blob(blob) == b"\x00\x00\x00\x05\xde\xad\xbe\xef\xff\x00\x00\x00"


def test_encode_blob_aligned_has_no_padding():
    blob = bytes([0xDE, 0xAD, 0xBE, 0xEF])
    assert encode_blob(blob) == b"\x00\x00\x00\x04\xde\xad\xbe\xef"


@pytest.mark.parametrize("size", range(0, 9))
def test_encode_blob_alignment(size):
    blob = bytes(range(1, size + 1))
    encoded = encode_blob(blob)
    assert len(encoded) % 4 == 0
    assert encoded[:4] == encode_i32(size)
    assert encoded[4 : 4 + size] == blob
    assert not any(encoded[4 + size :])


def test_encode_timetag():
    assert encode_timetag(0x01020304, 0x05060708) == b"\x01\x02\x03\x04\x05\x06\x07\x08"


@pytest.mark.parametrize("value", [2**31, -(2**31) - 1])
def test_encode_i32_out_of_range(value):
    with pytest.raises(BadCastError):
        encode_i32(value)


def test_encode_f32_out_of_range():
    with pytest.raises(BadCastError):
        encode_f32(1e300)


@pytest.mark.parametrize("seconds, fraction", [(-1, 0), (0, 2**32)])
def test_encode_timetag_out_of_range(seconds, fraction):
    with pytest.raises(BadCastError):
        encode_timetag(seconds, fraction)