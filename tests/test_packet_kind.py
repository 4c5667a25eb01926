import pytest

from oscpack.errors import BadCastError, BadFormatError, UnsupportedTypeError
from oscpack.model import TimeTag
from oscpack.packet_kind import PacketKind, classify, coerce_timetag


def test_string_head_is_message():
    assert classify("/example/path") is PacketKind.MESSAGE


def test_empty_string_head_is_message():
    assert classify("") is PacketKind.MESSAGE


@pytest.mark.parametrize(
    "head",
    [
        (0x01020304, 0x05060708),
        [0x01020304, 0x05060708],
        TimeTag(0x01020304, 0x05060708),
        {"seconds": 0x01020304, "fraction": 0x05060708},
    ],
)
def test_timetag_head_is_bundle(head):
    assert classify(head) is PacketKind.BUNDLE


@pytest.mark.parametrize(
    "value",
    [
        (0x01020304, 0x05060708),
        [0x01020304, 0x05060708],
        iter([0x01020304, 0x05060708]),
        {"sec": 0x01020304, "frac": 0x05060708},
    ],
)
def test_coerce_timetag_values(value):
    assert coerce_timetag(value) == TimeTag(0x01020304, 0x05060708)


def test_coerce_timetag_returns_same_instance():
    tag = TimeTag(0x01020304, 0x05060708)
    assert coerce_timetag(tag) is tag


def test_coerce_timetag_preserves_order():
    tag = coerce_timetag((0x05060708, 0x01020304))
    assert tag.as_tuple() == (0x05060708, 0x01020304)


@pytest.mark.parametrize("value", [(), (1,), (1, 2, 3), []])
def test_wrong_part_count_is_bad_format(value):
    with pytest.raises(BadFormatError):
        coerce_timetag(value)


@pytest.mark.parametrize("value", [(1,), (1, 2, 3)])
def test_classify_wrong_part_count_is_bad_format(value):
    with pytest.raises(BadFormatError):
        classify(value)


@pytest.mark.parametrize(
    "value",
    [
        (1.0, 2),
        (1, "2"),
        (True, 1),
        ((1, 2),),
        (None, None),
    ],
)
def test_non_integer_parts_are_unsupported(value):
    with pytest.raises(UnsupportedTypeError):
        coerce_timetag(value)


@pytest.mark.parametrize("head", [5, 440.0, None, b"/m1", bytearray(b"ab")])
def test_other_heads_are_unsupported(head):
    with pytest.raises(UnsupportedTypeError):
        classify(head)


def test_string_is_not_a_timetag():
    with pytest.raises(UnsupportedTypeError):
        coerce_timetag("/m1")


@pytest.mark.parametrize("value", [(-1, 0), (0, 1 << 32)])
def test_out_of_range_parts_are_bad_cast(value):
    with pytest.raises(BadCastError):
        coerce_timetag(value)


def test_unsupported_part_reported_before_count():
    with pytest.raises(UnsupportedTypeError):
        coerce_timetag((1, 2, 3.5))