"""Deciding whether a value to be encoded is an OSC message or a bundle.

A packet is given as a sequence whose first item settles its kind: a string
is the address of a message, while a flat pair of unsigned 32-bit integers is
the time tag of a bundle.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from typing import Any

from .errors import BadFormatError, UnsupportedTypeError
from .model import TimeTag

_TIMETAG_PARTS = 2


class PacketKind(enum.Enum):
    """The two kinds of OSC packet."""

    MESSAGE = enum.auto()
    BUNDLE = enum.auto()


def _is_plain_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def coerce_timetag(value: Any) -> TimeTag:
    """Turn ``value`` into a TimeTag.

    Accepts a TimeTag, a mapping whose values are two integers (taken in
    order), or any other flat iterable of exactly two integers.  Anything
    that is not an integer inside the pair raises UnsupportedTypeError; a
    pair with the wrong number of items raises BadFormatError; integers
    outside the u32 range raise BadCastError.
    """
    if isinstance(value, TimeTag):
        return value
    if isinstance(value, (str, bytes, bytearray, memoryview)):
        raise UnsupportedTypeError(f"not a time tag: {value!r}")
    if isinstance(value, Mapping):
        items: Iterable[Any] = value.values()
    elif isinstance(value, Iterable):
        items = value
    else:
        raise UnsupportedTypeError(f"not a time tag: {value!r}")

    parts: list[int] = []
    for item in items:
        if not _is_plain_int(item):
            raise UnsupportedTypeError(
                f"time tag parts must be unsigned 32-bit integers, got {item!r}"
            )
        if len(parts) == _TIMETAG_PARTS:
            raise BadFormatError("time tag has more than two parts")
        parts.append(item)
    if len(parts) != _TIMETAG_PARTS:
        raise BadFormatError(f"time tag needs two parts, got {len(parts)}")
    return TimeTag(*parts)


def classify(head: Any) -> PacketKind:
    """Return the kind of packet whose first item is ``head``.

    A string makes a message; a valid time tag makes a bundle.  Any other
    value raises UnsupportedTypeError, and a malformed time tag raises the
    error that coerce_timetag gives.
    """
    if isinstance(head, str):
        return PacketKind.MESSAGE
    coerce_timetag(head)
    return PacketKind.BUNDLE