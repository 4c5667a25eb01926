"""Encoding of OSC primitives to their big-endian, 4-byte-aligned wire form."""

from __future__ import annotations

import struct

from .errors import BadCastError

_I32 = struct.Struct(">i")
_F32 = struct.Struct(">f")
_TIMETAG = struct.Struct(">II")
_ZEROS = b"\0\0\0\0"


def encode_i32(value: int) -> bytes:
    """Encode a signed 32-bit integer."""
    try:
        return _I32.pack(value)
    except struct.error as exc:
        raise BadCastError(f"value does not fit in i32: {value!r}") from exc


def encode_f32(value: float) -> bytes:
    """Encode a 32-bit IEEE float."""
    try:
        return _F32.pack(value)
    except (struct.error, OverflowError) as exc:
        raise BadCastError(f"value does not fit in f32: {value!r}") from exc


def encode_str(value: str) -> bytes:
    """Encode a string with at least one null terminator, padded to 4 bytes."""
    raw = value.encode("utf-8")
    return raw + _ZEROS[: 4 - len(raw) % 4]


def encode_blob(value: bytes) -> bytes:
    """Encode an i32 length followed by the bytes, padded to 4 bytes."""
    raw = bytes(value)
    return encode_i32(len(raw)) + raw + _ZEROS[: (4 - len(raw) % 4) % 4]


def encode_timetag(seconds: int, fraction: int) -> bytes:
    """Encode a time tag as two unsigned 32-bit integers."""
    try:
        return _TIMETAG.pack(seconds, fraction)
    except struct.error as exc:
        raise BadCastError(
            f"time tag does not fit in two u32: ({seconds!r}, {fraction!r})"
        ) from exc