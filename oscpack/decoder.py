"""Decoding of OSC packets (messages and bundles) from bytes or streams."""

from __future__ import annotations

import io
from collections.abc import Iterator
from typing import Any, BinaryIO

from .errors import BadCastError, UnsupportedTypeError
from .model import Bundle, Framing, Message
from .reader import OscReader, skip_leading_comma
from .writer import encode_i32

_BUNDLE_ADDRESS = "#bundle"


def _parse_arg(reader: OscReader, tag: int) -> Any:
    if tag == ord("i"):
        return reader.read_i32()
    if tag == ord("f"):
        return reader.read_f32()
    if tag == ord("s"):
        return reader.read_str()
    if tag == ord("b"):
        return reader.read_blob()
    raise UnsupportedTypeError(f"unsupported OSC type tag {chr(tag)!r}")


def _iter_args(reader: OscReader) -> Iterator[Any]:
    tags = reader.read_padded_bytes()
    for tag in skip_leading_comma(tags):
        yield _parse_arg(reader, tag)


def _iter_elements(reader: OscReader) -> Iterator[Message | Bundle]:
    while reader.remaining:
        yield _read_framed(reader)


def _parse_contents(reader: OscReader) -> Message | Bundle:
    address = reader.read_str()
    if address == _BUNDLE_ADDRESS:
        timetag = reader.read_timetag()
        return Bundle(timetag, tuple(_iter_elements(reader)))
    return Message(address, tuple(_iter_args(reader)))


def _read_framed(reader: OscReader) -> Message | Bundle:
    length = reader.read_i32()
    if length < 0:
        raise BadCastError(f"negative packet length: {length}")
    body = reader.read_exact(length)
    # Any bytes the contents do not use are dropped along with the body.
    return _parse_contents(OscReader(io.BytesIO(body), length))


def read_packet(stream: BinaryIO) -> Message | Bundle:
    """Read one length-prefixed packet from ``stream``.

    The whole packet is consumed, so the stream is left positioned at the
    start of whatever follows it.
    """
    return _read_framed(OscReader(stream))


def from_read(stream: BinaryIO, framing: Framing) -> Message | Bundle:
    """Decode a packet from a readable binary stream.

    With ``Framing.FRAMED`` the packet starts with its i32 byte length; with
    ``Framing.UNFRAMED`` the rest of the stream is taken as the packet.
    """
    if framing is Framing.FRAMED:
        return read_packet(stream)
    if framing is Framing.UNFRAMED:
        payload = stream.read()
        return read_packet(io.BytesIO(encode_i32(len(payload)) + payload))
    raise ValueError(f"unknown framing: {framing!r}")


def from_bytes(data: bytes, framing: Framing) -> Message | Bundle:
    """Decode a packet held in a bytes-like object."""
    return from_read(io.BytesIO(bytes(data)), framing)