"""Encoding of OSC packets (messages and bundles) to bytes or streams.

A packet may be given as a Message or Bundle, or as a sequence (or a mapping,
whose values are taken in order) whose first item decides its kind:

* a string makes a message; it is the address, and every later item is a
  group of arguments (a sequence of int, float, str or bytes values, or
  ``None`` for no arguments);
* a time tag (anything holding exactly two u32 integers) makes a bundle; every
  later item is a group of packets, or a single Message or Bundle.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Mapping
from typing import Any, BinaryIO

from .errors import BadFormatError, UnsupportedTypeError
from .model import Bundle, Framing, Message
from .packet_kind import PacketKind, classify, coerce_timetag
from .writer import encode_blob, encode_f32, encode_i32, encode_str, encode_timetag

_BUNDLE_ADDRESS = "#bundle"
_BINARY = (bytes, bytearray, memoryview)


def _encode_arg(value: Any) -> tuple[str, bytes]:
    """Return the type tag and the encoded data of one argument."""
    if isinstance(value, bool):
        raise UnsupportedTypeError(f"OSC has no boolean argument type: {value!r}")
    if isinstance(value, int):
        return "i", encode_i32(value)
    if isinstance(value, float):
        return "f", encode_f32(value)
    if isinstance(value, str):
        return "s", encode_str(value)
    if isinstance(value, _BINARY):
        return "b", encode_blob(value)
    raise UnsupportedTypeError(f"unsupported OSC argument: {value!r}")


def _as_items(value: Any) -> list[Any]:
    """Return the items of a sequence-like value, or raise UnsupportedTypeError."""
    if isinstance(value, (str, *_BINARY)):
        raise UnsupportedTypeError(f"expected a sequence, got {value!r}")
    if isinstance(value, Mapping):
        return list(value.values())
    if isinstance(value, Iterable):
        return list(value)
    raise UnsupportedTypeError(f"expected a sequence, got {value!r}")


def _arg_group(group: Any) -> list[Any]:
    if group is None:
        return []
    if isinstance(group, (Message, Bundle)):
        raise UnsupportedTypeError("a packet cannot be a message argument")
    return _as_items(group)


def _element_group(group: Any) -> list[Any]:
    if isinstance(group, (Message, Bundle)):
        return [group]
    return _as_items(group)


def encode_message(address: str, args: Iterable[Any]) -> bytes:
    """Encode a message: address, type tag string and argument data."""
    if not isinstance(address, str):
        raise UnsupportedTypeError(f"message address must be a string: {address!r}")
    tags = [","]
    data = bytearray()
    for arg in args:
        tag, encoded = _encode_arg(arg)
        tags.append(tag)
        data += encoded
    return encode_str(address) + encode_str("".join(tags)) + bytes(data)


def encode_bundle(timetag: Any, elements: Iterable[Any]) -> bytes:
    """Encode a bundle: '#bundle', the time tag and each element framed by its length."""
    tag = coerce_timetag(timetag)
    body = bytearray(encode_str(_BUNDLE_ADDRESS))
    body += encode_timetag(tag.seconds, tag.fraction)
    for element in elements:
        packet = encode_packet(element)
        body += encode_i32(len(packet))
        body += packet
    return bytes(body)


def encode_packet(value: Any) -> bytes:
    """Encode one packet without a length prefix."""
    if isinstance(value, Message):
        return encode_message(value.address, value.args)
    if isinstance(value, Bundle):
        return encode_bundle(value.timetag, value.elements)
    items = _as_items(value)
    if not items:
        raise BadFormatError("packet has no contents")
    head, *rest = items
    if classify(head) is PacketKind.MESSAGE:
        args = itertools.chain.from_iterable(_arg_group(group) for group in rest)
        return encode_message(head, args)
    elements = itertools.chain.from_iterable(_element_group(group) for group in rest)
    return encode_bundle(head, elements)


def to_bytes(value: Any, framing: Framing) -> bytes:
    """Encode a packet; with ``Framing.FRAMED`` it is preceded by its i32 length."""
    packet = encode_packet(value)
    if framing is Framing.UNFRAMED:
        return packet
    if framing is Framing.FRAMED:
        return encode_i32(len(packet)) + packet
    raise ValueError(f"unknown framing: {framing!r}")


def to_write(stream: BinaryIO, value: Any, framing: Framing) -> None:
    """Encode a packet and write it to a binary stream."""
    stream.write(to_bytes(value, framing))