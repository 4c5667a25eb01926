"""Low-level reading of OSC primitives from a binary stream."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator
from typing import BinaryIO, TypeVar

from .errors import BadCastError, BadPaddingError, StringDecodeError, UnexpectedEofError
from .model import TimeTag

_T = TypeVar("_T")

_I32 = struct.Struct(">i")
_U32 = struct.Struct(">I")
_F32 = struct.Struct(">f")


class OscReader:
    """Reads big-endian OSC values from a stream, optionally capped at ``limit`` bytes."""

    def __init__(self, stream: BinaryIO, limit: int | None = None) -> None:
        if limit is not None and limit < 0:
            raise BadCastError(f"negative read limit: {limit}")
        self._stream = stream
        self._remaining = limit

    @property
    def remaining(self) -> int | None:
        """Bytes left before the limit, or None when unlimited."""
        return self._remaining

    def read_exact(self, size: int) -> bytes:
        """Read exactly ``size`` bytes or raise UnexpectedEofError."""
        if self._remaining is not None and size > self._remaining:
            raise UnexpectedEofError(
                f"needed {size} bytes but only {self._remaining} remain in packet"
            )
        chunks = []
        needed = size
        while needed > 0:
            chunk = self._stream.read(needed)
            if not chunk:
                raise UnexpectedEofError(f"needed {size} bytes but input ended")
            chunks.append(chunk)
            needed -= len(chunk)
        if self._remaining is not None:
            self._remaining -= size
        return b"".join(chunks)

    def read_padded_bytes(self) -> bytes:
        """Read a null-terminated byte string padded to 4 bytes."""
        data = bytearray()
        while True:
            word = self.read_exact(4)
            zeros = word.count(0)
            content = 4 - zeros
            if any(word[content:]):
                raise BadPaddingError()
            data += word[:content]
            if zeros:
                return bytes(data)

    def read_str(self) -> str:
        """Read a null-terminated, padded UTF-8 string."""
        raw = self.read_padded_bytes()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise StringDecodeError() from exc

    def read_i32(self) -> int:
        return _I32.unpack(self.read_exact(4))[0]

    def read_f32(self) -> float:
        return _F32.unpack(self.read_exact(4))[0]

    def read_u32(self) -> int:
        return _U32.unpack(self.read_exact(4))[0]

    def read_timetag(self) -> TimeTag:
        """Read a 64-bit time tag: u32 seconds followed by u32 fraction."""
        seconds = self.read_u32()
        fraction = self.read_u32()
        return TimeTag(seconds, fraction)

    def read_blob(self) -> bytes:
        """Read an i32 length followed by that many bytes, padded to 4."""
        size = self.read_i32()
        if size < 0:
            raise BadCastError(f"negative blob length: {size}")
        padded = (size + 3) & ~0x3
        raw = self.read_exact(padded)
        if any(raw[size:]):
            raise BadPaddingError()
        return raw[:size]

    def skip_rest(self) -> None:
        """Consume whatever is left up to the limit (or to the end when unlimited)."""
        if self._remaining is None:
            while self._stream.read(65536):
                pass
            return
        self.read_exact(self._remaining)


def skip_leading_comma(tags: Iterable[_T]) -> Iterator[_T]:
    """Yield type tags, dropping the first one if it is a comma."""
    iterator = iter(tags)
    for first in iterator:
        if first not in (ord(","), ","):
            yield first
        break
    yield from iterator