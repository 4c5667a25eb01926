"""Plain data types that describe OSC packets."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from .errors import BadCastError

_U32_MAX = 0xFFFFFFFF


class Framing(enum.Enum):
    """Whether a packet on the wire is preceded by its i32 byte length."""

    UNFRAMED = "unframed"
    FRAMED = "framed"


@dataclass(frozen=True)
class TimeTag:
    """NTP-style 64-bit fixed point time: seconds since 1900 and a 32-bit fraction."""

    seconds: int
    fraction: int

    def __post_init__(self) -> None:
        for name in ("seconds", "fraction"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise BadCastError(f"time tag {name} must be an integer")
            if not 0 <= value <= _U32_MAX:
                raise BadCastError(f"time tag {name} out of u32 range: {value}")

    def __iter__(self) -> Iterator[int]:
        yield self.seconds
        yield self.fraction

    def as_tuple(self) -> tuple[int, int]:
        return (self.seconds, self.fraction)


@dataclass(frozen=True)
class Message:
    """An OSC message: an address pattern and a sequence of arguments."""

    address: str
    args: tuple[Any, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))


@dataclass(frozen=True)
class Bundle:
    """An OSC bundle: a time tag and a sequence of messages or nested bundles."""

    timetag: TimeTag
    elements: tuple[Message | Bundle, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.timetag, TimeTag):
            object.__setattr__(self, "timetag", TimeTag(*self.timetag))
        object.__setattr__(self, "elements", tuple(self.elements))