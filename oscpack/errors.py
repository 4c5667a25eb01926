"""Exceptions raised while encoding or decoding OSC packets."""


class OscError(Exception):
    """Base class for every error raised by this package."""

    default_message = "OSC error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)

    @property
    def message(self) -> str:
        return str(self.args[0])


class UnsupportedTypeError(OscError):
    """A value or type tag that OSC cannot carry (only i, f, s and b are known)."""

    default_message = "Unsupported OSC type"


class BadFormatError(OscError):
    """The packet structure is wrong: mismatched lengths, missing parts, etc."""

    default_message = "Bad OSC packet format"


class BadPaddingError(OscError):
    """Data is not padded with zero bytes to a 4-byte boundary."""

    default_message = "OSC data not padded to 4-byte boundary"


class BadCastError(OscError):
    """A number does not fit the width the wire format gives it."""

    default_message = "Number out of range for its OSC representation"


class StringDecodeError(OscError):
    """An OSC string holds bytes that are not valid UTF-8."""

    default_message = "OSC string contains illegal (non-ascii) characters"


class UnexpectedEofError(OscError):
    """The input ended before a complete value could be read."""

    default_message = "Unexpected end of OSC data"