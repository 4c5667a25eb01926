# oscpack

Encode and decode Open Sound Control 1.0 packets: messages with `i`
(int32), `f` (float32), `s` (string) and `b` (blob) arguments, and bundles
carrying a 64-bit time tag and nested packets.

No dependencies beyond the standard library. Python 3.10 or newer.

## Encoding

```python
from oscpack.encoder import encode_message, encode_bundle, encode_packet, to_bytes
from oscpack.model import Bundle, Framing, Message, TimeTag

# A message addressed to /audio/play with an int, a float and a blob.
data = encode_message("/audio/play", [1, 44100.0, b"\xde\xad\xbe\xef"])

# The same as a Message object, written without a length prefix.
msg = Message("/audio/play", (1, 44100.0, b"\xde\xad\xbe\xef"))
unframed = to_bytes(msg, Framing.UNFRAMED)

# Framed output is preceded by its big-endian int32 byte count.
framed = to_bytes(msg, Framing.FRAMED)

# A bundle: a time tag followed by messages or further bundles.
bundle = Bundle(TimeTag(0x01020304, 0x05060708), (
    Message("/m1", (0x5EEEEEED,)),
    Message("/m2", (440.0,)),
))
packet = to_bytes(bundle, Framing.FRAMED)
```

Argument types follow the Python value: `int` is written as `i`, `float`
as `f`, `str` as `s`, and `bytes`, `bytearray` or `memoryview` as `b`.
`bool` and any other type raise `UnsupportedTypeError`; an `int` outside
the int32 range raises `BadCastError`.

### Packets as plain sequences

`encode_packet`, `to_bytes` and `to_write` also take a tuple or list (or a
mapping, whose values are used in order). Its first item decides the kind:

- a string makes a message. It is the address, and each later item is a
  group of arguments (a sequence of values, or `None` for none):

  ```python
  encode_packet(("/example/path", (0x01020304, 440.0, b"\xde\xad\xbe\xef\xff")))
  encode_packet(("/ts", None))          # b"/ts\0,\0\0\0"
  ```

- a time tag makes a bundle. A `TimeTag`, a pair of integers, or a mapping
  with two integer values all count. Each later item is a single
  `Message`/`Bundle` or a group of packets:

  ```python
  encode_packet(((1, 2), (("/m1", (5,)), ("/m2", (0.5,)))))
  ```

An empty packet or a time tag without exactly two parts raises
`BadFormatError`. `oscpack.packet_kind.classify(head)` and
`coerce_timetag(value)` expose this decision on their own.

`to_write(stream, value, framing)` writes the same bytes as `to_bytes` to
a binary file-like object.

## Decoding

```python
from oscpack.decoder import from_bytes, from_read, read_packet
from oscpack.model import Framing

msg = from_bytes(framed, Framing.FRAMED)
print(msg.address, msg.args)

with open("capture.osc", "rb") as fh:
    packet = from_read(fh, Framing.UNFRAMED)
```

A decoded packet is a `Message` (`address`, `args`) or a `Bundle`
(`timetag`, `elements`). Floats come back at float32 precision and blobs as
`bytes`. Type tag strings without a leading comma are accepted.

With `Framing.UNFRAMED`, `from_read` takes the rest of the stream as one
packet. `read_packet(stream)` reads one length-prefixed packet and leaves
the stream at the start of whatever follows, so several framed packets can
be read from one stream in turn. Bytes in a packet that its contents do not
use are skipped.

## Lower-level pieces

- `oscpack.writer`: `encode_i32`, `encode_f32`, `encode_str`,
  `encode_blob`, `encode_timetag` return the wire form of one value.
- `oscpack.reader.OscReader(stream, limit=None)` reads those values back
  (`read_i32`, `read_f32`, `read_u32`, `read_str`, `read_blob`,
  `read_timetag`, `read_padded_bytes`, `read_exact`, `skip_rest`), never
  reading past `limit` bytes when one is given.

## Errors

Every failure raises a subclass of `oscpack.errors.OscError`:

- `UnsupportedTypeError`: a value or type tag other than `i`, `f`, `s`, `b`
- `BadFormatError`: malformed packet structure
- `BadPaddingError`: data not padded with zeros to a 4-byte boundary
- `BadCastError`: a length or number out of range for its field
- `StringDecodeError`: a string that is not valid UTF-8
- `UnexpectedEofError`: the input ended in the middle of a value

## What it does not do

It only turns packets into bytes and back. It opens no sockets and has no
UDP or TCP client or server, and no address-pattern matching or dispatch.
Only the OSC 1.0 argument types above are supported; time tags stay as raw
seconds and fraction and are not converted to dates.

## The OSC format

Every field is aligned to four bytes. Strings are NUL-terminated and padded
with NULs; blobs are an int32 length followed by the bytes and padding;
numbers are big-endian. A bundle starts with the string `#bundle`, then a
64-bit time tag (seconds since 1900 and a 32-bit fraction), then each
element as an int32 length followed by its packet.