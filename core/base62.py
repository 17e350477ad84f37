"""Base62 codec: byte buffers as big-endian integers over 0-9A-Za-z."""

from core.errors import DecodeError

BASE62 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
_INDEX = {char: value for value, char in enumerate(BASE62)}


def encode_int(n, width=0):
    """Encode a non-negative int, left-padded with '0' to `width`."""
    if n < 0:
        raise ValueError(f"cannot encode negative value {n}")
    chars = []
    while n > 0:
        n, remainder = divmod(n, 62)
        chars.append(BASE62[remainder])
    return "".join(reversed(chars)).rjust(max(width, 1), "0")


def decode_int(text):
    if not text:
        raise DecodeError("empty base62 string", text=text)
    n = 0
    for position, char in enumerate(text):
        try:
            n = n * 62 + _INDEX[char]
        except KeyError:
            raise DecodeError(f"invalid base62 character {char!r}", text=text, position=position) from None
    return n


def encode(buf, width=0):
    """Encode a byte buffer read as one big-endian unsigned integer."""
    return encode_int(int.from_bytes(buf, byteorder="big"), width)


def decode(text, length):
    """Decode into exactly `length` big-endian bytes, zero-extended on the left."""
    n = decode_int(text)
    if n.bit_length() > length * 8:
        raise DecodeError(f"value does not fit in {length} bytes", text=text)
    return n.to_bytes(length, byteorder="big")
