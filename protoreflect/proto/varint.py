"""Varint length prefixes for delimited message streams."""

from typing import BinaryIO


class VarintError(ValueError):
    """Raised when a varint cannot be encoded or decoded."""


# A 64 bit value never needs more than ten 7 bit groups.
MAX_VARINT_BYTES = 10
MAX_VARINT = 2**64 - 1


def encode_varint(value: int) -> bytes:
    """Encode a non-negative integer as an unsigned LEB128 varint."""
    if value < 0:
        raise VarintError(f"Cannot encode negative value {value}")
    if value > MAX_VARINT:
        raise VarintError(f"Cannot encode {value}, it exceeds 64 bits")

    output = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            output.append(byte | 0x80)
        else:
            output.append(byte)
            return bytes(output)


def read_varint(stream: BinaryIO) -> int | None:
    """Read one varint from a stream.

    Returns None if the stream is already at EOF. Raises VarintError if the
    stream ends partway through the varint or the value exceeds 64 bits.
    """
    result = 0
    shift = 0

    for index in range(MAX_VARINT_BYTES):
        byte = stream.read(1)
        if not byte:
            if index == 0:
                return None
            raise VarintError("Truncated varint")

        if index == MAX_VARINT_BYTES - 1 and byte[0] > 0x01:
            raise VarintError("Varint exceeds 64 bits")

        result |= (byte[0] & 0x7F) << shift
        if not byte[0] & 0x80:
            return result
        shift += 7

    raise VarintError(f"Varint exceeds {MAX_VARINT_BYTES} bytes")
