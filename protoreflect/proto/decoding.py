"""Decoders that parse bytes and streams into message instances."""

import struct
import sys
from typing import BinaryIO, Generic, TypeVar

from .serialization import Message, SerializationError
from .varint import VarintError, read_varint

M = TypeVar("M", bound=Message)


class Decoder(Generic[M]):
    """Parses the binary forms of one message type.

    Decoders hold no state besides the message type and may be shared
    between threads.

    Example:
        decoder = Point.decoder()
        point = decoder.parse_from(data)
        for point in iter(lambda: decoder.parse_delimited_from(stream), None):
            handle(point)
    """

    __slots__ = ("_message_type",)

    def __init__(self, message_type: type[M]) -> None:
        self._message_type = message_type

    @property
    def message_type(self) -> type[M]:
        """The message type this decoder produces."""
        return self._message_type

    def parse_from(self, data: bytes | memoryview) -> M:
        """Parse a buffer holding exactly one message."""
        try:
            instance, consumed = self._message_type.unpack(data)
        except (struct.error, IndexError, ValueError) as exc:
            raise SerializationError(
                f"Malformed {self._message_type.__name__}: {exc}"
            ) from exc

        if consumed != len(data):
            raise SerializationError(
                f"{len(data) - consumed} trailing bytes after {self._message_type.__name__}"
            )
        return instance

    def parse_from_stream(self, stream: BinaryIO) -> M:
        """Read a stream to EOF and parse it as one message."""
        return self.parse_from(stream.read())

    def parse_delimited_from(self, stream: BinaryIO) -> M | None:
        """Read one length-prefixed message from a stream.

        Returns None if the stream is at EOF before the length prefix.
        """
        try:
            length = read_varint(stream)
        except VarintError as exc:
            raise SerializationError(f"Bad length prefix: {exc}") from exc

        if length is None:
            return None
        if length > sys.maxsize:
            raise SerializationError(f"Length prefix {length} exceeds the largest readable size")

        payload = stream.read(length)
        if len(payload) != length:
            raise SerializationError(
                f"Expected {length} bytes of {self._message_type.__name__}, got {len(payload)}"
            )
        return self.parse_from(payload)

    def __repr__(self) -> str:
        return f"Decoder({self._message_type.__qualname__})"
