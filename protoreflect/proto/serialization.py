"""Base classes for generated message and builder types."""

import json
from dataclasses import fields
from typing import BinaryIO, Self

from dataclasses_json import DataClassJsonMixin

from .varint import encode_varint


class SerializationError(RuntimeError):
    """Raised when serialization or deserialization fails."""


class Message:
    """Base class for generated message types.

    Subclasses are frozen dataclasses. Generated code adds the static
    entry points used for reflective binding:

    Example:
        @dataclass(frozen=True)
        class Point(Message):
            x: int = 0

            @staticmethod
            def new_builder() -> "PointBuilder":
                return PointBuilder()

            @staticmethod
            def decoder() -> "Decoder[Point]":
                return Decoder(Point)
    """

    def pack(self) -> bytes:
        """Pack this message to bytes. Generated code overrides this."""
        raise NotImplementedError("pack() must be implemented by generated code")

    @classmethod
    def unpack(cls, data: bytes | memoryview, offset: int = 0) -> tuple[Self, int]:
        """Unpack a message from bytes.

        Args:
            data: The bytes to unpack from.
            offset: Starting offset in data.

        Returns:
            Tuple of (instance, bytes_consumed).
        """
        raise NotImplementedError("unpack() must be implemented by generated code")

    def write_to(self, stream: BinaryIO) -> None:
        """Write the plain binary form of this message."""
        stream.write(self.pack())

    def write_delimited_to(self, stream: BinaryIO) -> None:
        """Write this message prefixed with its length as a varint."""
        payload = self.pack()
        stream.write(encode_varint(len(payload)))
        stream.write(payload)


class Builder(DataClassJsonMixin):
    """Base class for generated builder types.

    A builder is a mutable dataclass staging the fields of one message.
    Subclasses override build() to produce the frozen message.

    Example:
        @dataclass
        class PointBuilder(Builder):
            x: int = 0

            def build(self) -> Point:
                return Point(x=self.x)
    """

    def build(self) -> Message:
        """Finalize the builder. Generated code overrides this."""
        raise NotImplementedError("build() must be implemented by generated code")

    def merge_json(self, text: str) -> None:
        """Merge the fields of a JSON object into this builder.

        Only keys present in the document are changed.

        Args:
            text: A JSON object whose keys are field names.

        Raises:
            SerializationError: The text is not a JSON object, or names a
                field the builder does not have.
        """
        try:
            values = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SerializationError(f"Invalid JSON: {exc}") from exc

        if not isinstance(values, dict):
            raise SerializationError(f"Expected a JSON object, got {type(values).__name__}")

        names = {f.name for f in fields(self)}  # type: ignore[arg-type]
        unknown = sorted(set(values) - names)
        if unknown:
            raise SerializationError(
                f"{type(self).__name__} has no field(s) {', '.join(unknown)}"
            )

        merged = self.from_dict({**self.to_dict(encode_json=False), **values})
        for name in values:
            setattr(self, name, getattr(merged, name))
