"""Runtime base classes for generated message types."""

from .decoding import Decoder as Decoder
from .serialization import Builder as Builder
from .serialization import Message as Message
from .serialization import SerializationError as SerializationError
from .varint import VarintError as VarintError
from .varint import encode_varint as encode_varint
from .varint import read_varint as read_varint
