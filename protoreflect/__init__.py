"""protoreflect - Reflective builders and decoders for generated message types."""

import logging
from importlib.metadata import PackageNotFoundError, version

from .reflection import builder_function_of as builder_function_of
from .reflection import decoder_of as decoder_of

try:
    __version__ = version("protoreflect")
except PackageNotFoundError:
    __version__ = "(local)"

logging.getLogger(__name__).addHandler(logging.NullHandler())
