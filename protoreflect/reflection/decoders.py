"""Decoders for message types known only at runtime."""

import logging
from typing import TypeVar

from ..proto import Decoder, Message
from .conventions import DEFAULT_CONVENTIONS, Conventions
from .discovery import find_static
from .errors import ShapeMismatchError
from .invoke import invoke_no_args

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=Message)


def decoder_of(
    message_type: type[M], *, conventions: Conventions = DEFAULT_CONVENTIONS
) -> Decoder[M]:
    """Invoke the static decoder factory of a generated message type.

    The result should be kept and reused.

    Raises:
        DiscoveryError: message_type has no public zero-argument decoder factory.
        ShapeMismatchError: The factory returned something other than a
            Decoder for message_type.
        InvocationError: The factory raised.
    """
    factory = find_static(message_type, conventions.decoder_factory)

    # message_type.decoder() returns a Decoder[message_type]
    decoder: Decoder[M] = invoke_no_args(Decoder, factory)

    if not isinstance(decoder, Decoder):
        raise ShapeMismatchError(
            f"{message_type.__qualname__}.{conventions.decoder_factory}() "
            f"returned {type(decoder).__qualname__}, not a Decoder"
        )
    if decoder.message_type is not message_type:
        raise ShapeMismatchError(
            f"{message_type.__qualname__}.{conventions.decoder_factory}() returned "
            f"a decoder for {decoder.message_type.__qualname__}"
        )

    logger.debug("Bound %s to %r", message_type.__qualname__, decoder)
    return decoder
