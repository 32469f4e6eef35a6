"""Builder functions for message types known only at runtime."""

import logging
from collections.abc import Callable
from typing import TypeVar

from ..proto import Builder, Message
from .conventions import DEFAULT_CONVENTIONS, Conventions
from .discovery import find_method, find_static, return_type
from .errors import IntegrityError, ShapeMismatchError
from .invoke import call_no_args, call_single_arg, invoke_no_args, invoke_single_arg

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=Message)
InputT = TypeVar("InputT")


def builder_function_of(
    message_type: type[M],
    mutate: Callable[[Builder, InputT], None],
    *,
    conventions: Conventions = DEFAULT_CONVENTIONS,
) -> Callable[[InputT], M]:
    """Return a function that builds message_type instances from some input.

    Each call of the returned function creates a fresh builder, passes it
    to mutate together with the input, then finalizes the builder.

    Binding is relatively expensive, but the returned function is cheap to
    call, so callers should keep and reuse it. It is safe for concurrent use
    if mutate is.

    Args:
        message_type: A generated message class.
        mutate: Called with (builder, input); modifies the builder in place.
        conventions: Entry-point names to look up.

    Returns:
        A function of one argument returning a message_type instance.

    Raises:
        DiscoveryError: The builder factory or finalize method is missing.
        ShapeMismatchError: The builder factory does not declare a Builder
            return type, or finalize declares some other return type.
        IntegrityError: A trial build produced objects of the wrong type.
        InvocationError: The builder factory or finalize method raised
            during the trial build. Once bound, failures from the builder
            factory, mutate and finalize reach the caller unwrapped.
    """
    new_builder = find_static(message_type, conventions.builder_factory)

    # Resolve the builder type from the factory itself: message types created
    # from generated source in another namespace carry their own builder
    # types.
    builder_type = return_type(new_builder)
    if not isinstance(builder_type, type):
        raise ShapeMismatchError(
            f"{message_type.__qualname__}.{conventions.builder_factory}() "
            f"does not declare a builder class as its return type"
        )
    if not issubclass(builder_type, Builder):
        raise ShapeMismatchError(f"{builder_type.__qualname__} is not a Builder")

    build = find_method(builder_type, conventions.finalize)
    built_type = return_type(build)
    if isinstance(built_type, type) and not issubclass(built_type, message_type):
        raise ShapeMismatchError(
            f"{builder_type.__qualname__}.{conventions.finalize}() returns "
            f"{built_type.__qualname__}, not {message_type.__qualname__}"
        )

    # build a trial instance to make sure the binding works
    builder = invoke_no_args(builder_type, new_builder)
    if not isinstance(builder, builder_type):
        raise IntegrityError(f"{builder!r} is not an instance of {builder_type.__qualname__}")
    instance = invoke_single_arg(message_type, build, builder)
    if not isinstance(instance, message_type):
        raise IntegrityError(f"{instance!r} is not an instance of {message_type.__qualname__}")

    logger.debug(
        "Bound %s to builder %s", message_type.__qualname__, builder_type.__qualname__
    )

    def build_message(value: InputT) -> M:
        builder: Builder = call_no_args(builder_type, new_builder)
        mutate(builder, value)
        return call_single_arg(message_type, build, builder)

    return build_message
