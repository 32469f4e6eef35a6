"""Invocation of resolved entry points.

Every reflective call goes through this module so the one unchecked
adaptation of a result to its expected type lives in a single place.

call_no_args and call_single_arg let failures through untouched and are
meant for hot paths. invoke_no_args and invoke_single_arg wrap failures in
InvocationError and are meant for binding time.
"""

from collections.abc import Callable
from typing import Any, TypeVar, cast

from .errors import InvocationError

T = TypeVar("T")


def _adapt(expected_type: type[T], result: Any) -> T:
    # Unchecked.
    return cast(T, result)


def call_no_args(expected_type: type[T], entry_point: Callable[[], Any]) -> T:
    """Call a zero-argument entry point and adapt its result to expected_type."""
    return _adapt(expected_type, entry_point())


def call_single_arg(
    expected_type: type[T], entry_point: Callable[[Any], Any], argument: Any
) -> T:
    """Call a single-argument entry point and adapt its result to expected_type."""
    return _adapt(expected_type, entry_point(argument))


def invoke_no_args(expected_type: type[T], entry_point: Callable[[], Any]) -> T:
    """Like call_no_args, but failures are raised as InvocationError."""
    try:
        return call_no_args(expected_type, entry_point)
    except Exception as exc:
        raise InvocationError(
            f"{_describe(entry_point)}() raised {type(exc).__name__}: {exc}"
        ) from exc


def invoke_single_arg(
    expected_type: type[T], entry_point: Callable[[Any], Any], argument: Any
) -> T:
    """Like call_single_arg, but failures are raised as InvocationError."""
    try:
        return call_single_arg(expected_type, entry_point, argument)
    except Exception as exc:
        raise InvocationError(
            f"{_describe(entry_point)}({type(argument).__name__}) raised "
            f"{type(exc).__name__}: {exc}"
        ) from exc


def _describe(entry_point: Callable[..., Any]) -> str:
    return getattr(entry_point, "__qualname__", repr(entry_point))
