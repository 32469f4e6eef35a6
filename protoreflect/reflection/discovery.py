"""Lookup of entry points by name and arity."""

import inspect
import typing
from collections.abc import Callable
from typing import Any

from .errors import DiscoveryError, ShapeMismatchError


def find_static(owner: type, name: str) -> Callable[[], Any]:
    """Find a public, zero-argument static or class method on owner.

    Returns the entry point as retrieved from the class, so class methods
    come back already bound to owner.
    """
    raw = _lookup(owner, name)
    if not isinstance(raw, (staticmethod, classmethod)):
        raise DiscoveryError(f"{owner.__qualname__}.{name} is not a static or class method")

    entry_point = getattr(owner, name)
    _require_arity(owner, name, entry_point, 0)
    return entry_point


def find_method(owner: type, name: str) -> Callable[[Any], Any]:
    """Find a public instance method on owner that takes only self.

    Returns the plain function, to be called with the instance as its
    single argument.
    """
    raw = _lookup(owner, name)
    if not inspect.isfunction(raw):
        raise DiscoveryError(f"{owner.__qualname__}.{name} is not an instance method")

    _require_arity(owner, name, raw, 1)
    return raw


def return_type(entry_point: Callable[..., Any]) -> Any:
    """Resolve the declared return annotation of an entry point.

    String annotations are evaluated in the entry point's own module
    globals, so types created from generated source in a separate
    namespace resolve against that namespace. Returns None when no return
    annotation is declared.
    """
    try:
        hints = typing.get_type_hints(entry_point)
    except (NameError, TypeError, AttributeError, SyntaxError) as exc:
        raise ShapeMismatchError(
            f"Cannot resolve annotations of {entry_point.__qualname__}: {exc}"
        ) from exc
    return hints.get("return")


def _lookup(owner: type, name: str) -> Any:
    if name.startswith("_"):
        raise DiscoveryError(f"{owner.__qualname__}.{name} is not public")
    try:
        return inspect.getattr_static(owner, name)
    except AttributeError:
        raise DiscoveryError(f"{owner.__qualname__} has no {name}()") from None


def _require_arity(owner: type, name: str, entry_point: Callable[..., Any], arity: int) -> None:
    try:
        inspect.signature(entry_point).bind(*([None] * arity))
    except (TypeError, ValueError) as exc:
        expected = "no arguments" if arity == 0 else "only self"
        raise DiscoveryError(f"{owner.__qualname__}.{name} must take {expected}: {exc}") from exc
