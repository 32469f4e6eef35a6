"""Errors raised while binding to generated message types."""


class ReflectionError(RuntimeError):
    """Base exception for reflective binding errors."""


class DiscoveryError(ReflectionError):
    """Raised when a required entry point cannot be located on a type."""


class ShapeMismatchError(ReflectionError):
    """Raised when an entry point returns the wrong kind of type."""


class IntegrityError(ReflectionError):
    """Raised when the construction-time round-trip yields unexpected types."""


class InvocationError(ReflectionError):
    """Raised when invoking a resolved entry point fails.

    The original exception is available as __cause__.
    """
