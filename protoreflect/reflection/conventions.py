"""Names of the entry points generated message types expose."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Conventions:
    """Entry-point names looked up on message and builder types.

    builder_factory and decoder_factory are static methods on the message
    type; finalize is an instance method on the builder type.
    """

    builder_factory: str = "new_builder"
    finalize: str = "build"
    decoder_factory: str = "decoder"

    def __post_init__(self) -> None:
        for name in (self.builder_factory, self.finalize, self.decoder_factory):
            if not name.isidentifier():
                raise ValueError(f"{name!r} is not a valid method name")
            if name.startswith("_"):
                raise ValueError(f"{name!r} is not a public method name")


DEFAULT_CONVENTIONS = Conventions()
