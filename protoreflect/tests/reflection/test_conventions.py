"""Tests for entry-point naming conventions"""

from dataclasses import FrozenInstanceError

from pytest import raises

from protoreflect.reflection import DEFAULT_CONVENTIONS, Conventions


def describe_conventions():
    def defaults(expect):
        expect(DEFAULT_CONVENTIONS) == Conventions(
            builder_factory="new_builder", finalize="build", decoder_factory="decoder"
        )

    def is_immutable(expect):
        with raises(FrozenInstanceError):
            DEFAULT_CONVENTIONS.finalize = "finish"  # type: ignore[misc]

    def rejects_private_names(expect):
        with raises(ValueError):
            Conventions(builder_factory="_new_builder")

    def rejects_invalid_identifiers(expect):
        with raises(ValueError):
            Conventions(decoder_factory="parse-from")
