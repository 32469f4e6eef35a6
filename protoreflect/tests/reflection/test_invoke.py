"""Tests for the invocation helper"""

from pytest import raises

from protoreflect.reflection import (
    InvocationError,
    call_no_args,
    call_single_arg,
    invoke_no_args,
    invoke_single_arg,
)
from protoreflect.tests.sample import FavoriteColor, FavoriteColorBuilder


def describe_invoke_no_args():
    def returns_result(expect):
        builder = invoke_no_args(FavoriteColorBuilder, FavoriteColor.new_builder)
        expect(builder) == FavoriteColorBuilder()

    def does_not_check_result_type(expect):
        expect(invoke_no_args(FavoriteColorBuilder, lambda: "text")) == "text"

    def wraps_failures(expect):
        def explode():
            raise ZeroDivisionError("boom")

        with raises(InvocationError) as exinfo:
            invoke_no_args(int, explode)

        expect(str(exinfo.value)).includes("explode")
        expect(str(exinfo.value)).includes("boom")
        expect(isinstance(exinfo.value.__cause__, ZeroDivisionError)) == True


def describe_invoke_single_arg():
    def passes_argument(expect):
        builder = FavoriteColorBuilder(color="teal", priority=1)
        color = invoke_single_arg(FavoriteColor, FavoriteColorBuilder.build, builder)
        expect(color) == FavoriteColor(color="teal", priority=1)

    def wraps_failures(expect):
        with raises(InvocationError) as exinfo:
            invoke_single_arg(int, int, "not a number")

        expect(isinstance(exinfo.value.__cause__, ValueError)) == True

    def does_not_wrap_keyboard_interrupt(expect):
        def interrupt(value):
            raise KeyboardInterrupt

        with raises(KeyboardInterrupt):
            invoke_single_arg(int, interrupt, 1)


def describe_call():
    def returns_results(expect):
        expect(call_no_args(FavoriteColorBuilder, FavoriteColor.new_builder)) == FavoriteColorBuilder()
        builder = FavoriteColorBuilder(color="teal", priority=1)
        color = call_single_arg(FavoriteColor, FavoriteColorBuilder.build, builder)
        expect(color) == FavoriteColor(color="teal", priority=1)

    def does_not_wrap_failures(expect):
        def explode():
            raise ZeroDivisionError("boom")

        with raises(ZeroDivisionError):
            call_no_args(int, explode)
        with raises(ValueError):
            call_single_arg(int, int, "not a number")
