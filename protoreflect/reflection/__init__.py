"""Reflective binding to generated message types."""

from .builders import builder_function_of as builder_function_of
from .conventions import DEFAULT_CONVENTIONS as DEFAULT_CONVENTIONS
from .conventions import Conventions as Conventions
from .decoders import decoder_of as decoder_of
from .errors import DiscoveryError as DiscoveryError
from .errors import IntegrityError as IntegrityError
from .errors import InvocationError as InvocationError
from .errors import ReflectionError as ReflectionError
from .errors import ShapeMismatchError as ShapeMismatchError
from .invoke import call_no_args as call_no_args
from .invoke import call_single_arg as call_single_arg
from .invoke import invoke_no_args as invoke_no_args
from .invoke import invoke_single_arg as invoke_single_arg
