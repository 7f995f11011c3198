"""
Integrity checks.

Thin contract checks raising on failure. The message of a raised error is the check's default
text when no message arguments are passed, otherwise it is built from the arguments, see
integrity.message.build_message():

    >>> check_valid_number(float("nan"))
    Traceback (most recent call last):
    ...
    integrity.checks.InvalidNumberError: NaN
    >>> check(1 > 2, "expected {} > {}", 1, 2)
    Traceback (most recent call last):
    ...
    integrity.checks.IntegrityError: expected 1 > 2

Messages are built only on the failure path.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import numbers

from decimal import Decimal
from typing import Any, NoReturn, TypeVar

# Local ----------------------------------------------------------------------------------------------------------------
from .message import build_message
from .options import IntegrityOptions, resolve_options
from .render import ValueKind, value_kind
from .utils import type_tag

# Constants ------------------------------------------------------------------------------------------------------------

T = TypeVar("T")

NAN_TEXT = "NaN"
POS_INFINITY_TEXT = "+Infinity"
NEG_INFINITY_TEXT = "-Infinity"


# Classes --------------------------------------------------------------------------------------------------------------

class IntegrityError(RuntimeError):
    """A failed integrity check."""


class NoneValueError(IntegrityError, TypeError):
    """A None value where a value was required."""


class InvalidNumberError(IntegrityError, ValueError):
    """A NaN or infinite number where a finite one was required."""


# Methods --------------------------------------------------------------------------------------------------------------

def check(condition: Any, *message_args: Any, options: IntegrityOptions | None = None) -> None:
    """
    Check that condition is truthy.

    Raises:
        IntegrityError: If condition is falsy.
    """
    if not condition:
        opt = resolve_options(options)
        raise IntegrityError(build_message(opt.check_message, *message_args, options=opt))


def fail(*message_args: Any, options: IntegrityOptions | None = None) -> NoReturn:
    """
    Raise IntegrityError unconditionally.

    Raises:
        IntegrityError: Always.
    """
    opt = resolve_options(options)
    raise IntegrityError(build_message(opt.check_message, *message_args, options=opt))


def check_not_none(obj: T | None, *message_args: Any, options: IntegrityOptions | None = None) -> T:
    """
    Check that obj is not None.

    Returns:
        obj if valid.

    Raises:
        NoneValueError: If obj is None.
    """
    if obj is None:
        opt = resolve_options(options)
        raise NoneValueError(build_message(opt.none_message, *message_args, options=opt))
    return obj


def check_str_not_empty(s: str | None, *message_args: Any, options: IntegrityOptions | None = None) -> str:
    """
    Check that s is a string of at least one character.

    Whitespace counts as content, only the empty string '' fails.

    Returns:
        s if valid.

    Raises:
        NoneValueError: If s is None.
        IntegrityError: If s is ''.
        TypeError: If s is not a str.
    """
    if s is None:
        opt = resolve_options(options)
        raise NoneValueError(build_message(opt.none_message, *message_args, options=opt))
    if not isinstance(s, str):
        raise TypeError(f"s must be str, but got {type_tag(s)}")
    if len(s) == 0:
        opt = resolve_options(options)
        raise IntegrityError(build_message(opt.empty_str_message, *message_args, options=opt))
    return s


def check_valid_number(value: T | None, *message_args: Any, options: IntegrityOptions | None = None) -> T:
    """
    Check that value is not None, NaN, +Infinity or -Infinity.

    Only ValueKind.FLOAT values (float, Decimal, complex, NumPy floats, ...) are tested for
    NaN/Infinity. Integers, booleans and non-numeric values only fail when None.

    Returns:
        value if valid.

    Raises:
        NoneValueError: If value is None.
        InvalidNumberError: If value is NaN or infinite. The default message names the fault:
            'NaN', '+Infinity' or '-Infinity'.
    """
    kind = value_kind(value)
    if kind is ValueKind.NONE:
        opt = resolve_options(options)
        raise NoneValueError(build_message(opt.none_message, *message_args, options=opt))
    if kind is ValueKind.FLOAT:
        fault = _number_fault(value)
        if fault is not None:
            raise InvalidNumberError(build_message(fault, *message_args, options=options))
    return value


def check_valid_number_or_none(
        value: T | None,
        *message_args: Any,
        options: IntegrityOptions | None = None,
) -> T | None:
    """
    Same as check_valid_number(), but None is accepted.

    Raises:
        InvalidNumberError: If value is NaN or infinite.
    """
    if value is None:
        return None
    return check_valid_number(value, *message_args, options=options)


# Private Methods ------------------------------------------------------------------------------------------------------

def _number_fault(value: Any) -> str | None:
    """Return the default message naming a NaN/Infinity fault of value, None if value is finite."""
    # Non-real numbers are checked per component, complex subclasses or not
    if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
        return _number_fault(value.real) or _number_fault(value.imag)

    if isinstance(value, Decimal):
        if value.is_nan():
            return NAN_TEXT
        if value.is_infinite():
            return NEG_INFINITY_TEXT if value.is_signed() else POS_INFINITY_TEXT
        return None

    # Rationals are exact
    if isinstance(value, numbers.Rational):
        return None

    number = float(value)
    if math.isnan(number):
        return NAN_TEXT
    if math.isinf(number):
        return POS_INFINITY_TEXT if number > 0 else NEG_INFINITY_TEXT
    return None
