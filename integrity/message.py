"""
Positional template substitution for diagnostic messages.

Builds a message from a list of arguments: each argument either fills the first '{}' left in
the message built so far, or is appended after ', '.

    >>> deferred_string_builder("this is {}", 1)
    'this is 1'
    >>> deferred_string_builder("this is", 1)
    'this is, 1'
    >>> deferred_string_builder(True, "str", 1.1)
    'True, "str", 1.1'
    >>> deferred_string_builder("This is {}", "weird {} {}", 1, 2)
    'This is weird 1 2'
    >>> deferred_string_builder("{} {}", 1, 2, 3)
    '1 2, 3'

Placeholders are searched in the growing message, not in a frozen template, so text substituted
by one argument may expose new placeholders to the following ones.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .options import IntegrityOptions, resolve_options
from .render import render

# Constants ------------------------------------------------------------------------------------------------------------

PLACEHOLDER = "{}"
SEPARATOR = ", "


# Methods --------------------------------------------------------------------------------------------------------------

def build_message(default_text: str, *args: Any, options: IntegrityOptions | None = None) -> str:
    """
    Build a message from arguments, or return default_text when there are none.

    Arguments are processed in order against a message that starts empty:
        - If the message contains '{}', its first occurrence is replaced by the argument
          rendered in raw mode, strings are inserted bare.
        - Otherwise the argument is appended, preceded by ', ' unless the message is still empty.
          Appended strings are quoted, except a str first argument: it is the template and is taken
          verbatim, without truncation. A string following an empty template is quoted.

    All other arguments are rendered and truncated one by one, see render().

    Args:
        default_text: Message returned as is when no arguments are given.
        *args: Message arguments of any type.
        options: Rendering options, the module-level options if None.

    Returns:
        The message. Never raises for any argument value.

    Examples:
        >>> build_message("NaN")
        'NaN'
        >>> build_message("NaN", "ratio {} of {}", 0, 0)
        'ratio 0 of 0'
        >>> build_message("", 1, "two")
        '1, "two"'
    """
    if not args:
        return default_text

    opt = resolve_options(options)
    message = ""
    for i, arg in enumerate(args):
        braces = message.find(PLACEHOLDER)
        if braces != -1:
            text = render(arg, raw=True, options=opt)
            message = message[:braces] + text + message[braces + len(PLACEHOLDER):]
        elif i == 0 and isinstance(arg, str):
            message = arg
        elif not message:
            message = render(arg, options=opt)
        else:
            message += SEPARATOR + render(arg, options=opt)
    return message


def deferred_string_builder(*args: Any, options: IntegrityOptions | None = None) -> str:
    """
    Concatenate and substitute arguments into a message, see build_message().

    Same as build_message() with an empty default text, for ad-hoc formatting outside of checks.
    """
    return build_message("", *args, options=options)
