"""
Integrity configuration.

IntegrityOptions is an immutable value holding every tunable used by the renderer, the message
builder and the check facade. A module-level default is kept for callers that configure once at
startup and never pass options explicitly:

    >>> configure(max_len=60)
    >>> get_options().max_len
    60

The module default is swapped as a whole on each configure() call. Calls running concurrently
with configure() may observe either the old or the new options, nothing stronger is guaranteed.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, replace as dataclasses_replace
from typing import Literal

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import type_tag

# Constants ------------------------------------------------------------------------------------------------------------

Preset = Literal["default", "compact", "debug"]


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class IntegrityOptions:
    """
    Configuration for value rendering and message building.

    Attributes:
        max_depth: Recursion limit of the renderer; deeper values render as '<<depth N exceeded>>'.
        max_len: Length of a top-level rendering before it is truncated.
        ellipsis: Marker appended to truncated renderings.
        quote: Quote mark wrapped around strings outside of raw mode.
        check_message: Default message of check() and fail().
        none_message: Default message of None violations.
        empty_str_message: Default message of check_str_not_empty() on ''.

    Presets:
        compact(): Short one-line messages for logs.
        debug(): Deep and long renderings for interactive debugging.
    """

    max_depth: int = 10
    max_len: int = 100
    ellipsis: str = "..."
    quote: str = '"'

    check_message: str = "Integrity check failed"
    none_message: str = "Encountered None value"
    empty_str_message: str = "Expected non-empty string"

    def __post_init__(self):
        for name in ("max_depth", "max_len"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be int, but got {type_tag(value)}")
            if value < 0:
                raise ValueError(f"{name} must be >= 0, but got {value!r}")

        for name in ("ellipsis", "quote", "check_message", "none_message", "empty_str_message"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise TypeError(f"{name} must be str, but got {type_tag(value)}")

    @classmethod
    def compact(cls) -> "IntegrityOptions":
        return cls(max_depth=3, max_len=60)

    @classmethod
    def debug(cls) -> "IntegrityOptions":
        return cls(max_depth=32, max_len=2000)

    @classmethod
    def from_preset(cls, preset: Preset) -> "IntegrityOptions":
        """Return options for a preset name: 'default', 'compact' or 'debug'."""
        if preset == "default":
            return cls()
        if preset == "compact":
            return cls.compact()
        if preset == "debug":
            return cls.debug()
        raise ValueError(f"preset must be 'default', 'compact' or 'debug', but got {preset!r}")

    def merge(self, **kwargs) -> "IntegrityOptions":
        """
        Create a new IntegrityOptions with the given fields overridden.

        Fields not passed are inherited from the current instance. The result is validated.

        Raises:
            TypeError: If an unknown field is passed or a field has a wrong type.
            ValueError: If a numeric field is negative.
        """
        return dataclasses_replace(self, **kwargs)


# Module Options -------------------------------------------------------------------------------------------------------

_options: IntegrityOptions = IntegrityOptions()


# Methods --------------------------------------------------------------------------------------------------------------

def configure(preset: Preset | None = None, **kwargs) -> IntegrityOptions:
    """
    Replace the module-level default options.

    Args:
        preset: Base preset name. If None, the current module options are the base.
        **kwargs: IntegrityOptions fields merged on top of the base.

    Returns:
        The new module-level options.

    Examples:
        >>> configure(preset="compact", ellipsis="…").max_len
        60
    """
    global _options
    base = _options if preset is None else IntegrityOptions.from_preset(preset)
    _options = base.merge(**kwargs) if kwargs else base
    return _options


def get_options() -> IntegrityOptions:
    """Return the current module-level options."""
    return _options


def reset_options() -> IntegrityOptions:
    """Restore the module-level options to defaults."""
    global _options
    _options = IntegrityOptions()
    return _options


def resolve_options(options: IntegrityOptions | None) -> IntegrityOptions:
    """Return options if given, the module-level default otherwise."""
    if options is None:
        return _options
    if not isinstance(options, IntegrityOptions):
        raise TypeError(f"options must be IntegrityOptions or None, but got {type_tag(options)}")
    return options
