"""
Integrity utilities shared across the package.

Contains type-name helpers used by the renderer and the check facade to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------


def class_name(obj: Any, fully_qualified: bool = False) -> str:
    """
    Get the class name of an object or a class.

    Returns class name whether given an instance or the class itself, so both
    `class_name(10)` and `class_name(int)` return 'int'. Builtins are never module-qualified.

    Parameters:
        obj (Any): An object or a class.
        fully_qualified (bool): If true, returns 'module.QualName' for user objects or classes.

    Returns:
        str: The class name.

    Examples:
        >>> class_name(10)
        'int'
        >>> class_name(10, fully_qualified=True)
        'int'
        >>> class Node: ...
        >>> class_name(Node(), fully_qualified=True)
        '__main__.Node'
    """
    cls = obj if isinstance(obj, type) else type(obj)

    module = getattr(cls, "__module__", None)

    if fully_qualified and module not in (None, "builtins"):
        return f"{module}.{cls.__qualname__}"
    return cls.__name__


def default_object_text(obj: Any) -> str:
    """
    Return the text object.__repr__ would produce for obj, e.g. '<pkg.Node object at 0x7f...>'.

    Used to tell apart objects that only inherit the stdlib representation.
    """
    return object.__repr__(obj)


def type_tag(obj: Any) -> str:
    """Return the short '<TypeName>' tag for an object or a class."""
    return f"<{class_name(obj)}>"
