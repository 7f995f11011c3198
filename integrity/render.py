"""
Depth- and self-reference-bounded value-to-text renderer.

Turns arbitrary runtime values into compact structural text for diagnostic messages:

    >>> render([1, [2, 3]])
    '[1,[2,3]]'
    >>> render("abc"), render("abc", raw=True)
    ('"abc"', 'abc')

Objects without a meaningful text of their own are expanded into a JSON-like map of their
public members, e.g. '{"x":1,"y":"a","parent":<Node>}'. The output is meant for humans and
is not parseable back into values.

Rendering never raises. Introspection faults degrade to placeholder text, the depth limit
and the same-type guard produce sentinel text.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
import inspect
import numbers

from enum import Enum, unique
from typing import Any, Iterable, Iterator, Protocol, runtime_checkable

# Local ----------------------------------------------------------------------------------------------------------------
from .options import IntegrityOptions, resolve_options
from .utils import class_name, default_object_text, type_tag


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class ValueKind(str, Enum):
    """
    Closed set of value variants the renderer and the numeric checks dispatch on:
        - "none": None
        - "bool": bool (checked before int, bool is a subclass of int)
        - "int": integral numbers
        - "float": any other number, the only kind with NaN/Infinity semantics
        - "str": str, bytes, bytearray
        - "sequence": non-textual iterables that can be iterated without being consumed
        - "composite": everything else
    """
    NONE = "none"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STR = "str"
    SEQUENCE = "sequence"
    COMPOSITE = "composite"


@runtime_checkable
class Describable(Protocol):
    """
    Protocol for objects that describe their own members for structural rendering.

    describe_members() returns (name, value) pairs in display order. It takes precedence over
    both the object's own text and attribute introspection.
    """

    def describe_members(self) -> Iterable[tuple[str, Any]]: ...


class _AccessFailed:
    """Stands in for a member whose value could not be read."""
    __slots__ = ("exc",)

    def __init__(self, exc: BaseException):
        self.exc = exc


# Methods --------------------------------------------------------------------------------------------------------------

def value_kind(value: Any) -> ValueKind:
    """
    Classify a value into one of the ValueKind variants.

    Examples:
        >>> value_kind(True), value_kind(3), value_kind(0.5)
        (<ValueKind.BOOL: 'bool'>, <ValueKind.INT: 'int'>, <ValueKind.FLOAT: 'float'>)
        >>> value_kind(x for x in "ab")
        <ValueKind.COMPOSITE: 'composite'>
    """
    if value is None:
        return ValueKind.NONE
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, numbers.Integral):
        return ValueKind.INT
    if isinstance(value, numbers.Number):
        return ValueKind.FLOAT
    if isinstance(value, (str, bytes, bytearray)):
        return ValueKind.STR
    if _is_describable(value):
        return ValueKind.COMPOSITE
    # Iterators are one-shot, iterating them would consume the caller's value
    if isinstance(value, abc.Iterable) and not isinstance(value, abc.Iterator):
        return ValueKind.SEQUENCE
    return ValueKind.COMPOSITE


def render(value: Any, *, raw: bool = False, options: IntegrityOptions | None = None) -> str:
    """
    Render a value as display text for diagnostic messages.

    Args:
        value: Any Python object.
        raw: If True, a top-level str is returned bare instead of quoted. Nested strings are
            always quoted.
        options: Rendering options, the module-level options if None.

    Returns:
        Display text, truncated to options.max_len characters plus options.ellipsis.

    Rendering rules:
        - None, bool and numbers → str(value)
        - str → quoted unless raw; bytes/bytearray → repr(value)
        - Iterables (list, tuple, set, dict, ...) → '[a,b,c]'; mapping items render as '[key,value]'
        - Describable objects → '{"name":value,...}' from describe_members()
        - Objects whose str() is more than their type name → that text
        - Other objects → '{"name":value,...}' over public attributes, slots and properties
        - A member of exactly the parent's type → '<TypeName>', without recursion
        - Nesting beyond options.max_depth → '<<depth N exceeded>>'

    Examples:
        >>> render({"a": 1})
        '[["a",1]]'
        >>> render("x" * 150, options=IntegrityOptions(max_len=10))
        '"xxxxxxxx"...'
    """
    opt = resolve_options(options)
    text = _render(value, raw, 0, opt, opt.max_len)
    return _truncate(text, quoted=not raw and isinstance(value, str), opt=opt)


# Private Methods ------------------------------------------------------------------------------------------------------

def _render(value: Any, raw: bool, depth: int, opt: IntegrityOptions, limit: int) -> str:
    """
    Render value at the given nesting depth.

    Only the first limit + 1 characters of the result are needed by the caller: once a rendering
    grows past limit, the text is returned early as a prefix of the full rendering, so large
    collections and branching cycles cost about limit steps.
    """
    if depth > opt.max_depth:
        return f"<<depth {depth} exceeded>>"

    try:
        kind = value_kind(value)
        if kind is ValueKind.NONE:
            return "None"
        if kind is ValueKind.STR:
            return _render_text(value, raw, opt, limit)
        if kind in (ValueKind.BOOL, ValueKind.INT, ValueKind.FLOAT):
            return str(value)
        if kind is ValueKind.SEQUENCE:
            return _render_sequence(value, depth, opt, limit)
        return _render_composite(value, depth, opt, limit)
    except Exception as exc:
        return _render_failed(value, exc)


def _render_text(value: str | bytes | bytearray, raw: bool, opt: IntegrityOptions, limit: int) -> str:
    if not isinstance(value, str):
        return repr(value)
    text = str(value)
    # A prefix one character past the limit is enough to truncate
    if len(text) > limit + 1:
        text = text[:max(limit, 0) + 1]
        return text if raw else opt.quote + text
    if raw:
        return text
    return f"{opt.quote}{text}{opt.quote}"


def _render_sequence(value: abc.Iterable, depth: int, opt: IntegrityOptions, limit: int) -> str:
    items = value.items() if isinstance(value, abc.Mapping) else value
    text = "["
    for i, item in enumerate(items):
        if len(text) > limit:
            return text
        if i:
            text += ","
        text += _render(item, False, depth + 1, opt, limit - len(text))
    return text + "]"


def _render_composite(value: Any, depth: int, opt: IntegrityOptions, limit: int) -> str:
    if _is_describable(value):
        members = value.describe_members()
    else:
        text = _sensible_text(value)
        if text is not None:
            return text
        members = _public_members(value)

    text = "{"
    for i, (name, member) in enumerate(members):
        if len(text) > limit:
            return text
        if i:
            text += ","
        text += f"{opt.quote}{name}{opt.quote}:"
        if isinstance(member, _AccessFailed):
            text += f"<access failed: {class_name(member.exc)}>"
        elif type(member) is type(value):
            text += type_tag(member)
        else:
            text += _render(member, False, depth + 1, opt, limit - len(text))
    return text + "}"


def _render_failed(value: Any, exc: Exception) -> str:
    return f"<{type(value).__name__} object (render failed: {type(exc).__name__})>"


def _is_describable(value: Any) -> bool:
    # Classes expose describe_members() unbound
    return isinstance(value, Describable) and not isinstance(value, type)


def _sensible_text(value: Any) -> str | None:
    """
    Return str(value) if it says more than the type name, None otherwise.

    The stdlib object.__repr__ text ('<pkg.Node object at 0x...>') counts as a bare type name.
    """
    try:
        text = str(value)
    except Exception:
        return None
    if text in (class_name(value), class_name(value, fully_qualified=True), default_object_text(value)):
        return None
    return text


def _public_members(value: Any) -> Iterator[tuple[str, Any]]:
    """
    Yield public data members of value in declaration order.

    Instance attributes come first in assignment order, then __slots__ and property accessors
    in class body order, base classes first. Methods and other routines are skipped. Members are
    read lazily, one per step.
    """
    names = []
    seen = set()

    def add(name: str):
        if name not in seen and not name.startswith("_"):
            seen.add(name)
            names.append(name)

    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, abc.Mapping):
        for name in instance_dict:
            add(name)

    mro = type(value).__mro__[::-1]
    for cls in mro:
        slots = cls.__dict__.get("__slots__", ())
        for name in (slots,) if isinstance(slots, str) else slots:
            add(name)
    for cls in mro:
        for name, attr in cls.__dict__.items():
            if isinstance(attr, property):
                add(name)

    for name in names:
        try:
            member = getattr(value, name)
        except Exception as exc:
            yield name, _AccessFailed(exc)
            continue
        if inspect.isroutine(member):
            continue
        yield name, member


def _truncate(text: str, quoted: bool, opt: IntegrityOptions) -> str:
    """
    Cut text to opt.max_len characters and append opt.ellipsis.

    Quoted text keeps its closing quote within max_len, the ellipsis goes after it.
    """
    if len(text) <= opt.max_len:
        return text
    if quoted and opt.max_len >= 2 * len(opt.quote):
        return text[:opt.max_len - len(opt.quote)] + opt.quote + opt.ellipsis
    return text[:opt.max_len] + opt.ellipsis
