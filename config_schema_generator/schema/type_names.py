"""
Type-name normalization and nullability inference.

Maps Python type annotations onto the six canonical JSON-Schema type names.
"""

from __future__ import annotations

import collections.abc
import types
from decimal import Decimal
from enum import Enum
from typing import Any, Union, get_args, get_origin

# Canonical type names, the only ones ever emitted
RESERVED_TYPE_NAMES = ("string", "array", "object", "boolean", "number", "null")

# Bare names of Python builtins spelled differently in JSON
_BUILTIN_TYPE_NAMES = {
    "str": "string",
    "bool": "boolean",
    "int": "number",
    "float": "number",
    "Decimal": "number",
    "NoneType": "null",
}

# Bare names of array or single-element-type list shapes
_ARRAY_TYPE_NAMES = {"list", "List", "tuple", "Tuple", "set", "Set", "frozenset", "Sequence", "MutableSequence"}

# Origins of annotations whose elements are traversed
_LIST_ORIGINS = (
    list,
    tuple,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.MutableSequence,
    collections.abc.Set,
)

# Value-like types, the only non-nullable ones
_VALUE_TYPES = (bool, int, float, complex, Decimal, Enum)


def unwrap_optional(tp: Any) -> Any:
    """Return ``X`` for ``Optional[X]`` / ``X | None``, ``tp`` otherwise."""
    if not is_optional(tp):
        return tp
    return next(arg for arg in get_args(tp) if arg is not type(None))


def is_optional(tp: Any) -> bool:
    """Check whether a type is a union of exactly one type and None."""
    if get_origin(tp) not in (Union, types.UnionType):
        return False
    args = get_args(tp)
    return len(args) == 2 and type(None) in args


def element_type(tp: Any) -> Any | None:
    """
    Return the element type of a list/array-shaped type.

    Args:
        tp: A type annotation, possibly optional

    Returns:
        The single element type, or None if ``tp`` is not list-shaped
        (including unparameterized lists and fixed-size tuples)
    """
    tp = unwrap_optional(tp)
    origin = get_origin(tp)
    if origin is None or origin not in _LIST_ORIGINS:
        return None

    args = get_args(tp)
    if origin is tuple:
        # Only homogeneous tuples (tuple[X, ...]) have a single element type
        if len(args) == 2 and args[1] is Ellipsis:
            return args[0]
        return None
    if len(args) != 1:
        return None
    return args[0]


def bare_type_name(tp: Any) -> str:
    """
    Return the bare name of a type, without generic parameters.

    Examples:
        list[FileItem] -> "list"
        dict[str, int] -> "dict"
        FileItem -> "FileItem"
        typing.Any -> "Any"
    """
    origin = get_origin(tp)
    target = origin if origin is not None else tp
    name = getattr(target, "__name__", None) or getattr(target, "_name", None) or str(target)
    # typing reprs such as "typing.Any" keep only the last segment
    return name.split("[")[0].rsplit(".", 1)[-1]


def normalize_type_name(tp: Any) -> str:
    """
    Map a type annotation to its canonical type name.

    Rules, in order:
    1. Optional wrappers are unwrapped to their inner type
    2. The bare type name is taken (builtins use their JSON spelling)
    3. Array and list shapes become "array"
    4. The name is lower-cased
    5. Anything that is not a reserved name becomes "object"

    Examples:
        int | None -> "number"
        list[Widget] -> "array"
        Widget -> "object"
    """
    name = bare_type_name(unwrap_optional(tp))
    name = _BUILTIN_TYPE_NAMES.get(name, name)

    if name in _ARRAY_TYPE_NAMES:
        name = "array"

    name = name.lower()
    if name not in RESERVED_TYPE_NAMES:
        name = "object"

    return name


def is_nullable(tp: Any) -> bool:
    """
    Decide whether a member of the given type may hold null.

    Optional types are nullable, and so is every reference-like type: only
    value-like primitives (numbers, booleans, enums) without an optional
    wrapper are not. This is a coarse heuristic on the type shape only.
    """
    if is_optional(tp):
        return True
    if get_origin(tp) is not None or not isinstance(tp, type):
        return True
    return not issubclass(tp, _VALUE_TYPES)
