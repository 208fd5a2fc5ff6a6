"""Descriptor classification predicates and the operand-stack size model."""

from __future__ import annotations

from jvm_descriptors._descriptor.errors import UndefinedSizeError, require_non_empty
from jvm_descriptors._descriptor.types import (
    DESCRIPTOR_TO_PRIMITIVE,
    NUMERIC_TAGS,
    PRIMITIVE_TAGS,
)


def is_reference(d: str) -> bool:
    """Every primitive is a single character, every array or class type is longer."""
    require_non_empty(d)
    return len(d) > 1


def is_class_or_interface_reference(d: str) -> bool:
    require_non_empty(d)
    return d[0] == "L"


def is_array_reference(d: str) -> bool:
    require_non_empty(d)
    return d[0] == "["


def is_primitive(d: str) -> bool:
    require_non_empty(d)
    return len(d) == 1 and d in PRIMITIVE_TAGS


def is_primitive_numeric(d: str) -> bool:
    """
    True for the numeric primitives, which here include ``char``.

    >>> [t for t in "BCDFIJSVZ" if is_primitive_numeric(t)]
    ['B', 'C', 'D', 'F', 'I', 'J', 'S']
    """
    require_non_empty(d)
    return len(d) == 1 and d in NUMERIC_TAGS


def is_class_descriptor(d: str) -> bool:
    """
    True if *d* is a complete ``L<class path>;`` descriptor, i.e. its first ';' is its last character.

    >>> is_class_descriptor("Ljava/lang/String;"), is_class_descriptor("La;b/c;")
    (True, False)
    """
    return len(d) > 2 and d[0] == "L" and d.find(";") == len(d) - 1


def array_dimensions(d: str) -> int:
    """Number of leading '[' characters of *d*."""
    require_non_empty(d)
    return len(d) - len(d.lstrip("["))


def has_size_1(d: str) -> bool:
    require_non_empty(d)
    if len(d) == 1:
        return d in "BCFISZ"
    return is_reference(d)


def has_size_2(d: str) -> bool:
    require_non_empty(d)
    return len(d) == 1 and d in "JD"


def size(d: str) -> int:
    """
    Return the number of operand-stack slots a value of type *d* occupies.

    >>> size("V"), size("I"), size("J"), size("Ljava/lang/Object;")
    (0, 1, 2, 1)

    Method descriptors have no size; asking for one is an error.
    """
    require_non_empty(d)
    if d[0] == "(":
        raise UndefinedSizeError(f"No size defined for method descriptor {d!r}", d)
    if len(d) == 1:
        primitive = DESCRIPTOR_TO_PRIMITIVE.get(d)
        if primitive is not None:
            return primitive.slots
    elif is_class_descriptor(d):
        return 1
    elif d[0] == "[":
        component = d.lstrip("[")
        if (len(component) == 1 and component in "BCDFIJSZ") or is_class_descriptor(component):
            return 1
    raise UndefinedSizeError(f"No size defined for type {d!r}", d)
