"""
Conversion between descriptors, internal-form names and class names, and package lookup.

Three spellings of the same type are in use:

 - descriptor: ``Ljava/lang/String;``, ``I``, ``[Ljava/lang/String;``
 - internal form: ``java/lang/String`` (arrays keep their descriptor spelling)
 - class name, as returned by ``Class.getName()``: ``java.lang.String``, ``int``,
   ``[Ljava.lang.String;``
"""

from __future__ import annotations

from jvm_descriptors._descriptor.classify import is_class_descriptor
from jvm_descriptors._descriptor.errors import (
    DescriptorPreconditionError,
    MalformedDescriptorError,
    require_non_empty,
)
from jvm_descriptors._descriptor.types import DESCRIPTOR_TO_PRIMITIVE, KEYWORD_TO_PRIMITIVE

# Returned by get_package_name() for classes without a package.
DEFAULT_PACKAGE = None


def _require_class_descriptor(d: str, action: str) -> None:
    require_non_empty(d)
    if d[0] != "L":
        raise DescriptorPreconditionError(
            f"Attempt to {action} of non-class descriptor {d!r}", d
        )
    if not is_class_descriptor(d):
        raise MalformedDescriptorError(f"Malformed class descriptor {d!r}", d)


def from_class_name(class_name: str) -> str:
    """
    Convert a class name as returned by ``Class.getName()`` into a descriptor.

    >>> from_class_name("java.lang.String")
    'Ljava/lang/String;'
    >>> from_class_name("boolean")
    'Z'
    >>> from_class_name("[Ljava.lang.String;")
    '[Ljava/lang/String;'
    """
    if class_name in KEYWORD_TO_PRIMITIVE:
        return KEYWORD_TO_PRIMITIVE[class_name].descriptor
    if class_name.startswith("["):
        return class_name.replace(".", "/")
    if not class_name or "/" in class_name or ";" in class_name:
        raise DescriptorPreconditionError(f"Invalid class name {class_name!r}", class_name)
    return "L" + class_name.replace(".", "/") + ";"


def from_internal_form(internal_form: str) -> str:
    """
    Convert an internal-form class name into a descriptor. Array types are already
    spelled as descriptors and are returned unchanged.
    """
    if not internal_form:
        raise DescriptorPreconditionError("Internal form must not be empty", internal_form)
    if internal_form[0] == "[":
        return internal_form
    return "L" + internal_form + ";"


def to_class_name(d: str) -> str:
    """
    Convert a field descriptor into a class name as returned by ``Class.getName()``.

    >>> to_class_name("Ljava/lang/String;")
    'java.lang.String'
    >>> to_class_name("[Ljava/lang/String;")
    '[Ljava.lang.String;'
    """
    require_non_empty(d)
    if len(d) == 1:
        if d in DESCRIPTOR_TO_PRIMITIVE:
            return DESCRIPTOR_TO_PRIMITIVE[d].keyword
    elif is_class_descriptor(d):
        return d[1:-1].replace("/", ".")
    elif d[0] == "[":
        return d.replace("/", ".")
    raise DescriptorPreconditionError(f"Invalid field descriptor {d!r}", d)


def to_internal_form(d: str) -> str:
    """Strip the ``L``/``;`` wrapper of a class or interface descriptor."""
    _require_class_descriptor(d, "convert into internal form")
    return d[1:-1]


def get_component_descriptor(d: str) -> str:
    """
    Remove one array dimension.

    >>> get_component_descriptor("[[I")
    '[I'
    """
    require_non_empty(d)
    if d[0] != "[":
        raise DescriptorPreconditionError(
            f"Cannot determine component descriptor from non-array descriptor {d!r}", d
        )
    if len(d) == 1:
        raise MalformedDescriptorError(f"Array descriptor {d!r} has no component type", d)
    return d[1:]


def get_package_name(d: str) -> str | None:
    """
    Return the dotted package name of a class or interface descriptor, or
    DEFAULT_PACKAGE if the class is in the default package.

    >>> get_package_name("Ljava/lang/String;")
    'java.lang'
    >>> get_package_name("LFoo;") is DEFAULT_PACKAGE
    True
    """
    _require_class_descriptor(d, "get package name")
    idx = d.rfind("/")
    if idx == -1:
        return DEFAULT_PACKAGE
    return d[1:idx].replace("/", ".")


def are_in_same_package(d1: str, d2: str) -> bool:
    """Check whether two class or interface types are declared in the same package."""
    return get_package_name(d1) == get_package_name(d2)
