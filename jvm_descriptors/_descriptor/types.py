"""Well-known descriptor constants and the primitive type table."""

from __future__ import annotations

import dataclasses
import types

from jvm_descriptors._descriptor.errors import DescriptorPreconditionError, require_non_empty


# ---------------------------------------------------------------------------
# Primitive (base type) descriptors
# ---------------------------------------------------------------------------
VOID_ = "V"
BYTE_ = "B"
CHAR_ = "C"
DOUBLE_ = "D"
FLOAT_ = "F"
INT_ = "I"
LONG_ = "J"
SHORT_ = "S"
BOOLEAN_ = "Z"


# ---------------------------------------------------------------------------
# Common reference type descriptors
# ---------------------------------------------------------------------------
OBJECT = "Ljava/lang/Object;"
STRING = "Ljava/lang/String;"
STRING_BUFFER = "Ljava/lang/StringBuffer;"
STRING_BUILDER = "Ljava/lang/StringBuilder;"
CLASS = "Ljava/lang/Class;"
THROWABLE = "Ljava/lang/Throwable;"
RUNTIME_EXCEPTION = "Ljava/lang/RuntimeException;"
ERROR = "Ljava/lang/Error;"
CLONEABLE = "Ljava/lang/Cloneable;"
SERIALIZABLE = "Ljava/io/Serializable;"
BOOLEAN = "Ljava/lang/Boolean;"
BYTE = "Ljava/lang/Byte;"
CHARACTER = "Ljava/lang/Character;"
SHORT = "Ljava/lang/Short;"
INTEGER = "Ljava/lang/Integer;"
LONG = "Ljava/lang/Long;"
FLOAT = "Ljava/lang/Float;"
DOUBLE = "Ljava/lang/Double;"
VOID = "Ljava/lang/Void;"

WELL_KNOWN: types.MappingProxyType[str, str] = types.MappingProxyType(
    {
        "VOID_": VOID_,
        "BYTE_": BYTE_,
        "CHAR_": CHAR_,
        "DOUBLE_": DOUBLE_,
        "FLOAT_": FLOAT_,
        "INT_": INT_,
        "LONG_": LONG_,
        "SHORT_": SHORT_,
        "BOOLEAN_": BOOLEAN_,
        "OBJECT": OBJECT,
        "STRING": STRING,
        "STRING_BUFFER": STRING_BUFFER,
        "STRING_BUILDER": STRING_BUILDER,
        "CLASS": CLASS,
        "THROWABLE": THROWABLE,
        "RUNTIME_EXCEPTION": RUNTIME_EXCEPTION,
        "ERROR": ERROR,
        "CLONEABLE": CLONEABLE,
        "SERIALIZABLE": SERIALIZABLE,
        "BOOLEAN": BOOLEAN,
        "BYTE": BYTE,
        "CHARACTER": CHARACTER,
        "SHORT": SHORT,
        "INTEGER": INTEGER,
        "LONG": LONG,
        "FLOAT": FLOAT,
        "DOUBLE": DOUBLE,
        "VOID": VOID,
    }
)


# ---------------------------------------------------------------------------
# Java primitive type definitions
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class Primitive:
    keyword: str
    descriptor: str
    boxed: str
    slots: int


PRIMITIVES: list[Primitive] = [
    Primitive("void", VOID_, VOID, 0),
    Primitive("byte", BYTE_, BYTE, 1),
    Primitive("char", CHAR_, CHARACTER, 1),
    Primitive("double", DOUBLE_, DOUBLE, 2),
    Primitive("float", FLOAT_, FLOAT, 1),
    Primitive("int", INT_, INTEGER, 1),
    Primitive("long", LONG_, LONG, 2),
    Primitive("short", SHORT_, SHORT, 1),
    Primitive("boolean", BOOLEAN_, BOOLEAN, 1),
]

KEYWORD_TO_PRIMITIVE: dict[str, Primitive] = {p.keyword: p for p in PRIMITIVES}
DESCRIPTOR_TO_PRIMITIVE: dict[str, Primitive] = {p.descriptor: p for p in PRIMITIVES}
BOXED_TO_PRIMITIVE: dict[str, Primitive] = {p.boxed: p for p in PRIMITIVES}

PRIMITIVE_TAGS = "VBCDFIJSZ"
# 'C' is deliberately part of the numeric set.
NUMERIC_TAGS = "BDFIJSC"


def box(d: str) -> str:
    """
    Return the descriptor of the wrapper class for the primitive descriptor *d*.

    >>> box("I")
    'Ljava/lang/Integer;'
    """
    require_non_empty(d)
    if d not in DESCRIPTOR_TO_PRIMITIVE:
        raise DescriptorPreconditionError(
            f"Cannot box non-primitive descriptor {d!r}", d
        )
    return DESCRIPTOR_TO_PRIMITIVE[d].boxed


def unbox(d: str) -> str:
    """
    Return the primitive descriptor for the wrapper class descriptor *d*.

    >>> unbox("Ljava/lang/Character;")
    'C'
    """
    require_non_empty(d)
    if d not in BOXED_TO_PRIMITIVE:
        raise DescriptorPreconditionError(
            f"Descriptor {d!r} is not a primitive wrapper class", d
        )
    return BOXED_TO_PRIMITIVE[d].descriptor
