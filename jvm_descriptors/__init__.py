"""Reading, converting and pretty-printing JVM field and method descriptors."""

from jvm_descriptors._descriptor.classify import (
    array_dimensions,
    has_size_1,
    has_size_2,
    is_array_reference,
    is_class_or_interface_reference,
    is_primitive,
    is_primitive_numeric,
    is_reference,
    size,
)
from jvm_descriptors._descriptor.errors import (
    DescriptorError,
    DescriptorPreconditionError,
    ErrorKind,
    MalformedDescriptorError,
    Result,
    UndefinedSizeError,
    attempt,
)
from jvm_descriptors._descriptor.names import (
    DEFAULT_PACKAGE,
    are_in_same_package,
    from_class_name,
    from_internal_form,
    get_component_descriptor,
    get_package_name,
    to_class_name,
    to_internal_form,
)
from jvm_descriptors._descriptor.pretty import (
    parameter_descriptors,
    parameters_size,
    return_descriptor,
    to_string,
)
from jvm_descriptors._descriptor.types import (
    BOOLEAN,
    BOOLEAN_,
    BYTE,
    BYTE_,
    CHAR_,
    CHARACTER,
    CLASS,
    CLONEABLE,
    DOUBLE,
    DOUBLE_,
    ERROR,
    FLOAT,
    FLOAT_,
    INT_,
    INTEGER,
    LONG,
    LONG_,
    OBJECT,
    PRIMITIVES,
    RUNTIME_EXCEPTION,
    SERIALIZABLE,
    SHORT,
    SHORT_,
    STRING,
    STRING_BUFFER,
    STRING_BUILDER,
    THROWABLE,
    VOID,
    VOID_,
    WELL_KNOWN,
    Primitive,
    box,
    unbox,
)
