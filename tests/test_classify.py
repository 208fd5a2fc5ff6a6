import pytest

from jvm_descriptors import (
    DescriptorPreconditionError,
    UndefinedSizeError,
    array_dimensions,
    attempt,
    has_size_1,
    has_size_2,
    is_array_reference,
    is_class_or_interface_reference,
    is_primitive,
    is_primitive_numeric,
    is_reference,
    size,
)
from jvm_descriptors._descriptor.classify import is_class_descriptor
from jvm_descriptors._descriptor.errors import ErrorKind


@pytest.mark.parametrize("d", ["[I", "[[Ljava/lang/String;", "[Z"])
def test_arrays_are_references(d):
    assert is_array_reference(d)
    assert is_reference(d)
    assert not is_class_or_interface_reference(d)


@pytest.mark.parametrize("d", list("VBCDFIJSZ"))
def test_primitives_are_not_references(d):
    assert is_primitive(d)
    assert not is_reference(d)
    assert not is_array_reference(d)
    assert not is_class_or_interface_reference(d)


def test_class_reference():
    assert is_class_or_interface_reference("Ljava/lang/Object;")
    assert is_reference("Ljava/lang/Object;")
    assert not is_primitive("Ljava/lang/Object;")


def test_is_primitive_rejects_unknown_tags():
    assert not is_primitive("X")
    assert not is_primitive("II")


def test_numeric_set_includes_char():
    assert is_primitive_numeric("C")
    assert not is_primitive_numeric("Z")
    assert not is_primitive_numeric("V")
    assert not is_primitive_numeric("[I")


def test_sizes():
    assert size("J") == 2
    assert size("D") == 2
    assert size("V") == 0
    assert size("I") == 1
    assert size("Z") == 1
    assert size("Ljava/lang/Object;") == 1
    assert size("[J") == 1


def test_size_helpers():
    assert has_size_1("F")
    assert has_size_1("[D")
    assert not has_size_1("J")
    assert has_size_2("J")
    assert not has_size_2("[J")


@pytest.mark.parametrize(
    "d", ["(II)V", "X", "Ljava/lang/Object", "[V", "[[V", "[X", "[Ljava/lang/Object", "La;b/c;"]
)
def test_size_undefined(d):
    with pytest.raises(UndefinedSizeError) as excinfo:
        size(d)
    assert excinfo.value.kind == ErrorKind.UNDEFINED_SIZE
    assert excinfo.value.descriptor == d


def test_array_dimensions():
    assert array_dimensions("I") == 0
    assert array_dimensions("[[[Ljava/lang/String;") == 3


def test_empty_descriptor_is_a_precondition_violation():
    assert attempt(is_reference, "").error.kind == ErrorKind.PRECONDITION
    with pytest.raises(DescriptorPreconditionError):
        size("")


def test_array_sizes_check_the_component():
    assert size("[[Ljava/lang/String;") == 1
    assert size("[[[Z") == 1


def test_class_descriptor_ends_at_first_semicolon():
    assert is_class_descriptor("LFoo;")
    assert not is_class_descriptor("La;b/c;")
    assert not is_class_descriptor("L;")
    assert not is_class_descriptor("[LFoo;")
