import pytest

from jvm_descriptors import (
    INTEGER,
    OBJECT,
    PRIMITIVES,
    VOID,
    WELL_KNOWN,
    DescriptorPreconditionError,
    box,
    size,
    to_class_name,
    unbox,
)


def test_primitive_table_is_consistent():
    for p in PRIMITIVES:
        assert to_class_name(p.descriptor) == p.keyword
        assert size(p.descriptor) == p.slots


def test_well_known_is_read_only():
    assert WELL_KNOWN["OBJECT"] == OBJECT
    assert WELL_KNOWN["INT_"] == "I"
    assert WELL_KNOWN["VOID"] == VOID
    with pytest.raises(TypeError):
        WELL_KNOWN["OBJECT"] = "LFoo;"


def test_box_and_unbox():
    assert box("I") == INTEGER
    assert box("V") == VOID
    assert unbox(INTEGER) == "I"
    assert unbox(box("Z")) == "Z"


@pytest.mark.parametrize("func, d", [(box, "Ljava/lang/Integer;"), (unbox, "I"), (unbox, OBJECT)])
def test_box_unbox_reject_wrong_kind(func, d):
    with pytest.raises(DescriptorPreconditionError):
        func(d)
