import pytest

from jvm_descriptors import (
    DescriptorError,
    ErrorKind,
    MalformedDescriptorError,
    attempt,
    get_package_name,
    size,
    to_string,
)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        to_string("L")


def test_error_carries_kind_and_descriptor():
    with pytest.raises(DescriptorError) as excinfo:
        get_package_name("[I")
    err = excinfo.value
    assert err.kind == ErrorKind.PRECONDITION
    assert err.descriptor == "[I"
    assert str(err).startswith("precondition: ")


def test_attempt_success():
    result = attempt(size, "J")
    assert result.ok
    assert result.value == 2
    assert result.unwrap() == 2


def test_attempt_failure():
    result = attempt(to_string, "(I")
    assert not result.ok
    assert result.error.kind == ErrorKind.MALFORMED
    with pytest.raises(MalformedDescriptorError):
        result.unwrap()


def test_attempt_lets_other_exceptions_through():
    with pytest.raises(TypeError):
        attempt(size, 5)
