"""Error types raised by the descriptor codec, and a result wrapper for callers that prefer values."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    MALFORMED = "malformed"
    PRECONDITION = "precondition"
    UNDEFINED_SIZE = "undefined_size"


class DescriptorError(ValueError):
    """
    Base class of all codec failures.

    *descriptor* is always the complete input the operation was called with, not
    the fragment where scanning stopped, so that messages are useful on their own.
    """

    kind: ErrorKind = ErrorKind.MALFORMED

    def __init__(self, message: str, descriptor: str) -> None:
        super().__init__(message)
        self.message = message
        self.descriptor = descriptor

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class MalformedDescriptorError(DescriptorError):
    kind = ErrorKind.MALFORMED


class DescriptorPreconditionError(DescriptorError):
    kind = ErrorKind.PRECONDITION


class UndefinedSizeError(DescriptorError):
    kind = ErrorKind.UNDEFINED_SIZE


def invalid_descriptor(d: str) -> MalformedDescriptorError:
    return MalformedDescriptorError(f"Invalid descriptor {d!r}", d)


def require_non_empty(d: str) -> None:
    if not d:
        raise DescriptorPreconditionError("Descriptor must not be empty", d)


@dataclasses.dataclass(frozen=True)
class Result(Generic[T]):
    """Either the value of a codec call or the DescriptorError it raised."""

    value: T | None = None
    error: DescriptorError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def attempt(func: Callable[..., T], *args: Any) -> Result[T]:
    """
    Call a codec operation and capture a DescriptorError instead of raising it.

    >>> from jvm_descriptors import get_component_descriptor
    >>> attempt(get_component_descriptor, "[[I").value
    '[I'
    >>> attempt(get_component_descriptor, "I").error.kind
    <ErrorKind.PRECONDITION: 'precondition'>
    """
    try:
        return Result(value=func(*args))
    except DescriptorError as e:
        return Result(error=e)
