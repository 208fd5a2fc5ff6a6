"""Recursive-descent reader and pretty-printer for field and method descriptors."""

from __future__ import annotations

import dataclasses

from jvm_descriptors._descriptor.classify import size
from jvm_descriptors._descriptor.errors import (
    DescriptorPreconditionError,
    invalid_descriptor,
    require_non_empty,
)
from jvm_descriptors._descriptor.types import DESCRIPTOR_TO_PRIMITIVE, VOID_


@dataclasses.dataclass(frozen=True)
class _ParseResult:
    """Result of reading a single field type out of a descriptor string."""

    text: str
    end: int  # index directly after the consumed characters


def _read_field_type(d: str, pos: int) -> _ParseResult:
    """
    Render the field type starting at *pos* in *d*.

    Handles:
      - base types: B C D F I J S V Z
      - object types: L<internal name>;
      - arrays: any number of leading '[' before a non-void component
    """
    dimensions = 0
    while pos < len(d) and d[pos] == "[":
        dimensions += 1
        pos += 1
    if pos >= len(d):
        raise invalid_descriptor(d)

    c = d[pos]
    if c == "L":
        end = d.find(";", pos)
        if end == -1:
            raise invalid_descriptor(d)
        text = d[pos + 1 : end].replace("/", ".")
        pos = end + 1
    elif c in DESCRIPTOR_TO_PRIMITIVE:
        if c == VOID_ and dimensions:
            raise invalid_descriptor(d)
        text = DESCRIPTOR_TO_PRIMITIVE[c].keyword
        pos += 1
    else:
        raise invalid_descriptor(d)

    return _ParseResult(text + "[]" * dimensions, pos)


def _read_parameters(d: str) -> tuple[list[_ParseResult], list[int], int]:
    """
    Scan the parameter list of the method descriptor *d*.

    Returns the rendered parameters, the start index of each one, and the position
    directly after the closing ')'.
    """
    params: list[_ParseResult] = []
    starts: list[int] = []
    pos = 1  # skip '('
    while pos < len(d) and d[pos] != ")":
        result = _read_field_type(d, pos)
        params.append(result)
        starts.append(pos)
        pos = result.end
    if pos >= len(d):
        raise invalid_descriptor(d)
    return params, starts, pos + 1  # skip ')'


def _expect_end(d: str, pos: int) -> None:
    if pos != len(d):
        raise invalid_descriptor(d)


def to_string(d: str) -> str:
    """
    Render a field or method descriptor as a readable type signature.

    >>> to_string("[[Ljava/lang/String;")
    'java.lang.String[][]'
    >>> to_string("(IJ[Z)Ljava/lang/Object;")
    '(int, long, boolean[]) => java.lang.Object'
    """
    require_non_empty(d)
    if d[0] != "(":
        result = _read_field_type(d, 0)
        _expect_end(d, result.end)
        return result.text

    params, _, pos = _read_parameters(d)
    ret = _read_field_type(d, pos)
    _expect_end(d, ret.end)
    return "(" + ", ".join(p.text for p in params) + ") => " + ret.text


def _require_method(d: str) -> None:
    require_non_empty(d)
    if d[0] != "(":
        raise DescriptorPreconditionError(
            f"Attempt to read the parameters of non-method descriptor {d!r}", d
        )


def parameter_descriptors(d: str) -> list[str]:
    """
    Split the method descriptor *d* into its parameter descriptors.

    >>> parameter_descriptors("(I[JLjava/lang/String;)V")
    ['I', '[J', 'Ljava/lang/String;']
    """
    _require_method(d)
    params, starts, pos = _read_parameters(d)
    _expect_end(d, _read_field_type(d, pos).end)
    return [d[start : p.end] for start, p in zip(starts, params)]


def return_descriptor(d: str) -> str:
    """Return the return-type descriptor of the method descriptor *d*."""
    _require_method(d)
    _, _, pos = _read_parameters(d)
    ret = _read_field_type(d, pos)
    _expect_end(d, ret.end)
    return d[pos:]


def parameters_size(d: str) -> int:
    """
    Number of local-variable slots taken by the parameters of method *d*,
    not counting ``this``.

    >>> parameters_size("(IJLjava/lang/String;D)V")
    6
    """
    return sum(size(p) for p in parameter_descriptors(d))
