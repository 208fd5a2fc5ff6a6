import argparse
import logging
import sys
from collections.abc import Callable

from jvm_descriptors._descriptor.classify import (
    is_array_reference,
    is_class_or_interface_reference,
    is_primitive,
    is_primitive_numeric,
    is_reference,
    size,
)
from jvm_descriptors._descriptor.errors import DescriptorError
from jvm_descriptors._descriptor.names import (
    are_in_same_package,
    from_class_name,
    from_internal_form,
    get_component_descriptor,
    get_package_name,
    to_class_name,
    to_internal_form,
)
from jvm_descriptors._descriptor.pretty import to_string
from jvm_descriptors._log import configure_logging

log = logging.getLogger(__name__)


def _classify(d: str) -> str:
    flags = [
        ("reference", is_reference),
        ("class", is_class_or_interface_reference),
        ("array", is_array_reference),
        ("primitive", is_primitive),
        ("numeric", is_primitive_numeric),
    ]
    return " ".join(name for name, predicate in flags if predicate(d)) or "-"


def _package(d: str) -> str:
    package = get_package_name(d)
    return "<default>" if package is None else package


COMMANDS: dict[str, Callable[[str], object]] = {
    "show": to_string,
    "size": size,
    "classify": _classify,
    "class-name": to_class_name,
    "from-class-name": from_class_name,
    "internal-form": to_internal_form,
    "from-internal-form": from_internal_form,
    "component": get_component_descriptor,
    "package": _package,
}


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Convert and pretty-print JVM field and method descriptors."
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="warning",
        help="logging level, e.g. 'debug' or 'info' (default: warning)",
    )
    parser.add_argument(
        "command",
        choices=[*COMMANDS, "same-package"],
        help="operation to apply to each input",
    )
    parser.add_argument(
        "inputs",
        type=str,
        nargs="+",
        help=(
            "descriptors (e.g. 'Ljava/lang/String;', '(II)V'), class names "
            "(e.g. 'java.lang.String') or internal forms, depending on the command"
        ),
    )

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "same-package":
        if len(args.inputs) != 2:
            parser.error("same-package expects exactly two descriptors")
        _emit(_run(are_in_same_package, *args.inputs))
    else:
        func = COMMANDS[args.command]
        for inp in args.inputs:
            _emit(_run(func, inp))


def _emit(out: object) -> None:
    print(str(out).lower() if isinstance(out, bool) else out, flush=True)


def _run(func: Callable[..., object], *inputs: str) -> object:
    log.debug(f"{func.__name__}{inputs}")
    try:
        return func(*inputs)
    except DescriptorError as e:
        log.error(f"{e} (input: {e.descriptor!r})")
        sys.exit(1)
