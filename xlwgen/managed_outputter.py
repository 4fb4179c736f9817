"""Write the managed wrapper header and source for interface functions."""

from __future__ import annotations

from collections.abc import Sequence

from xlwgen.output_helper import join_lines, strip_path
from xlwgen.parser_data import FunctionArgument, FunctionDescription
from xlwgen.registry import TypeRegistry

_MANAGED_PREFIX = "mxlw_"
_SPACER = "\n\n\n\n"


def _preamble() -> list[str]:
    return [
        "//// ",
        "//// Autogenerated by xlw ",
        "//// Do not edit this file, it will be overwritten ",
        "//// by InterfaceGenerator ",
        "////",
        "",
        '#include "xlw/MyContainers.h"',
        "#include <xlw/CellMatrix.h>",
        "#include <stdexcept>",
    ]


def _conversion_body(argument: FunctionArgument, managed: TypeRegistry) -> str:
    """Statements converting the passed value down its chain to the declared type."""
    chain = argument.type.conversion_chain
    steps = len(chain) - 1
    suffix = "a"
    last_id = argument.name + suffix
    suffix = chr(ord(suffix) + 1)
    parts: list[str] = []
    for k, link in enumerate(reversed(chain[:-1])):
        new_id = argument.name
        if k + 1 != steps:
            new_id += suffix
        registration = managed.get_registration(link)
        parts.append(f"\t\t\t{registration.new_type} {new_id}(")

        identifier_bit = ""
        if registration.takes_identifier:
            identifier_bit = f'"{new_id}"' if registration.is_method else f',"{new_id}"'

        if registration.is_method:
            parts.append(f" {last_id}.{registration.converter}({identifier_bit} ));\n")
        else:
            parts.append(f" {registration.converter}({last_id}{identifier_bit} ));\n")

        suffix = chr(ord(suffix) + 1)
        last_id = new_id
    return "".join(parts)


def _function_lines(
    desc: FunctionDescription, managed: TypeRegistry
) -> tuple[list[str], list[str]]:
    header: list[str] = []
    source: list[str] = []

    name = desc.function_name
    managed_name = _MANAGED_PREFIX + name
    desc.function_name = managed_name

    source += [f"{desc.return_type} {managed_name}", "\t\t("]
    header += [f"{desc.return_type}  // {desc.description}", f"{managed_name}\t\t("]

    passing = "("
    bodies: list[str] = []
    count = desc.number_of_arguments
    for index, argument in enumerate(desc.arguments):
        chain = argument.type.conversion_chain
        passing += argument.name
        body = _conversion_body(argument, managed)

        if len(chain) == 1:
            param = f"\t\t{chain[-1]} {argument.name}"
        else:
            param = f"\t\t{chain[-1]} {argument.name}a"
        header_param = f"\t\t{chain[-1]} {argument.name}"

        is_last = index == count - 1
        term = "" if is_last else ","
        closing = " );" if is_last else ""
        passing += term + closing

        source.append(param + term)
        header.append(f"{header_param}{term} //{argument.description}")
        if closing:
            header.append(closing)
        bodies.append(body)

    source += ["\t\t)", "\t\t{", "\t\tMANAGED_EXECL_BEGIN"]
    source += [body for body in bodies if body]
    source += [
        f"\t\t\treturn {name}{passing}",
        "\t\tMANAGED_EXECL_END",
        "\t\t}",
        "",
        "////////////////////////////////////",
        "",
    ]
    return header, source


def create_managed_output(
    descriptions: Sequence[FunctionDescription],
    input_file_name: str,
    library_name: str,
    native: TypeRegistry,
    managed: TypeRegistry,
) -> tuple[str, str]:
    """Generate the managed wrapper header and source; returns ``(header, source)``.

    Every function that returns a value is renamed with the managed prefix,
    in place, so that the native pass can later be matched against it.
    """
    header = _preamble()
    source = _preamble()

    source += [
        f'#include "{strip_path(input_file_name)}"',
        "#include <xlw/xlwManaged.h>",
        "using namespace System;",
        "using namespace Runtime::InteropServices;",
    ]
    header.append("using namespace xlw;")

    for include in native.includes.get_includes():
        source.append(f"#include {include}\n")
        header.append(f"#include {include}\n")

    for namespace in managed.includes.get_includes():
        source.append(f"using namespace {namespace};\n")

    source.append(_SPACER)
    header.append(_SPACER)

    for desc in descriptions:
        if desc.return_type == "void":
            header += [
                f"void //{desc.description}",
                f"{desc.function_name}();",
                _SPACER,
            ]
        else:
            header_part, source_part = _function_lines(desc, managed)
            header += header_part
            source += source_part

    return join_lines(header), join_lines(source)