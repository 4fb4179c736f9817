"""Write the native wrapper source that registers interface functions with Excel."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence

from xlwgen.output_helper import join_lines, strip_path
from xlwgen.parser_data import FunctionArgument, FunctionDescription
from xlwgen.registry import TypeRegistry

_SEPARATOR = "//////////////////////////"
_WIZARD_NAME_LIMIT = 19


def write_macros_initialisation(policy: str, methods: Sequence[str]) -> list[str]:
    """Lines registering methods to run on Auto<policy>."""
    lines = [
        _SEPARATOR,
        f"// Methods that will get registered to execute in Auto{policy}",
        _SEPARATOR,
        "",
    ]
    for method in methods:
        quoted = f'"{method}"'
        lines += [
            f"void {method}();",
            "namespace {",
            f"\tMacroCache<xlw::{policy}>::MacroRegistra {method}_registra"
            f"({quoted},{quoted},{method});",
            "}",
            "",
            "",
        ]
    return lines


def _header_lines(input_file_name: str, library_name: str, registry: TypeRegistry) -> list[str]:
    lines = [
        "//// ",
        "//// Autogenerated by xlw ",
        "//// Do not edit this file, it will be overwritten ",
        "//// by InterfaceGenerator ",
        "////",
        "",
        '#include "xlw/MyContainers.h"',
        "#include <xlw/CellMatrix.h>",
        '#include "..\\' + strip_path(input_file_name) + '"',
        "#include <xlw/xlw.h>",
        "#include <xlw/XlFunctionRegistration.h>",
        "#include <stdexcept>",
        "#include <xlw/XlOpenClose.h>",
        "#include <xlw/HiResTimer.h>",
    ]
    lines += [f"#include {include}\n" for include in registry.includes.get_includes()]
    lines += [
        "using namespace xlw;",
        "",
        "namespace {",
        f'const char* LibraryName = "{library_name}";',
        "};",
        "",
        "",
        "// registrations start here",
        "",
        "",
    ]
    return lines


def _command_lines(desc: FunctionDescription) -> list[str]:
    name = desc.function_name
    return [
        "  XLRegistration::XLCommandRegistrationHelper",
        f'register{name}("xl{name}",',
        f'"{desc.display_name}",',
        f'"{desc.description} ",',
        "LibraryName,",
        f'"{desc.description} ");',
        "}",
        "",
        "",
        "",
        'extern "C"',
        "{",
        "int EXCEL_EXPORT",
        f"xl{name}()",
        "{",
        "EXCEL_BEGIN;",
        f"\t{name}();",
        "EXCEL_END_CMD;",
        "}",
        "}",
    ]


def _conversion_lines(argument: FunctionArgument, registry: TypeRegistry) -> Iterator[str]:
    """Declarations converting the raw Excel argument down its chain to the declared type."""
    chain = argument.type.conversion_chain
    steps = len(chain) - 1
    suffix = "a"
    last_id = argument.name + suffix
    suffix = chr(ord(suffix) + 1)
    for k, link in enumerate(reversed(chain[:-1])):
        new_id = argument.name
        if k + 1 != steps:
            new_id += suffix
        registration = registry.get_registration(link)
        yield f"{registration.new_type} {new_id}("

        identifier_bit = ""
        if registration.takes_identifier:
            identifier_bit = f'"{new_id}"' if registration.is_method else f',"{new_id}"'

        if registration.is_method:
            yield f"\t{last_id}.{registration.converter}({identifier_bit}));"
        else:
            yield f"\t{registration.converter}({last_id}{identifier_bit}));"

        suffix = chr(ord(suffix) + 1)
        last_id = new_id


def _function_lines(desc: FunctionDescription, registry: TypeRegistry) -> list[str]:
    name = desc.function_name
    count = desc.number_of_arguments
    delimiters = ["," if index + 1 < count else ")" for index in range(count)]
    lines: list[str] = []

    if count > 0:
        lines += ["XLRegistration::Arg", f"{name}Args[]=", "{"]
        for index, argument in enumerate(desc.arguments):
            if len(argument.name) >= _WIZARD_NAME_LIMIT:
                print(
                    f'XLW Warning - Argument name "{argument.name}" for function '
                    f'"{name}" may be too long to fit the in the function wizard',
                    file=sys.stderr,
                )
            line = (
                f'{{ "{argument.name}","{argument.description} ",'
                f'"{argument.type.excel_key}"}}'
            )
            if index + 1 < count:
                line += ","
            lines.append(line)
        lines.append("};")

    lines += [
        "  XLRegistration::XLFunctionRegistrationHelper",
        f'register{name}("xl{name}",',
        f'"{desc.display_name}",',
        f'"{desc.description} ",',
        "LibraryName,",
        f"{name}Args," if count > 0 else "0,",
        str(count),
        ",true" if desc.volatile else ",false",
        ",true" if desc.threadsafe else ",false",
        ',""',
        f",{desc.help_id}" if desc.help_id else ',""',
        ",true" if desc.asynchronous else ",false",
        ",true" if desc.macro_sheet else ",false",
        ",true" if desc.cluster_safe else ",false",
        ");",
        "}",
        "",
        "",
        "",
        'extern "C"',
        "{",
        "LPXLFOPER EXCEL_EXPORT",
        f"xl{name}(",
    ]

    for argument, delimiter in zip(desc.arguments, delimiters):
        chain = argument.type.conversion_chain
        uniqifier = "" if len(chain) == 1 else "a"
        lines.append(f"{chain[-1]} {argument.name}{uniqifier}{delimiter}")
    if count == 0:
        lines.append(")")

    lines += [
        "{",
        "EXCEL_BEGIN;",
        "",
        "\tif (XlfExcel::Instance().IsCalledByFuncWiz())",
        "\t\treturn XlfOper(true);",
        "",
    ]
    for argument in desc.arguments:
        lines += _conversion_lines(argument, registry)
        lines.append("")

    if desc.time:
        lines.append(" HiResTimer t;")

    lines.append(f"{desc.return_type} result(")
    if count > 0:
        lines.append(f"\t{name}(")
        lines += [
            f"\t\t{argument.name}{delimiter}"
            for argument, delimiter in zip(desc.arguments, delimiters)
        ]
        lines.append("\t);")
    else:
        lines.append(f"\t{name}());")

    if desc.time:
        lines += [
            "CellMatrix resultCells(result);",
            "CellMatrix time(1,2);",
            'time(0,0) = "time taken";',
            "time(0,1) = t.elapsed();",
            "resultCells.PushBottom(time);",
            "return XlfOper(resultCells);",
        ]
    else:
        lines.append("return XlfOper(result);")

    lines += ["EXCEL_END", "}", "}"]
    return lines


def create_output_file(
    descriptions: Sequence[FunctionDescription],
    input_file_name: str,
    library_name: str,
    open_methods: Sequence[str],
    close_methods: Sequence[str],
    registry: TypeRegistry,
) -> str:
    """Generate the wrapper source for the given functions and open/close methods."""
    lines = _header_lines(input_file_name, library_name, registry)

    for desc in descriptions:
        lines += ["namespace", "{"]
        if desc.return_type == "void":
            lines += _command_lines(desc)
        else:
            lines += _function_lines(desc, registry)
        lines += ["", "", "", _SEPARATOR, ""]

    lines += write_macros_initialisation("Open", open_methods)
    lines += write_macros_initialisation("Close", close_methods)
    return join_lines(lines)