"""Command line entry point of the interface generator."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from xlwgen.errors import GeneratorError
from xlwgen.functionizer import InterfaceSpec, convert_to_function_model
from xlwgen.managed_outputter import create_managed_output
from xlwgen.output_helper import get_dir, strip_path, write_output_file
from xlwgen.outputter import create_output_file
from xlwgen.parser_data import FunctionDescription, transit
from xlwgen.registrations import default_registries
from xlwgen.registry import TypeRegistry
from xlwgen.strip import strip_tokens
from xlwgen.tokenizer import tokenize
from xlwgen.typer import function_typer

_USAGE = (
    "usage is :\n "
    "          inputfile \n"
    "          inputfile outputfile \n"
    "      -m  inputfile \n"
    "      -m  inputfile outputdirectory\n"
)

# Control characters other than newline, and bytes outside ASCII, become spaces.
_CLEAN = bytes(
    b if (b >= 32 or b == 10) and b < 128 else 32 for b in range(256)
)


def read_source(path: str) -> str:
    """Read an interface file, turning special characters into spaces."""
    try:
        data = Path(path).read_bytes()
    except OSError:
        raise GeneratorError(f"input file not found :{path}\n") from None
    return data.translate(_CLEAN).decode("ascii")


def _parse(text: str, library_name: str, registry: TypeRegistry, label: str) -> InterfaceSpec:
    tokens = tokenize(text)
    print(f"{label} has been tokenized")
    stripped = strip_tokens(tokens)
    print(f"{label} has been stripped")
    spec = convert_to_function_model(stripped, library_name, registry)
    print(f"{label} has been function modeled")
    return spec


def _run(argv: Sequence[str]) -> None:
    options = [arg for arg in argv if arg.startswith("-")]
    args = [arg for arg in argv if not arg.startswith("-")]

    if not 1 <= len(args) <= 2:
        raise GeneratorError(_USAGE)
    input_file = args[0]

    clw = False
    managed_flag = False
    for option in options:
        if option == "-c":
            clw = True
        elif option == "-m":
            managed_flag = True
        else:
            print(f"unknown option ignored: {option}", file=sys.stderr)

    output_dir = get_dir(input_file)
    managed_header = ""
    managed_source = ""

    if not managed_flag and len(args) == 2:
        output_file = args[1]
    else:
        if managed_flag and len(args) == 2:
            output_dir = args[1]
        if clw:
            output_file = "clw"
        else:
            output_file = "xlw"
            managed_header = "mxlw"
        stem = strip_path(input_file).split(".", 1)[0]
        output_file += stem + ".cpp"
        managed_header += stem
        managed_source = managed_header + ".cpp"
        managed_header += ".h"

    text = read_source(input_file)
    native, managed = default_registries()
    library_name = input_file
    open_methods: list[str] = []
    close_methods: list[str] = []
    managed_descriptions: list[FunctionDescription] = []

    if managed_flag:
        print("managed file has been read in")
        spec = _parse(text, library_name, native, "managed file")
        library_name = spec.library_name
        open_methods += spec.open_methods
        close_methods += spec.close_methods

        managed_descriptions = function_typer(spec.functions, managed)
        print("managed file has been function described")

        header, source = create_managed_output(
            managed_descriptions, input_file, library_name, native, managed
        )
        input_file = managed_header
        header_path = f"{output_dir}/{managed_header}"
        source_path = f"{output_dir}/{managed_source}"

        print(f" .. writing {header_path}")
        write_output_file(header_path, header)
        print(f" .. writing {source_path}")
        write_output_file(source_path, source)

        output_file = f"{output_dir}/{output_file}"
        text = read_source(header_path)

    print("file has been read in")
    spec = _parse(text, library_name, native, "file")
    library_name = spec.library_name
    open_methods += spec.open_methods
    close_methods += spec.close_methods

    descriptions = function_typer(spec.functions, native)
    if managed_flag:
        transit(managed_descriptions, descriptions)
    print("file has been function described")

    output = create_output_file(
        descriptions, input_file, library_name, open_methods, close_methods, native
    )
    print(f" .. writing {output_file}")
    write_output_file(output_file, output)
    print("all done")


def main(argv: Sequence[str] | None = None) -> int:
    """Generate wrapper sources from an interface header; returns the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    print("XLW InterfaceGenerator")
    try:
        _run(list(argv))
    except GeneratorError as exc:
        print(f"***ERROR***\n{exc}\n***ERROR***", file=sys.stderr)
        return -1
    return 0