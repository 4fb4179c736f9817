"""Typed descriptions of interface functions, ready for code generation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from xlwgen.errors import GeneratorError


@dataclass
class FunctionArgumentType:
    """The declared type of an argument with its conversion chain and Excel key."""

    name_identifier: str
    conversion_chain: list[str]
    excel_key: str


@dataclass
class FunctionArgument:
    """A typed argument: its type, name and description."""

    type: FunctionArgumentType
    name: str
    description: str


@dataclass
class FunctionDescription:
    """A fully typed function, as passed to the output writers."""

    function_name: str
    description: str
    return_type: str
    excel_key: str
    arguments: list[FunctionArgument] = field(default_factory=list)
    volatile: bool = False
    time: bool = False
    threadsafe: bool = False
    help_id: str = ""
    asynchronous: bool = False
    macro_sheet: bool = False
    cluster_safe: bool = False
    display_name: str = field(init=False)

    def __post_init__(self) -> None:
        self.display_name = self.function_name

    @property
    def number_of_arguments(self) -> int:
        return len(self.arguments)


_COPIED_FIELDS = (
    "asynchronous",
    "cluster_safe",
    "display_name",
    "description",
    "help_id",
    "macro_sheet",
    "threadsafe",
    "time",
    "volatile",
)


def transit(
    source: Sequence[FunctionDescription],
    destination: Sequence[FunctionDescription],
) -> None:
    """Copy flags, display names and descriptions from managed functions onto their wrappers.

    The two sequences must be of equal length and list functions in the same order.
    """
    if len(source) != len(destination):
        raise GeneratorError("number of managed functions and native wrappers not the same")
    for src, dst in zip(source, destination):
        for name in _COPIED_FIELDS:
            setattr(dst, name, getattr(src, name))
        if dst.function_name != src.function_name:
            raise GeneratorError(
                "unmanaged wrappers must be in same order as manged function: "
                f"{dst.function_name} : {src.function_name}"
            )