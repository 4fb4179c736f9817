"""Untyped model of a function declared in an interface header."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ArgumentModel:
    """One declared argument: its C++ type name, name and description."""

    type: str
    name: str
    description: str


@dataclass
class FunctionModel:
    """A declared function with its flags and arguments."""

    return_type: str
    name: str
    description: str
    volatile: bool = False
    time: bool = False
    threadsafe: bool = False
    help_id: str = ""
    asynchronous: bool = False
    macro_sheet: bool = False
    cluster_safe: bool = False
    arguments: list[ArgumentModel] = field(default_factory=list)

    def add_argument(self, type_: str, name: str, description: str) -> None:
        """Append an argument to the function."""
        self.arguments.append(ArgumentModel(type_, name, description))

    @property
    def number_of_args(self) -> int:
        return len(self.arguments)