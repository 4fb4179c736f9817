"""Turn a stripped token stream into function models and library directives."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from xlwgen.errors import GeneratorError
from xlwgen.function_model import FunctionModel
from xlwgen.registry import TypeRegistry
from xlwgen.tokenizer import Token, TokenType

_DEFAULT_FUNCTION_DESC = "too lazy to comment this function"
_DEFAULT_ARG_DESC = "too lazy to comment this one"
_HALF_DECLARED = "function half declared at end of file"

_FLAG_COMMANDS = {
    "<xlw:volatile": "volatile",
    "<xlw:time": "time",
    "<xlw:threadsafe": "threadsafe",
    "<xlw:macrosheet": "macro_sheet",
    "<xlw:clustersafe": "cluster_safe",
}

_UNEXPECTED = {
    TokenType.CURLYLEFT: "curly bracket found, only functions can be coped with",
    TokenType.CURLYRIGHT: "curly bracket found, only functions can be coped with",
    TokenType.AMPERSAND: "unexpected ampersand found, return type expected",
    TokenType.COMMA: "unexpected comma found, return type expected",
    TokenType.RIGHT: "unexpected ) found, return type expected",
    TokenType.LEFT: "unexpected ( found, return type expected",
}

_USING_ERROR = "invalid syntax for declaration : 'using namespace xxx;'"


@dataclass
class InterfaceSpec:
    """Everything read from an interface header."""

    functions: list[FunctionModel] = field(default_factory=list)
    library_name: str = ""
    open_methods: list[str] = field(default_factory=list)
    close_methods: list[str] = field(default_factory=list)


def split_words(sentence: str) -> list[str]:
    """Split a string on spaces and tabs, dropping empty words."""
    return [word for word in re.split(r"[ \t]+", sentence) if word]


def _find_function(
    tokens: Sequence[Token], pos: int, time_default: bool
) -> tuple[FunctionModel, int]:
    end = len(tokens)
    return_type = tokens[pos].value
    pos += 1
    if pos == end:
        raise GeneratorError(_HALF_DECLARED)

    description = _DEFAULT_FUNCTION_DESC
    if tokens[pos].type is TokenType.COMMENT:
        description = tokens[pos].value
        pos += 1
    if pos == end:
        raise GeneratorError(_HALF_DECLARED)

    flags = {
        "volatile": False,
        "time": time_default,
        "threadsafe": False,
        "macro_sheet": False,
        "cluster_safe": False,
    }
    help_id = ""

    while tokens[pos].type is TokenType.COMMENT:
        command = tokens[pos].value
        if command[:5] != "<xlw:":
            raise GeneratorError(
                "unexpected comment in function definition before function name"
            )
        if command == "<xlw:asynchronous":
            raise GeneratorError("asynchronous not yet implemented")
        if command in _FLAG_COMMANDS:
            flags[_FLAG_COMMANDS[command]] = True
        elif command.startswith("<xlw:help="):
            help_id = command[10:]
        else:
            raise GeneratorError(f"unknown xlw command: {command}")
        pos += 1
        if pos == end:
            raise GeneratorError(_HALF_DECLARED)

    if tokens[pos].type is not TokenType.IDENTIFIER:
        raise GeneratorError("function name expected after return type")
    name = tokens[pos].value
    model = FunctionModel(
        return_type,
        name,
        description,
        volatile=flags["volatile"],
        time=flags["time"],
        threadsafe=flags["threadsafe"],
        help_id=help_id,
        asynchronous=False,
        macro_sheet=flags["macro_sheet"],
        cluster_safe=flags["cluster_safe"],
    )

    pos += 1
    if pos == end:
        raise GeneratorError(_HALF_DECLARED)
    if tokens[pos].type is not TokenType.LEFT:
        raise GeneratorError(f"left parenthesis expected after function name: {name}")

    def advance(current: int) -> int:
        current += 1
        if current == end:
            raise GeneratorError(f"{_HALF_DECLARED} {name}")
        return current

    pos = advance(pos)
    while tokens[pos].type is not TokenType.RIGHT:
        if tokens[pos].type is not TokenType.IDENTIFIER:
            raise GeneratorError(f"return type expected in arg list {name}")
        arg_type = tokens[pos].value
        pos = advance(pos)

        if tokens[pos].type is not TokenType.IDENTIFIER:
            raise GeneratorError(f"argument name expected in arg list {name}")
        arg_name = tokens[pos].value
        pos = advance(pos)

        arg_desc = _DEFAULT_ARG_DESC
        if tokens[pos].type is TokenType.COMMENT:
            arg_desc = tokens[pos].value
            pos = advance(pos)

        model.add_argument(arg_type, arg_name, arg_desc)

        if tokens[pos].type is TokenType.COMMA:
            pos = advance(pos)

    return model, pos + 1


def _method_name(value: str, prefix_len: int, kind: str) -> str:
    body = value[prefix_len:]
    if len(body) < 2 or not body.endswith(")"):
        raise GeneratorError(f"missing function name or ')'  for <xlw:{kind}")
    words = split_words(body[:-1])
    if len(words) != 1:
        raise GeneratorError(f"expected function name for parameter of <xlw:{kind}")
    return words[0]


def _apply_directive(value: str, spec: InterfaceSpec, registry: TypeRegistry) -> bool | None:
    """Apply a library-level directive; return the new time default, if it changed."""
    found = False
    time_default: bool | None = None

    if len(value) >= 19 and value[:17] == "<xlw:libraryname=":
        spec.library_name = value[17:]
        found = True
    if value[:12] == "<xlw:timeall":
        time_default = True
        found = True
    if value[:13] == "<xlw:timenone":
        time_default = False
        found = True
    if value[:12] == "<xlw:onopen(":
        spec.open_methods.append(_method_name(value, 12, "onopen"))
        found = True
    if value[:13] == "<xlw:onclose(":
        spec.close_methods.append(_method_name(value, 13, "onclose"))
        found = True
    if value[:18] == "<xlw:typeregister(":
        body = value[18:]
        if len(body) < 2 or not body.endswith(")"):
            raise GeneratorError("syntax error  for <xlw:typeregister")
        words = split_words(body[:-1])
        if len(words) != 3:
            raise GeneratorError(
                "syntax error expected <xlw:typeregister(new_type old_type converter)"
            )
        print(f"Registering type :{words[0]}")
        registry.add(words[0], words[1], words[2], False, False)
        found = True

    if not found:
        print(f"Unknown xlw command {value}")
    return time_default


def convert_to_function_model(
    tokens: Sequence[Token], library_name: str, registry: TypeRegistry
) -> InterfaceSpec:
    """Read function declarations and xlw directives from stripped tokens.

    ``library_name`` is the default, replaced by any libraryname directive;
    typeregister directives add types to ``registry``.
    """
    spec = InterfaceSpec(library_name=library_name)
    time_default = False
    end = len(tokens)
    pos = 0

    while pos < end:
        token = tokens[pos]
        kind = token.type
        if kind in (TokenType.PREPROCESSOR, TokenType.SEMICOLON):
            pos += 1
        elif kind in _UNEXPECTED:
            raise GeneratorError(_UNEXPECTED[kind])
        elif kind is TokenType.COMMENT:
            if token.value[:5] == "<xlw:":
                changed = _apply_directive(token.value, spec, registry)
                if changed is not None:
                    time_default = changed
            pos += 1
        elif kind is TokenType.IDENTIFIER:
            if token.value == "using":
                pos += 1
                if (
                    pos == end
                    or tokens[pos].type is not TokenType.IDENTIFIER
                    or tokens[pos].value != "namespace"
                ):
                    raise GeneratorError(_USING_ERROR)
                pos += 1
                if pos == end or tokens[pos].type is not TokenType.IDENTIFIER:
                    raise GeneratorError(_USING_ERROR)
                pos += 1
            else:
                model, pos = _find_function(tokens, pos, time_default)
                spec.functions.append(model)
        else:
            raise GeneratorError("unknown token type found")

    return spec