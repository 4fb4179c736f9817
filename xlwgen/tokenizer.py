"""Split a C++ interface header into a flat list of tokens."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from xlwgen.errors import GeneratorError


class TokenType(enum.Enum):
    """Kinds of token the tokenizer produces."""

    COMMA = "comma"
    LEFT = "left"
    RIGHT = "right"
    AMPERSAND = "ampersand"
    SEMICOLON = "semicolon"
    CURLYLEFT = "curlyleft"
    CURLYRIGHT = "curlyright"
    COMMENT = "comment"
    PREPROCESSOR = "preprocessor"
    IDENTIFIER = "identifier"


@dataclass(frozen=True)
class Token:
    """A single token: its kind and, for text-bearing kinds, its text."""

    type: TokenType
    value: str = ""


# Curly braces are reported as plain parentheses.
_PUNCTUATION = {
    ",": TokenType.COMMA,
    "(": TokenType.LEFT,
    ")": TokenType.RIGHT,
    "&": TokenType.AMPERSAND,
    ";": TokenType.SEMICOLON,
    "{": TokenType.LEFT,
    "}": TokenType.RIGHT,
}

_IDENTIFIER_STOPS = frozenset("\n (),&/")
_NOT_CONSUMED_AFTER_IDENTIFIER = frozenset("()&/")


def _read_line_comment(text: str, pos: int) -> tuple[Token, int]:
    end = len(text)
    start = pos
    while pos < end and text[pos] != "\n" and pos + 1 != end:
        pos += 1
    return Token(TokenType.COMMENT, text[start:pos].rstrip(" ")), pos


def _read_block_comment(text: str, pos: int, tokens: list[Token]) -> int:
    end = len(text)
    value = ""
    done = False
    while not done:
        star = text.find("*", pos)
        if star == -1:
            value += text[pos:]
            pos = end
            done = True
        else:
            value += text[pos:star]
            pos = star + 1
            if pos < end and text[pos] == "/":
                pos += 1
                done = True
            else:
                value += "*"
        tokens.append(Token(TokenType.COMMENT, value))
    return pos


def _read_preprocessor(text: str, pos: int) -> tuple[Token, int]:
    end = len(text)
    if pos >= end:
        return Token(TokenType.PREPROCESSOR, ""), pos
    stop = text.find("\n", pos + 1)
    if stop == -1:
        stop = end
    value = text[pos:stop]
    pos = stop
    if pos < end:
        pos += 1
    return Token(TokenType.PREPROCESSOR, value), pos


def _read_identifier(text: str, pos: int) -> tuple[Token, int]:
    end = len(text)
    start = pos - 1
    while pos < end and text[pos] not in _IDENTIFIER_STOPS:
        pos += 1
    value = text[start:pos]
    if pos < end and text[pos] not in _NOT_CONSUMED_AFTER_IDENTIFIER:
        pos += 1
    return Token(TokenType.IDENTIFIER, value), pos


def tokenize(text: str) -> list[Token]:
    """Tokenize header text into comments, directives, punctuation and identifiers."""
    tokens: list[Token] = []
    end = len(text)
    pos = 0
    while pos < end:
        char = text[pos]
        pos += 1
        if char in " \n":
            continue
        kind = _PUNCTUATION.get(char)
        if kind is not None:
            tokens.append(Token(kind))
            continue
        if char == "/":
            if pos >= end:
                raise GeneratorError("/ found where not expected.")
            follower = text[pos]
            pos += 1
            if follower == "/":
                token, pos = _read_line_comment(text, pos)
                tokens.append(token)
            elif follower == "*":
                pos = _read_block_comment(text, pos, tokens)
            else:
                raise GeneratorError("/ found where not expected.")
            continue
        if char == "#":
            token, pos = _read_preprocessor(text, pos)
        else:
            token, pos = _read_identifier(text, pos)
        tokens.append(token)
    return tokens