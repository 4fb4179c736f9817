"""Remove qualifiers the generator ignores and merge unsigned type names."""

from __future__ import annotations

from collections.abc import Iterable

from xlwgen.tokenizer import Token, TokenType

_UNSIGNED_SUFFIXES = frozenset({"long", "int", "short"})


def _is_identifier(token: Token, value: str | None = None) -> bool:
    return token.type is TokenType.IDENTIFIER and (value is None or token.value == value)


def strip_tokens(tokens: Iterable[Token]) -> list[Token]:
    """Drop ampersands and 'const', and join 'unsigned long/int/short' into one identifier."""
    kept = [
        t
        for t in tokens
        if t.type is not TokenType.AMPERSAND and not _is_identifier(t, "const")
    ]

    result: list[Token] = []
    pos = 0
    while pos < len(kept):
        token = kept[pos]
        if _is_identifier(token, "unsigned") and pos + 1 < len(kept):
            following = kept[pos + 1]
            if _is_identifier(following) and following.value in _UNSIGNED_SUFFIXES:
                result.append(Token(TokenType.IDENTIFIER, f"unsigned {following.value}"))
                pos += 2
                continue
        result.append(token)
        pos += 1
    return result