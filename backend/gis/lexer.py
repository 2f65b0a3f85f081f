"""
Location Lexer
Tokenize a human-written latitude/longitude string.

Always forces a comma token after an N/S letter, so that the comma
between latitude and longitude is present in the token stream.
An explicit comma immediately after N/S is folded into that token.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .constants import DEG_SYMS, MIN_SYMS, SEC_SYMS
from .types import Hemisphere


class TokenKind(str, Enum):
    INT = "int"
    FLOAT = "float"
    DIR = "dir"
    DEG = "deg"
    MIN = "min"
    SEC = "sec"
    COMMA = "comma"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    value: int | float | Hemisphere | None = None

    @property
    def is_number(self) -> bool:
        return self.kind in (TokenKind.INT, TokenKind.FLOAT)

    @property
    def is_negative(self) -> bool:
        # sign is kept from the text, so "-0" stays negative
        return self.is_number and self.text.startswith("-")


class LexError(ValueError):
    """Raised when the input contains a character or number that cannot be tokenized"""
    pass


_MARKS: dict[str, TokenKind] = {
    **{c: TokenKind.DEG for c in DEG_SYMS},
    **{c: TokenKind.MIN for c in MIN_SYMS},
    **{c: TokenKind.SEC for c in SEC_SYMS},
}

_NUM_START = set("0123456789+-.")


def tokenize(text: str) -> list[Token]:
    tokens: list[Token] = []

    i = 0
    while i < len(text):
        ch = text[i]

        if ch.isspace():
            i += 1
            continue

        if ch in _NUM_START:
            token, i = _number(text, i)
            tokens.append(token)
            continue

        mark = _MARKS.get(ch)
        if mark is not None:
            tokens.append(Token(mark, ch))
            i += 1
            continue

        if ch in ("N", "S"):
            tokens.append(Token(TokenKind.DIR, ch, Hemisphere(ch)))
            tokens.append(Token(TokenKind.COMMA, ","))
            i += 1
            if i < len(text) and text[i] == ",":
                i += 1
            continue

        if ch in ("E", "W"):
            tokens.append(Token(TokenKind.DIR, ch, Hemisphere(ch)))
            i += 1
            continue

        if ch == ",":
            tokens.append(Token(TokenKind.COMMA, ch))
            i += 1
            continue

        raise LexError(f"Illegal char \\u{ord(ch):04X} '{ch}' at position {i}")

    return tokens


def _number(text: str, start: int) -> tuple[Token, int]:
    i = start
    if text[i] in "+-":
        i += 1

    seen_point = False
    while i < len(text):
        ch = text[i]
        if ch.isdigit() and ch.isascii():
            i += 1
        elif ch == "." and not seen_point:
            seen_point = True
            i += 1
        else:
            break

    literal = text[start:i]
    if not any(c.isdigit() for c in literal):
        raise LexError(f"Illegal number '{literal}' at position {start}")

    if seen_point:
        return Token(TokenKind.FLOAT, literal, float(literal)), i
    return Token(TokenKind.INT, literal, int(literal)), i
