"""Lexical analysis of a command line into words and operators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

_BLANKS = " \t"
_METACHARS = "|<>"
_QUOTES = "'\""


class TokenType(IntEnum):
    """Kinds of token produced by the lexer."""

    WORD = 0
    PIPE = 1
    REDIR_IN = 2
    REDIR_OUT = 3
    REDIR_APPEND = 4
    HEREDOC = 5


@dataclass(frozen=True)
class Token:
    """A single lexical token; word values keep their quotes."""

    type: TokenType
    value: str


def _read_operator(line: str, start: int) -> tuple[Token, int]:
    ch = line[start]
    doubled = line[start + 1 : start + 2] == ch
    if ch == "|":
        kind, length = TokenType.PIPE, 1
    elif ch == "<":
        kind, length = (TokenType.HEREDOC, 2) if doubled else (TokenType.REDIR_IN, 1)
    else:
        kind, length = (
            (TokenType.REDIR_APPEND, 2) if doubled else (TokenType.REDIR_OUT, 1)
        )
    end = start + length
    return Token(kind, line[start:end]), end


def _read_word(line: str, start: int) -> tuple[Token, int]:
    quote = ""
    pos = start
    for pos in range(start, len(line) + 1):
        if pos == len(line):
            break
        ch = line[pos]
        if quote:
            if ch == quote:
                quote = ""
        elif ch in _QUOTES:
            quote = ch
        elif ch in _BLANKS or ch in _METACHARS:
            break
    return Token(TokenType.WORD, line[start:pos]), pos


def tokenize(line: str) -> list[Token]:
    """Split a command line into tokens.

    Blanks (spaces and tabs) separate words unless quoted; ``|``, ``<``,
    ``>``, ``<<`` and ``>>`` are operators. An unclosed quote runs to the
    end of the line.
    """
    tokens: list[Token] = []
    pos = 0
    while pos < len(line):
        ch = line[pos]
        if ch in _BLANKS:
            pos += 1
            continue
        if ch in _METACHARS:
            token, pos = _read_operator(line, pos)
        else:
            token, pos = _read_word(line, pos)
        tokens.append(token)
    return tokens


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens as a human-readable debugging listing."""
    body = "".join(
        f"type: {int(token.type)}, Value: [{token.value}]\n" for token in tokens
    )
    return f"TOKENS\n{body}---\n"