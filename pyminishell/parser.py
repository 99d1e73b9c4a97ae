"""Parse a token list into a tree of commands and pipes."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Union

from .tokens import Token, TokenType


class ParseError(Exception):
    """A syntax error; ``token`` is the token the shell complains about."""

    def __init__(self, token: str) -> None:
        super().__init__(f"syntax error near unexpected token `{token}'")
        self.token = token


@dataclass
class Redirection:
    """One redirection of a command; heredoc bodies are filled in later."""

    type: TokenType
    filename: str
    heredoc_content: Optional[str] = None


@dataclass
class Command:
    """A simple command: its words and its redirections, in order."""

    args: list[str] = field(default_factory=list)
    redirections: list[Redirection] = field(default_factory=list)


@dataclass
class Pipe:
    """Two sides of a pipe; the right side may itself be a pipe."""

    left: "Node"
    right: "Node"


Node = Union[Command, Pipe]


def _parse_command(stream: Iterator[Token]) -> tuple[Command, bool]:
    """Read one command; the flag tells whether a pipe ended it."""
    command = Command()
    for token in stream:
        if token.type is TokenType.PIPE:
            return command, True
        if token.type is TokenType.WORD:
            command.args.append(token.value)
            continue
        target = next(stream, None)
        if target is None or target.type is not TokenType.WORD:
            raise ParseError("newline")
        command.redirections.append(Redirection(token.type, target.value))
    return command, False


def _parse_pipeline(stream: Iterator[Token]) -> Node:
    command, piped = _parse_command(stream)
    if not piped:
        return command
    first = next(stream, None)
    if first is None:
        raise ParseError("|")
    right = _parse_pipeline(itertools.chain([first], stream))
    return Pipe(command, right)


def parse(tokens: Iterable[Token]) -> Optional[Node]:
    """Build the syntax tree for ``tokens``; None when there are none.

    Pipes nest to the right. Raises ParseError on a trailing pipe or a
    redirection without a word after it.
    """
    token_list = list(tokens)
    if not token_list:
        return None
    return _parse_pipeline(iter(token_list))


def command_count(node: Optional[Node]) -> int:
    """Number of simple commands in the tree."""
    if node is None:
        return 0
    if isinstance(node, Command):
        return 1
    return command_count(node.left) + command_count(node.right)


def format_ast(node: Optional[Node], level: int = 0) -> str:
    """Render the tree as a debugging listing."""
    if node is None:
        return ""
    if isinstance(node, Pipe):
        return (
            "pipe\n"
            + format_ast(node.left, level + 1)
            + format_ast(node.right, level + 1)
        )
    name = node.args[0] if node.args else "(null)"
    return f"[value: {name} | count: {level}]\n"