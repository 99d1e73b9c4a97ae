"""Variable expansion and quote removal."""

from __future__ import annotations

from typing import Iterable

from .env import Environment
from .parser import Command

_NAME_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_"
)


def var_name_length(text: str) -> int:
    """Length of the variable name at the start of ``text``."""
    length = 0
    for ch in text:
        if ch not in _NAME_CHARS:
            break
        length += 1
    return length


def _expand_variable(line: str, pos: int, env: Environment, status: int) -> tuple[str, int]:
    """Expand the ``$`` at ``pos``; return the text and the next position."""
    pos += 1
    if line[pos : pos + 1] == "?":
        return str(status), pos + 1
    length = var_name_length(line[pos:])
    if length == 0:
        return "$", pos
    value = env.get(line[pos : pos + length])
    return value or "", pos + length


def expand_line(line: str, env: Environment, status: int) -> str:
    """Expand ``$NAME`` and ``$?`` and remove quotes.

    Single quotes keep their contents literally; double quotes still
    expand variables. An unclosed quote runs to the end of the line.
    """
    out: list[str] = []
    pos = 0
    end = len(line)
    while pos < end:
        ch = line[pos]
        if ch == "'":
            close = line.find("'", pos + 1)
            close = end if close == -1 else close
            out.append(line[pos + 1 : close])
            pos = close + 1
        elif ch == '"':
            pos += 1
            while pos < end and line[pos] != '"':
                if line[pos] == "$":
                    text, pos = _expand_variable(line, pos, env, status)
                    out.append(text)
                else:
                    out.append(line[pos])
                    pos += 1
            pos += 1
        elif ch == "$":
            text, pos = _expand_variable(line, pos, env, status)
            out.append(text)
        else:
            out.append(ch)
            pos += 1
    return "".join(out)


def filter_empty_args(args: Iterable[str]) -> list[str]:
    """Drop arguments that expanded to nothing."""
    return [arg for arg in args if arg]


def expand_command(command: Command, env: Environment, status: int) -> None:
    """Expand a command's words and redirection targets in place."""
    command.args = filter_empty_args(
        expand_line(arg, env, status) for arg in command.args
    )
    for redirection in command.redirections:
        redirection.filename = expand_line(redirection.filename, env, status)