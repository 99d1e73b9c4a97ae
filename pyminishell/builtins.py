"""Commands the shell runs itself instead of starting a program."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

from .env import Environment, split_assignment

SUCCESS = 0
FAILURE = 1

_BUILTIN_NAMES = ("echo", "cd", "pwd", "export", "unset", "env", "exit")
_ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_ASCII_DIGITS = frozenset("0123456789")


class ShellExit(Exception):
    """Raised by ``exit`` to end the shell with ``status``."""

    def __init__(self, status: int) -> None:
        super().__init__(f"exit {status}")
        self.status = status


def _out(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _err(text: str) -> None:
    sys.stderr.write(text)
    sys.stderr.flush()


def is_builtin(name: Optional[str]) -> bool:
    """Whether ``name`` is one of the shell's own commands."""
    return name in _BUILTIN_NAMES


def is_valid_var_name(name: Optional[str]) -> bool:
    """Whether ``name`` is a valid shell variable name."""
    if not name:
        return False
    first, rest = name[0], name[1:]
    if first not in _ASCII_LETTERS and first != "_":
        return False
    return all(
        ch in _ASCII_LETTERS or ch in _ASCII_DIGITS or ch == "_" for ch in rest
    )


def replace_tilde(path: str, home: str) -> str:
    """Replace every ``~`` in ``path`` with ``home``."""
    return path.replace("~", home)


def _suppresses_newline(arg: str) -> bool:
    return arg.startswith("-") and all(ch == "n" for ch in arg[1:])


def builtin_echo(args: Sequence[str]) -> int:
    """Print the arguments separated by spaces; leading ``-n`` options drop the newline."""
    words = list(args[1:])
    newline = True
    while words and _suppresses_newline(words[0]):
        newline = False
        words.pop(0)
    _out(" ".join(words) + ("\n" if newline else ""))
    return SUCCESS


def builtin_env(env: Environment) -> int:
    """Print every variable that has a value as ``KEY=VALUE``."""
    _out("".join(f"{var.key}={var.value}\n" for var in env if var.value is not None))
    return SUCCESS


def builtin_pwd() -> int:
    """Print the current working directory."""
    try:
        cwd = os.getcwd()
    except OSError as exc:
        _err(f"pwd:error: {exc.strerror}\n")
        return FAILURE
    _out(cwd + "\n")
    return SUCCESS


def _cd_target(args: Sequence[str], env: Environment) -> Optional[str]:
    home = env.get("HOME")
    if len(args) < 2:
        if home is None:
            _err("cd: HOME not set\n")
            return None
        return home
    if len(args) > 2:
        _err("cd: too many arguments\n")
        return None
    return replace_tilde(args[1], home if home is not None else "")


def builtin_cd(args: Sequence[str], env: Environment) -> int:
    """Change directory and record ``OLDPWD`` and ``PWD``."""
    path = _cd_target(args, env)
    if path is None:
        return FAILURE
    try:
        old_pwd = os.getcwd()
    except OSError:
        old_pwd = ""
    status = SUCCESS
    try:
        os.chdir(path)
    except OSError as exc:
        _err(f"cd: {path}: {exc.strerror}\n")
        status = FAILURE
    env.set("OLDPWD", old_pwd, False)
    try:
        env.set("PWD", os.getcwd(), False)
    except OSError:
        pass
    return status


def _export_error(var: str) -> int:
    _err(f"minishell: export: `{var}': not a valid identifier\n")
    return FAILURE


def _print_exports(env: Environment) -> None:
    env.sort()
    lines = []
    for var in env:
        if var.has_no_eq:
            lines.append(f"declare -x {var.key}\n")
        elif var.value is not None:
            lines.append(f'declare -x {var.key}="{var.value}"\n')
        else:
            lines.append(f'declare -x {var.key}=""\n')
    _out("".join(lines))


def _export_one(env: Environment, var: str) -> int:
    if var == "=":
        return _export_error("=")
    if "=" not in var:
        if not is_valid_var_name(var):
            return _export_error(var)
        env.set(var, None, True)
        return SUCCESS
    key, value = split_assignment(var)
    if not is_valid_var_name(key):
        return _export_error(var)
    env.set(key, value, False)
    return SUCCESS


def builtin_export(args: Sequence[str], env: Environment) -> int:
    """Set or mark variables; with no arguments, list them sorted."""
    if len(args) < 2:
        _print_exports(env)
        return SUCCESS
    results = [_export_one(env, var) for var in args[1:]]
    return FAILURE if FAILURE in results else SUCCESS


def builtin_unset(args: Sequence[str], env: Environment) -> int:
    """Remove the named variables."""
    status = SUCCESS
    for name in args[1:]:
        if not is_valid_var_name(name):
            _err(f"minishell: unset: `{name}': not a valid identifier\n")
            status = FAILURE
            continue
        env.delete(name)
    return status


def _is_number(text: str) -> bool:
    digits = text[1:] if text[:1] in ("+", "-") else text
    return bool(digits) and all(ch in _ASCII_DIGITS for ch in digits)


def builtin_exit(args: Sequence[str], status: int) -> int:
    """Leave the shell by raising ShellExit.

    With no argument the last status is used; a non-numeric argument
    exits with 2. With too many arguments nothing is left and 1 is
    returned.
    """
    _out("exit\n")
    if len(args) < 2:
        raise ShellExit(status)
    if not _is_number(args[1]):
        _err(f"exit: {args[1]}: numeric argument required\n")
        raise ShellExit(2)
    if len(args) > 2:
        _err("exit: too many arguments\n")
        return FAILURE
    raise ShellExit(int(args[1]) % 256)


def run_builtin(args: Sequence[str], env: Environment, status: int) -> int:
    """Run the builtin named by ``args[0]`` and return its status."""
    name = args[0]
    if name == "echo":
        return builtin_echo(args)
    if name == "env":
        return builtin_env(env)
    if name == "exit":
        return builtin_exit(args, status)
    if name == "pwd":
        return builtin_pwd()
    if name == "cd":
        return builtin_cd(args, env)
    if name == "unset":
        return builtin_unset(args, env)
    if name == "export":
        return builtin_export(args, env)
    raise ValueError(f"not a builtin: {name!r}")