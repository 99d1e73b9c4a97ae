"""Ordered shell environment with export flags."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union


def split_assignment(var: str) -> tuple[str, str]:
    """Split ``KEY=VALUE`` at the first ``=``.

    Raises ValueError when there is no ``=``.
    """
    key, sep, value = var.partition("=")
    if not sep:
        raise ValueError(f"no '=' in {var!r}")
    return key, value


@dataclass
class EnvVar:
    """One variable; ``value`` is None for a name exported without ``=``."""

    key: str
    value: Optional[str] = None
    has_no_eq: bool = False


class Environment:
    """Variables in insertion order, as the shell keeps them."""

    def __init__(self) -> None:
        self._vars: list[EnvVar] = []

    @classmethod
    def from_envp(
        cls, envp: Union[Mapping[str, str], Iterable[str], None]
    ) -> "Environment":
        """Build from a mapping or from ``KEY=VALUE`` strings.

        Strings without ``=`` are ignored.
        """
        env = cls()
        if envp is None:
            return env
        if isinstance(envp, Mapping):
            pairs: Iterable[tuple[str, str]] = envp.items()
        else:
            pairs = (split_assignment(entry) for entry in envp if "=" in entry)
        for key, value in pairs:
            env.add(key, value, False)
        return env

    def __iter__(self) -> Iterator[EnvVar]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)

    def _find(self, key: str) -> Optional[EnvVar]:
        return next((var for var in self._vars if var.key == key), None)

    def get(self, key: str) -> Optional[str]:
        """Value of ``key``, or None if unset or set without a value."""
        var = self._find(key)
        return var.value if var else None

    def add(self, key: str, value: Optional[str], has_no_eq: bool) -> None:
        """Append a new variable without checking for duplicates."""
        self._vars.append(EnvVar(key, value, has_no_eq))

    def set(self, key: str, value: Optional[str], has_no_eq: bool) -> None:
        """Add ``key`` or update it in place.

        An existing variable keeps its value when ``has_no_eq`` is true;
        its flag is never changed by an update.
        """
        var = self._find(key)
        if var is None:
            self.add(key, value, has_no_eq)
        elif not has_no_eq:
            var.value = value

    def delete(self, key: str) -> None:
        """Remove the first variable named ``key``, if any."""
        var = self._find(key)
        if var is not None:
            self._vars.remove(var)

    def sort(self) -> None:
        """Order variables by name, stably."""
        self._vars.sort(key=lambda var: var.key)

    def to_envp(self) -> list[str]:
        """``KEY=VALUE`` strings for every variable that has a value."""
        return [f"{var.key}={var.value}" for var in self._vars if var.value is not None]