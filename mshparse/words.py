"""Word tokens, token flags and the shell environment."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from itertools import groupby


class Flag(IntEnum):
    """Role of a word within a command line."""

    NONE = 0
    COMMAND = 1
    OPTION = 2
    ARGUMENT = 3
    ENV = 4
    PIPE = 5
    OUTPUT = 6
    APPEND = 7
    INPUT = 8
    HEREDOC = 9
    META = 10
    OUT_FILE = 11
    APPEND_FILE = 12
    IN_FILE = 13
    EOF = 14

    @property
    def is_redirect(self) -> bool:
        """True for the redirection operators ``>``, ``>>``, ``<`` and ``<<``."""
        return Flag.OUTPUT <= self <= Flag.HEREDOC


@dataclass
class Word:
    """One word of a command line together with its flag."""

    word: str
    flag: Flag = Flag.NONE


@dataclass
class Environment:
    """Shell variables plus the status of the last command."""

    variables: dict[str, str] = field(default_factory=dict)
    exit_status: str = "0"

    def get(self, name: str) -> str | None:
        """Return the value of ``name``, or None when it is not set."""
        return self.variables.get(name)

    def set(self, name: str, value: str) -> None:
        """Define or replace the variable ``name``."""
        self.variables[name] = value

    def set_exit_status(self, status: int | str) -> None:
        """Record the status of the last command."""
        self.exit_status = str(status)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        """Yield ``(name, value)`` pairs in definition order."""
        return iter(self.variables.items())

    def __contains__(self, name: object) -> bool:
        return name in self.variables

    def __len__(self) -> int:
        return len(self.variables)


def count_quotes_str(text: str) -> int:
    """Length of the leading quoted segment of ``text``, quotes included.

    A text that does not start with a quote counts one character; an
    unterminated quote runs to the end of the text.
    """
    if not text:
        return 0
    quote = text[0]
    if quote not in "\"'":
        return 1
    close = text.find(quote, 1)
    return len(text) if close < 0 else close + 1


def split_str(text: str, charset: str) -> list[str]:
    """Split ``text`` on any character of ``charset``, dropping empty pieces."""
    return [
        "".join(group)
        for is_separator, group in groupby(text, key=lambda char: char in charset)
        if not is_separator
    ]