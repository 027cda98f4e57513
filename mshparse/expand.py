"""Expanding ``$NAME`` and ``$?`` references in a command line."""

from __future__ import annotations

from .libft import is_name_char
from .words import Environment

_STATUS_REFERENCE = "$?"


def _plain_segment(line: str, start: int) -> tuple[str, int]:
    """Text up to the next ``$`` outside single quotes.

    Returns the text and the index of its last character.
    """
    count = len(line)
    pos = start
    while pos < count:
        if line[pos] == "'":
            pos += 1
            while pos < count and line[pos] != "'":
                pos += 1
        if pos >= count or line[pos] == "$":
            break
        pos += 1
    return line[start:pos], pos - 1


def _dollar_segment(line: str, start: int) -> tuple[str, int]:
    """A ``$`` followed by name characters, and where scanning goes on."""
    end = start + 1
    while end < len(line) and line[end] not in " \t$" and is_name_char(line[end]):
        end += 1
    token = line[start:end]
    if len(token) == 1:
        return token, start + 1
    return token, end - 1


def make_strlist(line: str, env: Environment) -> list[str]:
    """Cut ``line`` into plain text and ``$`` references, resolving ``$?``.

    A lone ``$`` swallows the character after it.
    """
    pieces: list[str] = []
    count = len(line)
    pos = 0
    while pos < count:
        if line[pos] != "$":
            piece, pos = _plain_segment(line, pos)
            pieces.append(piece)
        if pos < count and line[pos] == "$":
            piece, pos = _dollar_segment(line, pos)
            pieces.append(piece)
        if pos < count and line[pos] != "$":
            pos += 1
    return [env.exit_status if piece == _STATUS_REFERENCE else piece for piece in pieces]


def _expand_piece(piece: str, env: Environment) -> str:
    if not piece.startswith("$") or piece[1:2] == "?":
        return piece
    name = piece.strip("$")
    for var_name, value in env:
        if name.startswith(var_name):
            return value if len(name) == len(var_name) else ""
    return piece


def change_line(line: str, env: Environment) -> str:
    """Return ``line`` with variable references replaced by their values.

    Unknown variables are left as written. A name that merely starts with a
    defined variable's name expands to nothing.
    """
    if "$" not in line:
        return line
    return "".join(_expand_piece(piece, env) for piece in make_strlist(line, env))