"""Checking a flagged word list for syntax errors."""

from __future__ import annotations

from itertools import pairwise

from .lexer import is_just_meta
from .words import Environment, Flag, Word

SYNTAX_ERROR_STATUS = "258"


class ShellSyntaxError(Exception):
    """A command line that cannot be run; ``token`` is None at end of line."""

    def __init__(self, token: str | None = None) -> None:
        self.token = token
        if token is None:
            message = "syntax error near unexpected token `newline'"
        else:
            message = f"syntax error near unexpected token '{token}'"
        super().__init__(message)


def _is_redirect(flag: int) -> bool:
    return Flag.OUTPUT <= flag <= Flag.HEREDOC


def _fail(env: Environment, token: str | None) -> None:
    env.set_exit_status(SYNTAX_ERROR_STATUS)
    raise ShellSyntaxError(token)


def pipe_error(words: list[Word], env: Environment) -> None:
    """Report a line that starts with a pipe."""
    if not words:
        raise ValueError("no words to report")
    _fail(env, words[0].word)


def check_error(words: list[Word], env: Environment) -> None:
    """Raise ShellSyntaxError for a malformed line and set the exit status."""
    if not words:
        return
    first = words[0]
    if len(words) == 1 and Flag.PIPE <= first.flag < Flag.META:
        if is_just_meta(first.word) == Flag.PIPE or not _is_redirect(first.flag):
            _fail(env, first.word)
        _fail(env, None)
    if first.flag == Flag.PIPE:
        pipe_error(words, env)
    last = len(words) - 1
    for index, (word, nxt) in enumerate(pairwise(words), start=1):
        if word.flag == Flag.COMMAND and _is_redirect(nxt.flag) and index == last:
            _fail(env, None)
        if _is_redirect(word.flag) and _is_redirect(nxt.flag):
            _fail(env, nxt.word)