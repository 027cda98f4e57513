"""Assigning roles to the words of a command line and removing quotes."""

from __future__ import annotations

from .lexer import argument_flag, is_just_meta, make_list
from .words import Flag, Word

_QUOTES = "'\""


def _is_redirect(flag: int) -> bool:
    return Flag.OUTPUT <= flag <= Flag.HEREDOC


def _set_meta_flags(words: list[Word]) -> None:
    for word in words:
        meta = is_just_meta(word.word)
        if meta != Flag.NONE:
            word.flag = meta


def _redirect_command(words: list[Word], index: int) -> int:
    """Flag a redirection, its target and the command after it.

    Returns the index at which flagging goes on; it may be past the end.
    """
    count = len(words)
    flag = is_just_meta(words[index].word)
    words[index].flag = flag
    if flag == Flag.NONE:
        return index
    if index + 1 < count:
        words[index + 1].flag = Flag(flag + 5)
    if index + 2 < count:
        index += 2
        current = words[index]
        current.flag = is_just_meta(current.word)
        if current.flag == Flag.PIPE:
            if index + 1 >= count:
                return index
            index += 1
            if is_just_meta(words[index].word) == Flag.NONE:
                words[index].flag = Flag.COMMAND
            return index
        if current.flag == Flag.NONE:
            current.flag = Flag.COMMAND
            return index + 1
    return index


def _set_flags_per_word(words: list[Word], index: int) -> int:
    count = len(words)
    word = words[index]
    if word.flag == Flag.PIPE and index + 1 < count:
        following = is_just_meta(words[index + 1].word)
        if _is_redirect(following):
            index += 1
            words[index].flag = following
            index = _redirect_command(words, index)
            if index >= count:
                return index
        else:
            words[index + 1].flag = Flag.COMMAND

    word = words[index]
    nxt = words[index + 1] if index + 1 < count else None
    if word.flag == Flag.COMMAND and nxt is not None:
        if nxt.word.startswith("-"):
            nxt.flag = Flag.OPTION
        elif not 3 < is_just_meta(nxt.word) < 15:
            nxt.flag = Flag.ARGUMENT
    if _is_redirect(word.flag) and nxt is not None:
        nxt.flag = Flag(word.flag + 5)
    if word.flag == Flag.NONE:
        word.flag = Flag.ARGUMENT
    return index


def set_flags(words: list[Word]) -> list[Word]:
    """Give each word its role: command, option, argument, operator or target."""
    if not words:
        return words
    _set_meta_flags(words)
    first = words[0]
    if is_just_meta(first.word) == Flag.NONE:
        first.flag = Flag.COMMAND
    index = 0
    if _is_redirect(first.flag):
        index = _redirect_command(words, 0)
    while index < len(words):
        word = words[index]
        if word.flag == Flag.NONE:
            meta = is_just_meta(word.word)
            if meta != Flag.NONE:
                word.flag = meta
        index = _set_flags_per_word(words, index) + 1
    _set_meta_flags(words)
    return words


def _trim_word(word: Word) -> None:
    text = word.word
    if len(text) == 1 or not any(char in _QUOTES for char in text):
        return
    if text[0] in _QUOTES and text[-1] == text[0]:
        word.word = text.strip(text[0])


def trim_quotes(words: list[Word]) -> list[Word]:
    """Strip the enclosing quotes of argument words that are wholly quoted."""
    for word in words:
        if word.flag == Flag.ARGUMENT:
            _trim_word(word)
    return words


def parse_line(line: str | None) -> list[Word]:
    """Split ``line`` into flagged words; a blank or missing line gives none."""
    if line is None or not line.strip(" \t"):
        return []
    words = make_list(line)
    argument_flag(words)
    set_flags(words)
    trim_quotes(words)
    return words


def format_words(words: list[Word]) -> str:
    """Render each word and its flag on a line of its own."""
    return "".join(
        f"string->word = {word.word}, string->flag = {int(word.flag)} \n"
        for word in words
    )