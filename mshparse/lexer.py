"""Splitting a command line into words and separating operators."""

from __future__ import annotations

from collections import deque

from .words import Flag, Word

_BLANKS = " \t"
_QUOTES = "\"'"
_META_CHARS = "|<>"
_WORD_STOPS = _BLANKS + _QUOTES

_SYMBOLS = {
    Flag.PIPE: "|",
    Flag.APPEND: ">>",
    Flag.OUTPUT: ">",
    Flag.HEREDOC: "<<",
    Flag.INPUT: "<",
}


def _quoted_span(text: str, quote: str) -> int:
    body = text[1:]
    end = body.find(quote)
    return (len(body) if end < 0 else end) + 2


def dquotes_sprt(text: str) -> int:
    """Span of a double-quoted segment at the start of ``text``, quotes counted.

    When the closing quote is missing the result is one past the text's end.
    """
    return _quoted_span(text, '"')


def squotes_sprt(text: str) -> int:
    """Span of a single-quoted segment at the start of ``text``, quotes counted.

    When the closing quote is missing the result is one past the text's end.
    """
    return _quoted_span(text, "'")


def _chunk(text: str, length: int) -> str:
    """Take the next word from ``text``, scanning on from ``length``."""
    if text[:1] == '"':
        size = dquotes_sprt(text)
    elif text[:1] == "'":
        size = squotes_sprt(text)
    else:
        size = length
        while size < len(text) and text[size] not in _WORD_STOPS:
            size += 1
    return text[:size]


def _first_token_length(text: str) -> int:
    """Length of the first blank-delimited token, quoted blanks included."""
    pos = 0
    while pos < len(text) and text[pos] not in _BLANKS:
        if text[pos] in _QUOTES:
            close = text.find(text[pos], pos + 1)
            if close < 0:
                return len(text)
            pos = close
        pos += 1
    return pos


def argument_flag(words: list[Word]) -> list[Word]:
    """Clear every flag, then mark words that open with a quote as arguments."""
    for word in words:
        word.flag = Flag.ARGUMENT if word.word[:1] in _QUOTES and word.word else Flag.NONE
    return words


def is_just_meta(text: str) -> Flag:
    """Return the operator flag when ``text`` is exactly an operator.

    An empty text counts as a pipe.
    """
    if text in ("", "|"):
        return Flag.PIPE
    for flag in (Flag.APPEND, Flag.OUTPUT, Flag.HEREDOC, Flag.INPUT):
        if text == _SYMBOLS[flag]:
            return flag
    return Flag.NONE


def is_include_meta(text: str) -> Flag:
    """Return the flag of the operator that ``text`` starts with, if any."""
    for flag in (Flag.PIPE, Flag.APPEND, Flag.OUTPUT, Flag.HEREDOC, Flag.INPUT):
        if text.startswith(_SYMBOLS[flag]):
            return flag
    return Flag.NONE


def give_flag(flag: int) -> str:
    """Return the operator text for an operator flag."""
    try:
        return _SYMBOLS[Flag(flag)]
    except (KeyError, ValueError):
        raise ValueError(f"flag {flag!r} is not an operator") from None


def _is_plain(text: str) -> bool:
    """Tell whether ``text`` needs no splitting around operators."""
    start = 0
    if text[:1] in _QUOTES and text:
        close = text.find(text[0], 1)
        if close < 0:
            return True
        if close == len(text) - 1:
            return True
        start = close
    return not any(char in _META_CHARS for char in text[start:])


def _split_word(word: Word) -> tuple[Word, Word] | None:
    text = word.word
    if is_just_meta(text) or _is_plain(text):
        return None
    leading = is_include_meta(text)
    if leading:
        cut = len(give_flag(leading))
    else:
        cut = next(pos for pos, char in enumerate(text) if char in _META_CHARS)
    return Word(text[:cut], word.flag), Word(text[cut:])


def _find_meta(words: list[Word]) -> list[Word]:
    argument_flag(words)
    pending = deque(words)
    result: list[Word] = []
    while pending:
        word = pending.popleft()
        parts = _split_word(word)
        if parts is None:
            result.append(word)
        else:
            head, tail = parts
            result.append(head)
            pending.appendleft(tail)
    return result


def make_list(line: str) -> list[Word]:
    """Break ``line`` into words, keeping quoted segments and splitting operators.

    The first token runs to the first unquoted blank; when it opens with a
    quote only the quoted segment is kept. Later words end at blanks and
    quotes, and each quoted segment is a word of its own.
    """
    rest = line.lstrip(_BLANKS)
    first_length = _first_token_length(rest)
    words = [Word(_chunk(rest, first_length))]
    rest = rest[first_length:].lstrip(_BLANKS)
    while rest:
        stop = next(
            (pos for pos, char in enumerate(rest) if char in _WORD_STOPS), None
        )
        if stop is None:
            words.append(Word(rest))
            break
        piece = _chunk(rest, stop)
        words.append(Word(piece))
        rest = rest[len(piece):].lstrip(_BLANKS)
    return _find_meta(words)