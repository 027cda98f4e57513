import pytest

from mshparse.syntax import ShellSyntaxError, check_error, pipe_error
from mshparse.words import Environment, Flag, Word

NEWLINE = "syntax error near unexpected token `newline'"


def _words(*pairs):
    return [Word(text, flag) for text, flag in pairs]


def test_valid_line_keeps_status():
    env = Environment()
    words = _words(
        ("cat", Flag.COMMAND),
        ("<", Flag.INPUT),
        ("in", Flag.IN_FILE),
        ("|", Flag.PIPE),
        ("wc", Flag.COMMAND),
    )
    assert check_error(words, env) is None
    assert env.exit_status == "0"


def test_empty_list_is_valid():
    env = Environment()
    check_error([], env)
    assert env.exit_status == "0"


def test_lone_redirect():
    env = Environment()
    with pytest.raises(ShellSyntaxError) as info:
        check_error(_words((">", Flag.OUTPUT)), env)
    assert str(info.value) == NEWLINE
    assert info.value.token is None
    assert env.exit_status == "258"


def test_lone_pipe():
    env = Environment()
    with pytest.raises(ShellSyntaxError) as info:
        check_error(_words(("|", Flag.PIPE)), env)
    assert str(info.value) == "syntax error near unexpected token '|'"
    assert env.exit_status == "258"


def test_leading_pipe():
    env = Environment()
    with pytest.raises(ShellSyntaxError) as info:
        check_error(_words(("|", Flag.PIPE), ("ls", Flag.COMMAND)), env)
    assert info.value.token == "|"
    assert env.exit_status == "258"


def test_command_then_trailing_redirect():
    env = Environment()
    with pytest.raises(ShellSyntaxError) as info:
        check_error(_words(("ls", Flag.COMMAND), (">", Flag.OUTPUT)), env)
    assert str(info.value) == NEWLINE
    assert env.exit_status == "258"


def test_two_redirects_in_a_row():
    env = Environment()
    words = _words(
        ("cat", Flag.COMMAND),
        (">", Flag.OUTPUT),
        ("<", Flag.INPUT),
        ("f", Flag.IN_FILE),
    )
    with pytest.raises(ShellSyntaxError) as info:
        check_error(words, env)
    assert info.value.token == "<"
    assert env.exit_status == "258"


def test_trailing_redirect_after_argument_is_accepted():
    env = Environment()
    words = _words(("echo", Flag.COMMAND), ("a", Flag.ARGUMENT), (">", Flag.OUTPUT))
    check_error(words, env)
    assert env.exit_status == "0"


def test_pipe_error_uses_first_word():
    env = Environment()
    with pytest.raises(ShellSyntaxError) as info:
        pipe_error(_words(("|", Flag.PIPE), ("x", Flag.COMMAND)), env)
    assert info.value.token == "|"
    assert env.exit_status == "258"


def test_pipe_error_needs_words():
    with pytest.raises(ValueError):
        pipe_error([], Environment())