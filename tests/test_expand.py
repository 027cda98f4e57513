import pytest

from mshparse.expand import change_line, make_strlist
from mshparse.words import Environment


@pytest.fixture
def env():
    return Environment(variables={"HOME": "/home/user", "A": "1", "B": "2"})


def test_line_without_dollar_is_unchanged(env):
    line = "echo hi 'there'"
    assert change_line(line, env) == line


def test_known_variable(env):
    assert change_line("echo $HOME", env) == "echo " + env.get("HOME")


def test_unknown_variable_is_kept(env):
    line = "echo $NOPE"
    assert change_line(line, env) == line


def test_exit_status(env):
    env.set_exit_status(42)
    assert change_line("echo $?", env) == "echo " + env.exit_status


def test_status_followed_by_text_is_kept(env):
    assert change_line("$?x", env) == "$?x"


def test_single_quotes_block_expansion(env):
    line = "echo '$HOME'"
    assert change_line(line, env) == line


def test_adjacent_variables(env):
    assert change_line("$A$B", env) == env.get("A") + env.get("B")


def test_name_with_defined_prefix_expands_to_nothing(env):
    assert change_line("x$AB", env) == "x"


def test_lone_dollar_at_end(env):
    line = "echo $"
    assert change_line(line, env) == line


def test_make_strlist_pieces(env):
    assert make_strlist("echo $HOME/x", env) == ["echo ", "$HOME", "/x"]


def test_make_strlist_joins_back_when_nothing_is_skipped(env):
    line = "a $HOME b $A c"
    assert "".join(make_strlist(line, env)) == line


def test_make_strlist_lone_dollar_swallows_next_char(env):
    assert make_strlist("a$/b", env) == ["a", "$", "b"]
    assert change_line("a$/b", env) == "a$b"


def test_make_strlist_resolves_status(env):
    env.set_exit_status("7")
    assert make_strlist("$?", env) == [env.exit_status]


def test_undefined_everything_round_trips():
    empty = Environment()
    line = "ls $X $Y/z"
    assert change_line(line, empty) == line