# mshparse

`mshparse` turns a line typed into a small interactive shell into a list of
flagged words. A command executor can then work from that list. The package
uses only the standard library.

A line goes through four stages.

1. **Expansion** (`mshparse.expand`). `change_line(line, env)` replaces
   `$NAME` references with values from an `Environment`.
   - `$?` becomes the last exit status.
   - Text inside single quotes is not expanded.
   - References to unknown variables stay as written.
   - A name that only starts with a defined variable's name expands to
     nothing.

   `make_strlist(line, env)` returns the pieces the line is cut into: plain
   text and `$` references, with `$?` already resolved.
2. **Lexing** (`mshparse.lexer`). `make_list(line)` splits a line into `Word`
   objects.
   - Quoted segments are kept together.
   - The operators `|`, `<`, `<<`, `>` and `>>` are split off from the words
     they touch.

   The helpers `is_just_meta`, `is_include_meta` and `give_flag` map between
   operator text and `Flag` members.
3. **Flagging** (`mshparse.parser`). `parse_line(line)` runs the lexer, then
   `set_flags` gives every word a role. The roles are command, option,
   argument, pipe, redirection operator, and redirection target (output,
   append or input file, or here-document delimiter). Last, `trim_quotes`
   strips the surrounding quotes from wholly quoted arguments. A blank line
   or `None` gives an empty list. `format_words(words)` renders one line per
   word together with its flag number.
4. **Syntax checking** (`mshparse.syntax`). `check_error(words, env)` rejects
   lines such as `| ls`, `ls >` or `cat < > out`. On a rejected line it sets
   the exit status to `258` and raises `ShellSyntaxError`. The error's
   `token` attribute holds the offending token, or `None` when the line ended
   too early.

## Example

```python
from mshparse.words import Environment
from mshparse.expand import change_line
from mshparse.parser import parse_line, format_words
from mshparse.syntax import check_error, ShellSyntaxError

env = Environment()
env.set("USER", "alice")

line = change_line("echo hello $USER | wc -c > out.txt", env)
words = parse_line(line)
try:
    check_error(words, env)
except ShellSyntaxError as exc:
    print(exc, env.exit_status)
else:
    print(format_words(words))
```

A `Word` has two members:

- `.word`: the text.
- `.flag`: a `Flag` member. `Flag.is_redirect` tells whether the flag is a
  redirection operator.

An `Environment` holds variables through `get` and `set`, and the last status
through `exit_status` and `set_exit_status()`.

## Helpers

- `mshparse.words.count_quotes_str` returns the length of a leading quoted
  segment.
- `mshparse.words.split_str` splits a string on any character in a set.
- `mshparse.libft` holds small string helpers: `atoi`, `itoa`,
  `is_name_char`, `split`, `strtrim`, `substr`, `strnstr`, `strncmp`,
  `strchr` and `strrchr`.
  - `atoi` skips leading whitespace and saturates at the 64-bit limits before
    narrowing the result to 32 bits.
  - The search helpers return an index, or `None` when nothing is found.

## What it does not do

This is only the front end of a shell. It does not:

- run commands or provide builtins;
- set up pipes, redirections or here-documents;
- read input at a prompt or keep a history;
- handle signals.

It also installs no command.

## Running the tests

```
pip install -e .[test]
pytest
```