# mshell

The building blocks of a small POSIX-style shell: the builtin commands
(`echo`, `cd`, `pwd`, `export`, `unset`, `env`, `exit`), an environment table
that behaves the way those builtins expect, and a set of C-style string and
character helpers.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `mshell.textutil`

String and character helpers with C library semantics:

- `atoi(text)`: skips leading whitespace, takes one optional sign and the
  digits that follow; clamps to the 64-bit long range and then narrows the
  result to a signed 32-bit integer.
- `itoa(n)`: the decimal text of `n`.
- `split(text, sep)`: splits on a single character and drops empty words.
- `strtrim(text, charset)`: strips the characters of `charset` from both ends.
- `substr(text, start, length)`: at most `length` characters from `start`;
  raises `ValueError` for negative arguments.
- `strnstr(haystack, needle, length)`: the index of `needle` within the first
  `length` characters, or `None`; an empty needle matches at 0.
- `strncmp(s1, s2, n)`: compares at most `n` characters; the sign of the
  result gives the order.
- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
  `to_lower`: take a one-character string or an integer code; the case
  functions return the same kind they were given.

### `mshell.environment`

`Environment` is an ordered list of entries, normally `NAME=VALUE`. It can be
iterated and has a length, and offers:

- `get(name)` and `index_of(name)`: the value or position of a variable, or
  `None` when it is not set.
- `set(name, value)`: replaces the entry in place or appends it.
- `update_entry(arg)`: replaces the entry for the name in a `NAME=VALUE`
  string; returns whether one was replaced. `add_entry(arg)` appends.
- `remove(name)`: removes the first `NAME=...` or bare `NAME` entry; text
  after `=` in `name` is ignored.
- `env_lines()`: the entries that carry a value, in order.
- `export_lines()`: every entry, sorted, as `declare -x NAME="value"`
  (or `declare -x NAME` when there is no value).

`is_valid_identifier(text)` checks a whole variable name;
`validate_export_name(text)` checks the part before any `=`.

### `mshell.builtins`

- `Command(args, in_pipeline=False)`: the words of a command; `argc` counts
  them.
- `Shell(env, exit_status=0, should_exit=False, stdout=None, stderr=None)`:
  the state builtins read and change. Output goes to `stdout`/`stderr` when
  given, otherwise to `sys.stdout`/`sys.stderr`.
- `builtin_echo`, `builtin_cd`, `builtin_pwd`, `builtin_export`,
  `builtin_unset`, `builtin_env`, `builtin_exit`: each called as
  `builtin_<name>(command, shell)` and returning an exit status.
- `is_builtin(command)` and `execute_builtin(command, shell)` dispatch by the
  command name; `execute_builtin` returns 1 for a name that is not a builtin.
- `is_valid_unset_name`, `is_valid_number`, `check_overflow` and
  `parse_exit_code` are the argument checks `unset` and `exit` use.

Behaviour worth knowing:

- `cd` with no argument goes to `HOME` (error if it is unset), changes the
  working directory of the running process, and updates `PWD` and `OLDPWD`.
- `export` with no arguments prints `export_lines()`; invalid names are
  reported and give status 1.
- `unset` silently skips invalid names and always returns 0.
- `env` given any argument prints an error and returns 0.
- `exit` writes `exit` to stderr unless the command is in a pipeline. A
  non-numeric or out-of-range argument gives status 2, too many arguments
  give status 1 without exiting, and a valid number is reduced modulo 256.

## Example

```python
from mshell.builtins import Command, Shell, execute_builtin
from mshell.environment import Environment

shell = Shell(Environment(["HOME=/tmp", "PATH=/usr/bin"]))
execute_builtin(Command(["export", "GREETING=hello"]), shell)
execute_builtin(Command(["env"]), shell)

status = execute_builtin(Command(["exit", "300"]), shell)
assert status == 44 and shell.should_exit
```

`exit` does not end the process: it sets `shell.should_exit` and returns the
status, and the caller decides what to do with it.

## What this package does not do

There is no interactive shell here and no command to run. The package does
not read input lines, tokenize, parse, expand variables or quotes, handle
redirections, here-documents, pipelines or signals, and it does not look up
or start external programs. It provides the builtins, the environment table
and the string helpers for a caller that does those things.