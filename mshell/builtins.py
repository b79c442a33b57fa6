"""The shell's built-in commands: echo, cd, pwd, export, unset, env and exit."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import Callable, Optional, TextIO

from mshell.environment import Environment, validate_export_name
from mshell.textutil import is_alnum, is_alpha

_WHITESPACE = " \t\n\v\f\r"
_LONG_MAX_DIGITS = "9223372036854775807"
_LONG_MIN_DIGITS = "9223372036854775808"


@dataclass
class Command:
    """A simple command: its words and whether it runs inside a pipeline."""

    args: list[str] = field(default_factory=list)
    in_pipeline: bool = False

    @property
    def argc(self) -> int:
        """Number of words, the command name included."""
        return len(self.args)


@dataclass
class Shell:
    """State that built-ins read and change."""

    env: Environment = field(default_factory=Environment)
    exit_status: int = 0
    should_exit: bool = False
    stdout: Optional[TextIO] = None
    stderr: Optional[TextIO] = None

    @property
    def out(self) -> TextIO:
        return self.stdout if self.stdout is not None else sys.stdout

    @property
    def err(self) -> TextIO:
        return self.stderr if self.stderr is not None else sys.stderr


def is_valid_unset_name(text: Optional[str]) -> bool:
    """True if the part of ``text`` before any ``=`` is a valid name."""
    if not text:
        return False
    if not (is_alpha(text[0]) or text[0] == "_"):
        return False
    name = text[1:].partition("=")[0]
    return all(is_alnum(ch) or ch == "_" for ch in name)


def _split_sign(text: str) -> tuple[int, str]:
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    return sign, rest


def is_valid_number(text: str) -> bool:
    """True if ``text`` is an optionally signed integer, padded by whitespace."""
    _, rest = _split_sign(text)
    if not rest:
        return False
    for index, ch in enumerate(rest):
        if "0" <= ch <= "9":
            continue
        if ch in _WHITESPACE:
            return rest[index:].lstrip(_WHITESPACE) == ""
        return False
    return True


def _leading_digits(text: str) -> str:
    digits = []
    for ch in text:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    return "".join(digits)


def check_overflow(text: str) -> bool:
    """True if the number in ``text`` does not fit in a signed 64-bit long."""
    sign, rest = _split_sign(text)
    digits = _leading_digits(rest.lstrip("0"))
    if len(digits) > 19:
        return True
    if len(digits) < 19:
        return False
    limit = _LONG_MAX_DIGITS if sign == 1 else _LONG_MIN_DIGITS
    return digits > limit


def parse_exit_code(text: str) -> int:
    """Parse a numeric ``exit`` argument and reduce it to a status 0-255."""
    sign, rest = _split_sign(text)
    digits = _leading_digits(rest)
    value = sign * int(digits) if digits else 0
    return value % 256


def _is_n_option(arg: str) -> bool:
    return len(arg) > 1 and arg[0] == "-" and set(arg[1:]) == {"n"}


def builtin_echo(command: Command, shell: Shell) -> int:
    """Print the arguments separated by spaces; ``-n`` drops the newline."""
    words = command.args[1:]
    newline = True
    while words and _is_n_option(words[0]):
        newline = False
        words = words[1:]
    shell.out.write(" ".join(words))
    if newline:
        shell.out.write("\n")
    return 0


def _cd_error(shell: Shell, arg: Optional[str], message: str) -> int:
    prefix = f"{arg}: " if arg else ""
    shell.err.write(f"minishell: cd: {prefix}{message}\n")
    return 1


def _current_dir() -> Optional[str]:
    try:
        return os.getcwd()
    except OSError:
        return None


def builtin_cd(command: Command, shell: Shell) -> int:
    """Change directory, to HOME without an argument, and update PWD/OLDPWD."""
    if command.argc == 1:
        target = shell.env.get("HOME")
        if target is None:
            return _cd_error(shell, None, "HOME not set")
    else:
        target = command.args[1]
    if not target:
        return 0
    old_pwd = _current_dir()
    try:
        os.chdir(target)
    except OSError as exc:
        return _cd_error(shell, target, exc.strerror or str(exc))
    new_pwd = _current_dir()
    if new_pwd is None:
        return 0
    if old_pwd is not None:
        shell.env.set("OLDPWD", old_pwd)
    shell.env.set("PWD", new_pwd)
    return 0


def builtin_pwd(command: Command, shell: Shell) -> int:
    """Print the current working directory."""
    try:
        cwd = os.getcwd()
    except OSError as exc:
        shell.err.write(f"minishell: pwd: {exc.strerror or exc}\n")
        return 1
    shell.out.write(f"{cwd}\n")
    return 0


def builtin_export(command: Command, shell: Shell) -> int:
    """Set variables from ``NAME=VALUE`` arguments, or list them all."""
    if command.argc == 1:
        for line in shell.env.export_lines():
            shell.out.write(f"{line}\n")
        return 0
    status = 0
    for arg in command.args[1:]:
        if not validate_export_name(arg):
            shell.err.write(f"minishell: export: `{arg}': not a valid identifier\n")
            status = 1
            continue
        if "=" not in arg:
            continue
        if not shell.env.update_entry(arg):
            shell.env.add_entry(arg)
    return status


def builtin_unset(command: Command, shell: Shell) -> int:
    """Remove each validly named variable; invalid names are ignored."""
    for arg in command.args[1:]:
        if is_valid_unset_name(arg):
            shell.env.remove(arg)
    return 0


def builtin_env(command: Command, shell: Shell) -> int:
    """Print every variable that carries a value."""
    if command.argc > 1:
        shell.err.write("env: No such file or directory\n")
        return 0
    for line in shell.env.env_lines():
        shell.out.write(f"{line}\n")
    return 0


def builtin_exit(command: Command, shell: Shell) -> int:
    """Ask the shell to exit and return the status it should exit with."""
    if not command.in_pipeline:
        shell.err.write("exit\n")
    if command.argc == 1:
        shell.should_exit = True
        return shell.exit_status
    arg = command.args[1]
    if not is_valid_number(arg) or check_overflow(arg):
        shell.err.write(f"minishell: exit: {arg}: numeric argument required\n")
        shell.should_exit = True
        return 2
    if command.argc > 2:
        shell.err.write("minishell: exit: too many arguments\n")
        return 1
    shell.should_exit = True
    return parse_exit_code(arg)


_BUILTINS: dict[str, Callable[[Command, Shell], int]] = {
    "echo": builtin_echo,
    "cd": builtin_cd,
    "pwd": builtin_pwd,
    "export": builtin_export,
    "unset": builtin_unset,
    "env": builtin_env,
    "exit": builtin_exit,
}


def is_builtin(command: Optional[Command]) -> bool:
    """True if the command names one of the built-ins."""
    return bool(command and command.args and command.args[0] in _BUILTINS)


def execute_builtin(command: Command, shell: Shell) -> int:
    """Run the built-in the command names; 1 if it names none."""
    handler = _BUILTINS.get(command.args[0]) if command.args else None
    if handler is None:
        return 1
    return handler(command, shell)