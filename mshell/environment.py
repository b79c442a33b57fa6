"""The shell's environment: an ordered list of ``NAME=VALUE`` entries."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from mshell.textutil import is_alnum, is_alpha


def _valid_name(name: str) -> bool:
    if not name:
        return False
    if not (is_alpha(name[0]) or name[0] == "_"):
        return False
    return all(is_alnum(ch) or ch == "_" for ch in name[1:])


def is_valid_identifier(text: Optional[str]) -> bool:
    """True if ``text`` as a whole is a valid variable name."""
    return bool(text) and _valid_name(text)


def validate_export_name(text: Optional[str]) -> bool:
    """True if the part of ``text`` before any ``=`` is a valid variable name."""
    if not text or text[0] == "=":
        return False
    return _valid_name(text.partition("=")[0])


class Environment:
    """Ordered environment entries, each normally of the form ``NAME=VALUE``."""

    def __init__(self, entries: Optional[Iterable[str]] = None) -> None:
        self._entries: list[str] = list(entries or ())

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Environment({self._entries!r})"

    def index_of(self, name: str) -> Optional[int]:
        """Return the position of the entry that assigns ``name``, or None."""
        prefix = f"{name}="
        return next(
            (i for i, entry in enumerate(self._entries) if entry.startswith(prefix)),
            None,
        )

    def get(self, name: str) -> Optional[str]:
        """Return the value assigned to ``name``, or None if it is not set."""
        index = self.index_of(name)
        if index is None:
            return None
        return self._entries[index][len(name) + 1:]

    def set(self, name: str, value: str) -> None:
        """Assign ``value`` to ``name``, replacing it in place or appending it."""
        if name is None or value is None:
            raise ValueError("name and value are required")
        entry = f"{name}={value}"
        index = self.index_of(name)
        if index is None:
            self._entries.append(entry)
        else:
            self._entries[index] = entry

    def update_entry(self, arg: str) -> bool:
        """Replace the entry for the name in ``arg`` (``NAME=VALUE``) with ``arg``.

        Returns True if an existing entry was replaced, False otherwise.
        """
        name, eq, _ = arg.partition("=")
        if not eq or not name:
            return False
        index = self.index_of(name)
        if index is None:
            return False
        self._entries[index] = arg
        return True

    def add_entry(self, arg: str) -> None:
        """Append ``arg`` as a new entry."""
        self._entries.append(arg)

    def remove(self, name: str) -> bool:
        """Remove the first entry for ``name``; text after ``=`` is ignored.

        Matches both ``NAME=...`` entries and bare ``NAME`` entries.  Returns
        True if an entry was removed.
        """
        key = name.partition("=")[0]
        for i, entry in enumerate(self._entries):
            if entry == key or entry.startswith(f"{key}="):
                del self._entries[i]
                return True
        return False

    def env_lines(self) -> list[str]:
        """Entries that carry a value, in order, as ``env`` prints them."""
        return [entry for entry in self._entries if "=" in entry]

    def export_lines(self) -> list[str]:
        """Every entry, sorted, in the ``declare -x`` form ``export`` prints."""
        lines = []
        for entry in sorted(self._entries):
            name, eq, value = entry.partition("=")
            if eq:
                lines.append(f'declare -x {name}="{value}"')
            else:
                lines.append(f"declare -x {entry}")
        return lines