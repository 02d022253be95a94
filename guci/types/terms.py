"""Immutable term variants for Guci.

Every parsed expression and every runtime value is one of: Nil, Boolean,
Number, String, Identifier or TermList. Terms compare structurally and are
hashable, so they can be used as dictionary keys and freely shared; a copy of
a term is never needed because nothing mutates one after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

_QUOTED = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t"}


def quote_string(value: str) -> str:
    """Render `value` as a string literal the reader accepts."""
    return '"' + "".join(_QUOTED.get(c, c) for c in value) + '"'


@dataclass(frozen=True, slots=True)
class Boolean:
    value: bool = False

    def __str__(self) -> str:
        return "#t" if self.value else "#f"


@dataclass(frozen=True, slots=True)
class Number:
    value: int

    def __post_init__(self):
        # bool is a subclass of int; keep the two variants apart
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Number expects an int, got {self.value!r}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class String:
    value: str

    def __str__(self) -> str:
        return quote_string(self.value)


class TermList:
    """Ordered sequence of terms. Represents both code (a call) and data."""

    __slots__ = ("_terms",)

    def __init__(self, terms: Iterable = ()):
        object.__setattr__(self, "_terms", tuple(terms))

    def __setattr__(self, key, value):
        raise AttributeError("TermList is immutable")

    def append(self, term) -> TermList:
        """Return a new list with `term` added at the end."""
        return TermList(self._terms + (term,))

    @property
    def head(self):
        return self._terms[0]

    @property
    def tail(self) -> tuple:
        return self._terms[1:]

    @property
    def terms(self) -> tuple:
        return self._terms

    def empty(self) -> bool:
        return not self._terms

    def __len__(self) -> int:
        return len(self._terms)

    def __getitem__(self, index):
        return self._terms[index]

    def __iter__(self) -> Iterator:
        return iter(self._terms)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, TermList) and self._terms == other._terms

    def __hash__(self) -> int:
        return hash(("TermList", self._terms))

    def __repr__(self) -> str:
        return f"TermList({list(self._terms)!r})"

    def __str__(self) -> str:
        return "[" + " ".join(str(t) for t in self._terms) + "]"
