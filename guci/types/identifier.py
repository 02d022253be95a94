from __future__ import annotations
import sys


class Identifier:
    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        object.__setattr__(self, "id", sys.intern(name))

    def __setattr__(self, key, value):
        raise AttributeError("Identifier is immutable")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Identifier) and self.id == other.id

    def __hash__(self) -> int:
        return hash(("Identifier", self.id))

    def __repr__(self):
        return f"Identifier({self.id!r})"

    def __str__(self):
        return self.id

    @property
    def value(self) -> str:
        return self.id
