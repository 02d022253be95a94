from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable

from guci.types.action import Action

if TYPE_CHECKING:
    from guci import Term


@dataclass(frozen=True, slots=True)
class PartialParse:
    """A parsed term and the input that follows it."""
    t: "Term"
    rest: str


@dataclass(slots=True)
class EvaluationSuccess:
    """A value plus the actions still waiting to be committed."""
    t: "Term"
    actions: list[Action] = field(default_factory=list)

    def merge_action_from(self, other: Iterable[Action]) -> None:
        self.actions.extend(other)
