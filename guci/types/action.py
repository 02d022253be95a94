"""Deferred context mutations.

Evaluation never writes to a context directly. A special form that wants to
bind a name returns an Action alongside its value, and the evaluator commits
the actions once the enclosing call has succeeded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from guci import Term


@dataclass(frozen=True, slots=True)
class SetValue:
    """Bind `id` to `value` in the frame the action is committed to."""
    id: str
    value: "Term"


Action = Union[SetValue]
