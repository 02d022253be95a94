"""Commit step for deferred context mutations.

Actions produced while evaluating a call are applied here, and only here,
once the call has succeeded. A batch is validated before anything is written,
so a failing batch leaves the context untouched.
"""

from __future__ import annotations

import logging
from typing import Iterable

from guci.errors import GuciDuplicateBinding
from guci.types.action import Action, SetValue
from guci.types.context import EvaluationContext

logger = logging.getLogger(__name__)


def _check(context: EvaluationContext, actions: list[Action]) -> None:
    pending: set[str] = set()
    for action in actions:
        match action:
            case SetValue(id=name):
                if name in context.values or name in pending:
                    raise GuciDuplicateBinding("value already exists")
                pending.add(name)
            case _:
                raise TypeError(f"Unknown action {action!r}")


def commit(context: EvaluationContext, actions: Iterable[Action]) -> None:
    """Apply `actions` in order to `context` (this frame, not its parents)."""
    actions = list(actions)
    if not actions:
        return
    _check(context, actions)
    for action in actions:
        match action:
            case SetValue(id=name, value=value):
                logger.debug("commit: %s <- %s (frame %d)", name, value, context.handle)
                context.set_value(name, value)
