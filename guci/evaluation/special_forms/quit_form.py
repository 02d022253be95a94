from __future__ import annotations

from typing import Callable, Sequence

from guci.types.context import EvaluationContext
from guci.types.nil import Nil
from guci.types.result import EvaluationSuccess


class TerminationFlag:
    """Set by `(quit)`; the REPL checks it between inputs."""

    __slots__ = ("requested",)

    def __init__(self):
        self.requested = False

    def request(self) -> None:
        self.requested = True

    def reset(self) -> None:
        self.requested = False

    def __bool__(self) -> bool:
        return self.requested

    def __repr__(self) -> str:
        return f"TerminationFlag(requested={self.requested})"


def make_quit_form(flag: TerminationFlag) -> Callable[[EvaluationContext, Sequence], EvaluationSuccess]:
    def quit_form(ctx: EvaluationContext, tail: Sequence) -> EvaluationSuccess:
        flag.request()
        return EvaluationSuccess(Nil)

    return quit_form
