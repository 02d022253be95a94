"""Global context construction.

The global frame holds every builtin function: arithmetic (+ - *) and the
special forms (let eval quit). It holds no values.
"""
from __future__ import annotations

from guci.builtin.arithmetic import add, mul, sub
from guci.evaluation.special_forms import special_forms
from guci.evaluation.special_forms.quit_form import TerminationFlag
from guci.types.context import EvaluationContext
from guci.types.function import Arity, BuiltInFunction

ARITHMETIC = {
    "+": BuiltInFunction(Arity.ANY, add, "+"),
    "-": BuiltInFunction(Arity.ANY_POSITIVE, sub, "-"),
    "*": BuiltInFunction(Arity.ANY, mul, "*"),
}


def register(ctx: EvaluationContext, flag: TerminationFlag) -> None:
    """Register all builtin functions into the given context's frame."""
    for name, fn in ARITHMETIC.items():
        ctx.set_function(name, fn)
    for name, fn in special_forms(flag).items():
        ctx.set_function(name, fn)


def make_global_context(flag: TerminationFlag | None = None) -> EvaluationContext:
    """A fresh root context with the builtin table installed."""
    ctx = EvaluationContext()
    register(ctx, flag if flag is not None else TerminationFlag())
    return ctx
