"""Integer arithmetic builtins.

Each operator evaluates its operands left to right in the calling context and
folds them into an accumulator. Both sides of every step must be Numbers;
anything else (most often an unbound identifier, which evaluates to itself)
is a type error. Results outside the configured integer width overflow.
"""

from __future__ import annotations

import operator
from typing import Callable, Sequence

from guci import config
from guci.errors import GuciOverflowError, GuciTypeError
from guci.evaluation.evaluator import evaluate
from guci.types.context import EvaluationContext
from guci.types.result import EvaluationSuccess
from guci.types.terms import Number


def combine(op: Callable[[int, int], int], lhs, rhs) -> Number:
    """Apply `op` to two Number terms, checking types and range."""
    match lhs, rhs:
        case Number(value=a), Number(value=b):
            value = op(a, b)
        case _:
            raise GuciTypeError("unbound variables in arithmetic expression")
    low, high = config.get_int_range()
    if not low <= value <= high:
        raise GuciOverflowError("integer overflow in arithmetic expression")
    return Number(value)


def _fold(
    ctx: EvaluationContext,
    es: EvaluationSuccess,
    operands: Sequence,
    op: Callable[[int, int], int],
) -> EvaluationSuccess:
    for t in operands:
        t_eval = evaluate(ctx, t)
        es.merge_action_from(t_eval.actions)
        es.t = combine(op, es.t, t_eval.t)
    return es


def add(ctx: EvaluationContext, args: Sequence) -> EvaluationSuccess:
    """(+ a b ...) -> sum, 0 with no operands."""
    return _fold(ctx, EvaluationSuccess(Number(0)), args, operator.add)


def mul(ctx: EvaluationContext, args: Sequence) -> EvaluationSuccess:
    """(* a b ...) -> product, 1 with no operands."""
    return _fold(ctx, EvaluationSuccess(Number(1)), args, operator.mul)


def sub(ctx: EvaluationContext, args: Sequence) -> EvaluationSuccess:
    """(- a b ...) -> a minus the rest. A single operand is returned as is."""
    first = evaluate(ctx, args[0])
    es = EvaluationSuccess(first.t, list(first.actions))
    return _fold(ctx, es, args[1:], operator.sub)
