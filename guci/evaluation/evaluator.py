"""Core evaluator for the Guci interpreter.

Atoms evaluate to themselves, identifiers to their bound value (or to
themselves when unbound), and a non-empty list is a call: its head names a
function and its tail is handed over unevaluated. Actions returned by a call
are committed to the context the call was evaluated in before its value is
passed on.
"""

from __future__ import annotations

import logging

from guci.errors import GuciEvalError, GuciNotAFunction, GuciUnboundFunction
from guci.evaluation.actions import commit
from guci.evaluation.apply import apply
from guci.types.context import EvaluationContext
from guci.types.identifier import Identifier
from guci.types.nil import Nil, NilType
from guci.types.result import EvaluationSuccess
from guci.types.terms import Boolean, Number, String, TermList

logger = logging.getLogger(__name__)


def evaluate(context: EvaluationContext, term) -> EvaluationSuccess:
    match term:
        case TermList():
            return evaluate_list(context, term)
        case Identifier():
            value = context.find_value(term)
            return EvaluationSuccess(term if value is None else value)
        case NilType() | Boolean() | Number() | String():
            return EvaluationSuccess(term)
    raise GuciEvalError(f"Cannot evaluate {term!r}")


def evaluate_list(context: EvaluationContext, term: TermList) -> EvaluationSuccess:
    if term.empty():
        return EvaluationSuccess(Nil)

    head = term.head
    if not isinstance(head, Identifier):
        raise GuciNotAFunction("not a function")

    fn = context.find_function(head)
    if fn is None:
        raise GuciUnboundFunction("function not found")

    logger.debug("call %s with %d argument(s) in frame %d", head, len(term.tail), context.handle)
    result = apply(fn, context, term.tail)
    commit(context, result.actions)
    return EvaluationSuccess(result.t)
