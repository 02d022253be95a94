from __future__ import annotations

from typing import Sequence

from guci.errors import GuciArityError
from guci.evaluation.actions import commit
from guci.evaluation.evaluator import evaluate
from guci.evaluation.term_utils import as_identifier
from guci.types.context import EvaluationContext
from guci.types.result import EvaluationSuccess


def eval_form(ctx: EvaluationContext, tail: Sequence) -> EvaluationSuccess:
    """
    (eval expr name1 value1 name2 value2 ...)
    Evaluate `expr` in a fresh frame below `ctx` holding the given bindings.
    Anything `expr` binds stays in that frame and is gone when eval returns.
    """
    if len(tail) % 2 != 1:
        raise GuciArityError("mismatched number of local variables and values")
    expr, bindings = tail[0], tail[1:]
    with ctx.child() as local:
        for i in range(0, len(bindings), 2):
            local.set_value(as_identifier(bindings[i]), bindings[i + 1])
        result = evaluate(local, expr)
        commit(local, result.actions)
    return EvaluationSuccess(result.t)
