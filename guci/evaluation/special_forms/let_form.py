from __future__ import annotations

from typing import Sequence

from guci.evaluation.term_utils import as_identifier
from guci.types.action import SetValue
from guci.types.context import EvaluationContext
from guci.types.result import EvaluationSuccess


def let_form(ctx: EvaluationContext, tail: Sequence) -> EvaluationSuccess:
    """
    (let name value)
    The name is read as written and the value is bound as written, without
    evaluating either. The binding is returned as an action and lands in the
    caller's frame once the call succeeds.
    """
    name = as_identifier(tail[0])
    value = tail[1]
    return EvaluationSuccess(value, [SetValue(name.id, value)])
