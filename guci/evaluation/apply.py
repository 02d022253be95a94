"""Application engine for Guci.

Every call goes through `apply`, which checks the callee's arity contract
before running it. Arguments are passed as raw, unevaluated terms.
"""

from __future__ import annotations

from typing import Sequence

from guci.errors import GuciArityError, GuciNotAFunction, GuciUndefinedFunction
from guci.types.context import EvaluationContext
from guci.types.function import Arity, BuiltInFunction, Function, UserDefinedFunction
from guci.types.result import EvaluationSuccess


def apply(fn: Function, ctx: EvaluationContext, args: Sequence) -> EvaluationSuccess:
    """Apply a built-in or user defined function.

    - For BuiltInFunction, reject a wrong argument count without calling it.
    - UserDefinedFunction has no body yet, so applying one is an error.
    """
    match fn:
        case BuiltInFunction():
            if not fn.accepts_argument_number(len(args)):
                raise GuciArityError(
                    f"arity mismatch: {fn.name} expects {Arity.describe(fn.arity)}, got {len(args)}"
                )
            return fn.apply(ctx, args)
        case UserDefinedFunction():
            raise GuciUndefinedFunction("not defined")
    raise GuciNotAFunction(f"Cannot apply non-function {fn!r}")
