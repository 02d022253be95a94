"""Callable values bound in a context's function table."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Sequence, Union

from guci.types.result import EvaluationSuccess

if TYPE_CHECKING:
    from guci import Term
    from guci.types.context import EvaluationContext


class Arity:
    """Arity contracts understood by BuiltInFunction.

    A non-negative int means exactly that many arguments.
    """
    ANY = -1
    ANY_POSITIVE = -2

    @staticmethod
    def describe(arity: int) -> str:
        if arity == Arity.ANY:
            return "any number of arguments"
        if arity == Arity.ANY_POSITIVE:
            return "at least 1 argument"
        return f"exactly {arity} argument{'s' if arity != 1 else ''}"


BuiltInImpl = Callable[["EvaluationContext", Sequence["Term"]], EvaluationSuccess]


class BuiltInFunction:
    """A native function with an arity contract.

    The implementation receives the calling context and the raw, unevaluated
    argument terms; it is responsible for evaluating whatever it needs.
    """

    __slots__ = ("arity", "fun", "name")

    def __init__(self, arity: int, fun: BuiltInImpl, name: str | None = None):
        if arity < Arity.ANY_POSITIVE:
            raise ValueError(f"Invalid arity {arity}")
        self.arity = arity
        self.fun = fun
        self.name = name or getattr(fun, "__name__", "builtin")

    def accepts_argument_number(self, arg_num: int) -> bool:
        if self.arity == Arity.ANY:
            return True
        if self.arity == Arity.ANY_POSITIVE:
            return arg_num != 0
        return self.arity == arg_num

    def apply(self, ctx: EvaluationContext, args: Sequence[Term]) -> EvaluationSuccess:
        return self.fun(ctx, args)

    def __repr__(self) -> str:
        return f"<builtin {self.name} ({Arity.describe(self.arity)})>"


class UserDefinedFunction:
    """Placeholder for functions defined in Guci code.

    There is no way to create one from the language yet, and applying one is
    an evaluation error.
    """

    __slots__ = ("name",)

    def __init__(self, name: str | None = None):
        self.name = name

    def __repr__(self) -> str:
        return f"<user function {self.name or '?'}>"


Function = Union[BuiltInFunction, UserDefinedFunction]
