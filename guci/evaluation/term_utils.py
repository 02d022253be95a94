from __future__ import annotations

from guci.errors import GuciInvalidIdentifier
from guci.types.context import EvaluationContext
from guci.types.identifier import Identifier
from guci.types.terms import TermList


def as_identifier(term) -> Identifier:
    """Read `term` as a name without evaluating it."""
    if not isinstance(term, Identifier):
        raise GuciInvalidIdentifier("term expected to be an identifier")
    return term


def has_unbound_variables(ctx: EvaluationContext, term) -> bool:
    """True if any identifier in `term` is bound to neither a value nor a function."""
    if isinstance(term, Identifier):
        return not ctx.is_bound(term)
    if isinstance(term, TermList):
        return any(has_unbound_variables(ctx, t) for t in term)
    return False
