"""Registry of special forms for the Guci evaluator.

Special forms are built-in functions that read their arguments as syntax
(names, unevaluated expressions) rather than evaluating them up front. They
are installed in the function table next to the arithmetic builtins.
"""

from guci.types.function import Arity, BuiltInFunction
from guci.evaluation.special_forms.let_form import let_form
from guci.evaluation.special_forms.eval_form import eval_form
from guci.evaluation.special_forms.quit_form import TerminationFlag, make_quit_form

SPECIAL_FORMS = {
    "let": BuiltInFunction(2, let_form, "let"),
    "eval": BuiltInFunction(Arity.ANY_POSITIVE, eval_form, "eval"),
}


def special_forms(flag: TerminationFlag) -> dict[str, BuiltInFunction]:
    """All special forms, with `quit` wired to `flag`."""
    forms = dict(SPECIAL_FORMS)
    forms["quit"] = BuiltInFunction(0, make_quit_form(flag), "quit")
    return forms
