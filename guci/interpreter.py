from __future__ import annotations

import logging

from guci.builtin.env_builtin import register
from guci.debug_utils.pprint import show
from guci.errors import GuciError
from guci.evaluation.evaluator import evaluate
from guci.evaluation.special_forms.quit_form import TerminationFlag
from guci.reader.parser import parse
from guci.types.context import EvaluationContext

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Evaluates Guci expressions one input at a time against a global context.
    The global context and the termination flag live as long as the interpreter.
    """

    def __init__(self, flag: TerminationFlag | None = None):
        self.flag = flag if flag is not None else TerminationFlag()
        self.context = EvaluationContext()
        register(self.context, self.flag)

    @property
    def quit_requested(self) -> bool:
        return self.flag.requested

    def eval(self, code: str):
        """Parse and evaluate one expression, raising on failure."""
        term = parse(code)
        result = evaluate(self.context, term)
        return result.t

    def show_result(self, code: str) -> str:
        """Rendering of the result, or the error message on failure."""
        try:
            return show(self.eval(code))
        except GuciError as e:
            logger.debug("%s: %s", type(e).__name__, e.message)
            return e.message


#  Example use-age:
if __name__ == "__main__":
    interp = Interpreter()

    tests = [
        "(+ 1 2 3)            ;; -> 6",
        "(let x 5)",
        "(* x 2)",
        "(eval (+ y 1) y 10)",
        "y",
        "(- 10 2 3)",
        "(+ foo 1)",
    ]

    for code in tests:
        code = code.split(";;")[0]
        print(code, "=>", interp.show_result(code))
