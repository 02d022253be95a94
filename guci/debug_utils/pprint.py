"""Rendering of terms for the REPL.

`show` produces the canonical one-line form:

    Nil -> NIL, Boolean -> #t / #f, Number -> decimal, String -> quoted,
    Identifier -> bare text, List -> [a b c]

`pprint_term` is the same rendering with optional ANSI colours and wrapping of
long lists, for interactive use.
"""

from __future__ import annotations

from typing import Optional

from guci.types.context import EvaluationContext
from guci.types.identifier import Identifier
from guci.types.nil import NilType
from guci.types.terms import Boolean, Number, String, TermList, quote_string

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_IDENTIFIER = "\033[94m"
COLOR_FUNCTION = "\033[95m"
COLOR_NUMBER = "\033[92m"
COLOR_STRING = "\033[93m"
COLOR_LITERAL = "\033[90m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_line_length": 80,
    "color": True,
}


def show(term) -> str:
    """Canonical rendering of a term."""
    match term:
        case NilType():
            return "NIL"
        case Boolean(value=b):
            return "#t" if b else "#f"
        case Number(value=n):
            return str(n)
        case String(value=s):
            return quote_string(s)
        case Identifier():
            return term.id
        case TermList():
            return "[" + " ".join(show(t) for t in term) + "]"
    raise TypeError(f"Not a term: {term!r}")


# ----------------- Colorize utility -----------------
def colorize(term, ctx: Optional[EvaluationContext] = None, options: dict = DEFAULT_OPTIONS) -> str:
    text = show(term)
    if not options.get("color", True):
        return text
    match term:
        case Identifier():
            if ctx is not None and ctx.find_function(term) is not None:
                return f"{COLOR_FUNCTION}{text}{RESET}"
            return f"{COLOR_IDENTIFIER}{text}{RESET}"
        case Number():
            return f"{COLOR_NUMBER}{text}{RESET}"
        case String():
            return f"{COLOR_STRING}{text}{RESET}"
        case NilType() | Boolean():
            return f"{COLOR_LITERAL}{text}{RESET}"
    return text


# ----------------- Pretty printer -----------------
def pprint_term(
    term,
    ctx: Optional[EvaluationContext] = None,
    indent: int = 0,
    options: dict = DEFAULT_OPTIONS,
) -> str:
    if not isinstance(term, TermList):
        return colorize(term, ctx, options)
    if term.empty():
        return "[]"

    parts = [pprint_term(t, ctx, indent + 1, options) for t in term]
    single_line = "[" + " ".join(parts) + "]"
    # measure without escape codes
    if len(show(term)) + indent * 2 <= options.get("max_line_length", 80):
        return single_line

    aligned_lines = ["[" + parts[0]]
    for part in parts[1:]:
        aligned_lines.append("  " * (indent + 1) + part)
    aligned_lines[-1] += "]"
    return "\n".join(aligned_lines)
