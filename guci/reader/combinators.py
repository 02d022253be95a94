"""
  Parser combinators

A parser is a function from the remaining input to a PartialParse (the term it
recognised plus the input after it). Parsers never mutate their input and
signal failure by raising GuciParseError, which the combinators below catch to
backtrack. Errors marked fatal (a malformed literal that cannot be
anything else) are never backtracked over. No other exception is caught.

    - skip_one_of(chars)   one character from `chars`, yields Nil
    - skip_whitespace      zero or more of " \\t\\n", always succeeds
    - kleene_star(p, op)   p repeated until it fails, folding with op
    - alternative(p, ...)  first parser that succeeds, in listed order
"""

from __future__ import annotations

from typing import Callable

from guci.errors import GuciParseError
from guci.types.nil import Nil
from guci.types.result import PartialParse

Parser = Callable[[str], PartialParse]
JoinOp = Callable[..., object]

WHITESPACE = " \t\n"


def is_whitespace(c: str) -> bool:
    return c != "" and c in WHITESPACE


def skip_one_of(chars: str) -> Parser:
    def parser(source: str) -> PartialParse:
        if source and source[0] in chars:
            return PartialParse(Nil, source[1:])
        raise GuciParseError("character mismatch", rest=source)

    parser.__name__ = f"skip_one_of({chars!r})"
    return parser


def kleene_star(p: Parser, op: JoinOp | None = None, initial=Nil) -> Parser:
    """Apply `p` until it fails. With `op`, fold each value into the result
    left to right starting from `initial`; without it the values are dropped.
    """

    def parser(source: str) -> PartialParse:
        ret = initial
        rest = source
        while True:
            try:
                result = p(rest)
            except GuciParseError as e:
                if e.fatal:
                    raise
                break
            if op is not None:
                ret = op(ret, result.t)
            # a match that consumed nothing would match forever
            if len(result.rest) >= len(rest):
                rest = result.rest
                break
            rest = result.rest
        return PartialParse(ret, rest)

    return parser


_skip_whitespace = kleene_star(skip_one_of(WHITESPACE))


def skip_whitespace(source: str) -> PartialParse:
    return _skip_whitespace(source)


def alternative(*parsers: Parser) -> Parser:
    """Try each parser in order and return the first success.

    When every alternative fails, the error from the one that got furthest
    into the input is re-raised, so diagnostics point at the real problem.
    If none got past the first significant character the error is generic.
    """

    def parser(source: str) -> PartialParse:
        failures: list[GuciParseError] = []
        for p in parsers:
            try:
                return p(source)
            except GuciParseError as e:
                if e.fatal:
                    raise
                failures.append(e)
        start = len(source.lstrip(WHITESPACE))
        progressed = [e for e in failures if e.rest is not None and len(e.rest) < start]
        if progressed:
            raise min(progressed, key=lambda e: len(e.rest))
        raise GuciParseError("none of the alternatives matched", rest=source)

    return parser
