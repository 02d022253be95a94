"""
  Guci Reader

Builds the term parsers out of the combinators in guci.reader.combinators.

    - numbers      -> Number      (optional '-', decimal digits)
    - strings      -> String      ("..." with \\n \\t \\\\ \\" escapes)
    - #t / #f      -> Boolean
    - NIL          -> Nil
    - identifiers  -> Identifier
    - ( ... )      -> TermList    (elements may be nested lists)

Atoms are tried in that order, so "-1" is a number and "-x" an identifier.
"""

from __future__ import annotations

import logging

from guci import config
from guci.errors import GuciOverflowParseError, GuciParseError
from guci.reader.combinators import (
    alternative,
    is_whitespace,
    kleene_star,
    skip_one_of,
    skip_whitespace,
)
from guci.types.identifier import Identifier
from guci.types.nil import Nil
from guci.types.result import PartialParse
from guci.types.terms import Boolean, Number, String, TermList

logger = logging.getLogger(__name__)

DECIMAL_DIGITS = "0123456789"
IDENTIFIER_SYMBOLS = "_+-*/%^@?!"

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "\\": "\\",
    '"': '"',
}

LITERALS = (
    ("#t", Boolean(True)),
    ("#f", Boolean(False)),
    ("NIL", Nil),
)


def is_alpha(c: str) -> bool:
    return ("a" <= c <= "z") or ("A" <= c <= "Z")


def is_decimal(c: str) -> bool:
    return c != "" and c in DECIMAL_DIGITS


def valid_begin(c: str) -> bool:
    return c != "" and (is_alpha(c) or c in IDENTIFIER_SYMBOLS)


def valid_rest(c: str) -> bool:
    return valid_begin(c) or is_decimal(c)


def parse_number(untrimmed: str) -> PartialParse:
    source = skip_whitespace(untrimmed).rest

    negative = source[:1] == "-"
    idx = 1 if negative else 0

    if not is_decimal(source[idx:idx + 1]):
        raise GuciParseError("not a number", rest=source)

    acc = 0
    while is_decimal(source[idx:idx + 1]):
        acc = 10 * acc + (ord(source[idx]) - ord("0"))
        idx += 1

    value = -acc if negative else acc
    low, high = config.get_int_range()
    if not low <= value <= high:
        raise GuciOverflowParseError("number literal out of range", rest=source[idx:])

    return PartialParse(Number(value), source[idx:])


def parse_identifier(untrimmed: str) -> PartialParse:
    source = skip_whitespace(untrimmed).rest

    if not valid_begin(source[:1]):
        raise GuciParseError("invalid identifier", rest=source)

    # cannot begin in the same way as a number
    if source[0] == "-" and is_decimal(source[1:2]):
        raise GuciParseError("identifier cannot begin like a number", rest=source)

    pos = 1
    while valid_rest(source[pos:pos + 1]):
        pos += 1

    return PartialParse(Identifier(source[:pos]), source[pos:])


def parse_string(untrimmed: str) -> PartialParse:
    source = skip_whitespace(untrimmed).rest
    opening = skip_one_of('"')
    try:
        rest = opening(source).rest
    except GuciParseError:
        raise GuciParseError("string should begin with '\"'", rest=source) from None

    chars: list[str] = []
    pos = 0
    while pos < len(rest):
        c = rest[pos]
        if c == '"':
            return PartialParse(String("".join(chars)), rest[pos + 1:])
        if c == "\\":
            escaped = rest[pos + 1:pos + 2]
            if escaped not in ESCAPES:
                raise GuciParseError(
                    f"invalid escape sequence '\\{escaped}'", rest=rest[pos:], fatal=True
                )
            chars.append(ESCAPES[escaped])
            pos += 2
            continue
        chars.append(c)
        pos += 1

    raise GuciParseError("unterminated string literal", rest="", fatal=True)


def parse_literal(untrimmed: str) -> PartialParse:
    source = skip_whitespace(untrimmed).rest
    for text, term in LITERALS:
        if source.startswith(text) and not valid_rest(source[len(text):len(text) + 1]):
            return PartialParse(term, source[len(text):])
    raise GuciParseError("not a literal", rest=source)


parse_atom = alternative(parse_number, parse_string, parse_literal, parse_identifier)


def _list_element(source: str) -> PartialParse:
    return alternative(parse_atom, parse_list)(source)


_list_elements = kleene_star(_list_element, lambda acc, t: acc.append(t), initial=TermList())


def parse_list(untrimmed: str) -> PartialParse:
    with_paren = skip_whitespace(untrimmed).rest
    try:
        rest = skip_one_of("(")(with_paren).rest
    except GuciParseError:
        raise GuciParseError("list should begin with '('", rest=with_paren) from None

    elements = _list_elements(rest)
    rest = skip_whitespace(elements.rest).rest

    try:
        end = skip_one_of(")")(rest)
    except GuciParseError:
        raise GuciParseError(f"list should end with ')'; rest is: {rest}", rest=rest) from None

    return PartialParse(elements.t, end.rest)


def parse_term(source: str) -> PartialParse:
    return alternative(parse_atom, parse_list)(source)


def parse(source: str):
    """Parse exactly one term; anything but whitespace after it is an error."""
    try:
        result = parse_term(source)
    except GuciParseError as e:
        logger.debug("parse failed: %s (input %r)", e.message, source)
        raise
    if not all(is_whitespace(c) for c in result.rest):
        logger.debug("incomplete parse, trailing input %r", result.rest)
        raise GuciParseError("incomplete parse", rest=result.rest)
    return result.t


__all__ = [
    "parse",
    "parse_atom",
    "parse_identifier",
    "parse_list",
    "parse_literal",
    "parse_number",
    "parse_string",
    "parse_term",
]
