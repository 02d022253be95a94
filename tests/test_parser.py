import pytest
from hypothesis import given, strategies as st

from guci.debug_utils.pprint import show
from guci.errors import GuciOverflowParseError, GuciParseError
from guci.reader.parser import (
    parse,
    parse_atom,
    parse_identifier,
    parse_list,
    parse_literal,
    parse_number,
    parse_string,
)
from guci.types import Boolean, Identifier, Nil, Number, String, TermList


@pytest.mark.parametrize(
    "source,expected,rest",
    [
        (" aa? 123", Identifier("aa?"), " 123"),
        (" + 123", Identifier("+"), " 123"),
        ("-x", Identifier("-x"), ""),
        ("-", Identifier("-"), ""),
        ("a1-b2", Identifier("a1-b2"), ""),
        ("_under)", Identifier("_under"), ")"),
    ],
)
def test_parse_identifier(source, expected, rest):
    p = parse_identifier(source)
    assert p.t == expected
    assert p.rest == rest


@pytest.mark.parametrize(
    "source,message",
    [
        ("1abc", "invalid identifier"),
        ("-1abc", "identifier cannot begin like a number"),
        ("", "invalid identifier"),
        ("(a)", "invalid identifier"),
    ],
)
def test_parse_identifier_failures(source, message):
    with pytest.raises(GuciParseError, match=message):
        parse_identifier(source)


@pytest.mark.parametrize(
    "source,expected,rest",
    [
        (" 123", Number(123), ""),
        (" -4321   ", Number(-4321), "   "),
        ("0", Number(0), ""),
        ("007", Number(7), ""),
        ("12abc", Number(12), "abc"),
    ],
)
def test_parse_number(source, expected, rest):
    p = parse_number(source)
    assert p.t == expected
    assert p.rest == rest


@pytest.mark.parametrize("source", ["abc", "-", "- 1", "", "   "])
def test_parse_number_failures(source):
    with pytest.raises(GuciParseError, match="not a number"):
        parse_number(source)


def test_parse_number_out_of_range():
    with pytest.raises(GuciOverflowParseError):
        parse_number(str(2 ** 63))
    assert parse_number(str(-(2 ** 63))).t == Number(-(2 ** 63))


def test_overflowing_literal_inside_a_list_is_reported():
    with pytest.raises(GuciOverflowParseError, match="out of range"):
        parse("(+ 1 99999999999999999999)")


@pytest.mark.parametrize(
    "source,expected,rest",
    [
        ("42 dups", Number(42), " dups"),
        ("dups 42", Identifier("dups"), " 42"),
        ('"hi" x', String("hi"), " x"),
        ("#t)", Boolean(True), ")"),
        ("#f", Boolean(False), ""),
        ("NIL ", Nil, " "),
        ("NILS", Identifier("NILS"), ""),
    ],
)
def test_parse_atom(source, expected, rest):
    p = parse_atom(source)
    assert p.t == expected
    assert p.rest == rest


def test_parse_literal_requires_a_boundary():
    with pytest.raises(GuciParseError):
        parse_literal("#tx")


def test_parse_string_without_escape_sequences():
    p = parse_string(' "abc"  x')
    assert p.t == String("abc")
    assert p.rest == "  x"


def test_parse_string_with_escape_sequences():
    p = parse_string(' "abc\\ndef"  x')
    assert p.t == String("abc\ndef")
    assert p.rest == "  x"


@pytest.mark.parametrize(
    "source,expected",
    [
        ('"a\\tb"', "a\tb"),
        ('"q\\"q"', 'q"q'),
        ('"back\\\\slash"', "back\\slash"),
        ('""', ""),
    ],
)
def test_parse_string_escapes(source, expected):
    assert parse_string(source).t == String(expected)


@pytest.mark.parametrize(
    "source,message",
    [
        ('"abc', "unterminated string literal"),
        ('"a\\qb"', "invalid escape sequence"),
        ('"a\\', "invalid escape sequence"),
        ("abc", "string should begin with"),
    ],
)
def test_parse_string_failures(source, message):
    with pytest.raises(GuciParseError, match=message):
        parse_string(source)


def test_parse_list_of_numbers():
    p = parse_list("(1 2 3)")
    assert p.rest == ""
    assert p.t == TermList([Number(1), Number(2), Number(3)])


def test_parse_list_with_identifier_at_first_pos():
    p = parse_list("(+ 1 2 3)")
    assert p.rest == ""
    assert p.t == TermList([Identifier("+"), Number(1), Number(2), Number(3)])


def test_parse_list_with_nested_list():
    p = parse_list("(+ (+ 3 4) 2)")
    assert p.rest == ""
    assert p.t == TermList([
        Identifier("+"),
        TermList([Identifier("+"), Number(3), Number(4)]),
        Number(2),
    ])


@pytest.mark.parametrize(
    "source,expected",
    [
        ("()", TermList()),
        ("( )", TermList()),
        ("(* )", TermList([Identifier("*")])),
        ("( a\n\tb )", TermList([Identifier("a"), Identifier("b")])),
        ("((a) (b))", TermList([TermList([Identifier("a")]), TermList([Identifier("b")])])),
        ('(let s "x y")', TermList([Identifier("let"), Identifier("s"), String("x y")])),
        ("(#t #f NIL)", TermList([Boolean(True), Boolean(False), Nil])),
    ],
)
def test_parse_list_shapes(source, expected):
    assert parse_list(source).t == expected


def test_parse_list_missing_open_paren():
    with pytest.raises(GuciParseError, match="list should begin with"):
        parse_list("1 2)")


def test_parse_list_missing_close_paren_reports_rest():
    with pytest.raises(GuciParseError) as excinfo:
        parse_list("((1 2) (3 4")
    assert excinfo.value.message == "list should end with ')'; rest is: (3 4"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(1 2 3)", TermList([Number(1), Number(2), Number(3)])),
        ("  foo  ", Identifier("foo")),
        ("-17\n", Number(-17)),
        ("(a)\t\n ", TermList([Identifier("a")])),
    ],
)
def test_parse(source, expected):
    assert parse(source) == expected


@pytest.mark.parametrize("source", ["(1 2) 3", "foo bar", "12abc", "(a))"])
def test_parse_rejects_trailing_input(source):
    with pytest.raises(GuciParseError, match="incomplete parse"):
        parse(source)


def test_parse_unterminated_list_is_explained():
    with pytest.raises(GuciParseError, match="list should end with"):
        parse("(+ 1 2")


@pytest.mark.parametrize("source", ["", "   ", ")", "#", "[1]"])
def test_parse_nothing_recognisable(source):
    with pytest.raises(GuciParseError):
        parse(source)


# ---------------------------------------------------------------
# Round trip for atoms: show(parse(r)) re-parses to the same term
# ---------------------------------------------------------------

identifiers = st.from_regex(r"[A-Za-z_+*/%^@?!][A-Za-z0-9_+\-*/%^@?!]*", fullmatch=True).filter(
    lambda s: s != "NIL"
)


@given(st.integers(min_value=-(2 ** 63), max_value=2 ** 63 - 1))
def test_number_round_trip(n):
    term = parse(str(n))
    assert term == Number(n)
    assert parse(show(term)) == term


@given(identifiers)
def test_identifier_round_trip(name):
    term = parse(name)
    assert term == Identifier(name)
    assert show(term) == name


@given(st.text())
def test_string_round_trip(text):
    term = String(text)
    assert parse(show(term)) == term


@pytest.mark.parametrize("source", ["#t", "#f", "NIL"])
def test_literal_round_trip(source):
    assert show(parse(source)) == source
