import pytest

from guci.errors import GuciParseError
from guci.reader.combinators import alternative, is_whitespace, kleene_star, skip_one_of, skip_whitespace
from guci.reader.parser import parse_identifier, parse_number
from guci.types import Identifier, Nil, Number, TermList


def test_is_whitespace():
    assert is_whitespace(" ")
    assert is_whitespace("\t")
    assert is_whitespace("\n")
    assert not is_whitespace("a")
    assert not is_whitespace("")


def test_skip_one_of():
    p = skip_one_of("abc")("aab")
    assert p.t == Nil
    assert p.rest == "ab"


@pytest.mark.parametrize("source", ["xab", ""])
def test_skip_one_of_mismatch(source):
    with pytest.raises(GuciParseError, match="character mismatch"):
        skip_one_of("abc")(source)


@pytest.mark.parametrize(
    "source,rest",
    [
        ("   x", "x"),
        (" \t\n y ", "y "),
        ("z", "z"),
        ("", ""),
        ("   ", ""),
    ],
)
def test_skip_whitespace(source, rest):
    assert skip_whitespace(source).rest == rest


def test_kleene_star_zero_matches_succeeds():
    p = kleene_star(skip_one_of("a"))("bbb")
    assert p.t == Nil
    assert p.rest == "bbb"


def test_kleene_star_discards_by_default():
    p = kleene_star(parse_number)("1 2 3 x")
    assert p.t == Nil
    assert p.rest == " x"


def test_kleene_star_folds_left_to_right():
    collect = kleene_star(parse_number, lambda acc, t: acc.append(t), initial=TermList())
    p = collect(" 1 2 3)")
    assert p.t == TermList([Number(1), Number(2), Number(3)])
    assert p.rest == ")"


def test_kleene_star_stops_on_empty_match():
    always = kleene_star(lambda s: skip_whitespace(s))
    assert always("abc").rest == "abc"


def test_alternative_order_is_significant():
    number_first = alternative(parse_number, parse_identifier)
    ident_first = alternative(parse_identifier, parse_number)
    assert number_first("-5").t == Number(-5)
    # identifiers may not begin like a number either way
    assert ident_first("-5").t == Number(-5)
    assert number_first("-x").t == Identifier("-x")


def test_alternative_all_fail():
    with pytest.raises(GuciParseError, match="none of the alternatives matched"):
        alternative(parse_number, parse_identifier)("(")


def test_alternative_reports_furthest_failure():
    def deep(source):
        raise GuciParseError("deep failure", rest=source[3:])

    with pytest.raises(GuciParseError, match="deep failure"):
        alternative(parse_number, deep)("abcdef")


def test_fatal_errors_are_not_backtracked():
    def fatal(source):
        raise GuciParseError("broken", rest=source, fatal=True)

    with pytest.raises(GuciParseError, match="broken"):
        alternative(fatal, parse_identifier)("abc")
    with pytest.raises(GuciParseError, match="broken"):
        kleene_star(fatal)("abc")
