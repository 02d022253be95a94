from guci.reader.combinators import alternative, kleene_star, skip_one_of, skip_whitespace
from guci.reader.parser import (
    parse,
    parse_atom,
    parse_identifier,
    parse_list,
    parse_literal,
    parse_number,
    parse_string,
    parse_term,
)
