# Core type aliases for Guci's data model.
# Unlike a host-native Lisp, every value is a dedicated Term variant (Nil, Boolean,
# Number, String, Identifier, TermList) so that strings, names and booleans never
# collapse into the same Python type. Code and data share the same Term type.

from typing import Union

from guci.types.nil import NilType, Nil
from guci.types.identifier import Identifier
from guci.types.terms import Boolean, Number, String, TermList

Term = Union[NilType, Boolean, Number, String, Identifier, TermList]

__all__ = [
    "Term",
    "Nil",
    "NilType",
    "Boolean",
    "Number",
    "String",
    "Identifier",
    "TermList",
]
