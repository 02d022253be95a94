from guci.types.nil import Nil, NilType
from guci.types.identifier import Identifier
from guci.types.terms import Boolean, Number, String, TermList
from guci.types.action import Action, SetValue
from guci.types.function import Arity, BuiltInFunction, Function, UserDefinedFunction
from guci.types.context import ContextArena, EvaluationContext
from guci.types.result import EvaluationSuccess, PartialParse
