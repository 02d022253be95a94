from __future__ import annotations

from enum import Enum


class ParseErrc(Enum):
    SUCCESS = 0
    GENERIC_ERROR = 1


class EvalErrc(Enum):
    SUCCESS = 0
    GENERIC_ERROR = 1


class GuciError(Exception):
    """ Base class for all Guci errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def msg(self) -> str:
        return self.message


# -------------------------------
# Parse errors
# -------------------------------
class GuciParseError(GuciError):
    """ Raised when input text cannot be read as a term"""
    kind = ParseErrc.GENERIC_ERROR

    fatal = False

    def __init__(self, message: str, rest: str | None = None, fatal: bool | None = None):
        super().__init__(message)
        # unconsumed input at the point of failure
        self.rest = rest
        # fatal errors are not backtracked over by the combinators
        if fatal is not None:
            self.fatal = fatal

class GuciOverflowParseError(GuciParseError):
    """ Raised when a number literal does not fit the configured integer width"""
    fatal = True


# -------------------------------
# Evaluation errors
# -------------------------------
class GuciEvalError(GuciError):
    """ Raised when a term cannot be evaluated"""
    kind = EvalErrc.GENERIC_ERROR

class GuciArityError(GuciEvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class GuciTypeError(GuciEvalError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class GuciUnboundFunction(GuciEvalError):
    """ Raised when a call names an identifier not bound to a function"""

class GuciNotAFunction(GuciEvalError):
    """ Raised when the head of a call is not an identifier"""

class GuciDuplicateBinding(GuciEvalError):
    """ Raised when a name is bound twice in the same context frame"""

class GuciInvalidIdentifier(GuciEvalError):
    """ Raised when an identifier is required but another term was given"""

class GuciOverflowError(GuciEvalError):
    """ Raised when an arithmetic result does not fit the configured integer width"""

class GuciUndefinedFunction(GuciEvalError):
    """ Raised when applying a user defined function, which has no body yet"""
