from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Categories of Error values surfaced by the evaluator."""

    UNBOUND_SYMBOL = "UnboundSymbol"
    NOT_CALLABLE = "NotCallable"
    ARITY_MISMATCH = "ArityMismatch"
    WRONG_TYPE = "WrongType"
    EMPTY_LIST = "EmptyList"
    DIVISION_BY_ZERO = "DivisionByZero"
    MODULO_BY_ZERO = "ModuloByZero"
    DEF_MISMATCH = "DefMismatch"
    INVALID_NUMBER = "InvalidNumber"


class LispyError(Exception):
    """ Base class for all Lispy errors raised inside the core"""
    kind: ErrorKind = ErrorKind.WRONG_TYPE

class LispyUnboundSymbol(LispyError):
    """ Raised when a symbol is looked up before it is bound"""
    kind = ErrorKind.UNBOUND_SYMBOL

class LispyInvalidSymbol(LispyError):
    """ Raised when a non-symbol is used as a binding name"""
    kind = ErrorKind.WRONG_TYPE

class LispyNotCallable(LispyError):
    """ Raised when an S-expression does not start with a function"""
    kind = ErrorKind.NOT_CALLABLE

class LispyArityError(LispyError):
    """ Raised when the number of arguments passed to a function is incorrect"""
    kind = ErrorKind.ARITY_MISMATCH

class LispyTypeError(LispyError):
    """ Raised when the types of arguments passed to a function are incorrect"""
    kind = ErrorKind.WRONG_TYPE

class LispyEmptyList(LispyError):
    """ Raised when a list operation needs at least one element"""
    kind = ErrorKind.EMPTY_LIST

class LispyDivisionByZero(LispyError):
    kind = ErrorKind.DIVISION_BY_ZERO

class LispyModuloByZero(LispyError):
    kind = ErrorKind.MODULO_BY_ZERO

class LispyDefMismatch(LispyError):
    """ Raised when def receives a different number of symbols and values"""
    kind = ErrorKind.DEF_MISMATCH

class LispyInvalidNumber(LispyError):
    kind = ErrorKind.INVALID_NUMBER


class LispySyntaxError(Exception):
    """ Raised by the reader on malformed source text (never an Error value)"""
