from . import types, operators, errors, lexer, parser, handler, validation, expression, util

from .config import CalcOptions
from .expression import Expression, calculate, evaluate
from .handler import BASIC_HANDLERS, BaseHandler, HandlerContext, HandlerError
from .lexer import Lexer, tokenize
from .operators import OPERATORS, Op
from .parser import ParseError, parse
from .validation import ValidateError

__all__ = (
    "BASIC_HANDLERS",
    "BaseHandler",
    "calculate",
    "CalcOptions",
    "errors",
    "evaluate",
    "expression",
    "Expression",
    "handler",
    "HandlerContext",
    "HandlerError",
    "Lexer",
    "lexer",
    "Op",
    "OPERATORS",
    "operators",
    "parse",
    "ParseError",
    "parser",
    "tokenize",
    "types",
    "util",
    "ValidateError",
    "validation",
)
