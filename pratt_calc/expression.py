import logging

from .config import CalcOptions
from .handler import HandlerContext
from .lexer import tokenize
from .parser import ExprParserSpec, Parser
from .types import ExpBase

logger = logging.getLogger(__name__)


class Expression:
    def __init__(self, source, *, options=None):
        if options is None:
            options = CalcOptions()
        if isinstance(source, (str, bytes, bytearray)):
            source = tokenize(source)
        self.tokens = tuple(source)
        self.expr = Parser(
            ExprParserSpec(), self.tokens, max_depth=options.max_depth
        ).go()

    def __repr__(self):
        return f"<Expr{self.expr!r}>"

    def __str__(self):
        return self.expr.prefix_string()

    def __call__(self, *args, **kwargs):
        return self.eval(*args, **kwargs)

    def eval(self, handlers=None):
        result = evaluate(self.expr, handlers)
        logger.debug("evaluated %s to %d", self.expr, result)
        return result

    def infix_string(self):
        return self.expr.infix_string()

    def pretty_string(self, depth=0):
        pad = " " * depth * 2
        return f"<Expr:\n{self.expr.pretty_string(depth=depth + 1)}\n{pad}>"


def evaluate(expr, handlers=None):
    if not isinstance(expr, ExpBase):
        raise TypeError(f"Cannot evaluate {type(expr)}, expected an expression node")
    if not isinstance(handlers, HandlerContext):
        handlers = HandlerContext(handlers)
    return expr.eval(handlers)


def calculate(source, *, options=None):
    return Expression(source, options=options).eval()


__all__ = ("calculate", "evaluate", "Expression")
