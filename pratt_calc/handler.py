import math
import operator

from .operators import Op
from .util import trunc_div, wrap_i64
from .validation import Arg, Empty, ValidateArg, ValidateError


class HandlerError(Exception):
    pass


def powu(x, p):
    # special casing
    if p == 0:
        return 1
    if p == 1:
        return x
    if p <= 4:
        return wrap_i64(x ** p)

    # power by repeated squaring
    res = x
    p_cur = 1
    while 2 * p_cur < p:
        res = wrap_i64(res * res)
        p_cur *= 2
    return wrap_i64(res * powu(x, p - p_cur))


def powi(x, p):
    return powu(x, ValidateArg.validate_exponent("exponent", p))


def factorial(n):
    return math.prod(range(2, ValidateArg.validate_factorial("value", n) + 1))


class BaseHandler:
    input_validators = ()

    def __call__(self, op, *args):
        try:
            val = self.handle(op, *self.validate_inputs(args))
            return self.validate_output(op, val)
        except ValidateError:
            raise
        except Exception as exc:
            raise HandlerError(
                f'Error evaluating "{op.symbol}" ({op.info.name}):\n  {exc!r}'
            ) from exc

    def validate_inputs(self, args):
        if len(args) > len(self.input_validators):
            raise ValidateError(
                f"Too many arguments: expected at most {len(self.input_validators)}, got {len(args)}"
            )
        padded = (*args, *(Empty,) * (len(self.input_validators) - len(args)))
        return tuple(
            validator(idx, val)
            for idx, (validator, val) in enumerate(zip(self.input_validators, padded))
        )

    def handle(self, op, *args):
        raise NotImplementedError

    def validate_output(self, op, value):
        return wrap_i64(ValidateArg.validate_integer(-1, value))


class SimpleMathHandler(BaseHandler):
    input_validators = (Arg.integer("lhs"), Arg.integer("rhs"))

    def __init__(self, handler):
        self.handler = handler

    def handle(self, op, *args):
        return self.handler(*args)


class UnarySimpleMathHandler(SimpleMathHandler):
    input_validators = (Arg.integer("value"),)


class DivHandler(BaseHandler):
    input_validators = (Arg.integer("lhs"), Arg.divisor("rhs"))

    def handle(self, op, lhs, rhs):
        return trunc_div(lhs, rhs)


class PowHandler(BaseHandler):
    input_validators = (Arg.integer("base"), Arg.integer("exponent"))

    def handle(self, op, base, exponent):
        return powi(base, exponent)


class FactorialHandler(BaseHandler):
    input_validators = (Arg.integer("value"),)

    def handle(self, op, value):
        return factorial(value)


class HandlerContext:
    def __init__(self, handlers=None):
        self.handlers = {
            arity: dict(hs)
            for arity, hs in (BASIC_HANDLERS if handlers is None else handlers).items()
        }

    def get_handler(self, op, arity):
        handler = self.handlers.get(arity, {}).get(op)
        if handler is None:
            kind = {1: "unary", 2: "binary"}.get(arity, f"{arity}-ary")
            raise HandlerError(f"No {kind} handler for operator '{op.symbol}'")
        return handler


UNARY_HANDLERS = {
    Op.ADD: UnarySimpleMathHandler(operator.pos),
    Op.SUB: UnarySimpleMathHandler(operator.neg),
    Op.FACT: FactorialHandler(),
}

BINARY_HANDLERS = {
    Op.ADD: SimpleMathHandler(operator.add),
    Op.SUB: SimpleMathHandler(operator.sub),
    Op.MUL: SimpleMathHandler(operator.mul),
    Op.DIV: DivHandler(),
    Op.EXP: PowHandler(),
}

BASIC_HANDLERS = {1: UNARY_HANDLERS, 2: BINARY_HANDLERS}


__all__ = (
    "BASIC_HANDLERS",
    "BaseHandler",
    "BINARY_HANDLERS",
    "factorial",
    "HandlerContext",
    "HandlerError",
    "powi",
    "powu",
    "UNARY_HANDLERS",
)
