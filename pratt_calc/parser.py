import logging

from .errors import (
    FixityError,
    LexError,
    NestingDepthError,
    ParseError,
    UnbalancedBracketsError,
    UnexpectedEndError,
    UnexpectedTokenError,
)
from .operators import OPERATORS, Op
from .types import END, ExpBinary, ExpLiteral, ExpUnary, TokInt, TokOp

logger = logging.getLogger(__name__)


# Pratt parsing referenced from https://github.com/andychu/pratt-parsing-demo
class ParserSpec:
    @staticmethod
    def null_error(p, token, bp):
        if isinstance(token, TokOp):
            raise FixityError(token.op, "prefix")
        raise UnexpectedTokenError(token, "number, '(' or prefix operator")

    @staticmethod
    def left_error(p, token, left, bp):
        raise FixityError(token.op, "infix")

    class LeftInfo:
        def __init__(self, led=None, lbp=0, rbp=0):
            self.led, self.lbp, self.rbp = led or ParserSpec.left_error, lbp, rbp

    class NullInfo:
        def __init__(self, nud=None, bp=0):
            self.nud, self.bp = nud or ParserSpec.null_error, bp

    def __init__(self):
        self.null_lookup = {}
        self.left_lookup = {}

    def add_null(self, bp, nud, tokens):
        for token in tokens:
            self.null_lookup[token] = self.NullInfo(nud, bp)

    def add_led(self, lbp, rbp, led, tokens):
        for token in tokens:
            self.left_lookup.setdefault(token, []).append(self.LeftInfo(led, lbp, rbp))

    def add_postfix(self, lbp, led, tokens):
        # Postfix entries are tried before infix ones for the same token.
        for token in tokens:
            self.left_lookup.setdefault(token, []).insert(
                0, self.LeftInfo(led, lbp, None)
            )

    def lookup_null(self, token_type):
        result = self.null_lookup.get(token_type)
        return result if result is not None else self.NullInfo()

    def lookup_left(self, token_type):
        result = self.left_lookup.get(token_type)
        return result if result else (self.LeftInfo(),)

    @staticmethod
    def get_type(token):
        if token is END:
            return None
        if isinstance(token, TokInt):
            return "number"
        if isinstance(token, TokOp):
            return token.op
        return str(token)


class ExprParserSpec(ParserSpec):
    def __init__(self, operators=None):
        super().__init__()
        self.populate(OPERATORS if operators is None else operators)

    @staticmethod
    def null_constant(p, token, bp):
        return ExpLiteral(token.value)

    @staticmethod
    def null_paren(p, token, bp):
        p.bracket_depth += 1
        result = p.parse_until(bp)
        p.bracket_depth -= 1
        if p.token_type != "RParen":
            raise UnbalancedBracketsError(
                f"Unbalanced brackets: '(' never closed, got {p.token}"
            )
        p.advance()
        return result

    @staticmethod
    def null_prefixop(p, token, bp):
        return ExpUnary(token.op, p.parse_until(bp))

    @staticmethod
    def left_binop(p, token, left, bp):
        return ExpBinary(token.op, left, p.parse_until(bp))

    @staticmethod
    def left_postfixop(p, token, left, bp):
        return ExpUnary(token.op, left)

    def populate(self, operators):
        for op, info in operators.items():
            if info.prefix is not None:
                self.add_null(info.prefix[1], self.null_prefixop, (op,))
            if info.infix is not None:
                self.add_led(*info.infix, self.left_binop, (op,))
            if info.postfix is not None:
                self.add_postfix(info.postfix[0], self.left_postfixop, (op,))
        self.add_null(0, self.null_paren, ("LParen",))
        self.add_null(-1, self.null_constant, ("number",))


class Parser:
    def __init__(self, spec, tokens, *, max_depth=None):
        self.spec = spec
        self.tokens = iter(tokens)
        self.token = None
        self.token_type = None
        self.pos = -1
        self.bracket_depth = 0
        self.depth = 0
        self.max_depth = max_depth

    def advance(self):
        if self.token is END:
            return END
        self.token = next(self.tokens, END)
        self.token_type = self.spec.get_type(self.token)
        self.pos += 1
        return self.token

    def parse_until(self, min_bp):
        if self.max_depth is not None and self.depth >= self.max_depth:
            raise NestingDepthError(self.max_depth)
        self.depth += 1
        try:
            return self._parse_until(min_bp)
        finally:
            self.depth -= 1

    def _parse_until(self, min_bp):
        spec = self.spec
        token, token_type = self.token, self.token_type
        if token is END:
            raise UnexpectedEndError("number, '(' or prefix operator")
        self.advance()
        ni = spec.lookup_null(token_type)
        node = ni.nud(self, token, ni.bp)
        while self.token is not END:
            token, token_type = self.token, self.token_type
            if token_type == "RParen":
                if self.bracket_depth == 0:
                    raise UnbalancedBracketsError(
                        "Unbalanced brackets: ')' without matching '('"
                    )
                break
            if not isinstance(token_type, Op):
                raise UnexpectedTokenError(token, "operator")
            for li in spec.lookup_left(token_type):
                if li.lbp >= min_bp:
                    self.advance()
                    node = li.led(self, token, node, li.rbp)
                    break
            else:
                break
        return node

    def go(self):
        self.advance()
        try:
            result = self.parse_until(0)
            if self.token is not END:
                raise UnexpectedTokenError(self.token, "end of input")
        except ParseError as exc:
            exc.add_note(f"at token {self.pos}: {self.token}")
            raise
        logger.debug("parsed %d tokens into %s", self.pos, result)
        return result


def parse(tokens, *, max_depth=None):
    return Parser(ExprParserSpec(), tokens, max_depth=max_depth).go()


__all__ = (
    "ExprParserSpec",
    "FixityError",
    "LexError",
    "NestingDepthError",
    "parse",
    "ParseError",
    "Parser",
    "ParserSpec",
    "UnbalancedBracketsError",
    "UnexpectedEndError",
    "UnexpectedTokenError",
)
