import logging
import re

from .errors import LexError
from .operators import SYMBOLS
from .types import END, TokInt, TokLParen, TokOp, TokRParen
from .util import wrap_i64

logger = logging.getLogger(__name__)


class Lexer:
    SPACE_RE = re.compile(rb"[ \t\n\r]*")
    NUMBER_RE = re.compile(rb"[0-9][0-9_]*")

    BRACKETS = {b"(": TokLParen(), b")": TokRParen()}

    def __init__(self, data):
        if isinstance(data, str):
            data = data.encode("utf-8")
        self.data = bytes(data)
        self.pos = 0

    @staticmethod
    def read_number(digits):
        acc = 0
        for c in digits:
            if c == 0x5F:  # _
                continue
            acc = wrap_i64(acc * 10 + (c - 0x30))
        return acc

    def next(self):
        data = self.data
        self.pos = self.SPACE_RE.match(data, self.pos).end()
        if self.pos >= len(data):
            return END
        byte = data[self.pos : self.pos + 1]
        op = SYMBOLS.get(byte)
        if op is not None:
            self.pos += 1
            return TokOp(op)
        tok = self.BRACKETS.get(byte)
        if tok is not None:
            self.pos += 1
            return tok
        m = self.NUMBER_RE.match(data, self.pos)
        if m is None:
            raise LexError(byte, self.pos)
        self.pos = m.end()
        return TokInt(self.read_number(m.group()))

    def __iter__(self):
        while True:
            tok = self.next()
            if tok is END:
                break
            yield tok

    def tokenize(self):
        tokens = tuple(self)
        logger.debug("lexed %d bytes into %d tokens", len(self.data), len(tokens))
        return tokens


def tokenize(data):
    return Lexer(data).tokenize()


__all__ = ("Lexer", "tokenize")
