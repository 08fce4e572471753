from .types import END


class ParseError(Exception):
    pass


class LexError(ParseError):
    def __init__(self, byte, position):
        self.byte = byte
        self.position = position
        super().__init__(
            f"Unexpected byte {byte!r} (0x{byte[0]:02x}) at position {position}"
        )


class UnexpectedTokenError(ParseError):
    def __init__(self, token, expected, message=None):
        self.token = token
        self.expected = expected
        super().__init__(message or f"Expected {expected}, got {token}")


class UnexpectedEndError(UnexpectedTokenError):
    def __init__(self, expected):
        super().__init__(
            END, expected, f"Unexpected end of input, expected {expected}"
        )


class FixityError(ParseError):
    def __init__(self, op, fixity):
        self.op = op
        self.fixity = fixity
        super().__init__(
            f"Operator '{op.symbol}' ({op.info.name}) cannot be used in {fixity} position"
        )


class UnbalancedBracketsError(ParseError):
    pass


class NestingDepthError(ParseError):
    def __init__(self, limit):
        self.limit = limit
        super().__init__(f"Expression nesting exceeds maximum depth {limit}")


__all__ = (
    "FixityError",
    "LexError",
    "NestingDepthError",
    "ParseError",
    "UnbalancedBracketsError",
    "UnexpectedEndError",
    "UnexpectedTokenError",
)
