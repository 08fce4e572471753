import enum


class Op(enum.Enum):
    ADD = "Add"
    SUB = "Sub"
    MUL = "Mul"
    DIV = "Div"
    EXP = "Exp"
    FACT = "Fact"

    @property
    def info(self):
        return OPERATORS[self]

    @property
    def symbol(self):
        return OPERATORS[self].symbol

    def infix_binding_power(self):
        return OPERATORS[self].infix

    def prefix_binding_power(self):
        return OPERATORS[self].prefix

    def postfix_binding_power(self):
        return OPERATORS[self].postfix

    def __str__(self):
        return OPERATORS[self].symbol


class OpInfo:
    __slots__ = ("symbol", "name", "infix", "prefix", "postfix")

    # Binding power pairs are (left, right); None means the operator is not
    # valid in that position. The unused half of the prefix/postfix pairs is
    # kept as None so all three have the same shape.
    def __init__(self, symbol, name, *, infix=None, prefix=None, postfix=None):
        self.symbol = symbol
        self.name = name
        self.infix = infix
        self.prefix = (None, prefix) if prefix is not None else None
        self.postfix = (postfix, None) if postfix is not None else None

    def fixities(self):
        return tuple(
            k
            for k, v in (
                ("prefix", self.prefix),
                ("infix", self.infix),
                ("postfix", self.postfix),
            )
            if v is not None
        )

    def __repr__(self):
        return (
            f"<OpInfo {self.name} {self.symbol!r}: infix={self.infix}, "
            f"prefix={self.prefix}, postfix={self.postfix}>"
        )


# Higher binds tighter. Infix left < right is left associative, left > right
# is right associative.
OPERATORS = {
    Op.ADD: OpInfo("+", "Add", infix=(1, 2), prefix=5),
    Op.SUB: OpInfo("-", "Sub", infix=(1, 2), prefix=5),
    Op.MUL: OpInfo("*", "Mul", infix=(3, 4)),
    Op.DIV: OpInfo("/", "Div", infix=(3, 4)),
    Op.EXP: OpInfo("^", "Exp", infix=(8, 7)),
    Op.FACT: OpInfo("!", "Fact", postfix=9),
}

SYMBOLS = {info.symbol.encode("ascii"): op for op, info in OPERATORS.items()}


__all__ = ("Op", "OpInfo", "OPERATORS", "SYMBOLS")
