class Token:
    __slots__ = ()

    def _key(self):
        return ()

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__, self._key()))

    def __repr__(self):
        return f"<{self}>"


class TokEnd(Token):
    __slots__ = ()

    def __str__(self):
        return "<end>"


class TokInt(Token):
    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def _key(self):
        return (self.value,)

    def __str__(self):
        return f"Int: {self.value}"


class TokOp(Token):
    __slots__ = ("op",)

    def __init__(self, op):
        self.op = op

    def _key(self):
        return (self.op,)

    def __str__(self):
        return f"Op: {self.op.symbol}"


class TokLParen(Token):
    __slots__ = ()

    def __str__(self):
        return "LParen"


class TokRParen(Token):
    __slots__ = ()

    def __str__(self):
        return "RParen"


END = TokEnd()


def fold(expr, fun):
    """
    Post-order reduction without recursion. fun(node, *child_results) is
    called once per node, children left to right before their parent.
    """
    stack = [(expr, False)]
    results = []
    while stack:
        node, ready = stack.pop()
        children = node.children
        if not children or ready:
            argc = len(children)
            if argc:
                args = results[-argc:]
                del results[-argc:]
            else:
                args = ()
            results.append(fun(node, *args))
            continue
        stack.append((node, True))
        stack.extend((child, False) for child in reversed(children))
    return results[0]


class ExpBase:
    __slots__ = ()

    children = ()

    def __bool__(self):
        return True

    def apply(self, handlers, *args):
        raise NotImplementedError

    def eval(self, handlers):
        return fold(self, lambda node, *args: node.apply(handlers, *args))

    def prefix_string(self):
        return fold(self, lambda node, *args: node.render_prefix(*args))

    def infix_string(self):
        return fold(self, lambda node, *args: node.render_infix(*args))

    def pretty_string(self, *, depth=0):
        lines = []
        stack = [(self, depth)]
        while stack:
            node, level = stack.pop()
            lines.append(f"{'  ' * level}{node.label()}")
            stack.extend((child, level + 1) for child in reversed(node.children))
        return "\n".join(lines)

    def depth(self):
        return fold(self, lambda node, *args: 1 + max(args, default=0))

    def __str__(self):
        return self.prefix_string()


class ExpLiteral(ExpBase):
    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def apply(self, handlers):
        return self.value

    def render_prefix(self):
        return str(self.value)

    def render_infix(self):
        return str(self.value) if self.value >= 0 else f"({self.value})"

    def label(self):
        return f"Literal {self.value}"

    def __repr__(self):
        return f"<Literal:{self.value}>"


class ExpUnary(ExpBase):
    __slots__ = ("op", "operand")

    def __init__(self, op, operand):
        self.op = op
        self.operand = operand

    @property
    def children(self):
        return (self.operand,)

    def apply(self, handlers, value):
        return handlers.get_handler(self.op, 1)(self.op, value)

    def render_prefix(self, operand):
        return f"({self.op.symbol} {operand})"

    def render_infix(self, operand):
        # Fixity is not stored on the node: anything that can't be a prefix
        # operator was applied as postfix.
        if self.op.prefix_binding_power() is not None:
            return f"({self.op.symbol}{operand})"
        return f"({operand}{self.op.symbol})"

    def label(self):
        return f"Unary {self.op.symbol} ({self.op.info.name})"

    def __repr__(self):
        return f"<Unary:{self.op.symbol} {self.operand!r}>"


class ExpBinary(ExpBase):
    __slots__ = ("op", "lhs", "rhs")

    def __init__(self, op, lhs, rhs):
        self.op = op
        self.lhs = lhs
        self.rhs = rhs

    @property
    def children(self):
        return (self.lhs, self.rhs)

    def apply(self, handlers, lhs, rhs):
        return handlers.get_handler(self.op, 2)(self.op, lhs, rhs)

    def render_prefix(self, lhs, rhs):
        return f"({self.op.symbol} {lhs} {rhs})"

    def render_infix(self, lhs, rhs):
        return f"({lhs} {self.op.symbol} {rhs})"

    def label(self):
        return f"Binary {self.op.symbol} ({self.op.info.name})"

    def __repr__(self):
        return f"<Binary:{self.op.symbol} {self.lhs!r} {self.rhs!r}>"


__all__ = (
    "END",
    "ExpBase",
    "ExpBinary",
    "ExpLiteral",
    "ExpUnary",
    "fold",
    "TokEnd",
    "Token",
    "TokInt",
    "TokLParen",
    "TokOp",
    "TokRParen",
)
