import pytest

from pratt_calc.lexer import tokenize
from pratt_calc.operators import Op, OpInfo
from pratt_calc.parser import (
    ExprParserSpec,
    FixityError,
    NestingDepthError,
    ParseError,
    Parser,
    UnbalancedBracketsError,
    UnexpectedEndError,
    UnexpectedTokenError,
    parse,
)
from pratt_calc.types import END, ExpBinary, ExpLiteral, ExpUnary, TokInt, TokRParen


def parse_str(src, **kwargs):
    return parse(tokenize(src), **kwargs)


@pytest.mark.parametrize(
    "src,expected",
    (
        ("2+3", "(+ 2 3)"),
        ("2+2*3", "(+ 2 (* 2 3))"),
        ("(2+2)*3", "(* (+ 2 2) 3)"),
        ("2-3-2", "(- (- 2 3) 2)"),
        ("8/4/2", "(/ (/ 8 4) 2)"),
        ("2^3^2", "(^ 2 (^ 3 2))"),
        ("-5!", "(- (! 5))"),
        ("5!!", "(! (! 5))"),
        ("3!^2", "(^ (! 3) 2)"),
        ("2^3!", "(^ 2 (! 3))"),
        ("2*3!", "(* 2 (! 3))"),
        ("-2^2", "(- (^ 2 2))"),
        ("-2*3", "(* (- 2) 3)"),
        ("-2+3", "(+ (- 2) 3)"),
        ("2*-3", "(* 2 (- 3))"),
        ("1 - -1", "(- 1 (- 1))"),
        ("--3", "(- (- 3))"),
        ("+3", "(+ 3)"),
        ("2^-1", "(^ 2 (- 1))"),
        ("((1))", "1"),
        ("(1 + 2) * (3 + 4)", "(* (+ 1 2) (+ 3 4))"),
        ("1 + 2 * 3 ^ 2 ! - 4", "(- (+ 1 (* 2 (^ 3 (! 2)))) 4)"),
    ),
)
def test_parse_structure(src, expected):
    assert str(parse_str(src)) == expected


def test_parse_node_types():
    tree = parse_str("-1 + 2!")
    assert isinstance(tree, ExpBinary)
    assert tree.op is Op.ADD
    assert isinstance(tree.lhs, ExpUnary) and tree.lhs.op is Op.SUB
    assert isinstance(tree.lhs.operand, ExpLiteral) and tree.lhs.operand.value == 1
    assert isinstance(tree.rhs, ExpUnary) and tree.rhs.op is Op.FACT
    assert tree.rhs.operand.value == 2


def test_parse_accepts_any_token_iterable():
    assert str(parse(iter(tokenize("1*2")))) == "(* 1 2)"


@pytest.mark.parametrize("src", ("2+", "", "   ", "-", "(", "2*(3+"))
def test_truncated_input(src):
    with pytest.raises(UnexpectedEndError) as excinfo:
        parse_str(src)
    assert excinfo.value.token is END


@pytest.mark.parametrize("src", ("(2+3", "((2)", "(1", "((1 + 2) * 3"))
def test_unclosed_bracket(src):
    with pytest.raises(UnbalancedBracketsError, match="never closed"):
        parse_str(src)


@pytest.mark.parametrize("src", ("2+3)", "(2))", "1)+(2", "(1) + 2) * 3"))
def test_unmatched_close_bracket(src):
    with pytest.raises(UnbalancedBracketsError, match="without matching"):
        parse_str(src)


@pytest.mark.parametrize(
    "src,op",
    (
        ("*2", Op.MUL),
        ("/2", Op.DIV),
        ("^2", Op.EXP),
        ("!5", Op.FACT),
        ("2 + * 3", Op.MUL),
        ("(!1)", Op.FACT),
    ),
)
def test_operator_in_unsupported_prefix_position(src, op):
    with pytest.raises(FixityError) as excinfo:
        parse_str(src)
    assert excinfo.value.op is op
    assert excinfo.value.fixity == "prefix"
    assert f"'{op.symbol}'" in str(excinfo.value)


@pytest.mark.parametrize(
    "src,token",
    (
        ("2 3", TokInt(3)),
        ("2(3)", None),
        ("5!3", TokInt(3)),
        ("(1)(2)", None),
    ),
)
def test_expected_operator(src, token):
    with pytest.raises(UnexpectedTokenError) as excinfo:
        parse_str(src)
    assert not isinstance(excinfo.value, UnexpectedEndError)
    assert excinfo.value.expected == "operator"
    if token is not None:
        assert excinfo.value.token == token


@pytest.mark.parametrize("src", ("()", ")", "1 + )"))
def test_close_bracket_as_operand(src):
    with pytest.raises(UnexpectedTokenError) as excinfo:
        parse_str(src)
    assert excinfo.value.token == TokRParen()


def test_error_kinds_share_base_and_note_position():
    with pytest.raises(ParseError) as excinfo:
        parse_str("1 + 2 3")
    assert any("at token 3" in note for note in excinfo.value.__notes__)


def test_nesting_depth_limit():
    assert str(parse_str("((1))", max_depth=3)) == "1"
    with pytest.raises(NestingDepthError) as excinfo:
        parse_str("(((1)))", max_depth=3)
    assert excinfo.value.limit == 3


@pytest.mark.parametrize(
    "src",
    (
        "(" * 20 + "1" + ")" * 20,
        "-" * 20 + "1",
        "^".join(["2"] * 20),
    ),
)
def test_deep_nesting_rejected(src):
    with pytest.raises(NestingDepthError):
        parse_str(src, max_depth=10)


def test_long_left_associative_chain_is_flat():
    # Left associative chains are built by the loop, not by recursion.
    tree = parse_str("+".join(["1"] * 5000), max_depth=3)
    assert tree.depth() == 5000


def test_prefix_only_operator_in_infix_position():
    # Mul is only a prefix operator in this table.
    table = {
        Op.ADD: OpInfo("+", "Add", infix=(1, 2)),
        Op.MUL: OpInfo("*", "Mul", prefix=5),
    }
    spec = ExprParserSpec(table)
    assert str(Parser(spec, tokenize("*2 + 3")).go()) == "(+ (* 2) 3)"
    for src in ("2 * 3", "1 + 2 * 3", "(4 * 5)"):
        with pytest.raises(FixityError) as excinfo:
            Parser(spec, tokenize(src)).go()
        assert excinfo.value.op is Op.MUL
        assert excinfo.value.fixity == "infix"
