import pytest

from pratt_calc.operators import OPERATORS, SYMBOLS, Op


def test_table_covers_every_operator():
    assert set(OPERATORS) == set(Op)


def test_symbols_are_unique_single_bytes():
    assert len(SYMBOLS) == len(OPERATORS)
    for sym, op in SYMBOLS.items():
        assert len(sym) == 1
        assert op.symbol.encode("ascii") == sym


@pytest.mark.parametrize(
    "op,infix,prefix,postfix",
    (
        (Op.ADD, (1, 2), (None, 5), None),
        (Op.SUB, (1, 2), (None, 5), None),
        (Op.MUL, (3, 4), None, None),
        (Op.DIV, (3, 4), None, None),
        (Op.EXP, (8, 7), None, None),
        (Op.FACT, None, None, (9, None)),
    ),
)
def test_binding_powers(op, infix, prefix, postfix):
    assert op.infix_binding_power() == infix
    assert op.prefix_binding_power() == prefix
    assert op.postfix_binding_power() == postfix


def test_associativity_encoding():
    add_l, add_r = Op.ADD.infix_binding_power()
    exp_l, exp_r = Op.EXP.infix_binding_power()
    assert add_l < add_r
    assert exp_l > exp_r


def test_precedence_ordering():
    assert Op.MUL.infix_binding_power()[0] > Op.ADD.infix_binding_power()[1]
    assert Op.EXP.infix_binding_power()[1] > Op.MUL.infix_binding_power()[1]
    # factorial binds tighter than unary minus
    assert Op.FACT.postfix_binding_power()[0] > Op.SUB.prefix_binding_power()[1]


def test_fixities_and_names():
    assert Op.ADD.info.fixities() == ("prefix", "infix")
    assert Op.MUL.info.fixities() == ("infix",)
    assert Op.FACT.info.fixities() == ("postfix",)
    assert [op.info.name for op in Op] == ["Add", "Sub", "Mul", "Div", "Exp", "Fact"]
    assert str(Op.EXP) == "^"
