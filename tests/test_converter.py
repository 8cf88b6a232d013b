import pytest

from core.converter import InfixConverter, to_rpn
from core.errors import StackUnderflow, UnbalancedParentheses
from core.token_system import Tokenizer


def rpn(expression, **kwargs):
    return [t.name for t in to_rpn(expression, **kwargs)]


def test_precedence():
    assert rpn("2+3*4") == ["2", "3", "4", "*", "+"]
    assert rpn("(2+3)*4") == ["2", "3", "+", "4", "*"]


def test_all_operators_left_associative():
    assert rpn("8-3-2") == ["8", "3", "-", "2", "-"]
    assert rpn("2^3^2") == ["2", "3", "^", "2", "^"]


def test_right_associative_power_option():
    assert rpn("2^3^2", right_associative_power=True) == ["2", "3", "2", "^", "^"]
    # only '^' changes
    assert rpn("8-3-2", right_associative_power=True) == ["8", "3", "-", "2", "-"]


def test_unary_minus_folds_into_number():
    tokens = to_rpn("-2+3")
    assert tokens[0].value == -2.0
    assert [t.name for t in tokens] == ["-2", "3", "+"]


def test_unary_minus_after_open_paren():
    assert rpn("4*(-2)") == ["4", "-2", "*"]


def test_minus_after_operator_is_binary():
    assert rpn("2*-3") == ["2", "*", "3", "-"]


def test_unary_minus_before_group_negates_group():
    assert rpn("-(2+3)") == ["2", "3", "+", "neg"]
    assert rpn("1*(-(4))") == ["1", "4", "neg", "*"]


def test_unknown_tokens_are_ignored():
    assert rpn("1.2.+3") == ["1.2", "3", "+"]


def test_unmatched_close_paren_underflows():
    with pytest.raises(StackUnderflow):
        InfixConverter().convert(Tokenizer("1+2)"))


def test_unclosed_open_paren():
    with pytest.raises(UnbalancedParentheses):
        InfixConverter().convert(Tokenizer("(1+2"))
