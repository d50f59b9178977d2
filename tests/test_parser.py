import math

import pytest

from rpnbot.parser import (
    Error,
    Parser,
    ParserError,
    InvalidExpression,
    UnclosedParentheses,
    InvalidOperator,
    DivisionByZero,
    get_precedence,
    power,
    shunting_yard,
    solve,
    solve_postfix,
)


@pytest.mark.parametrize('expression, postfix, result', [
    ('1 + 1', '1 1 +', 2.0),
    ('( 1 + 2 ) * 3', '1 2 + 3 *', 9.0),
    ('2 ^ 3', '2 3 ^', 8.0),
    ('10 - 4', '10 4 -', 6.0),
    ('7 / 2', '7 2 /', 3.5),
    ('( ( 1 + 2 ) * 3 / 4 ) ^ 5', '1 2 + 3 4 / * 5 ^', 57.6650390625),
])
def test_convert_and_eval(expression, postfix, result):
    parser = Parser(expression)
    assert parser.expr == expression
    assert parser.postfix == postfix
    assert parser.eval() == pytest.approx(result)


@pytest.mark.parametrize('number', ['0', '42', '3.5', '-2', '1e3'])
def test_single_number(number):
    parser = Parser(number)
    assert parser.postfix == number
    assert parser.eval() == float(number)


def test_operators_drain_in_reverse_order():
    # no precedence draining between operators
    assert shunting_yard('1 + 2 * 3') == '1 2 3 * +'
    assert shunting_yard('1 * 2 + 3') == '1 2 3 + *'
    assert solve('1 * 2 + 3') == 5.0
    assert solve('8 - 2 - 1') == 7.0


def test_extra_whitespace():
    parser = Parser('  ( 1   +\t2 )\n* 3 ')
    assert parser.postfix == '1 2 + 3 *'
    assert parser.eval() == 9.0


@pytest.mark.parametrize('expression', ['4 / 0', '4 / 0.0', '( 1 + 2 ) / ( 1 - 1 )'])
def test_division_by_zero(expression):
    parser = Parser(expression)
    with pytest.raises(DivisionByZero) as info:
        parser.eval()
    assert info.value.kind is Error.DivisionByZero


@pytest.mark.parametrize('expression', ['( 1 + 2', '( ( 1 + 2 ) * 3', '(', '1 + ( 2'])
def test_unclosed_parentheses(expression):
    with pytest.raises(UnclosedParentheses) as info:
        Parser(expression)
    assert info.value.kind is Error.UnclosedParentheses


def test_unmatched_close_is_tolerated():
    assert shunting_yard('1 + 2 )') == '1 2 +'
    assert solve('1 + 2 ) * 3') == 9.0


@pytest.mark.parametrize('expression', ['1 % 2', 'x', '1 + ( 2 ** 3 )', '2x3'])
def test_invalid_operator(expression):
    with pytest.raises(InvalidOperator) as info:
        Parser(expression)
    assert info.value.kind is Error.InvalidOperator


def test_invalid_operator_is_logged(caplog):
    with pytest.raises(InvalidOperator):
        get_precedence('%')
    assert 'Unknown operator: %' in caplog.text


def test_precedence():
    assert get_precedence('+') == get_precedence('-') == 2
    assert get_precedence('*') == get_precedence('/') == 1
    assert get_precedence('^') == 3
    assert get_precedence('(') == get_precedence(')') == 0


def test_invalid_expression():
    with pytest.raises(InvalidExpression) as info:
        solve_postfix('1 2 %')
    assert info.value.kind is Error.InvalidExpression


def test_errors_share_base():
    for error in (InvalidExpression, UnclosedParentheses, InvalidOperator, DivisionByZero):
        assert issubclass(error, ParserError)
    assert {error.kind for error in ParserError.__subclasses__()} == set(Error)


def test_error_str():
    assert str(DivisionByZero()) == 'DivisionByZero'
    assert str(InvalidOperator('%')) == 'InvalidOperator: %'


def test_underflow_not_hardened():
    with pytest.raises(IndexError):
        solve_postfix('1 +')


def test_result_is_bottom_of_stack():
    assert solve_postfix('1 2') == 1.0


def test_parser_is_read_only():
    parser = Parser('1 + 1')
    with pytest.raises(AttributeError):
        parser.expr = '2 + 2'
    with pytest.raises(AttributeError):
        parser.postfix = '2 2 +'
    assert parser.postfix == '1 1 +'


def test_deterministic():
    expression = '( ( 1 + 2 ) * 3 / 4 ) ^ 5'
    assert Parser(expression).postfix == Parser(expression).postfix
    parser = Parser(expression)
    assert parser.eval() == parser.eval()


def test_replay_postfix():
    parser = Parser('( 2 ^ ( 1 + 2 ) ) - ( 9 / 3 )')
    assert solve_postfix(parser.postfix) == parser.eval() == 5.0


def test_power():
    assert power(2.0, 10.0) == 1024.0
    assert power(-2.0, 3.0) == -8.0
    assert power(10.0, 1000.0) == math.inf
    assert power(-10.0, 1001.0) == -math.inf
    assert power(0.0, -1.0) == math.inf
    assert math.isnan(power(-8.0, 0.5))
    assert solve('4 ^ 0.5') == 2.0


@pytest.mark.parametrize('token', ['1_000', '1e', '.', '٣', '0x10', '1.5f'])
def test_rejected_literals(token):
    with pytest.raises(InvalidOperator):
        Parser('{} + 1'.format(token))


@pytest.mark.parametrize('token, value', [('5.', 5.0), ('.5', 0.5), ('+2', 2.0), ('2E-1', 0.2), ('Infinity', math.inf)])
def test_accepted_literals(token, value):
    assert Parser(token).eval() == value


def test_nan_literal():
    assert math.isnan(solve('nan + 1'))
