"""Display formatter: thousands grouping and the pending-expression line."""

import pytest

from calculator import ADD, DIVIDE, EQUALS, MULTIPLY, SUBTRACT, CalculatorState
from display_format import format_display, pending_expression


@pytest.mark.parametrize('display, expected', [
    ('0', '0'),
    ('999', '999'),
    ('1000', '1,000'),
    ('1234567', '1,234,567'),
    ('-1234', '-1,234'),
    ('12345678901234567890', '12,345,678,901,234,567,890'),
    ('1e+21', '1,000,000,000,000,000,000,000'),
])
def test_grouping(display, expected):
    assert format_display(display) == expected


@pytest.mark.parametrize('display', [
    'Error',
    '1234.5',
    '1234.',
    '0.001',
    '-999',
    'Infinity',
    '-Infinity',
    'NaN',
    '1e-7',
])
def test_passes_through(display):
    assert format_display(display) == display


def test_does_not_round_long_literals():
    display = '9007199254740993'
    assert format_display(display).replace(',', '') == display


@pytest.mark.parametrize('operation, symbol', [
    (ADD, '+'),
    (SUBTRACT, '−'),
    (MULTIPLY, '×'),
    (DIVIDE, '÷'),
])
def test_pending_expression(operation, symbol):
    state = CalculatorState('3', 12.0, operation, True)
    assert pending_expression(state) == f'12 {symbol}'


def test_pending_expression_renders_fractions():
    state = CalculatorState('0', 0.3, ADD, True)
    assert pending_expression(state) == '0.3 +'


def test_pending_expression_hidden_after_equals():
    assert pending_expression(CalculatorState('5', 5.0, EQUALS, True)) == ''


def test_pending_expression_hidden_without_operand():
    assert pending_expression(CalculatorState()) == ''
