"""Keyboard dispatcher: key names to engine calls."""

import pytest

from calculator import ADD, DIVIDE, EQUALS, INITIAL_STATE, MULTIPLY, SUBTRACT, Calculator
from key_input import BACKSPACE, ENTER, ESCAPE, dispatch_key


@pytest.fixture
def engine():
    return Calculator()


def press(engine, *keys):
    return [dispatch_key(engine, key) for key in keys]


def test_digits_and_dot(engine):
    assert press(engine, '4', '2', '.', '5') == [True] * 4
    assert engine.display_text() == '42.5'


@pytest.mark.parametrize('key, operation', [
    ('+', ADD),
    ('-', SUBTRACT),
    ('*', MULTIPLY),
    ('/', DIVIDE),
])
def test_operator_keys(engine, key, operation):
    press(engine, '7', key)
    assert engine.state.operation == operation
    assert engine.state.previous_value == 7


@pytest.mark.parametrize('key', [ENTER, '='])
def test_equals_keys(engine, key):
    press(engine, '6', '*', '7', key)
    assert engine.display_text() == '42'
    assert engine.state.operation == EQUALS


@pytest.mark.parametrize('key', [ESCAPE, 'c', 'C'])
def test_clear_keys(engine, key):
    press(engine, '9', '+', '1')
    assert dispatch_key(engine, key) is True
    assert engine.state == INITIAL_STATE


def test_backspace_key(engine):
    press(engine, '1', '2', BACKSPACE)
    assert engine.display_text() == '1'


@pytest.mark.parametrize('key', ['x', '%', '', 'Tab', 'F1', ' '])
def test_other_keys_ignored(engine, key):
    press(engine, '3')
    before = engine.state
    assert dispatch_key(engine, key) is False
    assert engine.state is before


def test_divide_by_zero_from_keyboard(engine):
    press(engine, '8', '/', '0', ENTER)
    assert engine.display_text() == 'Error'
    press(engine, '2')
    assert engine.display_text() == '2'
