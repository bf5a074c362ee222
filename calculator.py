# calculator.py
# Python 3.x
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Optional
import logging
import math
import re

logger = logging.getLogger('calculator')

ERROR_TEXT = 'Error'
RESULT_PRECISION = 12  # 결과 유효 자릿수

ADD = '+'
SUBTRACT = '-'
MULTIPLY = '*'
DIVIDE = '/'
EQUALS = '='  # 종결 연산자: 계산만 하고 새 연산을 예약하지 않음

ARITHMETIC_OPERATIONS = (ADD, SUBTRACT, MULTIPLY, DIVIDE)
DIGITS = '0123456789'

# 화면 문자열 앞부분에서 읽을 수 있는 가장 긴 숫자
_NUMBER_PREFIX = re.compile(
    r'[+-]?(?:Infinity|\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?)'
)

# UI 기호 → 내부 기호
UI_OPERATORS = {'+': ADD, '−': SUBTRACT, '×': MULTIPLY, '÷': DIVIDE}


@dataclass(frozen=True)
class CalculatorState:
    """계산기 상태 스냅샷: 전이마다 새 값으로 교체된다"""

    display: str = '0'
    previous_value: Optional[float] = None
    operation: Optional[str] = None
    waiting_for_operand: bool = False

    @property
    def is_error(self) -> bool:
        return self.display == ERROR_TEXT


INITIAL_STATE = CalculatorState()
ERROR_STATE = CalculatorState(ERROR_TEXT, None, None, True)


def combine(a: float, b: float, operation: str) -> float:
    if operation == ADD:
        return a + b
    if operation == SUBTRACT:
        return a - b
    if operation == MULTIPLY:
        return a * b
    if operation == DIVIDE:
        if b == 0:
            raise ZeroDivisionError('division by zero')
        return a / b
    raise ValueError(f'unknown operation: {operation!r}')


def parse_display(text: str) -> float:
    """'1e-7.' 이나 '-' 처럼 편집된 문자열도 읽는다. 숫자로 시작하지 않으면 nan."""
    match = _NUMBER_PREFIX.match(text.strip())
    if match is None:
        return math.nan
    return float(match.group(0))


def round_result(value: float) -> float:
    """0.1 + 0.2 같은 이진 부동소수점 잔여 오차를 12자리에서 잘라낸다."""
    if not math.isfinite(value):
        return value
    return float(format(value, f'.{RESULT_PRECISION}g'))


def to_display_string(value: float) -> str:
    """숫자를 화면 문자열로 변환한다.

    정수는 '.0' 없이, 1e-6 <= |x| < 1e21 은 고정 소수점으로,
    그 밖의 크기는 '1e+21', '1.5e-7' 형태의 지수 표기로 쓴다.
    """
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value == 0:
        return '0'  # -0 포함

    # repr 은 왕복 가능한 최단 자릿수를 준다
    d = Decimal(repr(value))
    if 1e-6 <= abs(value) < 1e21:
        s = format(d, 'f')
        if '.' in s:
            s = s.rstrip('0').rstrip('.')
        return s

    mantissa, exponent = format(d.normalize(), 'e').split('e')
    if not exponent.startswith('-'):
        exponent = '+' + exponent.lstrip('+')
    return f'{mantissa}e{exponent}'


# 상태 전이 함수: 모두 (state, ...) -> state, 잘못된 입력은 그대로 반환

def input_digit(state: CalculatorState, digit: str) -> CalculatorState:
    if len(digit) != 1 or digit not in DIGITS:
        return state
    if state.waiting_for_operand:
        return replace(state, display=digit, waiting_for_operand=False)
    if state.display == '0':
        # 앞자리 0 제거
        return replace(state, display=digit)
    return replace(state, display=state.display + digit)


def input_decimal(state: CalculatorState) -> CalculatorState:
    if state.waiting_for_operand:
        return replace(state, display='0.', waiting_for_operand=False)
    if '.' not in state.display:
        return replace(state, display=state.display + '.')
    return state


def clear(state: CalculatorState) -> CalculatorState:
    return INITIAL_STATE


def backspace(state: CalculatorState) -> CalculatorState:
    if len(state.display) > 1 and not state.is_error:
        return replace(state, display=state.display[:-1])
    return replace(state, display='0')


def perform_operation(state: CalculatorState, next_operation: str) -> CalculatorState:
    """대기 중인 연산을 왼쪽부터 즉시 계산하고 next_operation 을 예약한다.

    같은 자리에서 연산자를 연달아 누르면 계산 없이 연산자만 바뀐다.
    0으로 나누면 에러 상태로 전이하고 next_operation 은 버린다.
    """
    if next_operation not in ARITHMETIC_OPERATIONS and next_operation != EQUALS:
        return state
    if state.is_error:
        # 숫자나 Clear 로만 빠져나온다
        return state

    input_value = parse_display(state.display)

    if state.previous_value is None:
        # 첫 연산자: 현재 입력을 왼쪽 피연산자로 저장
        return replace(
            state,
            previous_value=input_value,
            operation=next_operation,
            waiting_for_operand=True,
        )

    if state.operation is not None and state.waiting_for_operand:
        return replace(state, operation=next_operation)

    if state.operation == EQUALS:
        # '=' 뒤에 새 수를 입력한 경우: 계산할 연산이 없으므로 무시
        return state

    try:
        result = combine(state.previous_value, input_value, state.operation)
    except ZeroDivisionError:
        logger.warning('division by zero: %s / %s', state.previous_value, input_value)
        return ERROR_STATE

    result = round_result(result)
    return CalculatorState(
        display=to_display_string(result),
        previous_value=result,
        operation=next_operation,
        waiting_for_operand=True,
    )


def calculate(state: CalculatorState) -> CalculatorState:
    return perform_operation(state, EQUALS)


class Calculator:
    """연산 엔진: 단 하나의 상태를 보관하고 이벤트마다 교체한다"""

    def __init__(self) -> None:
        self.reset()

    def _apply(self, event: str, new_state: CalculatorState) -> None:
        if new_state is self.state:
            logger.debug('%s: no-op', event)
            return
        logger.debug('%s: %s -> %s', event, self.state, new_state)
        self.state = new_state

    def reset(self) -> None:
        self.state = INITIAL_STATE
        logger.debug('reset')

    def input_digit(self, d: str) -> None:
        self._apply(f'digit {d!r}', input_digit(self.state, d))

    def input_dot(self) -> None:
        self._apply('dot', input_decimal(self.state))

    def backspace(self) -> None:
        self._apply('backspace', backspace(self.state))

    def set_operator(self, op: str) -> None:
        """op in {'+','-','*','/'} 또는 UI 기호 {'+','−','×','÷'}"""
        internal = UI_OPERATORS.get(op, op)
        if internal not in ARITHMETIC_OPERATIONS:
            logger.debug('ignored operator %r', op)
            return
        self._apply(f'operator {internal!r}', perform_operation(self.state, internal))

    def equal(self) -> None:
        self._apply('equals', calculate(self.state))

    def display_text(self) -> str:
        return self.state.display
