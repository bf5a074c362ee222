# display_format.py
# Python 3.x
# 화면 표시 전용 변환: 엔진 상태를 바꾸지 않는다

import math
import re
from decimal import Decimal

from calculator import (
    ADD,
    DIVIDE,
    EQUALS,
    ERROR_TEXT,
    MULTIPLY,
    SUBTRACT,
    CalculatorState,
    parse_display,
    to_display_string,
)

GROUPING_THRESHOLD = 1000

# 내부 기호 → 화면 기호
OPERATOR_SYMBOLS = {ADD: '+', SUBTRACT: '−', MULTIPLY: '×', DIVIDE: '÷'}

_PLAIN_INTEGER = re.compile(r'-?\d+')


def format_display(display: str) -> str:
    """1000 이상이고 소수점 없는 값에 천 단위 ',' 를 넣는다."""
    if display == ERROR_TEXT:
        return display

    value = parse_display(display)
    if not math.isfinite(value):
        return display
    if abs(value) < GROUPING_THRESHOLD or '.' in display:
        return display

    if _PLAIN_INTEGER.fullmatch(display):
        # 입력한 자릿수 그대로 묶는다 (float 로 반올림하지 않음)
        sign = '-' if display.startswith('-') else ''
        return sign + format(int(display.lstrip('-')), ',')

    # '1e+21' 같은 지수 표기
    return format(int(Decimal(repr(value))), ',')


def pending_expression(state: CalculatorState) -> str:
    """디스플레이 위에 보이는 보조 줄: '12 +' 형태"""
    if state.previous_value is None or state.operation in (None, EQUALS):
        return ''
    symbol = OPERATOR_SYMBOLS.get(state.operation, state.operation)
    return f'{to_display_string(state.previous_value)} {symbol}'
