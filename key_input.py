# key_input.py
# Python 3.x
# 키보드 입력 → Calculator 엔진 호출

import logging

from calculator import Calculator

logger = logging.getLogger('calculator')

ENTER = 'Enter'
ESCAPE = 'Escape'
BACKSPACE = 'Backspace'


def dispatch_key(engine: Calculator, key: str) -> bool:
    """키 하나를 엔진에 전달한다. 처리한 키면 True, 무시한 키면 False."""
    if len(key) == 1 and '0' <= key <= '9':
        engine.input_digit(key)
    elif key == '.':
        engine.input_dot()
    elif key in ('+', '-', '*', '/'):
        # '/' 는 호출 측에서 기본 동작(빠른 찾기 등)을 막아야 한다
        engine.set_operator(key)
    elif key in (ENTER, '='):
        engine.equal()
    elif key in (ESCAPE, 'c', 'C'):
        engine.reset()
    elif key == BACKSPACE:
        engine.backspace()
    else:
        logger.debug('ignored key %r', key)
        return False
    return True
