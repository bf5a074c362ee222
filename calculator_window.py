#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# calculator_window.py
# Python 3.x, PyQt5
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

import argparse
import logging
import sys

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont, QKeyEvent
from PyQt5.QtWidgets import (
    QApplication,
    QGridLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from calculator import Calculator
from display_format import format_display, pending_expression
from key_input import BACKSPACE, ENTER, ESCAPE, dispatch_key

WINDOW_TITLE = 'Calculator'
DISPLAY_FONT_SIZE = 28
PENDING_FONT_SIZE = 11
BUTTON_MIN_HEIGHT = 56
WINDOW_SIZE = (360, 560)

CLEAR_LABEL = 'Clear'
BACKSPACE_LABEL = '⌫'

# (라벨, 행, 열, 열 병합 수)
BUTTONS = [
    (CLEAR_LABEL, 0, 0, 2), (BACKSPACE_LABEL, 0, 2, 1), ('÷', 0, 3, 1),
    ('7', 1, 0, 1), ('8', 1, 1, 1), ('9', 1, 2, 1), ('×', 1, 3, 1),
    ('4', 2, 0, 1), ('5', 2, 1, 1), ('6', 2, 2, 1), ('−', 2, 3, 1),
    ('1', 3, 0, 1), ('2', 3, 1, 1), ('3', 3, 2, 1), ('+', 3, 3, 1),
    ('0', 4, 0, 2), ('.', 4, 2, 1), ('=', 4, 3, 1),
]

# Qt 특수 키 → 디스패처 키 이름
SPECIAL_KEYS = {
    Qt.Key_Return: ENTER,
    Qt.Key_Enter: ENTER,
    Qt.Key_Escape: ESCAPE,
    Qt.Key_Backspace: BACKSPACE,
}


def setup_logger(log_path=None, level=logging.INFO):
    """콘솔과 (선택) 파일(UTF-8)로 로그를 남기는 로거를 설정한다."""
    logger = logging.getLogger('calculator')
    if logger.handlers:
        return logger

    logger.setLevel(level)
    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # 콘솔
    sh = logging.StreamHandler(sys.stdout)
    sh.setLevel(level)
    sh.setFormatter(formatter)
    logger.addHandler(sh)

    # 파일(UTF-8)
    if log_path:
        fh = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        fh.setLevel(level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger


def key_name(event: QKeyEvent) -> str:
    return SPECIAL_KEYS.get(event.key(), event.text())


class CalculatorWindow(QWidget):
    """PyQt5 UI: 버튼/키보드 → Calculator 엔진 연결"""

    def __init__(self) -> None:
        super().__init__()
        self.engine = Calculator()
        self.buttons = {}
        self._build_ui()
        self.refresh()

    def _build_ui(self) -> None:
        self.setWindowTitle(WINDOW_TITLE)
        # 버튼이 포커스를 가져가지 않도록 창이 모든 키를 받는다
        self.setFocusPolicy(Qt.StrongFocus)
        root = QVBoxLayout()
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(8)
        self.setLayout(root)

        title = QLabel(WINDOW_TITLE)
        title.setAlignment(Qt.AlignCenter)
        root.addWidget(title)

        self.pending = QLabel()
        self.pending.setAlignment(Qt.AlignRight)
        font = QFont(self.pending.font())
        font.setPointSize(PENDING_FONT_SIZE)
        self.pending.setFont(font)
        root.addWidget(self.pending)

        self.display = QLineEdit()
        self.display.setReadOnly(True)
        self.display.setFocusPolicy(Qt.NoFocus)
        self.display.setAlignment(Qt.AlignRight)
        font = QFont(self.display.font())
        font.setPointSize(DISPLAY_FONT_SIZE)
        self.display.setFont(font)
        root.addWidget(self.display)

        grid = QGridLayout()
        grid.setSpacing(6)
        root.addLayout(grid)

        for label, r, c, span in BUTTONS:
            btn = QPushButton(label)
            btn.setMinimumHeight(BUTTON_MIN_HEIGHT)
            btn.setCursor(Qt.PointingHandCursor)
            btn.setFocusPolicy(Qt.NoFocus)
            # clicked는 checked(bool) 인자를 내보내므로 첫 인자를 흡수하도록 작성
            btn.clicked.connect(lambda checked=False, ch=label: self.on_button(ch))
            grid.addWidget(btn, r, c, 1, span)
            self.buttons[label] = btn

        footer = QLabel('Use keyboard for quick input • ESC to clear')
        footer.setAlignment(Qt.AlignCenter)
        root.addWidget(footer)

        self.resize(*WINDOW_SIZE)

    def on_button(self, ch: str) -> None:
        if ch == CLEAR_LABEL:
            self.engine.reset()
        elif ch == BACKSPACE_LABEL:
            self.engine.backspace()
        elif ch == '=':
            self.engine.equal()
        elif ch in {'+', '−', '×', '÷'}:
            self.engine.set_operator(ch)
        elif ch == '.':
            self.engine.input_dot()
        elif ch.isdigit():
            self.engine.input_digit(ch)

        self.refresh()

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if dispatch_key(self.engine, key_name(event)):
            event.accept()
            self.refresh()
            return
        super().keyPressEvent(event)

    def refresh(self) -> None:
        self.display.setText(format_display(self.engine.display_text()))
        self.pending.setText(pending_expression(self.engine.state))


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='PyQt5 calculator')
    parser.add_argument('--log-file', default=None, help='로그를 추가로 기록할 파일 경로')
    parser.add_argument('--debug', action='store_true', help='상태 전이를 DEBUG 로 기록')
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logger = setup_logger(args.log_file, logging.DEBUG if args.debug else logging.INFO)
    logger.info('calculator started')

    app = QApplication(sys.argv)
    w = CalculatorWindow()
    w.show()
    sys.exit(app.exec())


if __name__ == '__main__':
    main()
