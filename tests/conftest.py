"""Shared fixtures: a headless QApplication for the widget tests."""

import os

# Qt must pick the platform plugin before the first QApplication is built
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

import pytest


@pytest.fixture(scope='session')
def qapp():
    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def window(qapp):
    from calculator_window import CalculatorWindow

    w = CalculatorWindow()
    yield w
    w.close()
    w.deleteLater()
