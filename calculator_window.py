#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# calculator_window.py
# Python 3.x, PyQt5
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

import sys
import argparse
import logging
from typing import Optional

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont, QKeyEvent
from PyQt5.QtWidgets import (
    QApplication,
    QWidget,
    QGridLayout,
    QHBoxLayout,
    QVBoxLayout,
    QPushButton,
    QLineEdit,
    QComboBox,
)

from calculator import Calculator, Command
from keymap import BUTTONS, OPERATOR_LABELS, command_for_key, command_for_label
from personalization import BACKGROUNDS, DEFAULT_SETTINGS_PATH, Personalization
from themes import theme_names

logger = logging.getLogger('chain_calculator')

_SPECIAL_KEYS = {
    Qt.Key_Enter: 'Enter',
    Qt.Key_Return: 'Enter',
    Qt.Key_Backspace: 'Backspace',
    Qt.Key_Escape: 'Escape',
}

_FUNCTION_LABELS = ('AC', '+/-', '%', '⌫')


def setup_logger(log_path='chain_calculator.log', level=logging.INFO):
    """콘솔과 파일(UTF-8)로 동시에 로그를 남기는 로거를 설정한다."""
    root = logging.getLogger('chain_calculator')
    if root.handlers:
        return root

    root.setLevel(level)
    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # 콘솔
    sh = logging.StreamHandler(sys.stdout)
    sh.setLevel(level)
    sh.setFormatter(formatter)
    root.addHandler(sh)

    # 파일(UTF-8)
    fh = logging.FileHandler(log_path, mode='a', encoding='utf-8')
    fh.setLevel(level)
    fh.setFormatter(formatter)
    root.addHandler(fh)

    return root


class CalculatorWindow(QWidget):
    """PyQt5 UI: 버튼/키보드 → Calculator 엔진, 테마/배경 선택"""

    def __init__(self, personalization: Personalization) -> None:
        super().__init__()
        self.engine = Calculator()
        self.personalization = personalization
        self._build_ui()
        self._apply_personalization()

    def _build_ui(self) -> None:
        self.setWindowTitle('Calculator')
        self.setObjectName('CalculatorWindow')
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setFocusPolicy(Qt.StrongFocus)
        root = QVBoxLayout()
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(8)
        self.setLayout(root)

        # 꾸미기: 테마/배경/반투명
        controls = QHBoxLayout()
        self.theme_select = QComboBox()
        self.theme_select.addItems(theme_names())
        self.theme_select.setCurrentText(self.personalization.theme)
        self.theme_select.currentTextChanged.connect(self.on_theme_changed)
        controls.addWidget(self.theme_select)

        self.bg_select = QComboBox()
        self.bg_select.addItems(BACKGROUNDS)
        if self.personalization.background not in BACKGROUNDS:
            self.bg_select.addItem(self.personalization.background)
        self.bg_select.setCurrentText(self.personalization.background)
        self.bg_select.currentTextChanged.connect(self.on_background_changed)
        controls.addWidget(self.bg_select)

        self.glass_toggle = QPushButton()
        self.glass_toggle.setCheckable(True)
        self.glass_toggle.setFocusPolicy(Qt.NoFocus)
        self.glass_toggle.clicked.connect(self.on_glass_toggled)
        controls.addWidget(self.glass_toggle)
        root.addLayout(controls)

        # 표시부
        self.display = QLineEdit()
        self.display.setObjectName('display')
        self.display.setReadOnly(True)
        self.display.setFocusPolicy(Qt.NoFocus)
        self.display.setAlignment(Qt.AlignRight)
        font = QFont(self.display.font())
        font.setPointSize(28)
        self.display.setFont(font)
        self.display.setText(self.engine.display_text())
        root.addWidget(self.display)

        grid = QGridLayout()
        grid.setSpacing(6)
        root.addLayout(grid)

        for r, row in enumerate(BUTTONS):
            for c, label in enumerate(row):
                btn = QPushButton(label)
                btn.setMinimumHeight(56)
                btn.setCursor(Qt.PointingHandCursor)
                btn.setFocusPolicy(Qt.NoFocus)
                if label in OPERATOR_LABELS or label == '=':
                    btn.setProperty('role', 'operator')
                elif label in _FUNCTION_LABELS:
                    btn.setProperty('role', 'function')
                # clicked는 checked(bool) 인자를 내보내므로 첫 인자를 흡수하도록 작성
                btn.clicked.connect(lambda checked=False, ch=label: self.on_button(ch))
                grid.addWidget(btn, r, c)

        self.resize(360, 560)

    def _apply_personalization(self) -> None:
        self.setStyleSheet(self.personalization.stylesheet())
        self.glass_toggle.setChecked(self.personalization.glass)
        self.glass_toggle.setText('Glass: ON' if self.personalization.glass else 'Toggle Glass')

    def _run(self, command: Optional[Command]) -> bool:
        if command is None:
            return False
        text = self.engine.execute(command)
        logger.debug('[입력] %s(%s) → %s', command.name, command.arg or '', text)
        self.display.setText(text)
        return True

    def on_button(self, ch: str) -> None:
        self._run(command_for_label(ch))

    def keyPressEvent(self, event: QKeyEvent) -> None:
        key = _SPECIAL_KEYS.get(event.key(), event.text())
        if not self._run(command_for_key(key)):
            super().keyPressEvent(event)

    def on_theme_changed(self, name: str) -> None:
        self.personalization.set_theme(name)
        self._apply_personalization()
        self.display.setText(self.engine.display_text())

    def on_background_changed(self, image: str) -> None:
        self.personalization.set_background(image)
        self._apply_personalization()

    def on_glass_toggled(self, checked: bool = False) -> None:
        self.personalization.set_glass(checked)
        self._apply_personalization()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='체인 방식 사칙연산 계산기(테마/배경 설정 저장).'
    )
    parser.add_argument('--settings', default=str(DEFAULT_SETTINGS_PATH),
                        help='설정 INI 파일 경로(기본값: ~/.chain_calculator.ini)')
    parser.add_argument('--theme', choices=theme_names(),
                        help='시작 테마(지정하면 저장됨)')
    parser.add_argument('--background',
                        help="배경 이미지 경로 또는 'none'(지정하면 저장됨)")
    parser.add_argument('--log', default='chain_calculator.log',
                        help='로그 파일 경로(기본값: chain_calculator.log)')
    parser.add_argument('--debug', action='store_true',
                        help='입력마다 디버그 로그 출력')
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    setup_logger(args.log, logging.DEBUG if args.debug else logging.INFO)

    app = QApplication(sys.argv[:1])
    personalization = Personalization.from_file(args.settings).load()
    if args.theme:
        personalization.set_theme(args.theme)
    if args.background:
        personalization.set_background(args.background)

    w = CalculatorWindow(personalization)
    w.show()
    logger.info('[시작] 설정 파일: %s', args.settings)
    sys.exit(app.exec())


if __name__ == '__main__':
    main()
